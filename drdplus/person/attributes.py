"""
Value objects describing the identity and body of a person.
"""

from pydantic import BaseModel, ConfigDict, Field


class Name(BaseModel):
    """
    The name of a person.

    A name is immutable, the only way to change the name of a person is to
    replace it with another one.
    """

    model_config = ConfigDict(frozen=True)

    value: str = Field(
        min_length=1,
        description="The name itself.",
    )

    def __str__(self) -> str:
        return self.value


class Age(BaseModel):
    """The age of a person in years."""

    model_config = ConfigDict(frozen=True)

    value: int = Field(
        ge=0,
        description="The age in years.",
    )

    def __str__(self) -> str:
        return str(self.value)


class HeightInCm(BaseModel):
    """The height of a person in centimeters."""

    model_config = ConfigDict(frozen=True)

    value: float = Field(
        gt=0,
        description="The height in centimeters.",
    )

    def __str__(self) -> str:
        return f"{self.value:g} cm"


class BodyWeightInKg(BaseModel):
    """
    A body weight in kilograms.

    Used as an adjustment against the racial average, therefore it can be
    negative.
    """

    model_config = ConfigDict(frozen=True)

    value: float = Field(
        description="The weight (or weight adjustment) in kilograms.",
    )

    def __str__(self) -> str:
        return f"{self.value:+g} kg"
