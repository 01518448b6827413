"""
Health and stamina of a person.

Both start from their rules default state: no wounds and no fatigue.
"""

from pydantic import BaseModel, Field


class Health(BaseModel):
    """The wounds a person suffers."""

    wounds: list[int] = Field(
        default_factory=list,
        description="Sizes of the wounds not healed yet.",
    )

    @property
    def unhealed_wounds(self) -> int:
        """Returns the sum of all the unhealed wounds."""
        return sum(self.wounds)


class Stamina(BaseModel):
    """The fatigue a person suffers."""

    fatigue: int = Field(
        default=0,
        ge=0,
        description="Accumulated fatigue.",
    )
