"""
Profession level history of a person.

The history starts with the first level ever taken (which also gives the person
its profession) and continues with every following level-up, each one exactly
one rank above the previous.
"""

from typing import Iterator

from pydantic import BaseModel, ConfigDict, Field

from drdplus.core.constants import (
    COMMONER_LEVEL_RANK,
    MAX_LEVEL_RANK,
    MIN_FIRST_LEVEL_RANK,
    ProfessionCode,
)
from drdplus.core.logging import log_error

from .exceptions import InvalidProfessionLevels


class ProfessionLevel(BaseModel):
    """A single level taken in a profession."""

    model_config = ConfigDict(frozen=True)

    profession: ProfessionCode = Field(
        description="The profession the level was taken in.",
    )
    level_rank: int = Field(
        ge=COMMONER_LEVEL_RANK,
        le=MAX_LEVEL_RANK,
        description="The rank of the level, counted across all professions.",
    )

    def __str__(self) -> str:
        return f"{self.profession.display_name} {self.level_rank}"


class ProfessionLevels:
    """
    Ordered history of the profession levels of a person.

    Attributes:
        first_level (ProfessionLevel):
            The earliest level, it determines the profession of the person.
        next_levels (list[ProfessionLevel]):
            Every level taken after the first one, oldest first.

    """

    def __init__(
        self,
        first_level: ProfessionLevel,
        next_levels: list[ProfessionLevel] | tuple[ProfessionLevel, ...] = (),
    ) -> None:
        self._check_first_level(first_level)
        self.first_level: ProfessionLevel = first_level
        self.next_levels: list[ProfessionLevel] = []
        for level in next_levels:
            self.add_level(level)

    @staticmethod
    def _check_first_level(first_level: ProfessionLevel) -> None:
        if first_level.profession.is_commoner():
            expected_rank = COMMONER_LEVEL_RANK
        else:
            expected_rank = MIN_FIRST_LEVEL_RANK
        if first_level.level_rank != expected_rank:
            log_error(
                "Invalid rank of the first level",
                {
                    "profession": first_level.profession,
                    "level_rank": first_level.level_rank,
                    "expected_rank": expected_rank,
                },
            )
            raise InvalidProfessionLevels(
                f"First level of {first_level.profession.display_name} has to be of "
                f"rank {expected_rank}, got {first_level.level_rank}"
            )

    def add_level(self, level: ProfessionLevel) -> "ProfessionLevels":
        """
        Appends a level-up to the history.

        The experiences of the person are not checked again, that happens only
        when the person is created.

        Args:
            level (ProfessionLevel): The new level.

        Returns:
            ProfessionLevels: The history itself.

        Raises:
            InvalidProfessionLevels: If the level is a commoner level or its rank
                does not follow the current one.

        """
        if level.profession.is_commoner():
            log_error(
                "Commoner can not gain levels",
                {"profession": level.profession, "level_rank": level.level_rank},
            )
            raise InvalidProfessionLevels(
                "Commoner can not gain levels, got a commoner level of rank "
                f"{level.level_rank}"
            )
        expected_rank = self.get_current_level().level_rank + 1
        if level.level_rank != expected_rank:
            log_error(
                "Non-consecutive level rank",
                {"level_rank": level.level_rank, "expected_rank": expected_rank},
            )
            raise InvalidProfessionLevels(
                f"Next level has to be of rank {expected_rank}, got {level.level_rank}"
            )
        self.next_levels.append(level)
        return self

    def get_first_level(self) -> ProfessionLevel:
        return self.first_level

    def get_current_level(self) -> ProfessionLevel:
        """Returns the most recent level."""
        if self.next_levels:
            return self.next_levels[-1]
        return self.first_level

    def get_next_levels(self) -> list[ProfessionLevel]:
        return list(self.next_levels)

    def get_levels(self) -> list[ProfessionLevel]:
        """Returns all the levels, the first one included, oldest first."""
        return [self.first_level, *self.next_levels]

    def get_levels_of(self, profession: ProfessionCode) -> list[ProfessionLevel]:
        """Returns the levels taken in the given profession, oldest first."""
        return [level for level in self if level.profession == profession]

    def __iter__(self) -> Iterator[ProfessionLevel]:
        return iter(self.get_levels())

    def __len__(self) -> int:
        return 1 + len(self.next_levels)

    def __str__(self) -> str:
        return ", ".join(str(level) for level in self)
