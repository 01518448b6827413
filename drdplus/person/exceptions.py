"""
Exceptions raised by the person package.
"""

from typing import Any

from drdplus.core.utils import GameException


class PersonException(GameException):
    """Base class for the errors of the person package."""


class InsufficientExperience(PersonException):
    """
    Raised when the experiences of a person do not justify its declared level.

    Attributes:
        level_rank (int):
            The highest level rank the person claims.
        required_experiences (int):
            The total experiences needed to reach that level rank.
        available_experiences (int):
            The total experiences the person actually has.

    """

    def __init__(
        self,
        level_rank: int,
        required_experiences: int,
        available_experiences: int,
    ) -> None:
        self.level_rank = level_rank
        self.required_experiences = required_experiences
        self.available_experiences = available_experiences
        super().__init__(
            f"Given level {level_rank} needs at least {required_experiences} "
            f"experiences, got only {available_experiences}"
        )


class InvalidProfessionLevels(PersonException):
    """Raised when a profession level history is not consistent."""


class CannotUseArmamentBecauseOfMissingStrength(PersonException):
    """
    Raised by armament rules when a person is too weak for its armament.

    The person never raises this error by itself, it only lets it pass through
    when computing its current properties.
    """

    def __init__(self, message: str, armament: Any = None) -> None:
        self.armament = armament
        super().__init__(message)
