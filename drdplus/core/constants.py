"""
Constants and enumerations for the rules engine.

Defines the rule constants and the enumerations for genders and professions
used throughout the person package.
"""

from enum import Enum

# Highest level rank a person can reach in any profession.
MAX_LEVEL_RANK = 21

# Rank of the first level of every profession except the commoner.
MIN_FIRST_LEVEL_RANK = 1

# The commoner is the only profession starting (and staying) at level zero.
COMMONER_LEVEL_RANK = 0


class NiceEnum(Enum):
    """An enumeration that provides a nicer string representation."""

    def __str__(self) -> str:
        return self.name

    @property
    def display_name(self) -> str:
        return self.name.lower().capitalize()


class GenderCode(NiceEnum):
    """Defines the gender of a person."""

    MALE = "MALE"
    FEMALE = "FEMALE"

    @property
    def emoji(self) -> str:
        """Returns the emoji associated with this gender."""
        return {
            GenderCode.MALE: "♂",
            GenderCode.FEMALE: "♀",
        }.get(self, "❔")


class ProfessionCode(NiceEnum):
    """Defines the professions a person can take levels in."""

    COMMONER = "COMMONER"
    FIGHTER = "FIGHTER"
    THIEF = "THIEF"
    RANGER = "RANGER"
    WIZARD = "WIZARD"
    THEURGIST = "THEURGIST"
    PRIEST = "PRIEST"

    @property
    def color(self) -> str:
        """Returns the color string associated with this profession."""
        return {
            ProfessionCode.COMMONER: "dim white",
            ProfessionCode.FIGHTER: "bold red",
            ProfessionCode.THIEF: "bold yellow",
            ProfessionCode.RANGER: "bold green",
            ProfessionCode.WIZARD: "bold blue",
            ProfessionCode.THEURGIST: "bold magenta",
            ProfessionCode.PRIEST: "bold white",
        }.get(self, "dim white")

    @property
    def colored_name(self) -> str:
        return self.colorize(self.display_name)

    def colorize(self, message: str) -> str:
        """Applies profession color formatting to a message."""
        return f"[{self.color}]{message}[/]"

    def is_commoner(self) -> bool:
        """Check if this is the commoner (level zero) profession."""
        return self == ProfessionCode.COMMONER
