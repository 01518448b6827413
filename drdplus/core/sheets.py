"""
Sheets module for the rules engine.

Prints a person in a readable, rich formatted way.
"""

from typing import Any

from .constants import MAX_LEVEL_RANK
from .utils import cprint, make_bar


def print_person_sheet(person: Any) -> None:
    """
    Prints the details of a person in a formatted way.

    Args:
        person (Person): The person to display.

    """
    profession = person.get_profession()
    current_level = person.profession_levels.get_current_level()
    cprint(
        f"{person.gender_code.emoji} [bold]{person.name}[/], "
        f"[blue]{person.race}[/], {profession.colored_name}"
    )

    cprint(
        f"  Level: [green]{current_level.level_rank}[/] "
        f"{make_bar(current_level.level_rank, MAX_LEVEL_RANK, length=21, color='green')}"
    )
    levels = ", ".join(
        level.profession.colorize(str(level)) for level in person.profession_levels
    )
    cprint(f"  Levels: {levels}")

    cprint(
        f"  Age: {person.age}, Height: {person.height_in_cm}, "
        f"Weight: {person.body_weight_adjustment}"
    )
    cprint(
        f"  Wounds: [red]{person.health.unhealed_wounds}[/], "
        f"Fatigue: [yellow]{person.stamina.fatigue}[/]"
    )
