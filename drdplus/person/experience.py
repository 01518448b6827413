"""
Check of the declared level of a person against its experiences.
"""

from drdplus.core.logging import log_error

from .collaborators import ExperiencesTable
from .exceptions import InsufficientExperience


def check_levels_against_experiences(
    level_rank: int,
    available_experiences: int,
    experiences_table: ExperiencesTable,
) -> None:
    """
    Checks that the available experiences are enough for the given level rank.

    Args:
        level_rank (int):
            The highest level rank of the person.
        available_experiences (int):
            The total experiences the person has gained.
        experiences_table (ExperiencesTable):
            The table converting the level rank to the required experiences.

    Raises:
        InsufficientExperience: If fewer experiences are available than the
            level rank requires.

    """
    required_experiences = experiences_table.to_total_experiences(level_rank)
    if available_experiences < required_experiences:
        log_error(
            "Insufficient experiences for the declared level",
            {
                "level_rank": level_rank,
                "required": required_experiences,
                "available": available_experiences,
            },
        )
        raise InsufficientExperience(
            level_rank, required_experiences, available_experiences
        )
