"""
Person module of the rules engine.

This module handles the person aggregate: its creation guarded by the
experiences check, its identity and body value objects, its profession level
history and its derived properties.
"""

from .attributes import Age, BodyWeightInKg, HeightInCm, Name
from .exceptions import (
    CannotUseArmamentBecauseOfMissingStrength,
    InsufficientExperience,
    InvalidProfessionLevels,
    PersonException,
)
from .experience import check_levels_against_experiences
from .main import Person
from .person_properties import PersonProperties
from .profession_levels import ProfessionLevel, ProfessionLevels
from .vitals import Health, Stamina

__all__ = [
    # Import from attributes.py
    "Age",
    "BodyWeightInKg",
    "HeightInCm",
    "Name",
    # Import from exceptions.py
    "CannotUseArmamentBecauseOfMissingStrength",
    "InsufficientExperience",
    "InvalidProfessionLevels",
    "PersonException",
    # Import from experience.py
    "check_levels_against_experiences",
    # Import from main.py
    "Person",
    # Import from person_properties.py
    "PersonProperties",
    # Import from profession_levels.py
    "ProfessionLevel",
    "ProfessionLevels",
    # Import from vitals.py
    "Health",
    "Stamina",
]
