"""
Core module of the rules engine.

This module contains the shared building blocks of the engine, including
rule constants, enumerations, logging setup and console display utilities.
"""

from .constants import (
    COMMONER_LEVEL_RANK,
    MAX_LEVEL_RANK,
    MIN_FIRST_LEVEL_RANK,
    GenderCode,
    NiceEnum,
    ProfessionCode,
)
from .logging import (
    get_logger,
    setup_logging,
)
from .sheets import (
    print_person_sheet,
)
from .utils import (
    GameException,
    ccapture,
    cprint,
    make_bar,
)

__all__ = [
    # Import from constants.py
    "COMMONER_LEVEL_RANK",
    "MAX_LEVEL_RANK",
    "MIN_FIRST_LEVEL_RANK",
    "GenderCode",
    "NiceEnum",
    "ProfessionCode",
    # Import from logging.py
    "get_logger",
    "setup_logging",
    # Import from sheets.py
    "print_person_sheet",
    # Import from utils.py
    "GameException",
    "ccapture",
    "cprint",
    "make_bar",
]
