"""
Tests for the profession level history.
"""

import pytest
from drdplus.core.constants import MAX_LEVEL_RANK, ProfessionCode
from drdplus.person.exceptions import InvalidProfessionLevels
from drdplus.person.profession_levels import ProfessionLevel, ProfessionLevels
from pydantic import ValidationError


def level(profession: ProfessionCode, rank: int) -> ProfessionLevel:
    return ProfessionLevel(profession=profession, level_rank=rank)


def test_single_first_level_is_current():
    levels = ProfessionLevels(first_level=level(ProfessionCode.THIEF, 1))
    assert levels.get_first_level() is levels.get_current_level()
    assert levels.get_next_levels() == []
    assert len(levels) == 1


def test_current_level_is_the_last_one():
    levels = ProfessionLevels(
        first_level=level(ProfessionCode.FIGHTER, 1),
        next_levels=[level(ProfessionCode.FIGHTER, 2), level(ProfessionCode.WIZARD, 3)],
    )
    assert levels.get_first_level().profession == ProfessionCode.FIGHTER
    assert levels.get_current_level() == level(ProfessionCode.WIZARD, 3)
    assert [lvl.level_rank for lvl in levels] == [1, 2, 3]
    assert len(levels.get_levels_of(ProfessionCode.FIGHTER)) == 2


def test_commoner_starts_at_level_zero():
    levels = ProfessionLevels(first_level=level(ProfessionCode.COMMONER, 0))
    assert levels.get_current_level().level_rank == 0


def test_commoner_can_not_start_at_level_one():
    with pytest.raises(InvalidProfessionLevels):
        ProfessionLevels(first_level=level(ProfessionCode.COMMONER, 1))


def test_profession_can_not_start_above_level_one():
    with pytest.raises(InvalidProfessionLevels):
        ProfessionLevels(first_level=level(ProfessionCode.PRIEST, 2))


def test_next_level_has_to_follow_the_current_one():
    levels = ProfessionLevels(first_level=level(ProfessionCode.RANGER, 1))
    with pytest.raises(InvalidProfessionLevels):
        levels.add_level(level(ProfessionCode.RANGER, 3))
    assert len(levels) == 1


def test_commoner_can_not_gain_levels(caplog):
    levels = ProfessionLevels(first_level=level(ProfessionCode.COMMONER, 0))
    with caplog.at_level("ERROR", logger="drdplus"):
        with pytest.raises(InvalidProfessionLevels):
            levels.add_level(level(ProfessionCode.COMMONER, 1))
    assert "Commoner can not gain levels" in caplog.text
    assert "level_rank=1" in caplog.text


def test_add_level_returns_the_history():
    levels = ProfessionLevels(first_level=level(ProfessionCode.THEURGIST, 1))
    assert levels.add_level(level(ProfessionCode.THEURGIST, 2)) is levels
    assert levels.get_current_level().level_rank == 2


def test_level_rank_is_bounded():
    with pytest.raises(ValidationError):
        level(ProfessionCode.FIGHTER, MAX_LEVEL_RANK + 1)
    with pytest.raises(ValidationError):
        level(ProfessionCode.FIGHTER, -1)


def test_level_is_immutable():
    first = level(ProfessionCode.FIGHTER, 1)
    with pytest.raises(ValidationError):
        first.level_rank = 5


def test_levels_string():
    levels = ProfessionLevels(
        first_level=level(ProfessionCode.FIGHTER, 1),
        next_levels=[level(ProfessionCode.WIZARD, 2)],
    )
    assert str(levels) == "Fighter 1, Wizard 2"
