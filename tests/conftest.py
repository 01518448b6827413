"""
Shared fixtures for the person tests.

Provides small stand-ins for the rules tables, memories, equipment and the
property calculators, plus a ready to use person.
"""

import pytest
from drdplus.core.constants import GenderCode, ProfessionCode
from drdplus.person import (
    Age,
    BodyWeightInKg,
    HeightInCm,
    Name,
    Person,
    ProfessionLevel,
    ProfessionLevels,
)


class ExperiencesTableStub:
    """Each level rank requires a fixed amount of experiences per rank."""

    def __init__(self, experiences_per_rank: int = 40) -> None:
        self.experiences_per_rank = experiences_per_rank

    def to_total_experiences(self, level_rank: int) -> int:
        return level_rank * self.experiences_per_rank


class TablesStub:
    def __init__(self, experiences_table=None) -> None:
        self.experiences_table = experiences_table or ExperiencesTableStub()
        self.weight_table = object()

    def get_experiences_table(self):
        return self.experiences_table

    def get_weight_table(self):
        return self.weight_table


class MemoriesStub:
    def __init__(self, experiences: int) -> None:
        self.experiences = experiences
        self.asked_tables: list = []

    def get_experiences(self, experiences_table) -> int:
        self.asked_tables.append(experiences_table)
        return self.experiences


class EquipmentStub:
    def __init__(self, body_armor="chainmail", helm="barbute", weight=12) -> None:
        self.body_armor = body_armor
        self.helm = helm
        self.weight = weight
        self.weight_tables: list = []

    def get_worn_body_armor(self):
        return self.body_armor

    def get_worn_helm(self):
        return self.helm

    def get_weight(self, weight_table):
        self.weight_tables.append(weight_table)
        return self.weight


class RaceStub:
    def __init__(self, name: str = "Human") -> None:
        self.name = name

    def __str__(self) -> str:
        return self.name


class CalculatorSpy:
    """Records every call and returns a fresh dictionary of the given fields."""

    def __init__(self, error: Exception | None = None) -> None:
        self.calls: list[dict] = []
        self.error = error

    def __call__(self, **fields):
        self.calls.append(fields)
        if self.error is not None:
            raise self.error
        return dict(fields)


@pytest.fixture
def tables():
    return TablesStub()


@pytest.fixture
def race():
    return RaceStub()


@pytest.fixture
def equipment():
    return EquipmentStub()


@pytest.fixture
def fighter_levels():
    return ProfessionLevels(
        first_level=ProfessionLevel(profession=ProfessionCode.FIGHTER, level_rank=1),
        next_levels=[
            ProfessionLevel(profession=ProfessionCode.FIGHTER, level_rank=2),
        ],
    )


@pytest.fixture
def properties_by_levels_calculator():
    return CalculatorSpy()


@pytest.fixture
def current_properties_calculator():
    return CalculatorSpy()


@pytest.fixture
def person_kwargs(
    race,
    equipment,
    fighter_levels,
    tables,
    properties_by_levels_calculator,
    current_properties_calculator,
):
    """Every argument of a valid person, level 2 needs 80 experiences, 100 given."""
    return dict(
        name=Name(value="Conan"),
        race=race,
        gender_code=GenderCode.MALE,
        properties_by_fate={"strength": 2, "agility": 1},
        memories=MemoriesStub(100),
        profession_levels=fighter_levels,
        background={"heritage": 3},
        skills={"swimming": 1},
        body_weight_adjustment=BodyWeightInKg(value=-2.5),
        height_in_cm=HeightInCm(value=182),
        age=Age(value=25),
        equipment=equipment,
        tables=tables,
        properties_by_levels_calculator=properties_by_levels_calculator,
        current_properties_calculator=current_properties_calculator,
    )


@pytest.fixture
def person(person_kwargs):
    return Person(**person_kwargs)


@pytest.fixture
def make_memories():
    return MemoriesStub


@pytest.fixture
def make_tables():
    return TablesStub


@pytest.fixture
def make_experiences_table():
    return ExperiencesTableStub


@pytest.fixture
def make_calculator():
    return CalculatorSpy
