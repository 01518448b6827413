"""
Person management module for the rules engine.

Defines the Person class, the aggregate holding the identity, body, fate,
progression and possessions of a single person, and giving access to its
derived properties.
"""

from typing import Any

from drdplus.core.constants import GenderCode, ProfessionCode
from drdplus.core.logging import log_debug

from .attributes import Age, BodyWeightInKg, HeightInCm, Name
from .collaborators import (
    Armourer,
    CurrentPropertiesCalculator,
    Equipment,
    Memories,
    PropertiesByLevelsCalculator,
    Tables,
)
from .experience import check_levels_against_experiences
from .person_properties import PersonProperties
from .profession_levels import ProfessionLevels
from .vitals import Health, Stamina


class Person:
    """
    Represents a person of the game, including identity, body, fate, levels,
    memories and equipment. Health and stamina are created by the person itself.

    A person can be created only if its memories hold enough experiences for
    its current level. The check is done once, at creation.

    Attributes:
        race (Any):
            The race of the person.
        gender_code (GenderCode):
            The gender of the person.
        properties_by_fate (Any):
            The base properties the person got by fate.
        memories (Memories):
            The memories, source of the experiences of the person.
        profession_levels (ProfessionLevels):
            The history of the levels of the person.
        background (Any):
            The background of the person.
        skills (Any):
            The skills of the person.
        body_weight_adjustment (BodyWeightInKg):
            The body weight adjustment of the person.
        height_in_cm (HeightInCm):
            The height of the person.
        age (Age):
            The age of the person.
        equipment (Equipment):
            The worn and carried items of the person.
        health (Health):
            The health of the person.
        stamina (Stamina):
            The stamina of the person.

    """

    def __init__(
        self,
        name: Name,
        race: Any,
        gender_code: GenderCode,
        properties_by_fate: Any,
        memories: Memories,
        profession_levels: ProfessionLevels,
        background: Any,
        skills: Any,
        body_weight_adjustment: BodyWeightInKg,
        height_in_cm: HeightInCm,
        age: Age,
        equipment: Equipment,
        tables: Tables,
        *,
        properties_by_levels_calculator: PropertiesByLevelsCalculator,
        current_properties_calculator: CurrentPropertiesCalculator,
    ) -> None:
        # Nothing is stored before the levels are proven by experiences.
        experiences_table = tables.get_experiences_table()
        check_levels_against_experiences(
            profession_levels.get_current_level().level_rank,
            memories.get_experiences(experiences_table),
            experiences_table,
        )

        self._name = name
        self._race = race
        self._gender_code = gender_code
        self._properties_by_fate = properties_by_fate
        self._memories = memories
        self._profession_levels = profession_levels
        self._background = background
        self._skills = skills
        self._body_weight_adjustment = body_weight_adjustment
        self._height_in_cm = height_in_cm
        self._age = age
        self._equipment = equipment
        self._health = Health()
        self._stamina = Stamina()

        # Initialize modules.
        self._properties = PersonProperties(
            owner=self,
            properties_by_levels_calculator=properties_by_levels_calculator,
            current_properties_calculator=current_properties_calculator,
        )

        log_debug(
            "Person created",
            {"name": name, "level": profession_levels.get_current_level()},
        )

    # ============================================================================
    # IDENTITY
    # ============================================================================

    @property
    def name(self) -> Name:
        """Returns the name of the person."""
        return self._name

    @name.setter
    def name(self, name: Name) -> None:
        # A name is immutable, changing it means replacing it.
        self._name = name

    def set_name(self, name: Name) -> "Person":
        """
        Replaces the name of the person.

        Args:
            name (Name): The new name.

        Returns:
            Person: The person itself.

        """
        self.name = name
        return self

    @property
    def race(self) -> Any:
        return self._race

    @property
    def gender_code(self) -> GenderCode:
        return self._gender_code

    @property
    def properties_by_fate(self) -> Any:
        return self._properties_by_fate

    # ============================================================================
    # PROGRESSION
    # ============================================================================

    @property
    def memories(self) -> Memories:
        return self._memories

    @property
    def profession_levels(self) -> ProfessionLevels:
        return self._profession_levels

    @property
    def background(self) -> Any:
        return self._background

    @property
    def skills(self) -> Any:
        return self._skills

    def get_profession(self) -> ProfessionCode:
        """
        Returns the profession of the person.

        The profession is given by the very first level, whatever the
        profession of the later levels is.
        """
        return self._profession_levels.get_first_level().profession

    # ============================================================================
    # BODY AND POSSESSIONS
    # ============================================================================

    @property
    def body_weight_adjustment(self) -> BodyWeightInKg:
        return self._body_weight_adjustment

    @property
    def height_in_cm(self) -> HeightInCm:
        return self._height_in_cm

    @property
    def age(self) -> Age:
        return self._age

    @property
    def equipment(self) -> Equipment:
        return self._equipment

    @property
    def health(self) -> Health:
        return self._health

    @property
    def stamina(self) -> Stamina:
        return self._stamina

    # ============================================================================
    # DELEGATED DERIVED PROPERTIES
    # ============================================================================

    def get_properties_by_levels(self, tables: Tables) -> Any:
        """
        Returns the properties by levels, built on the first request.

        Only the tables of the first request are used, later requests get the
        already built properties even with other tables.

        Args:
            tables (Tables): The rules tables.

        Returns:
            Any: The properties by levels.

        """
        return self._properties.get_properties_by_levels(tables)

    def get_current_properties(self, tables: Tables, armourer: Armourer) -> Any:
        """
        Returns the current properties, built anew on every request.

        Args:
            tables (Tables): The rules tables.
            armourer (Armourer): The armament rules.

        Returns:
            Any: The current properties.

        Raises:
            CannotUseArmamentBecauseOfMissingStrength: When the person is too
                weak for its armament.

        """
        return self._properties.get_current_properties(tables, armourer)
