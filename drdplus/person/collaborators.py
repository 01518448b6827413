"""
Capability interfaces of the collaborators consumed by a person.

Each protocol exposes only the methods the person actually calls, so that the
rules tables, memories, equipment and calculators can be implemented (or
stubbed) independently.
"""

from typing import Any, Protocol


class ExperiencesTable(Protocol):
    """Converts level ranks to the cumulative experiences they require."""

    def to_total_experiences(self, level_rank: int) -> int:
        """Returns the total experiences needed to reach the given level rank."""
        ...


class WeightTable(Protocol):
    """Weight table, only handed over to the equipment."""


class Tables(Protocol):
    """Bundle of the rules tables."""

    def get_experiences_table(self) -> ExperiencesTable: ...

    def get_weight_table(self) -> WeightTable: ...


class Memories(Protocol):
    """Source of the experiences a person gained during its adventures."""

    def get_experiences(self, experiences_table: ExperiencesTable) -> int:
        """Returns the sum of all experiences recorded in the memories."""
        ...


class Equipment(Protocol):
    """Worn and carried items of a person."""

    def get_worn_body_armor(self) -> Any: ...

    def get_worn_helm(self) -> Any: ...

    def get_weight(self, weight_table: WeightTable) -> Any: ...


class Armourer(Protocol):
    """Armament rules, only handed over to the current properties calculator."""


class PropertiesByLevelsCalculator(Protocol):
    """Builds the properties a person has thanks to race, fate and levels."""

    def __call__(
        self,
        *,
        race: Any,
        gender_code: Any,
        properties_by_fate: Any,
        profession_levels: Any,
        body_weight_adjustment: Any,
        height_in_cm: Any,
        age: Any,
        tables: Tables,
    ) -> Any: ...


class CurrentPropertiesCalculator(Protocol):
    """
    Builds the current properties of a person, affected by health and armament.

    May raise CannotUseArmamentBecauseOfMissingStrength.
    """

    def __call__(
        self,
        *,
        properties_by_levels: Any,
        health: Any,
        race: Any,
        worn_body_armor: Any,
        worn_helm: Any,
        equipment_weight: Any,
        tables: Tables,
        armourer: Armourer,
    ) -> Any: ...
