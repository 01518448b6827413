"""
Person properties module.

Handles the derived properties of a Person: the properties by levels, built
once on demand and kept for the lifetime of the person, and the current
properties, built anew on every request.
"""

import threading
from typing import Any

from catchery import log_warning

from drdplus.core.logging import log_debug

from .collaborators import (
    Armourer,
    CurrentPropertiesCalculator,
    PropertiesByLevelsCalculator,
    Tables,
)

# Marks properties by levels not built yet, a calculator may return None.
_NOT_BUILT = object()


class PersonProperties:
    """
    Builds and caches the derived properties of a Person.

    Attributes:
        owner (Any):
            The Person instance that owns these properties.
        properties_by_levels_calculator (PropertiesByLevelsCalculator):
            Service building the properties by levels.
        current_properties_calculator (CurrentPropertiesCalculator):
            Service building the current properties.

    """

    def __init__(
        self,
        owner: Any,
        properties_by_levels_calculator: PropertiesByLevelsCalculator,
        current_properties_calculator: CurrentPropertiesCalculator,
    ) -> None:
        """
        Initializes the PersonProperties with a reference to its owner.

        Args:
            owner (Any):
                The Person instance that owns these properties.
            properties_by_levels_calculator (PropertiesByLevelsCalculator):
                Service building the properties by levels.
            current_properties_calculator (CurrentPropertiesCalculator):
                Service building the current properties.

        """
        self.owner: Any = owner
        self.properties_by_levels_calculator = properties_by_levels_calculator
        self.current_properties_calculator = current_properties_calculator
        self._properties_by_levels: Any = _NOT_BUILT
        self._properties_by_levels_tables: Tables | None = None
        self._lock = threading.Lock()

    # ============================================================================
    # PROPERTIES BY LEVELS
    # ============================================================================

    def get_properties_by_levels(self, tables: Tables) -> Any:
        """
        Returns the properties by levels, building them on the first call.

        The tables are used only by the first call. Once built, the properties
        are returned as they are, even for different tables.

        Args:
            tables (Tables): The rules tables.

        Returns:
            Any: The properties by levels of the owner.

        """
        if self._properties_by_levels is _NOT_BUILT:
            with self._lock:
                if self._properties_by_levels is _NOT_BUILT:
                    properties_by_levels = self._build_properties_by_levels(tables)
                    # Tables first, a lock-free reader must never see them unset.
                    self._properties_by_levels_tables = tables
                    self._properties_by_levels = properties_by_levels
                    return properties_by_levels
        if tables is not self._properties_by_levels_tables:
            log_warning(
                "Properties by levels are already built, ignoring the given tables",
                {"person": str(self.owner.name)},
            )
        return self._properties_by_levels

    def _build_properties_by_levels(self, tables: Tables) -> Any:
        log_debug(
            "Building properties by levels",
            {"person": str(self.owner.name)},
        )
        return self.properties_by_levels_calculator(
            race=self.owner.race,
            gender_code=self.owner.gender_code,
            properties_by_fate=self.owner.properties_by_fate,
            profession_levels=self.owner.profession_levels,
            body_weight_adjustment=self.owner.body_weight_adjustment,
            height_in_cm=self.owner.height_in_cm,
            age=self.owner.age,
            tables=tables,
        )

    # ============================================================================
    # CURRENT PROPERTIES
    # ============================================================================

    def get_current_properties(self, tables: Tables, armourer: Armourer) -> Any:
        """
        Builds the current properties of the owner, never cached.

        Args:
            tables (Tables): The rules tables.
            armourer (Armourer): The armament rules.

        Returns:
            Any: The current properties of the owner.

        Raises:
            CannotUseArmamentBecauseOfMissingStrength: Passed through from the
                calculator when the owner is too weak for its armament.

        """
        equipment = self.owner.equipment
        return self.current_properties_calculator(
            properties_by_levels=self.get_properties_by_levels(tables),
            health=self.owner.health,
            race=self.owner.race,
            worn_body_armor=equipment.get_worn_body_armor(),
            worn_helm=equipment.get_worn_helm(),
            equipment_weight=equipment.get_weight(tables.get_weight_table()),
            tables=tables,
            armourer=armourer,
        )
