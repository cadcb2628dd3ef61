"""Navigation context and the derived state a controller exposes."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Optional, Tuple

from voscope.config.levels import VOLevel

from .dataset import Building, SheetRef, VOLineItem


@dataclass(frozen=True)
class LevelContext:
    """Identifiers and names pinpointing the current hierarchy node."""

    level: VOLevel
    project_id: Optional[int] = None
    project_name: Optional[str] = None
    building_id: Optional[int] = None
    building_name: Optional[str] = None
    sheet_id: Optional[int] = None
    sheet_name: Optional[str] = None

    @classmethod
    def field_names(cls) -> Tuple[str, ...]:
        return tuple(f.name for f in fields(cls))

    @property
    def scope_key(self) -> Tuple[VOLevel, Optional[int], Optional[int]]:
        """Tuple that fully determines the filtered item subset."""
        return (self.level, self.building_id, self.sheet_id)


@dataclass(frozen=True)
class ItemTotals:
    count: int = 0
    quantity_sum: float = 0.0
    total_sum: float = 0.0


@dataclass(frozen=True)
class NavigationStatus:
    can_navigate_to_building: bool
    can_navigate_to_sheet: bool
    has_buildings: bool
    has_sheets: bool
    is_at_project_level: bool
    is_at_building_level: bool
    is_at_sheet_level: bool


@dataclass(frozen=True)
class NavigationState:
    """Everything a view renders for one context, replaced as a whole."""

    context: LevelContext
    filtered_items: Tuple[VOLineItem, ...] = ()
    available_buildings: Tuple[Building, ...] = ()
    available_sheets: Tuple[SheetRef, ...] = ()
    totals: ItemTotals = ItemTotals()

    @property
    def current_level(self) -> VOLevel:
        return self.context.level
