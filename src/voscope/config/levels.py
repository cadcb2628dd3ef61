"""Navigation levels and their per-level display configuration."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple, Union


class VOLevel(str, Enum):
    PROJECT = "Project"
    BUILDING = "Building"
    SHEET = "Sheet"


LEVEL_DEPTH: Dict[VOLevel, int] = {
    VOLevel.PROJECT: 0,
    VOLevel.BUILDING: 1,
    VOLevel.SHEET: 2,
}

_LEVEL_BY_DEPTH = {depth: level for level, depth in LEVEL_DEPTH.items()}


def normalize_level(value: Union[str, int, VOLevel]) -> VOLevel:
    """Normalize a string, depth index or enum to a canonical VOLevel.

    Raises:
        ValueError: if the value names no known level
    """
    if isinstance(value, VOLevel):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        if value in _LEVEL_BY_DEPTH:
            return _LEVEL_BY_DEPTH[value]
        raise ValueError(f"Unknown navigation level depth: {value}")
    if isinstance(value, str):
        lower = value.strip().lower()
        for level in VOLevel:
            if level.value.lower() == lower:
                return level
    raise ValueError(f"Unknown navigation level: {value!r}")


def is_deeper(level: VOLevel, other: VOLevel) -> bool:
    return LEVEL_DEPTH[level] > LEVEL_DEPTH[other]


@dataclass(frozen=True)
class ItemColumn:
    """A line-item table column."""

    key: str
    """VOLineItem attribute shown in the column"""

    label: str
    """Column header"""

    numeric: bool = False


@dataclass(frozen=True)
class LevelConfig:
    """Display configuration for a navigation level."""

    level: VOLevel
    label: str
    """Human-readable level name (e.g., 'Building Level')"""

    icon: str
    """Icon key used by breadcrumb and selector widgets"""

    columns: Tuple[ItemColumn, ...]
    """Item table columns in display order"""

    @property
    def column_keys(self) -> Tuple[str, ...]:
        return tuple(column.key for column in self.columns)


BASE_COLUMNS: Tuple[ItemColumn, ...] = (
    ItemColumn("order_index", "Order", numeric=True),
    ItemColumn("no", "Item No"),
    ItemColumn("description", "Description"),
    ItemColumn("unit", "Unit"),
    ItemColumn("quantity", "Quantity", numeric=True),
    ItemColumn("unit_price", "Unit Price", numeric=True),
    ItemColumn("total_price", "Total", numeric=True),
    ItemColumn("cost_code", "Cost Code"),
)

BUILDING_COLUMN = ItemColumn("building_name", "Building")
SHEET_COLUMN = ItemColumn("sheet_name", "Sheet")

# Coarser levels surface the scope columns the finer levels pin down.
LEVEL_CONFIGS: Dict[VOLevel, LevelConfig] = {
    VOLevel.PROJECT: LevelConfig(
        level=VOLevel.PROJECT,
        label="Project Level",
        icon="building-2",
        columns=BASE_COLUMNS[:1] + (BUILDING_COLUMN, SHEET_COLUMN) + BASE_COLUMNS[1:],
    ),
    VOLevel.BUILDING: LevelConfig(
        level=VOLevel.BUILDING,
        label="Building Level",
        icon="home",
        columns=BASE_COLUMNS[:1] + (SHEET_COLUMN,) + BASE_COLUMNS[1:],
    ),
    VOLevel.SHEET: LevelConfig(
        level=VOLevel.SHEET,
        label="Sheet Level",
        icon="file-text",
        columns=BASE_COLUMNS,
    ),
}


def get_level_config(level: Union[str, int, VOLevel]) -> LevelConfig:
    """Return the display configuration for a level."""
    return LEVEL_CONFIGS[normalize_level(level)]
