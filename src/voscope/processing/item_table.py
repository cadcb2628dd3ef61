"""Display helpers layered on top of filtered items: columns, sorting, frames.

Nothing here feeds back into navigation; the navigator always works on the
source-ordered item lists.
"""

from __future__ import annotations

from dataclasses import fields
from typing import Any, List, Sequence, Tuple, Union

import pandas as pd

from voscope.config.levels import ItemColumn, VOLevel, get_level_config
from voscope.models.dataset import VOLineItem
from voscope.utils.data_utils import parse_numeric_safe

ITEM_FIELDS = frozenset(f.name for f in fields(VOLineItem))
NUMERIC_FIELDS = frozenset(
    {"id", "order_index", "sheet_id", "quantity", "unit_price", "total_price", "cost_code_id", "building_id"}
)


def get_level_columns(level: Union[str, VOLevel]) -> Tuple[ItemColumn, ...]:
    """Columns shown for items at ``level``, in display order."""
    return get_level_config(level).columns


def _sort_key(field_name: str):
    if field_name in NUMERIC_FIELDS:
        return lambda item: parse_numeric_safe(getattr(item, field_name))

    def text_key(item: VOLineItem) -> str:
        value = getattr(item, field_name)
        return "" if value is None else str(value).lower()

    return text_key


def sort_items(items: Sequence[VOLineItem], field: str, descending: bool = False) -> List[VOLineItem]:
    """Return ``items`` stably sorted by one field.

    Text compares case-insensitively; missing values sort as empty text or zero.

    Raises:
        ValueError: if ``field`` is not a VOLineItem field
    """
    if field not in ITEM_FIELDS:
        raise ValueError(f"Cannot sort VO items by unknown field {field!r}")
    return sorted(items, key=_sort_key(field), reverse=descending)


def _cell(item: VOLineItem, column: ItemColumn) -> Any:
    return getattr(item, column.key)


def items_to_frame(
    items: Sequence[VOLineItem],
    level: Union[str, VOLevel],
    use_labels: bool = True,
) -> pd.DataFrame:
    """Tabulate ``items`` with the columns configured for ``level``."""
    columns = get_level_columns(level)
    names = [column.label if use_labels else column.key for column in columns]
    rows = [[_cell(item, column) for column in columns] for item in items]
    frame = pd.DataFrame(rows, columns=names)
    for column, name in zip(columns, names):
        if column.numeric:
            frame[name] = pd.to_numeric(frame[name], errors="coerce")
    return frame
