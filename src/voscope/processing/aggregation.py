"""Count and sum VO line items."""

from __future__ import annotations

from typing import Callable, Dict, Hashable, Iterable, List, Sequence

import pandas as pd

from voscope.models.dataset import VOLineItem
from voscope.models.navigation import ItemTotals
from voscope.utils.data_utils import parse_numeric_safe


def aggregate(items: Iterable[VOLineItem]) -> ItemTotals:
    """Return count, quantity sum and total-price sum for ``items``.

    Missing or non-numeric quantities and totals count as zero. Sums are not
    rounded.
    """
    count = 0
    quantity_sum = 0.0
    total_sum = 0.0
    for item in items:
        count += 1
        quantity_sum += parse_numeric_safe(item.quantity)
        total_sum += parse_numeric_safe(item.total_price)
    return ItemTotals(count=count, quantity_sum=quantity_sum, total_sum=total_sum)


_GROUP_KEYS: Dict[str, Callable[[VOLineItem], Hashable]] = {
    "building": lambda item: item.building_id,
    "sheet": lambda item: (item.building_id, item.sheet_id),
}


def aggregate_by(items: Sequence[VOLineItem], key: str) -> Dict[Hashable, ItemTotals]:
    """Return per-group totals keyed by building id or (building id, sheet id).

    Groups appear in the order their first item appears in ``items``.

    Raises:
        ValueError: if ``key`` is not 'building' or 'sheet'
    """
    if key not in _GROUP_KEYS:
        raise ValueError(f"Unknown grouping key: {key!r} (expected one of {sorted(_GROUP_KEYS)})")
    if not items:
        return {}

    key_func = _GROUP_KEYS[key]
    # Group on first-appearance codes; raw keys may be tuples or None.
    codes: Dict[Hashable, int] = {}
    item_codes: List[int] = []
    for item in items:
        item_codes.append(codes.setdefault(key_func(item), len(codes)))

    frame = pd.DataFrame(
        {
            "group": item_codes,
            "quantity": [parse_numeric_safe(item.quantity) for item in items],
            "total": [parse_numeric_safe(item.total_price) for item in items],
        }
    )
    grouped = frame.groupby("group", sort=True).agg(
        count=("quantity", "size"),
        quantity_sum=("quantity", "sum"),
        total_sum=("total", "sum"),
    )

    group_keys = list(codes)
    return {
        group_keys[code]: ItemTotals(
            count=int(row["count"]),
            quantity_sum=float(row["quantity_sum"]),
            total_sum=float(row["total_sum"]),
        )
        for code, row in grouped.iterrows()
    }
