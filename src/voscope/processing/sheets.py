"""Derive the BOQ sheets a building's items reference."""

from __future__ import annotations

from typing import Dict, List, Optional

from voscope.models.dataset import SheetRef, VODataset


def get_available_sheets(dataset: Optional[VODataset], building_id: Optional[int]) -> List[SheetRef]:
    """Return distinct sheets of a building in first-appearance order.

    The first named occurrence of a sheet id wins. Items with a blank sheet name
    (or no sheet id) contribute nothing, so a sheet exists for navigation only
    while at least one of its items carries a name.
    """
    if dataset is None:
        return []
    building = dataset.get_building(building_id)
    if building is None:
        return []

    seen: Dict[int, SheetRef] = {}
    for item in building.items:
        if item.sheet_id is None or not item.sheet_name:
            continue
        if item.sheet_id not in seen:
            seen[item.sheet_id] = SheetRef(id=item.sheet_id, name=item.sheet_name)
    return list(seen.values())
