"""Project a VO dataset onto the items visible at a navigation scope."""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Tuple

from voscope.config.levels import VOLevel
from voscope.models.dataset import VODataset, VOLineItem
from voscope.models.navigation import LevelContext
from voscope.utils.error_handling import timed

logger = logging.getLogger(__name__)

ScopeKey = Tuple[VOLevel, Optional[int], Optional[int]]


@timed
def filter_items(dataset: Optional[VODataset], context: LevelContext) -> List[VOLineItem]:
    """Return the items in scope for ``context``, enriched with their building.

    Source order is preserved. Scopes missing the identifiers they need
    (a Building without building_id, a Sheet without building_id or sheet_id)
    yield an empty list.
    """
    if dataset is None:
        return []

    if context.level == VOLevel.PROJECT:
        return [
            item.with_building(building)
            for building in dataset.buildings
            for item in building.items
        ]

    if context.building_id is None:
        return []
    building = dataset.get_building(context.building_id)
    if building is None:
        return []

    if context.level == VOLevel.BUILDING:
        return [item.with_building(building) for item in building.items]

    if context.sheet_id is None:
        return []
    return [
        item.with_building(building)
        for item in building.items
        if item.sheet_id == context.sheet_id
    ]


class ItemFilter:
    """Memoizes filtered item lists for one dataset by (level, building_id, sheet_id)."""

    def __init__(self, dataset: Optional[VODataset]) -> None:
        self.dataset = dataset
        self._cache: Dict[ScopeKey, Tuple[VOLineItem, ...]] = {}

    def get(self, context: LevelContext) -> Tuple[VOLineItem, ...]:
        cache_key = context.scope_key
        if cache_key in self._cache:
            return self._cache[cache_key]

        items = tuple(filter_items(self.dataset, context))
        self._cache[cache_key] = items
        logger.debug(f"Filtered {len(items)} items for scope {cache_key}")
        return items

    def invalidate(self, level: VOLevel, building_id: Optional[int] = None, sheet_id: Optional[int] = None) -> None:
        self._cache.pop((level, building_id, sheet_id), None)

    def clear(self) -> None:
        self._cache.clear()
