"""Controller owning the VO level-hierarchy navigation state for one view."""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple, Union

from voscope.config.levels import VOLevel, is_deeper, normalize_level
from voscope.models.dataset import SheetRef, VODataset, VOLineItem
from voscope.models.navigation import ItemTotals, LevelContext, NavigationState, NavigationStatus
from voscope.processing.aggregation import aggregate
from voscope.processing.item_filter import ItemFilter
from voscope.processing.sheets import get_available_sheets
from voscope.utils.error_handling import TimingContext, log_exception

from .breadcrumb import BreadcrumbSegment, activate_segment, build_breadcrumb
from .navigator import initial_context, navigate

logger = logging.getLogger(__name__)

LevelChangeCallback = Callable[[VOLevel, LevelContext], None]


class VOHierarchyController:
    """Drives Project > Building > Sheet navigation over a VO dataset.

    Every navigation request builds a complete NavigationState (context, items,
    sheets, totals) before it replaces the current one, so observers never see
    a context whose derived lists belong to a different scope.
    """

    def __init__(
        self,
        dataset: Optional[VODataset],
        initial_level: Union[str, VOLevel] = VOLevel.PROJECT,
        on_level_change: Optional[LevelChangeCallback] = None,
    ) -> None:
        self.dataset = dataset if dataset is not None else VODataset.empty()
        self.on_level_change = on_level_change
        self._items = ItemFilter(self.dataset)
        self._sheets: Dict[int, Tuple[SheetRef, ...]] = {}
        start = initial_context(self.dataset, initial_level)
        self._warn_if_degraded(start)
        self._state = self._build_state(start)

    # ---- State accessors ---------------------------------------------------

    @property
    def state(self) -> NavigationState:
        return self._state

    @property
    def context(self) -> LevelContext:
        return self._state.context

    @property
    def current_level(self) -> VOLevel:
        return self._state.current_level

    @property
    def filtered_items(self) -> Tuple[VOLineItem, ...]:
        return self._state.filtered_items

    @property
    def totals(self) -> ItemTotals:
        return self._state.totals

    @property
    def breadcrumb(self) -> List[BreadcrumbSegment]:
        return build_breadcrumb(self._state.context)

    @property
    def navigation_status(self) -> NavigationStatus:
        state = self._state
        level = state.current_level
        return NavigationStatus(
            can_navigate_to_building=bool(state.available_buildings),
            can_navigate_to_sheet=state.context.building_id is not None and bool(state.available_sheets),
            has_buildings=bool(state.available_buildings),
            has_sheets=bool(state.available_sheets),
            is_at_project_level=level == VOLevel.PROJECT,
            is_at_building_level=level == VOLevel.BUILDING,
            is_at_sheet_level=level == VOLevel.SHEET,
        )

    def get_available_sheets(self, building_id: Optional[int]) -> Tuple[SheetRef, ...]:
        if building_id is None:
            return ()
        if building_id not in self._sheets:
            self._sheets[building_id] = tuple(get_available_sheets(self.dataset, building_id))
        return self._sheets[building_id]

    # ---- Navigation --------------------------------------------------------

    def navigate_to_level(
        self,
        level: Union[str, int, VOLevel],
        overrides: Optional[Mapping[str, Any]] = None,
        **fields: Any,
    ) -> NavigationState:
        """Apply one navigation request and return the committed state."""
        context = navigate(self._state.context, level, {**(overrides or {}), **fields})
        return self._commit(context)

    def _commit(self, context: LevelContext) -> NavigationState:
        previous = self._state.context
        self._warn_if_degraded(context)

        with TimingContext(f"navigate:{context.level.value}"):
            self._state = self._build_state(context)

        if is_deeper(context.level, previous.level):
            direction = "down"
        elif is_deeper(previous.level, context.level):
            direction = "up"
        else:
            direction = "same"
        logger.debug(
            f"Navigated {previous.level.value} -> {context.level.value} ({direction}); "
            f"{self._state.totals.count} items in scope",
            extra={
                "event": "navigation.committed",
                "level": context.level.value,
                "building_id": context.building_id,
                "sheet_id": context.sheet_id,
            },
        )

        self._notify(context)
        return self._state

    def reset_to_project_level(self) -> NavigationState:
        return self.navigate_to_level(VOLevel.PROJECT)

    def select_building(self, building_id: int) -> NavigationState:
        """Drill into a building by id; unknown ids leave the state untouched."""
        building = self.dataset.get_building(building_id)
        if building is None:
            logger.warning(
                f"Ignoring selection of unknown building {building_id}",
                extra={"event": "navigation.ignored", "building_id": building_id},
            )
            return self._state
        return self.navigate_to_level(
            VOLevel.BUILDING,
            building_id=building.id,
            building_name=building.name,
        )

    def select_sheet(self, sheet_id: int) -> NavigationState:
        """Drill into a sheet of the current building; unknown ids are ignored."""
        sheet = next((s for s in self._state.available_sheets if s.id == sheet_id), None)
        if sheet is None:
            logger.warning(
                f"Ignoring selection of sheet {sheet_id} not available in building "
                f"{self._state.context.building_id}",
                extra={"event": "navigation.ignored", "sheet_id": sheet_id},
            )
            return self._state
        return self.navigate_to_level(VOLevel.SHEET, sheet_id=sheet.id, sheet_name=sheet.name)

    def activate_breadcrumb(self, level: Union[str, VOLevel]) -> NavigationState:
        """Navigate to the breadcrumb segment for ``level`` if it is shown and inactive."""
        target = normalize_level(level)
        for segment in self.breadcrumb:
            if segment.level == target:
                if segment.active:
                    return self._state
                return self._commit(activate_segment(self._state.context, segment))
        logger.debug(f"No breadcrumb segment for level {target.value}")
        return self._state

    # ---- Internals ---------------------------------------------------------

    def _build_state(self, context: LevelContext) -> NavigationState:
        items = self._items.get(context)
        return NavigationState(
            context=context,
            filtered_items=items,
            available_buildings=self.dataset.buildings,
            available_sheets=self.get_available_sheets(context.building_id),
            totals=aggregate(items),
        )

    def _warn_if_degraded(self, context: LevelContext) -> None:
        reason = None
        if context.level != VOLevel.PROJECT:
            if context.building_id is None:
                reason = "no building selected"
            elif self.dataset.get_building(context.building_id) is None:
                reason = f"building {context.building_id} not in dataset"
            elif context.level == VOLevel.SHEET and context.sheet_id is None:
                reason = "no sheet selected"
        if reason:
            logger.warning(
                f"{context.level.value} level requested with {reason}; scope is empty",
                extra={"event": "navigation.degraded", "level": context.level.value},
            )

    def _notify(self, context: LevelContext) -> None:
        if self.on_level_change is None:
            return
        try:
            self.on_level_change(context.level, context)
        except Exception as e:
            log_exception(e, "on_level_change callback failed", extra={"level": context.level.value})
            raise
