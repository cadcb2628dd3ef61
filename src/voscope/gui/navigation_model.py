"""Qt adapter exposing a VOHierarchyController to PyQt6 views through signals."""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional, Union

from PyQt6.QtCore import QObject, pyqtSignal

from voscope.config.levels import VOLevel
from voscope.models.dataset import VODataset
from voscope.models.navigation import LevelContext, NavigationState
from voscope.services.hierarchy_controller import VOHierarchyController
from voscope.utils.error_handling import format_error_message, log_exception

logger = logging.getLogger(__name__)


class HierarchyNavigationModel(QObject):
    """Signals fire after the controller has committed the new state.

    levelChanged(level_name, LevelContext)
    stateChanged(NavigationState)
    breadcrumbChanged(list[BreadcrumbSegment])
    errorOccurred(message)
    """

    levelChanged = pyqtSignal(str, object)
    stateChanged = pyqtSignal(object)
    breadcrumbChanged = pyqtSignal(list)
    errorOccurred = pyqtSignal(str)

    def __init__(
        self,
        dataset: Optional[VODataset],
        initial_level: Union[str, VOLevel] = VOLevel.PROJECT,
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent)
        self.controller = VOHierarchyController(
            dataset,
            initial_level=initial_level,
            on_level_change=self._on_level_change,
        )

    @property
    def state(self) -> NavigationState:
        return self.controller.state

    # ---- Requests from views ----------------------------------------------

    def navigate_to_level(self, level: Union[str, VOLevel], **fields: Any) -> None:
        self._run(lambda: self.controller.navigate_to_level(level, **fields), "Navigation failed")

    def select_building(self, building_id: int) -> None:
        self._run(lambda: self.controller.select_building(building_id), "Building selection failed")

    def select_sheet(self, sheet_id: int) -> None:
        self._run(lambda: self.controller.select_sheet(sheet_id), "Sheet selection failed")

    def reset_to_project_level(self) -> None:
        self._run(self.controller.reset_to_project_level, "Navigation failed")

    def activate_breadcrumb(self, level: Union[str, VOLevel]) -> None:
        self._run(lambda: self.controller.activate_breadcrumb(level), "Navigation failed")

    # ---- Internals ----------------------------------------------------------

    def _run(self, request: Callable[[], Any], context: str) -> None:
        try:
            request()
        except Exception as e:
            log_exception(e, context)
            self.errorOccurred.emit(format_error_message(e, context))

    def _on_level_change(self, level: VOLevel, context: LevelContext) -> None:
        self.levelChanged.emit(level.value, context)
        self.stateChanged.emit(self.controller.state)
        self.breadcrumbChanged.emit(self.controller.breadcrumb)
