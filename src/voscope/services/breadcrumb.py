"""Breadcrumb segments derived from a LevelContext."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from voscope.config.levels import VOLevel, get_level_config
from voscope.models.navigation import LevelContext

from .navigator import navigate


@dataclass(frozen=True)
class BreadcrumbSegment:
    level: VOLevel
    label: str
    active: bool

    @property
    def icon(self) -> str:
        return get_level_config(self.level).icon


def build_breadcrumb(context: LevelContext) -> List[BreadcrumbSegment]:
    """Ordered Project > Building > Sheet segments for ``context``.

    Building and Sheet segments only appear when both their id and name are
    known. The segment matching ``context.level`` is the active one.
    """
    segments = [
        BreadcrumbSegment(
            level=VOLevel.PROJECT,
            label=context.project_name or VOLevel.PROJECT.value,
            active=context.level == VOLevel.PROJECT,
        )
    ]
    if context.building_id is not None and context.building_name:
        segments.append(
            BreadcrumbSegment(
                level=VOLevel.BUILDING,
                label=context.building_name,
                active=context.level == VOLevel.BUILDING,
            )
        )
    if context.sheet_id is not None and context.sheet_name:
        segments.append(
            BreadcrumbSegment(
                level=VOLevel.SHEET,
                label=context.sheet_name,
                active=context.level == VOLevel.SHEET,
            )
        )
    return segments


def activate_segment(context: LevelContext, segment: BreadcrumbSegment) -> LevelContext:
    """Context reached by clicking ``segment``; the active segment is a no-op."""
    if segment.level == context.level:
        return context
    return navigate(context, segment.level, {})
