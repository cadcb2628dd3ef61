"""Compute the next LevelContext from a navigation request."""

from __future__ import annotations

from dataclasses import replace
from typing import Any, Mapping, Optional, Union

from voscope.config.levels import VOLevel, normalize_level
from voscope.models.dataset import VODataset
from voscope.models.navigation import LevelContext

_OVERRIDABLE = frozenset(LevelContext.field_names()) - {"level"}

_BUILDING_FIELDS = {"building_id": None, "building_name": None}
_SHEET_FIELDS = {"sheet_id": None, "sheet_name": None}


def initial_context(dataset: Optional[VODataset], level: Union[str, VOLevel] = VOLevel.PROJECT) -> LevelContext:
    """Starting context carrying the dataset's project identity.

    Below Project level the context is scoped to the dataset's focus
    building (``VODataset.building_id``) when one was supplied.
    """
    target = normalize_level(level)
    if dataset is None:
        return LevelContext(level=target)
    context = LevelContext(
        level=target,
        project_id=dataset.project_id,
        project_name=dataset.project_name,
    )
    if target == VOLevel.PROJECT or dataset.building_id is None:
        return context
    building = dataset.get_building(dataset.building_id)
    return replace(
        context,
        building_id=dataset.building_id,
        building_name=building.name if building is not None else None,
    )


def navigate(
    current: LevelContext,
    target_level: Union[str, int, VOLevel],
    overrides: Optional[Mapping[str, Any]] = None,
) -> LevelContext:
    """Merge ``overrides`` onto ``current`` at ``target_level`` and enforce containment.

    Project clears building and sheet fields whatever the overrides say;
    Building clears the sheet fields; Sheet keeps the merged fields as-is, even
    without a building (the filter then yields nothing for that scope).

    Raises:
        ValueError: if ``target_level`` names no level
        TypeError: if ``overrides`` names a field LevelContext does not have
    """
    level = normalize_level(target_level)
    overrides = dict(overrides or {})

    unknown = set(overrides) - _OVERRIDABLE
    if unknown:
        raise TypeError(f"Unknown navigation context field(s): {', '.join(sorted(unknown))}")

    merged = {**overrides, "level": level}
    if level == VOLevel.PROJECT:
        merged.update(_BUILDING_FIELDS)
        merged.update(_SHEET_FIELDS)
    elif level == VOLevel.BUILDING:
        merged.update(_SHEET_FIELDS)

    return replace(current, **merged)
