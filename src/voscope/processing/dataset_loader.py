"""Convert an externally fetched VO payload into a VODataset snapshot.

The payload normally follows the navigator's own shape::

    {"projectId": 1, "projectName": "...", "buildings": [
        {"id": 10, "buildingName": "...", "items": [{"id": ..., "sheetId": ..., ...}]}
    ]}

The back-end's native names (``contractVoes``, ``boqSheetId``, ``qte``, ``pu``,
``key``, ``unite``, ``orderVo``) and snake_case keys are accepted as aliases.
Malformed parts are skipped and logged; the loader never raises on bad data.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, List, Mapping, Optional, Sequence

from voscope.models.dataset import Building, Project, VODataset, VOLineItem
from voscope.utils.data_utils import clean_text, parse_optional_int, parse_optional_number
from voscope.utils.error_handling import safe_operation, timed

logger = logging.getLogger(__name__)

_ITEM_KEYS = {
    "id": ("id",),
    "order_index": ("orderIndex", "order_index", "orderVo"),
    "sheet_id": ("sheetId", "sheet_id", "boqSheetId"),
    "sheet_name": ("sheetName", "sheet_name"),
    "description": ("description", "key"),
    "unit": ("unit", "unite"),
    "quantity": ("quantity", "qte"),
    "unit_price": ("unitPrice", "unit_price", "pu"),
    "total_price": ("totalPrice", "total_price"),
    "cost_code": ("costCode", "cost_code"),
    "no": ("no",),
    "cost_code_id": ("costCodeId", "cost_code_id"),
    "boq_type": ("boqtype", "boqType", "boq_type"),
}

_INT_FIELDS = {"id", "order_index", "sheet_id", "cost_code_id"}
_NUMBER_FIELDS = {"quantity", "unit_price", "total_price"}

_BUILDING_ITEM_KEYS = ("items", "contractVoes", "contract_voes")
_BUILDING_NAME_KEYS = ("buildingName", "building_name", "name")
_PROJECT_ID_KEYS = ("projectId", "project_id")
_PROJECT_NAME_KEYS = ("projectName", "project_name")
_FOCUS_BUILDING_KEYS = ("buildingId", "building_id")


def _first(raw: Mapping[str, Any], keys: Iterable[str]) -> Any:
    for key in keys:
        value = raw.get(key)
        if value is not None:
            return value
    return None


def _as_sequence(value: Any) -> Optional[Sequence[Any]]:
    if isinstance(value, (list, tuple)):
        return value
    return None


def parse_item(raw: Mapping[str, Any]) -> VOLineItem:
    """Build a VOLineItem from one raw item mapping."""
    values = {}
    for field_name, keys in _ITEM_KEYS.items():
        value = _first(raw, keys)
        if field_name in _INT_FIELDS:
            values[field_name] = parse_optional_int(value)
        elif field_name in _NUMBER_FIELDS:
            values[field_name] = parse_optional_number(value)
        else:
            values[field_name] = clean_text(value)
    return VOLineItem(**values)


def parse_building(raw: Any) -> Optional[Building]:
    """Build a Building from one raw entry, or None when the entry is unusable."""
    if not isinstance(raw, Mapping):
        logger.warning(f"Skipping building entry of type {type(raw).__name__}")
        return None

    building_id = parse_optional_int(raw.get("id"))
    if building_id is None:
        logger.warning(f"Skipping building without a usable id: {raw.get('id')!r}")
        return None

    raw_items = _as_sequence(_first(raw, _BUILDING_ITEM_KEYS)) or ()
    items: List[VOLineItem] = []
    for index, raw_item in enumerate(raw_items):
        if not isinstance(raw_item, Mapping):
            logger.warning(
                f"Skipping item #{index} of building {building_id}: not a mapping",
                extra={"event": "dataset.item_skipped", "building_id": building_id},
            )
            continue
        items.append(parse_item(raw_item))

    return Building(
        id=building_id,
        name=clean_text(_first(raw, _BUILDING_NAME_KEYS)),
        items=tuple(items),
    )


@timed
def load_dataset(payload: Any) -> VODataset:
    """Convert a raw VO payload into an immutable VODataset.

    Missing or malformed ``buildings`` yield a dataset with no buildings.
    """
    if not isinstance(payload, Mapping):
        logger.warning(
            f"VO payload is {type(payload).__name__}, expected a mapping; treating as no data",
            extra={"event": "dataset.malformed"},
        )
        return VODataset.empty()

    project = Project(
        id=parse_optional_int(_first(payload, _PROJECT_ID_KEYS)),
        name=clean_text(_first(payload, _PROJECT_NAME_KEYS)),
    )

    focus_building = parse_optional_int(_first(payload, _FOCUS_BUILDING_KEYS))

    raw_buildings = _as_sequence(payload.get("buildings"))
    if raw_buildings is None:
        logger.warning(
            f"VO payload for project {project.id} has no buildings list; treating as no data",
            extra={"event": "dataset.malformed", "project_id": project.id},
        )
        return VODataset(project=project, building_id=focus_building)

    buildings: List[Building] = []
    for raw in raw_buildings:
        building = safe_operation(
            lambda: parse_building(raw),
            "Parsing VO building entry",
            default=None,
            level=logging.WARNING,
        )
        if building is not None:
            buildings.append(building)

    dataset = VODataset(project=project, buildings=tuple(buildings), building_id=focus_building)
    logger.info(
        f"Loaded VO dataset for project {project.id}: "
        f"{len(dataset.buildings)} buildings, {dataset.item_count} items",
        extra={"event": "dataset.loaded", "project_id": project.id},
    )
    return dataset
