"""Tests for navigation level configuration helpers."""

import pytest

from voscope.config.levels import (
    LEVEL_CONFIGS,
    LEVEL_DEPTH,
    VOLevel,
    get_level_config,
    is_deeper,
    normalize_level,
)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("Project", VOLevel.PROJECT),
        ("building", VOLevel.BUILDING),
        ("  SHEET ", VOLevel.SHEET),
        (0, VOLevel.PROJECT),
        (2, VOLevel.SHEET),
        (VOLevel.BUILDING, VOLevel.BUILDING),
    ],
)
def test_normalize_level_accepts_names_depths_and_enums(value, expected) -> None:
    assert normalize_level(value) is expected


@pytest.mark.parametrize("value", ["Floor", "", 3, -1, None, True])
def test_normalize_level_rejects_unknown_values(value) -> None:
    with pytest.raises(ValueError):
        normalize_level(value)


def test_level_depth_orders_project_building_sheet() -> None:
    assert LEVEL_DEPTH[VOLevel.PROJECT] < LEVEL_DEPTH[VOLevel.BUILDING] < LEVEL_DEPTH[VOLevel.SHEET]
    assert is_deeper(VOLevel.SHEET, VOLevel.BUILDING)
    assert not is_deeper(VOLevel.PROJECT, VOLevel.PROJECT)


def test_project_level_shows_building_and_sheet_columns() -> None:
    keys = get_level_config("Project").column_keys
    assert keys[:3] == ("order_index", "building_name", "sheet_name")


def test_building_level_shows_sheet_but_not_building_column() -> None:
    keys = get_level_config(VOLevel.BUILDING).column_keys
    assert keys[1] == "sheet_name"
    assert "building_name" not in keys


def test_sheet_level_shows_base_columns_only() -> None:
    keys = get_level_config(VOLevel.SHEET).column_keys
    assert "sheet_name" not in keys
    assert "building_name" not in keys
    assert keys[-1] == "cost_code"


def test_every_level_has_a_config() -> None:
    assert set(LEVEL_CONFIGS) == set(VOLevel)
    for level, config in LEVEL_CONFIGS.items():
        assert config.level is level
        assert config.label.endswith("Level")
