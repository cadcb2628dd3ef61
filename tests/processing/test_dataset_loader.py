"""Tests for converting raw VO payloads into datasets."""

import logging

import pytest

from voscope.models.dataset import VODataset
from voscope.processing.dataset_loader import load_dataset, parse_building, parse_item


def test_load_dataset_reads_project_and_buildings(sample_payload):
    dataset = load_dataset(sample_payload)

    assert dataset.project_id == 7
    assert dataset.project_name == "Harbour View"
    assert [b.id for b in dataset.buildings] == [1, 2]
    assert [b.name for b in dataset.buildings] == ["Tower A", "Tower B"]
    assert dataset.item_count == 5


def test_load_dataset_preserves_item_order_and_fields(sample_dataset):
    tower_a = sample_dataset.get_building(1)
    assert [item.id for item in tower_a.items] == [101, 102, 103]

    first = tower_a.items[0]
    assert first.sheet_id == 11
    assert first.sheet_name == "Civil"
    assert first.description == "Excavation"
    assert first.quantity == 2.0
    assert first.unit_price == 10.0
    assert first.total_price == 20.0
    assert first.cost_code == "CC-101"
    assert first.building_id is None


def test_load_dataset_accepts_backend_aliases(backend_payload):
    dataset = load_dataset(backend_payload)

    item = dataset.get_building(5).items[0]
    assert item.description == "Steel frame"
    assert item.unit == "t"
    assert item.quantity == 12.0
    assert item.unit_price == 900.0
    assert item.sheet_id == 50
    assert item.order_index == 3
    assert item.no == "1.1"
    assert item.cost_code_id == 4
    assert item.boq_type == "VO"


def test_total_price_is_kept_as_supplied():
    """A supplied total that disagrees with qty x price is not recomputed."""
    item = parse_item({"id": 1, "quantity": 2, "unitPrice": 10, "totalPrice": 18.5})
    assert item.total_price == 18.5

    missing = parse_item({"id": 2, "quantity": 2, "unitPrice": 10})
    assert missing.total_price is None


def test_non_numeric_quantities_become_absent():
    item = parse_item({"id": 1, "quantity": "lots", "unitPrice": None, "totalPrice": ""})
    assert item.quantity is None
    assert item.unit_price is None
    assert item.total_price is None


@pytest.mark.parametrize("payload", [None, [], "data", 42])
def test_non_mapping_payload_is_no_data(payload):
    dataset = load_dataset(payload)
    assert isinstance(dataset, VODataset)
    assert dataset.buildings == ()


def test_missing_buildings_is_no_data(caplog):
    with caplog.at_level(logging.WARNING):
        dataset = load_dataset({"projectId": 1, "projectName": "P"})

    assert dataset.project_name == "P"
    assert dataset.buildings == ()
    assert any("no buildings" in record.getMessage() for record in caplog.records)


def test_malformed_entries_are_skipped(caplog):
    payload = {
        "projectId": 1,
        "buildings": [
            "not a building",
            {"buildingName": "No id"},
            {"id": 4, "buildingName": "Good", "items": [{"id": 1}, "junk", None]},
            {"id": 5, "buildingName": "No items"},
        ],
    }

    with caplog.at_level(logging.WARNING):
        dataset = load_dataset(payload)

    assert [b.id for b in dataset.buildings] == [4, 5]
    assert len(dataset.get_building(4).items) == 1
    assert dataset.get_building(5).items == ()
    assert len([r for r in caplog.records if r.levelno == logging.WARNING]) >= 4


def test_parse_building_rejects_non_integral_id():
    assert parse_building({"id": "abc"}) is None
    assert parse_building({"id": "12", "buildingName": "B"}).id == 12


def test_duplicate_building_ids_resolve_to_first():
    dataset = load_dataset(
        {"buildings": [{"id": 1, "buildingName": "First"}, {"id": 1, "buildingName": "Second"}]}
    )
    assert dataset.get_building(1).name == "First"


def test_focus_building_id_is_read_from_payload(sample_payload):
    assert load_dataset({**sample_payload, "buildingId": "2"}).building_id == 2
    assert load_dataset({**sample_payload, "building_id": 1}).building_id == 1
    assert load_dataset(sample_payload).building_id is None


def test_decimal_comma_values_are_not_misread():
    dataset = load_dataset(
        {"buildings": [{"id": 1, "items": [{"id": 1, "quantity": "1,5", "totalPrice": "1,250.50"}]}]}
    )
    item = dataset.buildings[0].items[0]
    assert item.quantity is None
    assert item.total_price == 1250.5
