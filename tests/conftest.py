"""Pytest configuration and fixtures."""

import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest

# Add src directory to Python path
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from voscope.models.dataset import VODataset
from voscope.processing.dataset_loader import load_dataset


def _item(item_id, sheet_id, sheet_name, qty, price, order, description="Item", total=None):
    return {
        "id": item_id,
        "orderIndex": order,
        "sheetId": sheet_id,
        "sheetName": sheet_name,
        "description": description,
        "unit": "m3",
        "quantity": qty,
        "unitPrice": price,
        "totalPrice": qty * price if total is None else total,
        "costCode": f"CC-{item_id}",
    }


# ---------------------------------------------------------------------------
# Dataset Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def sample_payload() -> dict:
    """Two buildings: B1 has sheets S1 (2 items) and S2 (1 item), B2 has S3 (2 items)."""
    return {
        "projectId": 7,
        "projectName": "Harbour View",
        "buildings": [
            {
                "id": 1,
                "buildingName": "Tower A",
                "items": [
                    _item(101, 11, "Civil", 2, 10, order=1, description="Excavation"),
                    _item(102, 12, "MEP", 1, 5, order=2, description="Conduit"),
                    _item(103, 11, "Civil", 4, 2.5, order=3, description="Backfill"),
                ],
            },
            {
                "id": 2,
                "buildingName": "Tower B",
                "items": [
                    _item(201, 13, "Finishes", 3, 20, order=1, description="Tiling"),
                    _item(202, 13, "Finishes", 1, 100, order=2, description="Paint"),
                ],
            },
        ],
    }


@pytest.fixture
def sample_dataset(sample_payload: dict) -> VODataset:
    """VODataset built from sample_payload."""
    return load_dataset(sample_payload)


@pytest.fixture
def backend_payload() -> dict:
    """Payload using the back-end's native field names."""
    return {
        "projectId": 3,
        "projectName": "Depot",
        "buildings": [
            {
                "id": 5,
                "buildingName": "Workshop",
                "contractVoes": [
                    {
                        "id": 1,
                        "no": "1.1",
                        "key": "Steel frame",
                        "unite": "t",
                        "qte": 12,
                        "pu": 900,
                        "costCode": "ST",
                        "costCodeId": 4,
                        "boqtype": "VO",
                        "boqSheetId": 50,
                        "sheetName": "Structure",
                        "level": 1,
                        "orderVo": 3,
                        "totalPrice": 10800,
                    }
                ],
            }
        ],
    }


@pytest.fixture
def level_change_callback() -> MagicMock:
    """Mock on_level_change callback."""
    return MagicMock()
