"""Dataset snapshot: Project -> Buildings -> VO line items.

Buildings hold their items by value and never point back at the project, so a
dataset is a plain tree of frozen records that can be shared freely between
controllers.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Dict, Optional, Tuple


@dataclass(frozen=True)
class VOLineItem:
    """A single priced variation-order line."""

    id: Optional[int]
    order_index: Optional[int] = None
    sheet_id: Optional[int] = None
    sheet_name: Optional[str] = None
    description: Optional[str] = None
    unit: Optional[str] = None
    quantity: Optional[float] = None
    unit_price: Optional[float] = None
    total_price: Optional[float] = None
    """Authoritative as supplied; never derived from quantity x unit price"""
    cost_code: Optional[str] = None
    no: Optional[str] = None
    cost_code_id: Optional[int] = None
    boq_type: Optional[str] = None
    building_id: Optional[int] = None
    """Source building, set when the item is projected out of its building"""
    building_name: Optional[str] = None

    def with_building(self, building: "Building") -> "VOLineItem":
        return replace(self, building_id=building.id, building_name=building.name)


@dataclass(frozen=True)
class SheetRef:
    """A BOQ sheet derived from the items that reference it."""

    id: int
    name: str


@dataclass(frozen=True)
class Building:
    id: int
    name: Optional[str]
    items: Tuple[VOLineItem, ...] = ()


@dataclass(frozen=True)
class Project:
    id: Optional[int]
    name: Optional[str]


@dataclass(frozen=True)
class VODataset:
    """Read-only snapshot of one project's VO line items."""

    project: Project
    buildings: Tuple[Building, ...] = ()
    # Building the payload was opened for; seeds non-Project initial contexts.
    building_id: Optional[int] = None
    _index: Dict[int, Building] = field(init=False, repr=False, compare=False, hash=False)

    def __post_init__(self) -> None:
        index: Dict[int, Building] = {}
        for building in self.buildings:
            # First building wins when the payload repeats an id.
            index.setdefault(building.id, building)
        object.__setattr__(self, "_index", index)

    @classmethod
    def empty(cls, project_id: Optional[int] = None, project_name: Optional[str] = None) -> "VODataset":
        return cls(project=Project(id=project_id, name=project_name))

    @property
    def project_id(self) -> Optional[int]:
        return self.project.id

    @property
    def project_name(self) -> Optional[str]:
        return self.project.name

    @property
    def item_count(self) -> int:
        return sum(len(building.items) for building in self.buildings)

    def get_building(self, building_id: Optional[int]) -> Optional[Building]:
        if building_id is None:
            return None
        return self._index.get(building_id)
