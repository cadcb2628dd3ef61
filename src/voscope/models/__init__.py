"""Immutable value types for VO datasets and navigation state."""

from .dataset import Building, Project, SheetRef, VODataset, VOLineItem
from .navigation import ItemTotals, LevelContext, NavigationState, NavigationStatus

__all__ = [
    "Building",
    "ItemTotals",
    "LevelContext",
    "NavigationState",
    "NavigationStatus",
    "Project",
    "SheetRef",
    "VODataset",
    "VOLineItem",
]
