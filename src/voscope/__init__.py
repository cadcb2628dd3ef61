"""VO level hierarchy navigator for subcontract variation orders."""

from .config.levels import VOLevel
from .models import LevelContext, NavigationState, VODataset
from .processing import aggregate, filter_items, get_available_sheets, load_dataset
from .services import VOHierarchyController, build_breadcrumb, navigate

__version__ = "1.0.0"

__all__ = [
    "LevelContext",
    "NavigationState",
    "VODataset",
    "VOHierarchyController",
    "VOLevel",
    "aggregate",
    "build_breadcrumb",
    "filter_items",
    "get_available_sheets",
    "load_dataset",
    "navigate",
]
