"""Pure projections over a VO dataset: loading, sheets, filtering, totals."""

from .aggregation import aggregate, aggregate_by
from .dataset_loader import load_dataset
from .item_filter import ItemFilter, filter_items
from .sheets import get_available_sheets

__all__ = [
    "ItemFilter",
    "aggregate",
    "aggregate_by",
    "filter_items",
    "get_available_sheets",
    "load_dataset",
]
