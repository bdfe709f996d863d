"""Range selection for add and surrounding-pair detection for delete/replace."""

from .models import DetectedRange, SelectionMode
from .pair_finder import find_all_surrounding_pairs, find_surrounding_pair
from .range_selector import select_range

__all__ = [
    "DetectedRange",
    "SelectionMode",
    "select_range",
    "find_surrounding_pair",
    "find_all_surrounding_pairs",
]
