from .filters import IntervalFilters

__all__ = [
    "IntervalFilters",
]
