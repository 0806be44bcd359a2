#worktock\utils\__init__.py

from .timeparse import TimeParser

__all__ = [
    "TimeParser",
]
