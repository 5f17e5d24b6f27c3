# apps/domains/picks/models/__init__.py
from .entry import PickEntry

__all__ = [
    "PickEntry",
]
