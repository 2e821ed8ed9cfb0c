"""Domain services operating on things."""

from .thing_comparator import things_equal

__all__ = ["things_equal"]
