"""Class lookup queries over a PAX index."""

from __future__ import annotations

from paxcalc.models.pax_class import PaxClass
from paxcalc.models.pax_index import PaxIndex


def find_class(code: str, index: PaxIndex) -> PaxClass | None:
    """Return the class with exactly this code, or None."""
    return index.classes_by_code.get(code)


def active_classes(index: PaxIndex) -> list[PaxClass]:
    """Return active classes in group order, then class order within each group."""
    return [c for c in index.all_classes if c.is_active]


def sorted_active_classes(index: PaxIndex) -> list[PaxClass]:
    """Return active classes ordered by code, as shown in class pickers."""
    return sorted(active_classes(index), key=lambda c: c.code)
