"""Helpers for declaring embedded PAX tables."""

from __future__ import annotations

from paxcalc.models.pax_class import ClassGroup, PaxClass


def group(
    group_id: str,
    name: str,
    description: str,
    rows: list[tuple[str, str, float]],
) -> ClassGroup:
    """Build a class group from (code, name, pax_index) rows, all active."""
    return ClassGroup(
        id=group_id,
        name=name,
        description=description,
        classes=tuple(
            PaxClass(code=code, name=class_name, pax_index=pax, is_active=True)
            for code, class_name, pax in rows
        ),
    )
