"""Shared test fixtures and sample datasets."""

from __future__ import annotations

from typing import Any

import pytest

from paxcalc.models import ClassGroup, PaxClass, PaxIndex


def _make_class(
    code: str,
    pax_index: float = 0.85,
    name: str | None = None,
    is_active: bool = True,
) -> PaxClass:
    return PaxClass(
        code=code,
        name=name if name is not None else f"{code} Class",
        pax_index=pax_index,
        is_active=is_active,
    )


def _make_group(group_id: str, classes: list[PaxClass], name: str | None = None) -> ClassGroup:
    return ClassGroup(
        id=group_id,
        name=name if name is not None else group_id.title(),
        description=f"{group_id} group",
        classes=tuple(classes),
    )


def _make_index(groups: list[ClassGroup], **overrides: Any) -> PaxIndex:
    fields: dict[str, Any] = {
        "year": 2024,
        "index_type": "Solo",
        "version": "1.0.0",
        "release_date": "2024-01-01",
        "last_updated": "2024-01-01",
        "class_groups": groups,
    }
    fields.update(overrides)
    return PaxIndex(**fields)


SAMPLE_INDEX_JSON = {
    "year": 2024,
    "indexType": "ProSolo",
    "version": "2024.2.0",
    "releaseDate": "2024-03-01",
    "lastUpdated": "2024-03-15",
    "classGroups": [
        {
            "id": "street",
            "name": "Street",
            "description": "Street Category",
            "classes": [
                {"code": "SS", "name": "Super Street", "paxIndex": 0.844, "isActive": True},
                {"code": "AS", "name": "A Street", "paxIndex": 0.83, "isActive": True},
            ],
        },
        {
            "id": "modified",
            "name": "Modified",
            "description": "Modified Category",
            "classes": [
                {"code": "AM", "name": "A Modified", "paxIndex": 1.0, "isActive": True},
            ],
        },
    ],
}


@pytest.fixture
def super_street() -> PaxClass:
    return _make_class("SS", 0.844, name="Super Street")


@pytest.fixture
def a_street() -> PaxClass:
    return _make_class("AS", 0.83, name="A Street")


@pytest.fixture
def small_index() -> PaxIndex:
    """Two groups, one inactive class."""
    return _make_index([
        _make_group("street", [
            _make_class("SS", 0.844),
            _make_class("AS", 0.83),
            _make_class("BS", 0.821, is_active=False),
        ]),
        _make_group("modified", [
            _make_class("AM", 1.0),
            _make_class("BM", 0.978),
        ]),
    ])


@pytest.fixture
def sample_index_json() -> dict[str, Any]:
    return SAMPLE_INDEX_JSON


@pytest.fixture
def make_class():
    """Factory fixture for creating classes."""
    return _make_class


@pytest.fixture
def make_group():
    """Factory fixture for creating class groups."""
    return _make_group


@pytest.fixture
def make_index():
    """Factory fixture for creating PAX indices."""
    return _make_index
