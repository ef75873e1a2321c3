"""PAX index dataset model."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, model_validator
from pydantic.alias_generators import to_camel

from paxcalc.models.pax_class import ClassGroup, PaxClass


class IndexType(str, Enum):
    """Event formats that publish their own PAX index."""

    SOLO = "Solo"
    PROSOLO = "ProSolo"


def _pick(data: dict[str, Any], name: str, alias: str) -> tuple[str, Any]:
    if name in data:
        return name, data[name]
    return alias, data.get(alias)


class PaxIndex(BaseModel):
    """One versioned snapshot of the classes and indices for an event format.

    ``classes_by_code`` is an index over ``class_groups``. When the payload
    omits it, it is derived from the groups in group-then-class order; a
    supplied map is kept as-is so that the validator can compare it against
    the groups.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    year: int
    # Unknown formats must still load; the validator reports them
    index_type: str
    version: str
    release_date: str
    last_updated: str
    class_groups: tuple[ClassGroup, ...] = ()
    classes_by_code: dict[str, PaxClass]

    @model_validator(mode="before")
    @classmethod
    def _derive_classes_by_code(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        _, lookup = _pick(data, "classes_by_code", "classesByCode")
        if lookup is not None:
            return data

        groups_key, raw_groups = _pick(data, "class_groups", "classGroups")
        if raw_groups is None:
            raw_groups = ()
        if not isinstance(raw_groups, (list, tuple)):
            # Left for field validation to report
            return data
        try:
            groups = [ClassGroup.model_validate(g) for g in raw_groups]
        except ValidationError:
            return data
        derived = {c.code: c for g in groups for c in g.classes}
        return {**data, groups_key: groups, "classes_by_code": derived}

    @property
    def all_classes(self) -> list[PaxClass]:
        """Every class across all groups, in group order."""
        return [c for group in self.class_groups for c in group.classes]
