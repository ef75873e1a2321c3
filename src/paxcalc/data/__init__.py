"""Embedded PAX indices and catalog queries over them."""

from __future__ import annotations

from typing import Any, Iterable

from pydantic import ValidationError

from paxcalc._logging import log_core_call
from paxcalc.data.prosolo2024 import PROSOLO_2024
from paxcalc.data.solo2024 import SOLO_2024
from paxcalc.exceptions import PaxDataError
from paxcalc.models.pax_index import IndexType, PaxIndex

ALL_INDICES: tuple[PaxIndex, ...] = (SOLO_2024, PROSOLO_2024)


def _of_type(index_type: IndexType | str, indices: Iterable[PaxIndex]) -> list[PaxIndex]:
    wanted = IndexType(index_type).value
    return [index for index in indices if index.index_type == wanted]


def get_index(
    index_type: IndexType | str,
    year: int,
    indices: Iterable[PaxIndex] = ALL_INDICES,
) -> PaxIndex | None:
    """Return the index for an event format and year, or None."""
    for index in _of_type(index_type, indices):
        if index.year == year:
            return index
    return None


def get_latest_index(
    index_type: IndexType | str,
    indices: Iterable[PaxIndex] = ALL_INDICES,
) -> PaxIndex | None:
    """Return the most recent index for an event format, or None."""
    return max(_of_type(index_type, indices), key=lambda i: i.year, default=None)


def get_available_years(
    index_type: IndexType | str,
    indices: Iterable[PaxIndex] = ALL_INDICES,
) -> list[int]:
    """Return the years with an index for this event format, newest first."""
    return sorted((i.year for i in _of_type(index_type, indices)), reverse=True)


@log_core_call
def load_index(payload: str | bytes | dict[str, Any]) -> PaxIndex:
    """Parse a PAX index from a JSON document or an already-decoded mapping.

    Keys may be camelCase (as published) or snake_case. The result is not
    validated for integrity; run :func:`paxcalc.validate` before trusting it.

    Raises:
        PaxDataError: If the payload does not describe a PAX index.
    """
    try:
        if isinstance(payload, dict):
            return PaxIndex.model_validate(payload)
        return PaxIndex.model_validate_json(payload)
    except ValidationError as exc:
        raise PaxDataError(str(exc)) from exc


__all__ = [
    "ALL_INDICES",
    "PROSOLO_2024",
    "SOLO_2024",
    "get_available_years",
    "get_index",
    "get_latest_index",
    "load_index",
]
