"""Immutable calculator state and the transitions between states.

Each transition takes a state value and returns a new one; nothing here
stores or persists anything. Callers hand the returned values to
:class:`paxcalc.storage.JsonStore` when they want them remembered.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from paxcalc.calculator import convert
from paxcalc.data import get_latest_index
from paxcalc.exceptions import PaxDomainError
from paxcalc.lookup import find_class
from paxcalc.models.pax_class import PaxClass
from paxcalc.models.pax_index import PaxIndex
from paxcalc.models.preferences import UserPreferences
from paxcalc.models.results import CalculationResult


class CalculatorState(BaseModel):
    """What the calculator screen is showing."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    current_time: str = ""
    last_result: CalculationResult | None = None
    is_calculating: bool = False
    error: str | None = None


class IndexCatalog(BaseModel):
    """The indices known to the application and which one is selected."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    indices: tuple[PaxIndex, ...] = ()
    current_index: PaxIndex | None = None
    last_update_check: datetime | None = None
    has_updates: bool = False


# ── Preferences ──────────────────────────────────────────────────────────────


def update_preferences(prefs: UserPreferences, **changes: Any) -> UserPreferences:
    """Return prefs with the given fields replaced (validated)."""
    return UserPreferences.model_validate({**prefs.model_dump(), **changes})


def reset_preferences() -> UserPreferences:
    return UserPreferences()


# ── Calculator ───────────────────────────────────────────────────────────────


def set_time(state: CalculatorState, time: str) -> CalculatorState:
    """Record new time input; any previous error no longer applies."""
    return state.model_copy(update={"current_time": time, "error": None})


def apply_calculation(
    state: CalculatorState,
    input_time: float,
    input_class: PaxClass,
    output_class: PaxClass,
) -> CalculatorState:
    """Run a conversion and fold its result, or its domain error, into the state."""
    try:
        result = convert(input_time, input_class, output_class)
    except PaxDomainError as exc:
        return state.model_copy(update={"is_calculating": False, "error": exc.message})
    return state.model_copy(
        update={"last_result": result, "is_calculating": False, "error": None},
    )


def clear(state: CalculatorState) -> CalculatorState:
    return state.model_copy(update={"current_time": "", "last_result": None, "error": None})


def clear_error(state: CalculatorState) -> CalculatorState:
    return state.model_copy(update={"error": None})


def can_calculate(
    input_class: PaxClass | None,
    output_class: PaxClass | None,
    state: CalculatorState,
) -> bool:
    """True when both classes are chosen, a time is entered and nothing is running."""
    return bool(
        input_class is not None
        and output_class is not None
        and state.current_time.strip()
        and not state.is_calculating
    )


# ── Index catalog ────────────────────────────────────────────────────────────


def set_indices(catalog: IndexCatalog, indices: tuple[PaxIndex, ...] | list[PaxIndex]) -> IndexCatalog:
    return catalog.model_copy(update={"indices": tuple(indices)})


def set_current_index(catalog: IndexCatalog, index: PaxIndex | None) -> IndexCatalog:
    return catalog.model_copy(update={"current_index": index})


def set_has_updates(
    catalog: IndexCatalog,
    has_updates: bool,
    checked_at: datetime | None = None,
) -> IndexCatalog:
    """Record the outcome of an update check, stamped with when it happened."""
    return catalog.model_copy(update={
        "has_updates": has_updates,
        "last_update_check": checked_at or datetime.now(timezone.utc),
    })


def resolve_current_index(catalog: IndexCatalog, prefs: UserPreferences) -> PaxIndex | None:
    """Pick the index the calculator should use.

    With auto-update on, the newest index of the preferred type wins. Otherwise
    a pinned version of that type, and failing that the catalog's current
    index if it is of the preferred type.
    """
    index_type = prefs.index_type.value

    if prefs.auto_update:
        return get_latest_index(index_type, catalog.indices)

    if prefs.pinned_version:
        for index in catalog.indices:
            if index.index_type == index_type and index.version == prefs.pinned_version:
                return index
        return None

    current = catalog.current_index
    if current is not None and current.index_type == index_type:
        return current
    return None


def resolve_selection(
    index: PaxIndex | None,
    prefs: UserPreferences,
) -> tuple[PaxClass | None, PaxClass | None]:
    """Look up the preferred input and output classes in the given index."""
    if index is None:
        return None, None
    input_class = find_class(prefs.input_class, index) if prefs.input_class else None
    output_class = find_class(prefs.output_class, index) if prefs.output_class else None
    return input_class, output_class
