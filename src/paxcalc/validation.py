"""Integrity checks for PAX index datasets."""

from __future__ import annotations

from paxcalc._logging import log_core_call
from paxcalc.constants import PAX_TYPICAL_MAX, PAX_TYPICAL_MIN, YEAR_MAX, YEAR_MIN
from paxcalc.models.pax_index import IndexType, PaxIndex
from paxcalc.models.results import ValidationResult

_INDEX_TYPES = {t.value for t in IndexType}


@log_core_call
def validate(index: PaxIndex) -> ValidationResult:
    """Check a dataset's structure and values, collecting every problem found.

    Hard errors make the result invalid. A PAX index outside the usual
    0.7-1.0 band is only a warning; a non-positive one is also an error.
    """
    errors: list[str] = []
    warnings: list[str] = []

    if not YEAR_MIN <= index.year <= YEAR_MAX:
        errors.append(f"invalid year: {index.year}")

    if index.index_type not in _INDEX_TYPES:
        errors.append(f"invalid index type: {index.index_type}")

    if not index.class_groups:
        errors.append("no class groups found")

    class_count = 0
    seen_codes: set[str] = set()

    for group in index.class_groups:
        if not group.id or not group.name:
            errors.append(
                f"class group missing id or name: {group.model_dump_json(by_alias=True)}",
            )
            continue

        for pax_class in group.classes:
            class_count += 1

            if pax_class.code in seen_codes:
                errors.append(f"duplicate class code: {pax_class.code}")
            seen_codes.add(pax_class.code)

            if not pax_class.code or not pax_class.name:
                errors.append(
                    f"class missing code or name: {pax_class.model_dump_json(by_alias=True)}",
                )

            if not PAX_TYPICAL_MIN <= pax_class.pax_index <= PAX_TYPICAL_MAX:
                warnings.append(
                    f"pax index outside typical range for {pax_class.code}: "
                    f"{pax_class.pax_index}",
                )

            if pax_class.pax_index <= 0:
                errors.append(
                    f"invalid pax index for {pax_class.code}: {pax_class.pax_index}",
                )

    lookup_count = len(index.classes_by_code)
    if lookup_count != class_count:
        errors.append(f"class lookup count mismatch: {lookup_count} vs {class_count}")

    return ValidationResult(
        is_valid=not errors,
        errors=errors,
        warnings=warnings,
        class_count=class_count,
        group_count=len(index.class_groups),
    )
