"""JSON persistence adapter for calculator values.

The backend is any mutable string-to-string mapping: a plain dict in tests,
a browser-style key-value store or a shelf in an application. Persistence is
best effort; a value that cannot be read back is replaced by the default.
"""

from __future__ import annotations

import logging
from typing import Any, MutableMapping, TypeVar

from pydantic import TypeAdapter, ValidationError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class JsonStore:
    """Load and save pydantic-serializable values under string keys."""

    def __init__(self, backend: MutableMapping[str, str]) -> None:
        self._backend = backend

    def load(self, key: str, type_: type[T] | Any, default: T) -> T:
        """Return the stored value for key, or default if missing or unreadable."""
        raw = self._backend.get(key)
        if not raw:
            return default
        try:
            return TypeAdapter(type_).validate_json(raw)
        except ValidationError as exc:
            logger.warning("Failed to load %s from storage: %s", key, exc)
            return default

    def save(self, key: str, value: Any) -> None:
        """Serialize value under key; failures are logged and otherwise ignored."""
        try:
            encoded = TypeAdapter(type(value)).dump_json(value, by_alias=True)
            self._backend[key] = encoded.decode("utf-8")
        except (TypeError, ValueError, OSError) as exc:
            logger.warning("Failed to save %s to storage: %s", key, exc)

    def remove(self, key: str) -> None:
        self._backend.pop(key, None)
