"""Call logging for the paxcalc core operations."""

from __future__ import annotations

import functools
import logging
import os
import threading
import time
from typing import Any, Callable, TypeVar

from paxcalc.constants import LOG_DIR_ENV, LOG_FILE_NAME

F = TypeVar("F", bound=Callable[..., Any])

LOGGER_NAME = "paxcalc.core"

_LOG_DIR: str | None = os.environ.get(LOG_DIR_ENV) or None

_logger: logging.Logger | None = None
_logger_lock = threading.Lock()


def _get_logger() -> logging.Logger:
    """Return the core logger, attaching a file handler on first use if a log dir is set."""
    global _logger
    if _logger is not None:
        return _logger

    with _logger_lock:
        if _logger is not None:
            return _logger

        logger = logging.getLogger(LOGGER_NAME)

        if _LOG_DIR and not logger.handlers:
            os.makedirs(_LOG_DIR, exist_ok=True)
            logger.setLevel(logging.DEBUG)
            handler = logging.FileHandler(
                os.path.join(_LOG_DIR, LOG_FILE_NAME), encoding="utf-8",
            )
            handler.setFormatter(
                logging.Formatter("%(asctime)s | %(levelname)s | %(message)s"),
            )
            logger.addHandler(handler)
            logger.propagate = False

        _logger = logger

    return _logger


def _summarize(value: Any) -> str:
    # Class code or dataset label instead of the full model repr
    code = getattr(value, "code", None)
    if isinstance(code, str):
        return code
    year = getattr(value, "year", None)
    index_type = getattr(value, "index_type", None)
    if year is not None and index_type is not None:
        return f"{index_type} {year}"
    return repr(value)


def log_core_call(fn: F) -> F:
    """Decorator that logs calls to core operations, their timing and failures."""

    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        logger = _get_logger()
        arg_parts = [_summarize(a) for a in args]
        arg_parts += [f"{k}={_summarize(v)}" for k, v in kwargs.items()]
        arg_str = ", ".join(arg_parts)
        logger.debug("CALL: %s(%s)", fn.__qualname__, arg_str)

        start = time.monotonic()
        try:
            result = fn(*args, **kwargs)
        except Exception as exc:
            elapsed = time.monotonic() - start
            logger.warning(
                "FAIL: %s(%s) -> %s: %s (%.3fs)",
                fn.__qualname__, arg_str, type(exc).__name__, exc, elapsed,
            )
            raise
        elapsed = time.monotonic() - start
        logger.debug("OK: %s(%s) (%.3fs)", fn.__qualname__, arg_str, elapsed)
        return result

    return wrapper  # type: ignore[return-value]
