"""Shared constants for the PAX calculator."""

from __future__ import annotations

DECIMAL_PLACES = 3

# Typical PAX band; 1.000 is the reference class
PAX_TYPICAL_MIN = 0.7
PAX_TYPICAL_MAX = 1.0

YEAR_MIN = 2000
YEAR_MAX = 2100

EASTER_EGG_TIME = "69.420"

STORAGE_KEYS: dict[str, str] = {
    "preferences": "pax-calculator-preferences",
    "pax_data": "pax-calculator-data",
    "last_calculation": "pax-calculator-last-calculation",
}

LOG_DIR_ENV = "PAXCALC_LOG_DIR"
LOG_FILE_NAME = "paxcalc_calls.log"
