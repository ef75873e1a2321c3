"""Tests for the JSON persistence adapter."""

from __future__ import annotations

import logging

from paxcalc.calculator import convert
from paxcalc.constants import STORAGE_KEYS
from paxcalc.models import CalculationResult, UserPreferences
from paxcalc.storage import JsonStore


class TestJsonStore:
    def test_missing_key_returns_default(self) -> None:
        store = JsonStore({})
        default = UserPreferences()
        assert store.load(STORAGE_KEYS["preferences"], UserPreferences, default) is default

    def test_preferences_round_trip(self) -> None:
        backend: dict[str, str] = {}
        store = JsonStore(backend)
        prefs = UserPreferences(input_class="SS", output_class="AS", last_time="45.1")
        store.save(STORAGE_KEYS["preferences"], prefs)
        assert '"inputClass":"SS"' in backend[STORAGE_KEYS["preferences"]]
        loaded = store.load(STORAGE_KEYS["preferences"], UserPreferences, UserPreferences())
        assert loaded == prefs

    def test_result_round_trip(self, super_street, a_street) -> None:
        store = JsonStore({})
        result = convert(60.0, super_street, a_street)
        store.save(STORAGE_KEYS["last_calculation"], result)
        loaded = store.load(STORAGE_KEYS["last_calculation"], CalculationResult | None, None)
        assert loaded == result

    def test_corrupt_value_falls_back(self, caplog) -> None:
        store = JsonStore({STORAGE_KEYS["preferences"]: "{broken"})
        default = UserPreferences()
        with caplog.at_level(logging.WARNING, logger="paxcalc.storage"):
            loaded = store.load(STORAGE_KEYS["preferences"], UserPreferences, default)
        assert loaded is default
        assert "Failed to load" in caplog.text

    def test_unserializable_value_logged(self, caplog) -> None:
        backend: dict[str, str] = {}
        store = JsonStore(backend)
        with caplog.at_level(logging.WARNING, logger="paxcalc.storage"):
            store.save("odd", object())
        assert backend == {}
        assert "Failed to save odd" in caplog.text

    def test_remove(self) -> None:
        backend = {"k": "1"}
        JsonStore(backend).remove("k")
        JsonStore(backend).remove("k")
        assert backend == {}
