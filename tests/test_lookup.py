"""Tests for class lookup queries."""

from __future__ import annotations

from paxcalc.lookup import active_classes, find_class, sorted_active_classes


class TestFindClass:
    def test_found(self, small_index) -> None:
        found = find_class("AM", small_index)
        assert found is not None
        assert found.pax_index == 1.0

    def test_missing(self, small_index) -> None:
        assert find_class("ZZ", small_index) is None

    def test_case_sensitive(self, small_index) -> None:
        assert find_class("ss", small_index) is None
        assert find_class("SS ", small_index) is None

    def test_inactive_still_found(self, small_index) -> None:
        found = find_class("BS", small_index)
        assert found is not None
        assert found.is_active is False


class TestActiveClasses:
    def test_excludes_inactive_keeps_order(self, small_index) -> None:
        codes = [c.code for c in active_classes(small_index)]
        assert codes == ["SS", "AS", "AM", "BM"]

    def test_empty_index(self, make_index) -> None:
        assert active_classes(make_index([])) == []

    def test_sorted_by_code(self, small_index) -> None:
        codes = [c.code for c in sorted_active_classes(small_index)]
        assert codes == ["AM", "AS", "BM", "SS"]
