"""Tests for set_equals and combinations."""

from __future__ import annotations

from bunnygraph.domain.sets import combinations, set_equals


class TestSetEquals:
    def test_equal_sets(self) -> None:
        assert set_equals({"a", "b"}, {"b", "a"})

    def test_different_sizes(self) -> None:
        assert not set_equals({"a"}, {"a", "b"})

    def test_same_size_different_members(self) -> None:
        assert not set_equals({"a", "b"}, {"a", "c"})

    def test_empty(self) -> None:
        assert set_equals(set(), set())

    def test_ordered_dict_sets_ignore_order(self) -> None:
        assert set_equals({"x": None, "y": None}, {"y": None, "x": None})

    def test_mixed_containers(self) -> None:
        assert set_equals({"x": None, "y": None}.keys(), {"x", "y"})


class TestCombinations:
    def test_pairs_in_index_order(self) -> None:
        assert combinations(["a", "b", "c"], 2) == [("a", "b"), ("a", "c"), ("b", "c")]

    def test_preserves_input_order_not_sorted(self) -> None:
        assert combinations(["c", "a", "b"], 2) == [("c", "a"), ("c", "b"), ("a", "b")]

    def test_k_equals_length(self) -> None:
        assert combinations(["a", "b", "c"], 3) == [("a", "b", "c")]

    def test_k_one(self) -> None:
        assert combinations(["a", "b"], 1) == [("a",), ("b",)]

    def test_k_out_of_range(self) -> None:
        assert combinations(["a", "b"], 0) == []
        assert combinations(["a", "b"], -1) == []
        assert combinations(["a", "b"], 3) == []

    def test_empty_items(self) -> None:
        assert combinations([], 2) == []

    def test_triples(self) -> None:
        assert combinations([1, 2, 3, 4], 3) == [(1, 2, 3), (1, 2, 4), (1, 3, 4), (2, 3, 4)]
