"""Tests for multi-key stable sorting."""

import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from FleetQuery.engine.sorting import sort_views


class TestSortViews(unittest.TestCase):
    def test_rank_field_puts_primary_first(self) -> None:
        records = [
            {"type": "replica", "cluster": "c1", "_type_sort_order": 2},
            {"type": "primary", "cluster": "c1", "_type_sort_order": 1},
        ]

        ordered = sort_views(records, ["cluster", "_type_sort_order", "type"])

        self.assertEqual([r["type"] for r in ordered], ["primary", "replica"])

    def test_later_keys_only_break_ties(self) -> None:
        records = [
            {"cluster": "b", "alias": "a"},
            {"cluster": "a", "alias": "z"},
            {"cluster": "a", "alias": "b"},
        ]

        ordered = sort_views(records, ["cluster", "alias"])

        self.assertEqual([(r["cluster"], r["alias"]) for r in ordered], [("a", "b"), ("a", "z"), ("b", "a")])

    def test_equal_records_keep_input_order(self) -> None:
        records = [{"cluster": "c1", "id": idx} for idx in range(5)]

        ordered = sort_views(list(reversed(records)), ["cluster"])

        self.assertEqual([r["id"] for r in ordered], [4, 3, 2, 1, 0])

    def test_missing_values_sort_lowest(self) -> None:
        records = [{"shard": "80-"}, {"shard": None}, {}, {"shard": "-80"}]

        ordered = sort_views(records, ["shard"])

        self.assertEqual([r.get("shard") for r in ordered], [None, None, "-80", "80-"])

    def test_comparison_is_case_sensitive_ordinal(self) -> None:
        ordered = sort_views([{"k": "b"}, {"k": "B"}, {"k": "a"}], ["k"])

        self.assertEqual([r["k"] for r in ordered], ["B", "a", "b"])


if __name__ == "__main__":
    unittest.main()
