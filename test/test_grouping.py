"""Tests for grouping sub-records by a discriminant."""

import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from FleetQuery.core.models import Stream
from FleetQuery.engine.grouping import UNKNOWN_BUCKET, bucket_counts, group_by


class TestGroupBy(unittest.TestCase):
    def test_counts_and_first_seen_bucket_order(self) -> None:
        streams = [Stream(id=i, state=s) for i, s in enumerate(["Running", "Running", "Error", "Copying"])]

        buckets = group_by(streams, "state")

        self.assertEqual(list(buckets), ["Running", "Error", "Copying"])
        self.assertEqual(bucket_counts(buckets), {"Running": 2, "Error": 1, "Copying": 1})

    def test_items_keep_relative_order_within_bucket(self) -> None:
        streams = [Stream(id=1, state="Running"), Stream(id=2, state="Error"), Stream(id=3, state="Running")]

        buckets = group_by(streams, "state")

        self.assertEqual([s.id for s in buckets["Running"]], [1, 3])

    def test_missing_discriminant_goes_to_unknown_bucket(self) -> None:
        streams = [Stream(id=1, state=None), Stream(id=2, state="Stopped"), Stream(id=3, state="")]

        buckets = group_by(streams, "state")

        self.assertEqual(list(buckets), [UNKNOWN_BUCKET, "Stopped"])
        self.assertEqual([s.id for s in buckets[UNKNOWN_BUCKET]], [1, 3])
        self.assertEqual(sum(bucket_counts(buckets).values()), 3)

    def test_mappings_and_callables_are_supported(self) -> None:
        items = [{"kind": "a"}, {"kind": "b"}, {}]

        by_name = group_by(items, "kind")
        by_func = group_by(items, lambda item: item.get("kind"))

        self.assertEqual(dict(by_name), dict(by_func))
        self.assertEqual(by_name[UNKNOWN_BUCKET], ({},))

    def test_empty_input_gives_no_buckets(self) -> None:
        self.assertEqual(dict(group_by([], "state")), {})


if __name__ == "__main__":
    unittest.main()
