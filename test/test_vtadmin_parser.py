"""Tests for parsing dashboard API payloads into raw records."""

import json
import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from FleetQuery.sources.vtadmin.parser import (
    MalformedRecordError,
    parse_keyspaces,
    parse_tablets,
    parse_workflows,
)


class TestParseTablets(unittest.TestCase):
    def test_envelope_and_enum_names(self) -> None:
        payload = {
            "ok": True,
            "result": {
                "tablets": [
                    {
                        "cluster": {"id": "c1-id", "name": "c1"},
                        "state": "SERVING",
                        "tablet": {
                            "alias": {"cell": "zone1", "uid": 100},
                            "hostname": "h1",
                            "keyspace": "commerce",
                            "shard": "0",
                            "type": "master",
                        },
                    }
                ]
            },
        }

        (tablet,) = parse_tablets(payload)

        self.assertEqual(tablet.cluster.id, "c1-id")
        self.assertEqual(tablet.alias.uid, 100)
        self.assertEqual(tablet.type, "MASTER")
        self.assertEqual(tablet.state, "SERVING")

    def test_integer_enums(self) -> None:
        (tablet,) = parse_tablets([{"tablet": {"type": 2}, "state": 2}])

        self.assertEqual(tablet.type, "REPLICA")
        self.assertEqual(tablet.state, "NOT_SERVING")

    def test_missing_tablet_object_raises_in_strict_mode(self) -> None:
        with self.assertRaises(MalformedRecordError):
            parse_tablets({"tablets": [{"state": "SERVING"}]})

    def test_missing_tablet_object_is_blank_when_lenient(self) -> None:
        with self.assertLogs("FleetQuery", level="WARNING"):
            (tablet,) = parse_tablets({"tablets": [{"state": "SERVING"}]}, strict=False)

        self.assertIsNone(tablet.keyspace)
        self.assertIsNone(tablet.state)

    def test_non_list_payload_raises(self) -> None:
        with self.assertRaises(MalformedRecordError):
            parse_tablets({"tablets": {"not": "a list"}})


class TestParseKeyspaces(unittest.TestCase):
    def test_shard_serving_flag_and_legacy_name(self) -> None:
        payload = {
            "keyspaces": [
                {
                    "cluster": {"id": "c1-id"},
                    "keyspace": {"name": "commerce"},
                    "shards": {
                        "-80": {"shard": {"is_primary_serving": True}},
                        "80-": {"shard": {"is_master_serving": False}},
                        "x": {},
                    },
                }
            ]
        }

        (keyspace,) = parse_keyspaces(payload)

        self.assertEqual(keyspace.name, "commerce")
        self.assertIs(keyspace.shards["-80"].is_primary_serving, True)
        self.assertIs(keyspace.shards["80-"].is_primary_serving, False)
        self.assertIsNone(keyspace.shards["x"].is_primary_serving)


class TestParseWorkflows(unittest.TestCase):
    def test_streams_and_timestamps(self) -> None:
        payload = [
            {
                "cluster": {"id": "c1-id", "name": "c1"},
                "keyspace": "customer",
                "workflow": {
                    "name": "move",
                    "source": {"keyspace": "commerce", "shards": ["0"]},
                    "target": {"keyspace": "customer", "shards": ["-80", "80-"]},
                    "shard_streams": {
                        "customer/-80": {
                            "streams": [
                                {"id": 1, "state": "Running", "time_updated": {"seconds": "1700000000"}},
                                {"id": 2, "state": "Error", "time_updated": "2023-11-14T22:13:20Z"},
                            ]
                        },
                        "customer/80-": {"streams": [{"id": 1, "state": "Copying", "time_updated": 5}]},
                    },
                },
            }
        ]

        (workflow,) = parse_workflows(payload)

        self.assertEqual(workflow.name, "move")
        self.assertEqual(workflow.target.shards, ("-80", "80-"))
        streams = workflow.shard_streams["customer/-80"]
        self.assertEqual([s.state for s in streams], ["Running", "Error"])
        self.assertEqual(streams[0].time_updated, 1_700_000_000)
        self.assertEqual(streams[1].time_updated, 1_700_000_000)
        self.assertEqual(workflow.shard_streams["customer/80-"][0].time_updated, 5)

    def test_non_finite_timestamp_is_dropped_with_warning(self) -> None:
        payload = json.loads(
            '{"workflows": [{"workflow": {"name": "move", "shard_streams": {"customer/-80": '
            '{"streams": [{"id": 1, "state": "Running", "time_updated": {"seconds": NaN}}, '
            '{"id": 2, "state": "Copying", "time_updated": Infinity}]}}}}]}'
        )

        with self.assertLogs("FleetQuery", level="WARNING") as captured:
            (workflow,) = parse_workflows(payload)

        streams = workflow.shard_streams["customer/-80"]
        self.assertEqual([s.time_updated for s in streams], [None, None])
        self.assertEqual(len(captured.output), 2)

    def test_empty_payload(self) -> None:
        self.assertEqual(parse_workflows({"result": {}}), [])


if __name__ == "__main__":
    unittest.main()
