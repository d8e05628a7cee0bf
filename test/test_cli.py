"""CLI tests running commands against snapshot files."""

import json
import sys
import tempfile
import unittest
from pathlib import Path

from click.testing import CliRunner

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from FleetQuery.cli import cli


def _write_snapshot(tmp: Path, *, keyspaces: bool = True) -> Path:
    (tmp / "tablets.json").write_text((REPO_ROOT / "data" / "tablets.json").read_text(encoding="utf-8"), encoding="utf-8")
    (tmp / "workflows.json").write_text(
        (REPO_ROOT / "data" / "workflows.json").read_text(encoding="utf-8"), encoding="utf-8"
    )
    if keyspaces:
        (tmp / "keyspaces.json").write_text(
            (REPO_ROOT / "data" / "keyspaces.json").read_text(encoding="utf-8"), encoding="utf-8"
        )
    config_path = tmp / "config.yml"
    config_path.write_text(
        "\n".join(
            [
                "log:",
                "  level: INFO",
                "  to_file: false",
                "snapshot:",
                f"  tablets: {tmp / 'tablets.json'}",
                f"  keyspaces: {tmp / 'keyspaces.json'}",
                f"  workflows: {tmp / 'workflows.json'}",
                "output:",
                f"  base_dir: {tmp / 'output'}",
                "  formats: [json]",
                "",
            ]
        ),
        encoding="utf-8",
    )
    return config_path


def _read_output(tmp: Path, action: str) -> list[dict]:
    (path,) = list((tmp / "output" / "json").glob(f"{action}_*.json"))
    return json.loads(path.read_text(encoding="utf-8"))


class TestCli(unittest.TestCase):
    def test_tablets_command_orders_primary_first(self) -> None:
        with tempfile.TemporaryDirectory() as tmp_dir:
            tmp = Path(tmp_dir)
            config_path = _write_snapshot(tmp)

            result = CliRunner().invoke(cli, ["--config", str(config_path), "tablets"])
            self.assertEqual(result.exit_code, 0, result.output)
            rows = _read_output(tmp, "tablets")[0]["rows"]

        self.assertEqual([r["alias"] for r in rows], ["zone1-100", "zone1-101", "zone1-300"])
        self.assertEqual(rows[0]["type"], "PRIMARY")
        self.assertIs(rows[2]["is_shard_serving"], False)

    def test_tablets_without_keyspaces_report_unknown_serving(self) -> None:
        with tempfile.TemporaryDirectory() as tmp_dir:
            tmp = Path(tmp_dir)
            config_path = _write_snapshot(tmp, keyspaces=False)

            result = CliRunner().invoke(cli, ["--config", str(config_path), "tablets", "--filter", "commerce"])
            self.assertEqual(result.exit_code, 0, result.output)
            (payload,) = _read_output(tmp, "tablets")

        self.assertEqual(payload["keyspaces_state"], "failed")
        self.assertEqual(len(payload["rows"]), 2)
        self.assertTrue(all(r["is_shard_serving"] is None for r in payload["rows"]))

    def test_workflows_command_filters(self) -> None:
        with tempfile.TemporaryDirectory() as tmp_dir:
            tmp = Path(tmp_dir)
            config_path = _write_snapshot(tmp)

            result = CliRunner().invoke(
                cli, ["--config", str(config_path), "workflows", "--filter", "keyspace:cust running"]
            )
            self.assertEqual(result.exit_code, 0, result.output)
            rows = _read_output(tmp, "workflows")[0]["rows"]

        self.assertEqual(len(rows), 1)
        self.assertEqual(rows[0]["stream_counts"], {"Running": 1, "Copying": 1})
        self.assertEqual(rows[0]["time_updated"], 1_700_000_060)

    def test_missing_snapshot_aborts(self) -> None:
        with tempfile.TemporaryDirectory() as tmp_dir:
            tmp = Path(tmp_dir)
            config_path = _write_snapshot(tmp)
            (tmp / "tablets.json").unlink()

            result = CliRunner().invoke(cli, ["--config", str(config_path), "tablets"])

        self.assertNotEqual(result.exit_code, 0)


if __name__ == "__main__":
    unittest.main()
