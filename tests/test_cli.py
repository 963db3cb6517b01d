"""
Tests for the zonescore command-line front end.
"""

import json
from pathlib import Path

import pytest

from zonescore_toolkit.cli import EXIT_INVALID, EXIT_NO_DATA, EXIT_OK, main


def write_jsonl(path: Path, rows: list) -> None:
    path.write_text("\n".join(json.dumps(r) for r in rows) + "\n", encoding="utf-8")


@pytest.fixture
def data_dir(tmp_path: Path, snapshot_factory) -> Path:
    """Scenario A as snapshot 1, zone X at 70 / 50 as snapshots 2 and 3."""
    records = [
        snapshot_factory(1, {"Math": [80, 60, 90], "Science": [None, None]}),
        snapshot_factory(2, {"X": [70]}),
        snapshot_factory(3, {"X": [50, 50]}),
    ]
    write_jsonl(tmp_path / "zones.jsonl", [z.to_dict() for zs, _, _ in records for z in zs])
    write_jsonl(tmp_path / "zone_memberships.jsonl", [m.to_dict() for _, ms, _ in records for m in ms])
    write_jsonl(tmp_path / "questions.jsonl", [q.to_dict() for _, _, qs in records for q in qs])
    return tmp_path


class TestStudentCommand:
    """Tests for `zonescore student`."""

    def test_student_when_data_then_prints_report(self, data_dir, capsys):
        code = main(["student", "--data", str(data_dir), "--snapshot", "1"])

        out = json.loads(capsys.readouterr().out)
        assert code == EXIT_OK
        assert out["title"] == "Student report"
        assert [z["zone_name"] for z in out["top_zones"]] == ["Math"]
        assert out["low_score_zones"] == []

    def test_student_when_threshold_then_low_list(self, data_dir, capsys):
        code = main(["student", "-d", str(data_dir), "-s", "1", "--threshold", "80", "--strict"])

        out = json.loads(capsys.readouterr().out)
        assert code == EXIT_OK
        assert [z["score"] for z in out["low_score_zones"]] == [76.67]

    def test_student_when_unknown_snapshot_then_no_data_exit(self, data_dir, capsys):
        code = main(["student", "--data", str(data_dir), "--snapshot", "42"])

        err = json.loads(capsys.readouterr().err)
        assert code == EXIT_NO_DATA
        assert err["reason"] == "no_zones"

    def test_student_when_negative_snapshot_then_invalid_exit(self, data_dir, capsys):
        code = main(["student", "--data", str(data_dir), "--snapshot", "-1"])

        assert code == EXIT_INVALID
        assert "non-negative" in capsys.readouterr().err

    def test_student_when_output_file_then_written(self, data_dir, tmp_path, capsys):
        out_file = tmp_path / "out" / "report.json"

        code = main(["student", "--data", str(data_dir), "--snapshot", "1", "-o", str(out_file)])

        assert code == EXIT_OK
        assert json.loads(out_file.read_text(encoding="utf-8"))["snapshot_id"] == 1
        assert capsys.readouterr().out == ""

    def test_student_when_output_is_directory_then_invalid_exit(self, data_dir, tmp_path, capsys):
        code = main(["student", "--data", str(data_dir), "--snapshot", "1", "-o", str(tmp_path)])

        assert code == EXIT_INVALID
        assert "error: cannot write" in capsys.readouterr().err


class TestPrincipalCommand:
    """Tests for `zonescore principal`."""

    def test_principal_when_snapshots_then_lowest_zone(self, data_dir, capsys):
        code = main(["principal", "--data", str(data_dir), "--snapshots", "2", "3", "9"])

        out = json.loads(capsys.readouterr().out)
        assert code == EXIT_OK
        assert out["lowest_average_zone"]["zone_name"] == "X"
        assert out["lowest_average_zone"]["score"] == 60.0
        assert out["analyzed_snapshots"] == [2, 3]
        assert out["excluded_snapshots"] == [9]

    def test_principal_when_no_snapshots_given_then_all_analyzed(self, data_dir, capsys):
        code = main(["principal", "--data", str(data_dir)])

        out = json.loads(capsys.readouterr().out)
        assert code == EXIT_OK
        assert out["analyzed_snapshots"] == [1, 2, 3]
        assert out["lowest_average_zone"]["zone_name"] == "X"
        assert out["lowest_average_zone"]["score"] == 60.0

    def test_principal_when_no_snapshots_and_empty_data_then_invalid_exit(self, tmp_path, capsys):
        (tmp_path / "questions.jsonl").write_text("", encoding="utf-8")
        (tmp_path / "zones.jsonl").write_text("", encoding="utf-8")

        code = main(["principal", "--data", str(tmp_path)])

        assert code == EXIT_INVALID
        assert "At least one snapshot ID is required" in capsys.readouterr().err

    def test_principal_when_weighted_then_weighted_score(self, data_dir, capsys):
        code = main(["principal", "-d", str(data_dir), "-s", "2", "3", "--weighted"])

        out = json.loads(capsys.readouterr().out)
        assert code == EXIT_OK
        assert out["lowest_average_zone"]["score"] == 56.67

    def test_principal_when_no_data_then_no_data_exit(self, data_dir, capsys):
        code = main(["principal", "--data", str(data_dir), "--snapshots", "8", "9"])

        assert code == EXIT_NO_DATA
        assert json.loads(capsys.readouterr().err)["reason"] == "no_zone_data"

    def test_principal_when_bad_workers_then_invalid_exit(self, data_dir):
        assert main(["principal", "-d", str(data_dir), "-s", "2", "--workers", "0"]) == EXIT_INVALID

    def test_main_when_missing_data_dir_then_invalid_exit(self, tmp_path, capsys):
        code = main(["student", "--data", str(tmp_path / "missing"), "--snapshot", "1"])

        assert code == EXIT_INVALID
        assert "does not exist" in capsys.readouterr().err
