# tests/integration/test_cli_qa_captures.py
# Integration tests for the qa & captures commands against a job JSON file

import json

from typer.testing import CliRunner

from cutlog.cli.app import app

ENV = {"NO_COLOR": "1", "TERM": "dumb"}


def _read(path):
    return json.loads(path.read_text(encoding="utf-8"))


class TestQaCommand:

    # * Units 1 & 5 captured, unit 2 dispatched, 3-4 pending
    def test_counts(self, job_file):
        result = CliRunner().invoke(app, ["qa", str(job_file)], env=ENV)
        assert result.exit_code == 0
        assert "2 Operation Logged" in result.output
        assert "1 QA Dispatched" in result.output
        assert "2 Pending Input" in result.output

    def test_unit_listing(self, job_file):
        result = CliRunner().invoke(app, ["qa", str(job_file), "--units"], env=ENV)
        assert result.exit_code == 0
        assert "SENT_TO_QA" in result.output
        assert "EMPTY" in result.output

    # * Marking writes quantityQaStates back to the job
    def test_mark_selected(self, job_file):
        result = CliRunner().invoke(
            app, ["qa", str(job_file), "--mark", "sent", "--select", "1"], env=ENV
        )
        assert result.exit_code == 0
        assert "2 QA Dispatched" in result.output
        assert _read(job_file)["quantityQaStates"] == {"1": "SENT_TO_QA", "2": "SENT_TO_QA"}

    # * Without --select only logged, undispatched units are marked
    def test_mark_defaults_to_logged_units(self, job_file):
        result = CliRunner().invoke(app, ["qa", str(job_file), "--mark", "sent"], env=ENV)
        assert result.exit_code == 0
        assert "Marked 2 unit(s)" in result.output
        states = _read(job_file)["quantityQaStates"]
        assert states == {"1": "SENT_TO_QA", "2": "SENT_TO_QA", "5": "SENT_TO_QA"}
        assert "3" not in states and "4" not in states

    # * Nothing logged & undispatched leaves the job untouched
    def test_mark_nothing_logged(self, tmp_path, sample_job):
        sample_job["operatorCaptures"] = []
        job_file = tmp_path / "empty.json"
        job_file.write_text(json.dumps(sample_job), encoding="utf-8")
        result = CliRunner().invoke(app, ["qa", str(job_file), "--mark", "ready"], env=ENV)
        assert result.exit_code == 0
        assert "No logged units awaiting dispatch" in result.output
        assert _read(job_file)["quantityQaStates"] == {"2": "SENT_TO_QA"}

    # * Unusable quantity reads as a single unit instead of crashing
    def test_infinite_quantity(self, tmp_path, sample_job):
        sample_job["qty"] = "inf"
        job_file = tmp_path / "inf.json"
        job_file.write_text(json.dumps(sample_job), encoding="utf-8")
        result = CliRunner().invoke(app, ["qa", str(job_file)], env=ENV)
        assert result.exit_code == 0
        assert "1 units" in result.output

    # * A dispatched unit can never be selected again
    def test_redispatch_rejected(self, job_file):
        result = CliRunner().invoke(
            app, ["qa", str(job_file), "--mark", "ready", "--select", "1-2"], env=ENV
        )
        assert result.exit_code == 1
        assert "Not Allowed" in result.output
        assert _read(job_file)["quantityQaStates"] == {"2": "SENT_TO_QA"}

    def test_bad_selection(self, job_file):
        result = CliRunner().invoke(
            app, ["qa", str(job_file), "--mark", "sent", "--select", "3-1"], env=ENV
        )
        assert result.exit_code == 2


class TestCapturesCommand:

    def test_summary(self, job_file):
        result = CliRunner().invoke(app, ["captures", str(job_file)], env=ENV)
        assert result.exit_code == 0
        assert "Operator Activity" in result.output
        assert "Priya" in result.output
        assert "3.250" in result.output

    # * New capture gets machine hours & idle duration filled in
    def test_add_capture(self, job_file, tmp_path):
        new = tmp_path / "capture.json"
        new.write_text(
            json.dumps(
                {
                    "fromQty": 3,
                    "toQty": 4,
                    "startTime": "02/03/2025 13:00",
                    "endTime": "02/03/2025 14:00",
                    "machineNumber": "M1",
                    "opsName": "Priya",
                    "idleTime": "Vertical Dial",
                }
            ),
            encoding="utf-8",
        )
        result = CliRunner().invoke(app, ["captures", str(job_file), "--add", str(new)], env=ENV)
        assert result.exit_code == 0
        assert "Saved capture 3-4" in result.output

        captures = _read(job_file)["operatorCaptures"]
        assert [(c["fromQty"], c["toQty"]) for c in captures] == [(1, 2), (3, 4), (5, 5)]
        added = captures[1]
        assert added["machineHrs"] == "1.333"
        assert added["idleTimeDuration"] == "00:20"
        assert added["captureMode"] == "RANGE"
        assert added["createdAt"]

    def test_add_overlap_rejected(self, job_file, tmp_path):
        new = tmp_path / "capture.json"
        new.write_text(
            json.dumps(
                {
                    "fromQty": 2,
                    "toQty": 3,
                    "startTime": "02/03/2025 13:00",
                    "endTime": "02/03/2025 14:00",
                    "machineNumber": "M1",
                    "opsName": "Priya",
                }
            ),
            encoding="utf-8",
        )
        before = _read(job_file)["operatorCaptures"]
        result = CliRunner().invoke(app, ["captures", str(job_file), "--add", str(new)], env=ENV)
        assert result.exit_code == 1
        assert "Capture Conflict" in result.output
        assert _read(job_file)["operatorCaptures"] == before

        result = CliRunner().invoke(
            app, ["captures", str(job_file), "--add", str(new), "--overwrite"], env=ENV
        )
        assert result.exit_code == 0
        captures = _read(job_file)["operatorCaptures"]
        assert [(c["fromQty"], c["toQty"]) for c in captures] == [(2, 3), (5, 5)]

    # * Incomplete captures are not saved
    def test_add_invalid_capture(self, job_file, tmp_path):
        new = tmp_path / "capture.json"
        new.write_text(json.dumps({"fromQty": 3, "toQty": 3, "startTime": "02/03/2025 13:00"}), encoding="utf-8")
        result = CliRunner().invoke(app, ["captures", str(job_file), "--add", str(new)], env=ENV)
        assert result.exit_code == 1
        assert "Validation Error" in result.output
        assert len(_read(job_file)["operatorCaptures"]) == 2
