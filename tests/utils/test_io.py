"""Tests for JSON row dumps."""

import json

from window_measure.models.window import WindowRecord
from window_measure.utils.io import load_job_export, load_json_robust, save_windows_json


class TestLoadJsonRobust:
    def test_missing_file(self, tmp_path):
        data, err = load_json_robust(tmp_path / "missing.json")
        assert data is None
        assert "File not found" in err

    def test_bom(self, tmp_path):
        path = tmp_path / "bom.json"
        path.write_bytes(b"\xef\xbb\xbf" + json.dumps({"a": 1}).encode("utf-8"))
        assert load_json_robust(path) == ({"a": 1}, None)

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")
        data, err = load_json_robust(path)
        assert data is None
        assert err.startswith("JSON error")


class TestJobExport:
    def test_round_trip(self, tmp_path, job, detailed_record, pending_record):
        path = save_windows_json([detailed_record, pending_record], tmp_path / "rows.json", job=job)
        loaded_job, windows, err = load_job_export(path)
        assert err is None
        assert loaded_job == job
        assert windows == [detailed_record, pending_record]

    def test_bare_list(self, tmp_path):
        path = tmp_path / "rows.json"
        path.write_text(json.dumps([{"po_number": "77", "location": "Den"}]), encoding="utf-8")
        job, windows, err = load_job_export(path)
        assert err is None
        assert job.po_number == "77"
        assert windows == [WindowRecord(po_number="77", location="Den")]

    def test_unexpected_structure(self, tmp_path):
        path = tmp_path / "rows.json"
        path.write_text("42", encoding="utf-8")
        job, windows, err = load_job_export(path)
        assert job is None
        assert windows == []
        assert "Unexpected JSON structure" in err
