"""Unit tests for the JSON record writer."""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import patch

import pytest

from rtuk_licenses.core.exceptions import RecordWriteError
from rtuk_licenses.core.schemas.licenses import (
    InternetStreamLicense,
    SatelliteBroadcastingLicense,
)
from rtuk_licenses.scraper.writer import serialize_records, write_records


class TestSerializeRecords:
    def test_four_space_indent_and_literal_unicode(self) -> None:
        text = serialize_records([InternetStreamLicense(id=1, name="Org A")])
        assert text.startswith('[\n    {\n        "id": 1,')
        assert '"license_type": "İnternet"' in text

    def test_published_key_spelling(self) -> None:
        text = serialize_records([SatelliteBroadcastingLicense(license_detail="Genel")])
        assert '"lisence_detail": "Genel"' in text
        assert "license_detail" not in text

    def test_empty_sequence_is_empty_array(self) -> None:
        assert serialize_records([]) == "[]"


class TestWriteRecords:
    def test_writes_json_array(self, tmp_path: Path) -> None:
        path = tmp_path / "internetStreamLicense.json"
        records = [
            InternetStreamLicense(id=1, name="Org A", url="example.com", license_type="İNTERNET"),
            InternetStreamLicense(id=2, name="Org B"),
        ]

        count = write_records(records, path)

        assert count == 2
        data = json.loads(path.read_text(encoding="utf-8"))
        assert data[0] == {
            "id": 1,
            "name": "Org A",
            "url": "example.com",
            "fullname": "",
            "license": "",
            "start_date": "",
            "end_date": "",
            "license_type": "İNTERNET",
        }
        assert data[1]["license_type"] == "İnternet"

    def test_truncates_existing_file(self, tmp_path: Path) -> None:
        path = tmp_path / "out.json"
        path.write_text("x" * 10_000, encoding="utf-8")

        write_records([], path)

        assert path.read_text(encoding="utf-8") == "[]"

    def test_missing_directory_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "missing" / "out.json"
        with pytest.raises(RecordWriteError) as exc_info:
            write_records([InternetStreamLicense(id=1)], path)
        assert exc_info.value.path == str(path)

    def test_encoding_failure_raises(self, tmp_path: Path) -> None:
        with patch(
            "rtuk_licenses.scraper.writer.json.dumps",
            side_effect=TypeError("not serializable"),
        ):
            with pytest.raises(RecordWriteError):
                write_records([InternetStreamLicense(id=1)], tmp_path / "out.json")
