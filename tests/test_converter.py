import csv
import json
import logging
from pathlib import Path

import pytest

from skill_converter.converter import convert_document, convert_file
from skill_converter.errors import InvalidEnumValue, MissingRequiredField, SinkWriteFailure
from skill_converter.sink import write_row
from skill_converter.assembly import TabularRow


def test_convert_document_aligns(skill_document) -> None:
    row = convert_document(skill_document)
    assert len(row.header) == len(row.values)
    assert row.as_dict()["abilityName"] == "Cleave"


def test_convert_file_writes_csv_next_to_name(skill_file: Path, tmp_path: Path) -> None:
    out_dir = tmp_path / "out"
    path, row = convert_file(skill_file, out_dir)
    assert path == out_dir / "cleave.csv"
    with open(path, newline="", encoding="utf-8") as f:
        records = list(csv.reader(f))
    assert records == [list(row.header), list(row.values)]


def test_convert_file_defaults_to_temp_dir(skill_file: Path, tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setattr("tempfile.gettempdir", lambda: str(tmp_path))
    path, _ = convert_file(skill_file)
    assert path == tmp_path / "cleave.csv"


def test_invalid_document_writes_nothing(tmp_path: Path, skill_document) -> None:
    skill_document["type"] = "FireballSkill"
    source = tmp_path / "bad.json"
    source.write_text(json.dumps(skill_document), encoding="utf-8")
    with pytest.raises(InvalidEnumValue):
        convert_file(source, tmp_path)
    assert not (tmp_path / "bad.csv").exists()


def test_missing_name_names_field(skill_document) -> None:
    del skill_document["abilityName"]
    with pytest.raises(MissingRequiredField) as exc:
        convert_document(skill_document)
    assert "abilityName" in str(exc.value)


def test_stages_are_logged(skill_document, caplog) -> None:
    with caplog.at_level(logging.DEBUG, logger="skill_converter"):
        convert_document(skill_document)
    messages = [r.getMessage() for r in caplog.records]
    assert "Deserializing JSON" in messages
    assert "Serializing CSV" in messages


def test_sink_failure(tmp_path: Path) -> None:
    blocker = tmp_path / "file"
    blocker.write_text("x", encoding="utf-8")
    with pytest.raises(SinkWriteFailure):
        write_row(TabularRow(("a",), ("1",)), blocker / "out.csv")
