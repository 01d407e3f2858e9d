from pathlib import Path

import pytest

from skill_converter.assembly import TabularRow, assemble_row, destination_for
from skill_converter.errors import EncodingFailure
from skill_converter.flattening import build_sections, encode_sections
from skill_converter.loader import load_skill


def _row(document, include_maps=False) -> TabularRow:
    return assemble_row(encode_sections(build_sections(load_skill(document), include_maps)))


def test_header_and_values_align(skill_document) -> None:
    row = _row(skill_document)
    assert len(row.header) == len(row.values) == 24
    assert row.header[-2:] == ("requiredReagents", "aspects")
    assert row.values[-2:] == ("blood|sparkling_powder", "wide|heavy")


def test_sections_concatenate_in_fixed_order() -> None:
    row = assemble_row([("scalar", "a,b\n1,2\n"), ("requiredReagents", "r\nx\n"), ("aspects", "s\ny\n")])
    assert row.header == ("a", "b", "r", "s")
    assert row.values == ("1", "2", "x", "y")


def test_bare_text_blocks_are_accepted() -> None:
    row = assemble_row(["a\n1\n", "b\n2"])
    assert row.as_dict() == {"a": "1", "b": "2"}


def test_empty_list_section_still_aligns(skill_document) -> None:
    skill_document["requiredReagents"] = []
    skill_document["aspects"] = []
    row = _row(skill_document)
    assert len(row.header) == len(row.values)
    assert row.as_dict()["requiredReagents"] == ""
    assert row.as_dict()["aspects"] == ""


def test_proficiency_and_debuffs_omitted_by_default(skill_document) -> None:
    row = _row(skill_document)
    assert "Clumsy" not in row.values
    assert not any(h.startswith(("proficiencyLevels", "debuffs")) for h in row.header)


def test_proficiency_and_debuffs_included_on_request(skill_document) -> None:
    row = _row(skill_document, include_maps=True)
    assert len(row.header) == len(row.values) == 30
    assert row.as_dict()["debuffs.RiskOfCounterAttack.tickDuration"] == "3"


def test_include_maps_with_empty_maps(skill_document) -> None:
    skill_document["proficiencyLevels"] = {}
    skill_document["debuffs"] = {}
    row = _row(skill_document, include_maps=True)
    assert len(row.header) == len(row.values) == 24


@pytest.mark.parametrize("block", ["a,b\n", "a\n1\n2\n", ""])
def test_wrong_line_count_is_encoding_failure(block) -> None:
    with pytest.raises(EncodingFailure) as exc:
        assemble_row([("aspects", block)])
    assert exc.value.field_path == "aspects"


def test_width_mismatch_is_encoding_failure() -> None:
    with pytest.raises(EncodingFailure):
        assemble_row([("scalar", "a,b\n1\n")])


def test_duplicate_columns_are_rejected() -> None:
    with pytest.raises(EncodingFailure):
        assemble_row(["a\n1\n", "a\n2\n"])


def test_to_csv_is_one_header_and_one_value_line() -> None:
    row = TabularRow(("a", "b"), ("x,y", "z"))
    assert row.to_csv() == 'a,b\n"x,y",z\n'


def test_to_frame_has_one_row() -> None:
    frame = TabularRow(("a", "b"), ("1", "2")).to_frame()
    assert list(frame.columns) == ["a", "b"]
    assert frame.shape == (1, 2)


def test_destination_replaces_extension(tmp_path: Path) -> None:
    assert destination_for("cleave.json") == Path("cleave.csv")
    assert destination_for("/in/cleave.skill.json", tmp_path) == tmp_path / "cleave.skill.csv"
    assert destination_for("noext", tmp_path) == tmp_path / "noext.csv"


def test_nul_character_in_text_survives_stitching(skill_document) -> None:
    skill_document["narrative"] = "before\x00after"
    row = _row(skill_document)
    assert row.as_dict()["narrative"] == "before\x00after"
