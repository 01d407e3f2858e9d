import pytest

from skill_converter.errors import InvalidEnumValue
from skill_converter.schema import (
    SCHEMA,
    DamageType,
    Debuff,
    ProficiencyLevel,
    Reagent,
    SkillCategory,
    Unit,
)

ALL_ENUMS = [SkillCategory, DamageType, ProficiencyLevel, Debuff, Reagent, Unit]


@pytest.mark.parametrize("enum_cls", ALL_ENUMS)
def test_wire_forms_round_trip(enum_cls) -> None:
    for member in enum_cls:
        assert enum_cls.from_wire(member.wire) is member
        assert enum_cls.from_tabular(member.tabular) is member


@pytest.mark.parametrize("enum_cls", ALL_ENUMS)
def test_wire_forms_are_unique(enum_cls) -> None:
    forms = enum_cls.wire_forms()
    assert len(forms) == len(set(forms))


def test_category_wire_differs_from_member_name() -> None:
    assert SkillCategory.MELEE.wire == "MeleeCombatSkill"
    assert DamageType.PHYSICAL_SLASHING.wire == "Physical/Slashing"


def test_reagent_cells_are_snake_case() -> None:
    assert Reagent.SPARKLING_POWDER.tabular == "sparkling_powder"
    assert Reagent.BLOOD.tabular == "blood"
    assert Reagent.SPARKLING_POWDER.wire == "SparklingPowder"


def test_unknown_wire_form_names_field() -> None:
    with pytest.raises(InvalidEnumValue) as exc:
        SkillCategory.from_wire("FireballSkill", "type")
    assert exc.value.field_path == "type"
    assert "FireballSkill" in str(exc.value)


def test_wire_lookup_is_case_sensitive() -> None:
    with pytest.raises(InvalidEnumValue):
        ProficiencyLevel.from_wire("Novice")


def test_every_field_name_matches_its_dataclass() -> None:
    for composite, fields in SCHEMA.items():
        attributes = set(composite.__dataclass_fields__)
        assert {spec.name for spec in fields} == attributes
