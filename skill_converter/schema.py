"""Skill record types and the field tables that map them to JSON keys.

The dataclasses only describe the in-memory shape. Which external key feeds
which attribute, and how the value is decoded, lives in the `FieldSpec`
tables at the bottom of this module; both the loader and the flattener walk
those tables.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Tuple, Type

import numpy as np

from .errors import InvalidEnumValue

U8_MAX = 255


def to_f32(number: float) -> float:
    """Round to the nearest single-precision value; overflow gives inf."""
    with np.errstate(over='ignore'):
        return float(np.float32(number))


def format_f32(number: float) -> str:
    """Shortest text that reads back as the same single-precision value."""
    return str(np.float32(number))


class WireEnum(Enum):
    """Enum whose member values are the canonical wire strings."""

    @property
    def wire(self) -> str:
        return self.value

    @property
    def tabular(self) -> str:
        """Form written into CSV cells."""
        return self.value

    @classmethod
    def from_wire(cls, text: Any, field_path: Optional[str] = None):
        for member in cls:
            if member.value == text:
                return member
        raise InvalidEnumValue(
            f"{text!r} is not a valid {cls.__name__}; expected one of {cls.wire_forms()}",
            field_path,
        )

    @classmethod
    def from_tabular(cls, text: str, field_path: Optional[str] = None):
        for member in cls:
            if member.tabular == text:
                return member
        raise InvalidEnumValue(
            f"{text!r} is not a valid {cls.__name__} cell value",
            field_path,
        )

    @classmethod
    def wire_forms(cls) -> list:
        return [member.value for member in cls]


class SkillCategory(WireEnum):
    MELEE = "MeleeCombatSkill"
    RANGED = "RangedCombatSkill"
    UTILITY = "UtilitySkill"
    SPELL = "SpellSkill"
    HEALING = "HealingSkill"


class DamageType(WireEnum):
    PHYSICAL_SLASHING = "Physical/Slashing"
    MAGICAL = "Magical"


class Reagent(WireEnum):
    SPARKLING_POWDER = "SparklingPowder"
    BLOOD = "Blood"

    @property
    def tabular(self) -> str:
        return _REAGENT_CELLS[self]


_REAGENT_CELLS = {
    Reagent.SPARKLING_POWDER: "sparkling_powder",
    Reagent.BLOOD: "blood",
}


class ProficiencyLevel(WireEnum):
    NOVICE = "novice"
    ADEPT = "adept"
    MASTER = "master"


class Unit(WireEnum):
    METERS = "meters"
    DEGREES = "degrees"


class Debuff(WireEnum):
    RISK_OF_COUNTER_ATTACK = "RiskOfCounterAttack"


@dataclass(frozen=True)
class Measurement:
    value: float
    explanation: str
    # None means the unit does not apply to this measurement.
    unit: Optional[Unit] = None


@dataclass(frozen=True)
class Proficiency:
    description: str
    damage_multiplier: float
    cooldown_factors: int


@dataclass(frozen=True)
class DebuffEffect:
    description: str
    multiplier: float
    tick_duration: int


@dataclass(frozen=True)
class Requirements:
    actions: int
    conditions: str


@dataclass(frozen=True)
class Skill:
    ability_name: str
    category: SkillCategory
    short_description: str
    extended_description: str
    narrative: str
    cooldown_seconds: int
    damage_type: DamageType
    required_skill: str
    requirements: Requirements
    base_damage_multiplier: Measurement
    immediate_damage_per_use: Measurement
    effect_range: Measurement
    area_damage_arc: Measurement
    proficiency_levels: Mapping[ProficiencyLevel, Proficiency] = field(default_factory=dict)
    debuffs: Mapping[Debuff, DebuffEffect] = field(default_factory=dict)
    required_reagents: Tuple[Reagent, ...] = ()
    aspects: Tuple[str, ...] = ()


class Rule(Enum):
    TEXT = "text"
    INTEGER = "integer"
    FLOAT = "float"
    ENUM = "enum"
    COMPOSITE = "composite"
    ENUM_MAP = "enum_map"
    LIST = "list"


@dataclass(frozen=True)
class FieldSpec:
    """How one attribute is named externally and decoded.

    `target` is the enum class for ENUM, the composite type for COMPOSITE,
    `(key_enum, value_type)` for ENUM_MAP and the item type (an enum class
    or `str`) for LIST.
    """

    key: str
    name: str
    rule: Rule
    target: Any = None
    optional: bool = False
    aliases: Tuple[str, ...] = ()

    @property
    def keys(self) -> Tuple[str, ...]:
        return (self.key,) + self.aliases


SKILL_FIELDS: Tuple[FieldSpec, ...] = (
    FieldSpec("abilityName", "ability_name", Rule.TEXT),
    FieldSpec("type", "category", Rule.ENUM, SkillCategory),
    FieldSpec("shortDescription", "short_description", Rule.TEXT),
    FieldSpec("extendedDescription", "extended_description", Rule.TEXT),
    FieldSpec("narrative", "narrative", Rule.TEXT),
    FieldSpec("cooldownSeconds", "cooldown_seconds", Rule.INTEGER),
    FieldSpec("damageType", "damage_type", Rule.ENUM, DamageType),
    FieldSpec("requiredSkill", "required_skill", Rule.TEXT),
    FieldSpec("requirements", "requirements", Rule.COMPOSITE, Requirements),
    FieldSpec("baseDamageMultiplier", "base_damage_multiplier", Rule.COMPOSITE, Measurement),
    FieldSpec("immediateDamagePerUse", "immediate_damage_per_use", Rule.COMPOSITE, Measurement),
    FieldSpec("effectRange", "effect_range", Rule.COMPOSITE, Measurement),
    FieldSpec("areaDamageArc", "area_damage_arc", Rule.COMPOSITE, Measurement),
    FieldSpec("proficiencyLevels", "proficiency_levels", Rule.ENUM_MAP, (ProficiencyLevel, Proficiency)),
    FieldSpec("debuffs", "debuffs", Rule.ENUM_MAP, (Debuff, DebuffEffect)),
    FieldSpec("requiredReagents", "required_reagents", Rule.LIST, Reagent),
    FieldSpec("aspects", "aspects", Rule.LIST, str),
)

REQUIREMENTS_FIELDS: Tuple[FieldSpec, ...] = (
    FieldSpec("actions", "actions", Rule.INTEGER, aliases=("requirements.actions",)),
    FieldSpec("conditions", "conditions", Rule.TEXT, aliases=("requirements.conditions",)),
)

MEASUREMENT_FIELDS: Tuple[FieldSpec, ...] = (
    FieldSpec("value", "value", Rule.FLOAT),
    FieldSpec("explanation", "explanation", Rule.TEXT),
    FieldSpec("unit", "unit", Rule.ENUM, Unit, optional=True),
)

PROFICIENCY_FIELDS: Tuple[FieldSpec, ...] = (
    FieldSpec("description", "description", Rule.TEXT),
    FieldSpec("damageMultiplier", "damage_multiplier", Rule.FLOAT),
    FieldSpec("cooldownFactors", "cooldown_factors", Rule.INTEGER),
)

DEBUFF_EFFECT_FIELDS: Tuple[FieldSpec, ...] = (
    FieldSpec("description", "description", Rule.TEXT),
    FieldSpec("multiplier", "multiplier", Rule.FLOAT),
    FieldSpec("tickDuration", "tick_duration", Rule.INTEGER),
)

SCHEMA: Dict[Type[Any], Tuple[FieldSpec, ...]] = {
    Skill: SKILL_FIELDS,
    Requirements: REQUIREMENTS_FIELDS,
    Measurement: MEASUREMENT_FIELDS,
    Proficiency: PROFICIENCY_FIELDS,
    DebuffEffect: DEBUFF_EFFECT_FIELDS,
}


def fields_for(composite: Type[Any]) -> Tuple[FieldSpec, ...]:
    """Return the field table registered for a composite type."""
    return SCHEMA[composite]
