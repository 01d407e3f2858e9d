from __future__ import annotations

import copy
import json
from pathlib import Path

import pytest

SAMPLE_SKILL = {
    "abilityName": "Cleave",
    "type": "MeleeCombatSkill",
    "shortDescription": "A wide swing.",
    "extendedDescription": "Strikes every enemy in front of the user.",
    "narrative": "Taught to every recruit, mastered by few.",
    "cooldownSeconds": 12,
    "damageType": "Physical/Slashing",
    "requiredSkill": "Basic Swordplay",
    "requirements": {
        "requirements.actions": 2,
        "requirements.conditions": "Wielding a sword",
    },
    "baseDamageMultiplier": {"value": 1.5, "explanation": "Of weapon damage"},
    "immediateDamagePerUse": {"value": 40, "explanation": "Flat bonus"},
    "effectRange": {"value": 2.5, "explanation": "Reach", "unit": "meters"},
    "areaDamageArc": {"value": 120, "explanation": "Frontal cone", "unit": "degrees"},
    "proficiencyLevels": {
        "novice": {"description": "Clumsy", "damageMultiplier": 0.8, "cooldownFactors": 2},
    },
    "debuffs": {
        "RiskOfCounterAttack": {"description": "Opens guard", "multiplier": 1.2, "tickDuration": 3},
    },
    "requiredReagents": ["Blood", "SparklingPowder"],
    "aspects": ["wide", "heavy"],
}


@pytest.fixture
def skill_document() -> dict:
    return copy.deepcopy(SAMPLE_SKILL)


@pytest.fixture
def skill_file(tmp_path: Path, skill_document: dict) -> Path:
    path = tmp_path / "cleave.json"
    path.write_text(json.dumps(skill_document), encoding="utf-8")
    return path
