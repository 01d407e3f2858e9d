"""Converter settings loaded from an optional JSON file and the environment."""
from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Mapping, Optional

logger = logging.getLogger(__name__)

CONFIG_ENV = 'SKILL_CONVERTER_CONFIG'
ENV_PREFIX = 'SKILL_CONVERTER_'
_TRUE = {'1', 'true', 'yes', 'on'}
_FALSE = {'0', 'false', 'no', 'off'}


@dataclass(frozen=True)
class ConverterSettings:
    log_level: str = 'DEBUG'
    include_maps: bool = False
    output_dir: Optional[str] = None
    log_limit: int = 200
    window_title: str = 'Converter'


def _parse_bool(value: object) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    raise ValueError(f"not a boolean: {value!r}")


def _parse_level(value: object) -> str:
    level = str(value).strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"unknown log level: {value!r}")
    return level


def _coerce(raw: Mapping[str, object]) -> dict:
    values = {}
    if 'log_level' in raw:
        values['log_level'] = _parse_level(raw['log_level'])
    if 'include_maps' in raw:
        values['include_maps'] = _parse_bool(raw['include_maps'])
    if 'output_dir' in raw:
        values['output_dir'] = str(raw['output_dir']) if raw['output_dir'] else None
    if 'log_limit' in raw:
        limit = raw['log_limit']
        if isinstance(limit, bool) or not isinstance(limit, (int, str)):
            raise ValueError(f"log_limit must be an integer: {limit!r}")
        values['log_limit'] = int(limit)
    if 'window_title' in raw:
        values['window_title'] = str(raw['window_title'])
    return values


def load_settings(path: Optional[Path] = None, environ: Optional[Mapping[str, str]] = None) -> ConverterSettings:
    """Load settings or return defaults.

    File values are applied first, then `SKILL_CONVERTER_<FIELD>` variables.
    Anything unreadable or invalid is logged and skipped.
    """
    env = os.environ if environ is None else environ
    settings = ConverterSettings()

    config_path = path or (Path(env[CONFIG_ENV]) if env.get(CONFIG_ENV) else None)
    if config_path is not None:
        try:
            raw = json.loads(Path(config_path).read_text(encoding='utf-8'))
            if not isinstance(raw, dict):
                raise ValueError("config must be a JSON object")
            settings = replace(settings, **_coerce(raw))
        except (OSError, ValueError) as exc:
            logger.warning("Ignoring config file %s: %s", config_path, exc)

    overrides = {
        key[len(ENV_PREFIX):].lower(): value
        for key, value in env.items()
        if key.startswith(ENV_PREFIX) and key != CONFIG_ENV
    }
    try:
        settings = replace(settings, **_coerce(overrides))
    except ValueError as exc:
        logger.warning("Ignoring environment overrides: %s", exc)
    return settings


def configure_logging(settings: ConverterSettings) -> logging.Logger:
    """Set the package logger level; handlers are attached by the caller."""
    package_logger = logging.getLogger('skill_converter')
    package_logger.setLevel(settings.log_level)
    return package_logger
