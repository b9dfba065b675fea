"""
Settings loader for fluentassert.

This module provides the public API for loading and validating
settings files from disk or YAML strings.
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml

from .models import Settings
from .parser import SettingsParser
from .validation import InvalidSettingsError, SettingsReport, SettingsValidator

logger = logging.getLogger(__name__)

# Environment variable naming a settings file for default_settings()
CONFIG_ENV_VAR = "FLUENTASSERT_CONFIG"


def load_settings(path: str | Path) -> tuple[Settings | None, SettingsReport]:
    """
    Load and validate settings from a YAML file.

    Args:
        path: Path to the YAML settings file

    Returns:
        Tuple of (Settings or None, SettingsReport)
        If the report has issues, Settings will be None.

    Example:
        settings, report = load_settings("fluentassert.yaml")
        if not report.ok:
            print(report)
        should(items, settings=settings).contain(3)
    """
    path = Path(path)

    if not path.is_file():
        return None, SettingsReport.single(
            str(path), "no settings file here", hint="FLUENTASSERT_CONFIG must name a readable file"
        )

    logger.info(f"Loading settings from {path}")
    return _read(path.read_text(), str(path))


def validate_settings_yaml(yaml_string: str) -> tuple[Settings | None, SettingsReport]:
    """Validate settings given as YAML text."""
    return _read(yaml_string, "<string>")


@lru_cache(maxsize=1)
def default_settings() -> Settings:
    """
    Settings used when an assertion is not given explicit settings.

    Reads the file named by FLUENTASSERT_CONFIG when it is set, otherwise
    returns the built-in defaults. The result is cached; call
    default_settings.cache_clear() after changing the environment.

    Raises:
        InvalidSettingsError: If the configured file cannot be used
    """
    path = os.environ.get(CONFIG_ENV_VAR)
    if not path:
        logger.debug(f"{CONFIG_ENV_VAR} not set, using built-in settings")
        return Settings()

    settings, report = load_settings(path)
    if settings is None:
        raise InvalidSettingsError(path, report)
    return settings


def _read(text: str, source: str) -> tuple[Settings | None, SettingsReport]:
    try:
        data: Any = yaml.safe_load(text)
    except yaml.YAMLError as e:
        logger.debug(f"{source} is not parseable YAML: {e}")
        return None, SettingsReport.single(source, f"unparseable YAML ({e})")

    if not isinstance(data, dict):
        return None, SettingsReport.single(
            source, "expected a mapping of settings at the top level", value=type(data).__name__
        )

    report = SettingsValidator(data).validate()
    if not report.ok:
        return None, report

    return SettingsParser(data).parse(), report
