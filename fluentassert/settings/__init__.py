"""
Settings for fluentassert

This package loads, validates and exposes the options that shape
failure messages (rendering limits, predicate descriptions).

Usage:
    from fluentassert.settings import load_settings, validate_settings_yaml

    # Load from file
    settings, report = load_settings("fluentassert.yaml")
    if not report.ok:
        print(report)

    # Or validate from string
    settings, report = validate_settings_yaml(yaml_string)
"""

# Public API
from .loader import (
    CONFIG_ENV_VAR,
    default_settings,
    load_settings,
    validate_settings_yaml,
)

# Models
from .models import FormattingOptions, PredicateOptions, Settings

# Validation
from .validation import (
    InvalidSettingsError,
    SettingsValidator,
    SettingsIssue,
    SettingsReport,
)

__all__ = [
    # Loader functions
    "CONFIG_ENV_VAR",
    "default_settings",
    "load_settings",
    "validate_settings_yaml",
    # Models
    "Settings",
    "FormattingOptions",
    "PredicateOptions",
    # Validation
    "InvalidSettingsError",
    "SettingsReport",
    "SettingsIssue",
    "SettingsValidator",
]
