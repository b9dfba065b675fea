"""
Settings validation for fluentassert.

SettingsValidator walks raw parsed YAML and records every problem it
finds in a SettingsReport, so that one run shows all of them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


# ─────────────────────────────────────────────────────────────────────────────
# Report Types
# ─────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class SettingsIssue:
    """One problem, located by its dotted key (or the file it came from)."""
    path: str
    message: str
    value: Any = None
    hint: str | None = None

    def __str__(self) -> str:
        line = f"{self.path}: {self.message}"
        if self.value is not None:
            line += f" (got {self.value!r})"
        if self.hint:
            line += f"; {self.hint}"
        return line


@dataclass
class SettingsReport:
    """Issues found while reading settings; empty means usable."""
    issues: list[SettingsIssue] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.issues

    @property
    def paths(self) -> list[str]:
        return [issue.path for issue in self.issues]

    def report(self, path: str, message: str, value: Any = None, hint: str | None = None) -> None:
        self.issues.append(SettingsIssue(path, message, value, hint))

    @classmethod
    def single(cls, path: str, message: str, value: Any = None, hint: str | None = None) -> SettingsReport:
        report = cls()
        report.report(path, message, value, hint)
        return report

    def __str__(self) -> str:
        if self.ok:
            return "settings ok"
        listed = "\n".join(f"  - {issue}" for issue in self.issues)
        return f"{len(self.issues)} problem(s) in settings:\n{listed}"


class InvalidSettingsError(ValueError):
    """Raised when settings that must be used cannot be loaded."""

    def __init__(self, source: str, report: SettingsReport):
        self.source = source
        self.report = report
        super().__init__(f"Cannot use settings from {source}: {report}")


# ─────────────────────────────────────────────────────────────────────────────
# Settings Validator
# ─────────────────────────────────────────────────────────────────────────────

class SettingsValidator:
    """Validates raw parsed YAML against the settings schema."""

    REQUIRED_TOP_LEVEL = {"version"}
    OPTIONAL_TOP_LEVEL = {"formatting", "predicates"}
    FORMATTING_KEYS = {"max_items", "max_depth", "max_string_length"}
    PREDICATE_KEYS = {"describe_lambdas"}

    def __init__(self, data: dict[str, Any]):
        self.data = data
        self.result = SettingsReport()

    def validate(self) -> SettingsReport:
        """Run all validation checks and return result."""
        self._validate_top_level()
        if not self.result.ok:
            return self.result

        self._validate_version()
        self._validate_formatting()
        self._validate_predicates()

        return self.result

    def _validate_top_level(self) -> None:
        """Check required and unknown top-level keys."""
        keys = set(self.data.keys())
        missing = self.REQUIRED_TOP_LEVEL - keys
        unknown = keys - self.REQUIRED_TOP_LEVEL - self.OPTIONAL_TOP_LEVEL

        for key in sorted(missing):
            self.result.report(
                key,
                f"Required field '{key}' is missing",
                hint=f"Add '{key}:' to your settings file"
            )

        for key in sorted(unknown, key=str):
            self.result.report(
                str(key),
                f"Unknown top-level field '{key}'",
                hint=f"Valid fields are: {', '.join(sorted(self.REQUIRED_TOP_LEVEL | self.OPTIONAL_TOP_LEVEL))}"
            )

    def _validate_version(self) -> None:
        version = self.data.get("version")
        if not isinstance(version, int) or isinstance(version, bool):
            self.result.report(
                "version",
                "Must be an integer",
                value=version,
                hint="Use 'version: 1'"
            )
        elif version < 1:
            self.result.report(
                "version",
                "Must be >= 1",
                value=version
            )

    def _validate_formatting(self) -> None:
        formatting = self._section("formatting", self.FORMATTING_KEYS)
        if formatting is None:
            return

        for key in ("max_items", "max_depth"):
            if key in formatting:
                self._check_int(f"formatting.{key}", formatting[key], minimum=1)

        if "max_string_length" in formatting:
            self._check_int(
                "formatting.max_string_length",
                formatting["max_string_length"],
                minimum=0,
                hint="Use 0 to show strings in full",
            )

    def _validate_predicates(self) -> None:
        predicates = self._section("predicates", self.PREDICATE_KEYS)
        if predicates is None:
            return

        if "describe_lambdas" in predicates:
            value = predicates["describe_lambdas"]
            if not isinstance(value, bool):
                self.result.report(
                    "predicates.describe_lambdas",
                    "Must be a boolean",
                    value=value,
                    hint="Use 'true' or 'false'"
                )

    def _section(self, name: str, valid_keys: set[str]) -> dict[str, Any] | None:
        """Return a section if it is present and well-formed."""
        section = self.data.get(name)
        if section is None:
            return None

        if not isinstance(section, dict):
            self.result.report(
                name,
                "Must be an object",
                value=section
            )
            return None

        for key in sorted(set(section) - valid_keys, key=str):
            self.result.report(
                f"{name}.{key}",
                f"Unknown field '{key}'",
                hint=f"Valid fields are: {', '.join(sorted(valid_keys))}"
            )

        return section

    def _check_int(
        self,
        path: str,
        value: Any,
        minimum: int,
        hint: str | None = None,
    ) -> None:
        if not isinstance(value, int) or isinstance(value, bool):
            self.result.report(
                path,
                "Must be an integer",
                value=value
            )
        elif value < minimum:
            self.result.report(
                path,
                f"Must be >= {minimum}",
                value=value,
                hint=hint
            )
