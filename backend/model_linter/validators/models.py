"""Lint models: warning codes, warning records, and the per-locale report.

All checks are deterministic: same model and locale, same warnings in the same order.
"""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field

# Leading marker on every rendered warning line
WARNING_PREFIX = "🔺 Warning: "


class ErrorCode(str, Enum):
    """Deterministic codes for every lint rule.

    Naming convention: CATEGORY_SPECIFIC_ISSUE
    """

    # Duplicates
    DUPLICATE_PHRASE = "DUPLICATE_PHRASE"
    DUPLICATE_ENTITY_VALUE = "DUPLICATE_ENTITY_VALUE"
    DUPLICATE_ENTITY_SYNONYM = "DUPLICATE_ENTITY_SYNONYM"

    # Whitespace
    WHITESPACE_PHRASE = "WHITESPACE_PHRASE"
    WHITESPACE_ENTITY_VALUE = "WHITESPACE_ENTITY_VALUE"
    WHITESPACE_ENTITY_SYNONYM = "WHITESPACE_ENTITY_SYNONYM"

    # Variable brackets
    BRACKET_MISSING_CLOSING = "BRACKET_MISSING_CLOSING"
    BRACKET_MISSING_OPENING = "BRACKET_MISSING_OPENING"


class LintWarning(BaseModel):
    """A single lint finding."""

    code: ErrorCode
    locale: str
    message: str                       # Sentence without the warning marker
    text: str                          # The phrase/value/synonym that triggered it
    intent: Optional[str] = None
    entity_type: Optional[str] = None

    def render(self) -> str:
        return f"{WARNING_PREFIX}{self.message}"


class LintReport(BaseModel):
    """Complete lint report for one locale: the output of the lint engine."""

    locale: str
    passed: bool = Field(description="True if no warnings and no fatal error")
    summary: dict[str, int] = Field(default_factory=dict, description="Count of warnings by code")
    warnings: list[LintWarning] = Field(default_factory=list)
    failed_validators: list[str] = Field(default_factory=list)
    error: Optional[str] = Field(default=None, description="Fatal error that aborted this locale")

    @classmethod
    def build(
        cls,
        locale: str,
        warnings: list[LintWarning],
        failed_validators: Optional[list[str]] = None,
    ) -> "LintReport":
        """Build a report from warnings, keeping the order the checks produced them."""
        summary: dict[str, int] = {}
        for warning in warnings:
            summary[warning.code.value] = summary.get(warning.code.value, 0) + 1

        failed = list(failed_validators or [])
        return cls(
            locale=locale,
            passed=not warnings and not failed,
            summary=summary,
            warnings=list(warnings),
            failed_validators=failed,
        )

    @classmethod
    def failed(cls, locale: str, error: str) -> "LintReport":
        """Report for a locale whose model could not be linted at all."""
        return cls(locale=locale, passed=False, error=error)

    def render(self) -> list[str]:
        """Rendered warning lines, in order."""
        return [w.render() for w in self.warnings]
