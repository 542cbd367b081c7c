"""Lint Engine: orchestrates all validators and produces a per-locale report.

This is the main entry point for model validation. It runs all registered
validators against one locale's model and produces a LintReport.

Usage:
    engine = LintEngine()
    report = engine.validate(model_json, "de", sink=stderr_sink)
    if not report.passed:
        # Warnings were already handed to the sink in detection order
"""

import time
import json
from typing import Optional, Union

import structlog

from model_linter.exceptions import ModelLoadError
from model_linter.models import LanguageModel
from model_linter.sinks import WarningSink, stderr_sink
from model_linter.validators.base import BaseValidator
from model_linter.validators.models import LintWarning, LintReport

# Import all validators
from model_linter.validators.duplicate_phrase_validator import DuplicatePhraseValidator
from model_linter.validators.duplicate_entity_value_validator import DuplicateEntityValueValidator
from model_linter.validators.phrase_whitespace_validator import PhraseWhitespaceValidator
from model_linter.validators.entity_type_whitespace_validator import EntityTypeWhitespaceValidator
from model_linter.validators.bracket_validator import BracketValidator

logger = structlog.get_logger()


class LintEngine:
    """Orchestrates all validators and produces a unified lint report.

    Design principles:
        - Deterministic: same input → same output
        - Independent checks: one validator crashing does not stop the others
        - Extensible: add validators without modifying engine
        - Observable: logs every lint run with timing
    """

    def __init__(self, validators: Optional[list[BaseValidator]] = None):
        """Initialize with default validators or custom list.

        Args:
            validators: Optional list of validators. If None, uses all defaults.
        """
        self.validators = validators if validators is not None else self._default_validators()

    @staticmethod
    def _default_validators() -> list[BaseValidator]:
        """Create the default validator chain in execution order."""
        return [
            DuplicatePhraseValidator(),
            DuplicateEntityValueValidator(),
            PhraseWhitespaceValidator(),
            EntityTypeWhitespaceValidator(),
            BracketValidator(),
        ]

    def validate(
        self,
        model: Union[LanguageModel, dict, str],
        locale: str,
        sink: Optional[WarningSink] = None,
    ) -> LintReport:
        """Run all validators against one locale's model and produce a report.

        Args:
            model: Parsed model (typed, decoded JSON object, or JSON string)
            locale: Locale identifier used in every message
            sink: Optional consumer called with each warning as it is found

        Returns:
            LintReport with all warnings in detection order

        Raises:
            ModelLoadError: if a JSON string cannot be decoded
            ModelStructureError: if the model lacks the structure the checks need
        """
        start_time = time.perf_counter()

        # Parse JSON string if needed
        if isinstance(model, str):
            try:
                model = json.loads(model)
            except json.JSONDecodeError as e:
                raise ModelLoadError(locale, f"Cannot parse '{locale}' model JSON: {e}") from e

        parsed = LanguageModel.from_obj(model, locale)

        # Run all validators
        all_warnings: list[LintWarning] = []
        failed_validators: list[str] = []
        validator_timings: dict[str, float] = {}

        for validator in self.validators:
            v_start = time.perf_counter()
            try:
                warnings = validator.validate(parsed, locale)
            except Exception as e:
                logger.error(
                    "validator_failed",
                    validator=validator.name,
                    locale=locale,
                    error=str(e),
                )
                failed_validators.append(validator.name)
                continue
            finally:
                v_duration = (time.perf_counter() - v_start) * 1000
                validator_timings[validator.name] = round(v_duration, 2)

            all_warnings.extend(warnings)
            if sink is not None:
                for warning in warnings:
                    sink(warning)

        report = LintReport.build(locale, all_warnings, failed_validators)

        total_duration = (time.perf_counter() - start_time) * 1000

        logger.debug(
            "validation_complete",
            locale=locale,
            passed=report.passed,
            summary=report.summary,
            total_warnings=len(all_warnings),
            duration_ms=round(total_duration, 2),
            validator_timings=validator_timings,
        )

        return report

    def add_validator(self, validator: BaseValidator) -> None:
        """Add a custom validator to the chain."""
        self.validators.append(validator)

    def remove_validator(self, validator_name: str) -> None:
        """Remove a validator by name."""
        self.validators = [v for v in self.validators if v.name != validator_name]


# Module-level singleton
lint_engine = LintEngine()


def validate_model(
    model: Union[LanguageModel, dict, str],
    locale: str,
    sink: Optional[WarningSink] = stderr_sink,
) -> LintReport:
    """Lint one locale's model with the default validators, writing warnings to `sink`.

    The per-run summary is logged at debug level. Unconfigured structlog prints every
    level to stdout, so embedding applications should call structlog.configure (see
    model_linter.main.configure_logging) to filter or redirect it.
    """
    return lint_engine.validate(model, locale, sink=sink)
