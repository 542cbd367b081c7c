"""Model Validator: deterministic lint checks for language models.

Usage:
    from model_linter.validators import lint_engine

    report = lint_engine.validate(model_json, "en")
    for line in report.render():
        print(line)
"""

from model_linter.validators.engine import LintEngine, lint_engine, validate_model
from model_linter.validators.models import LintReport, LintWarning, ErrorCode, WARNING_PREFIX

__all__ = [
    "LintEngine",
    "lint_engine",
    "validate_model",
    "LintReport",
    "LintWarning",
    "ErrorCode",
    "WARNING_PREFIX",
]
