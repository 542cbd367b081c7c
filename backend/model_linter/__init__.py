"""Model Linter: static checks for per-locale conversational language models.

Usage:
    from model_linter import validate_model

    report = validate_model(model_json, "de")
    if not report.passed:
        # Warnings were already written to the sink (stderr by default)
"""

from model_linter.validators import lint_engine, validate_model

__all__ = ["lint_engine", "validate_model"]
