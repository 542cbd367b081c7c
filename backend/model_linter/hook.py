"""Build hook: lints the model file of every configured locale.

Models live in a models directory as `<locale>.json`. A locale whose file cannot be
loaded, or whose model has no usable structure, is reported and skipped; the other
locales are still linted.
"""

import json
from pathlib import Path
from typing import Optional, Union

import structlog

from model_linter.config import get_settings
from model_linter.exceptions import ModelLinterError, ModelLoadError
from model_linter.sinks import WarningSink, stderr_sink
from model_linter.validators import LintEngine, LintReport, lint_engine

logger = structlog.get_logger()


def model_path(models_dir: Union[str, Path], locale: str) -> Path:
    """Path of the model file for a locale."""
    return Path(models_dir) / f"{locale}.json"


def load_model(models_dir: Union[str, Path], locale: str) -> dict:
    """Read and decode one locale's model file.

    Raises:
        ModelLoadError: if the file is missing, unreadable, not UTF-8 or not valid JSON
    """
    path = model_path(models_dir, locale)
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as e:
        raise ModelLoadError(locale, f"Cannot read '{locale}' model at {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ModelLoadError(locale, f"Cannot parse '{locale}' model at {path}: {e}") from e


def model_linter_hook(
    locales: Optional[list[str]] = None,
    models_dir: Optional[Union[str, Path]] = None,
    sink: Optional[WarningSink] = stderr_sink,
    engine: Optional[LintEngine] = None,
) -> dict[str, LintReport]:
    """Lint every locale's model and return the reports keyed by locale.

    Args:
        locales: Locales to lint. Defaults to the LOCALES setting.
        models_dir: Directory with `<locale>.json` files. Defaults to the MODELS_DIR setting.
        sink: Consumer for warnings as they are found
        engine: Lint engine to use. Defaults to the module-level engine.
    """
    settings = get_settings()
    locales = locales if locales is not None else settings.LOCALES
    models_dir = models_dir if models_dir is not None else settings.MODELS_DIR
    engine = engine or lint_engine

    logger.info("model_linter_launching", locales=locales, models_dir=str(models_dir))

    reports: dict[str, LintReport] = {}
    for locale in locales:
        try:
            model = load_model(models_dir, locale)
            reports[locale] = engine.validate(model, locale, sink=sink)
        except ModelLinterError as e:
            logger.error("model_lint_failed", locale=locale, error=str(e))
            reports[locale] = LintReport.failed(locale, str(e))

    logger.info(
        "model_lint_complete",
        locales=len(reports),
        failed=[locale for locale, r in reports.items() if r.error],
        total_warnings=sum(len(r.warnings) for r in reports.values()),
    )

    return reports
