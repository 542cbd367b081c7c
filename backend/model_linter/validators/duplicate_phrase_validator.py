"""Duplicate Phrase Validator: no two intents may listen to the same phrase."""

from model_linter.models import LanguageModel
from model_linter.validators.base import BaseValidator
from model_linter.validators.models import LintWarning, ErrorCode


class DuplicatePhraseValidator(BaseValidator):
    """Detects phrases that are equal after trimming and lower-casing.

    The owner recorded for a phrase is replaced by every later intent using it, so a
    third occurrence is reported against the second, not the first.
    """

    @property
    def name(self) -> str:
        return "DuplicatePhraseValidator"

    def validate(self, model: LanguageModel, locale: str) -> list[LintWarning]:
        warnings = []
        owners: dict[str, str] = {}

        for intent, phrase in model.iter_phrases():
            key = self._normalize(phrase)
            if key in owners:
                warnings.append(self._warning(
                    code=ErrorCode.DUPLICATE_PHRASE,
                    locale=locale,
                    message=(
                        f"phrase '{key}' is used in both intents '{owners[key]}' "
                        f"and '{intent}' in '{locale}' model. "
                    ),
                    text=key,
                    intent=intent,
                ))
            owners[key] = intent

        return warnings
