"""Phrase Whitespace Validator: flags phrases with leading or trailing whitespace."""

from model_linter.models import LanguageModel
from model_linter.validators.base import BaseValidator
from model_linter.validators.models import LintWarning, ErrorCode


class PhraseWhitespaceValidator(BaseValidator):
    """Reports every raw phrase that differs from its trimmed form."""

    @property
    def name(self) -> str:
        return "PhraseWhitespaceValidator"

    def validate(self, model: LanguageModel, locale: str) -> list[LintWarning]:
        warnings = []

        for intent, phrase in model.iter_phrases():
            if self._has_superfluous_whitespace(phrase):
                warnings.append(self._warning(
                    code=ErrorCode.WHITESPACE_PHRASE,
                    locale=locale,
                    message=(
                        f"phrase '{phrase}' has superfluous whitespace in intent "
                        f"'{intent}' in '{locale}' model. "
                    ),
                    text=phrase,
                    intent=intent,
                ))

        return warnings
