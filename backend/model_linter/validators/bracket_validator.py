"""Bracket Validator: curly-brace variable markers in phrases must be balanced.

Complains about expressions like "what is your {name", "what is your {{name}"
or "what is your name}".
"""

from typing import Optional

from model_linter.models import LanguageModel
from model_linter.validators.base import BaseValidator
from model_linter.validators.models import LintWarning, ErrorCode


class BracketValidator(BaseValidator):
    """Scans each phrase with a depth counter: '{' opens, '}' closes.

    Depth above 1 (nested or repeated opening) is reported as a missing closing bracket,
    depth below 0 as a missing opening bracket. Scanning of a phrase stops at the first
    finding. A phrase ending at depth 1 is reported as a missing closing bracket.
    """

    @property
    def name(self) -> str:
        return "BracketValidator"

    def validate(self, model: LanguageModel, locale: str) -> list[LintWarning]:
        warnings = []

        for intent, phrase in model.iter_phrases():
            code = self._scan(phrase)
            if code is None:
                continue
            which = "closing" if code == ErrorCode.BRACKET_MISSING_CLOSING else "opening"
            warnings.append(self._warning(
                code=code,
                locale=locale,
                message=(
                    f"missing {which} bracket in phrase '{phrase}' in intent "
                    f"'{intent}' in '{locale}' model. "
                ),
                text=phrase,
                intent=intent,
            ))

        return warnings

    @staticmethod
    def _scan(phrase: str) -> Optional[ErrorCode]:
        depth = 0
        # Iterating a str yields code points, so multi-byte characters stay whole
        for character in phrase:
            if character == "{":
                depth += 1
            elif character == "}":
                depth -= 1

            if depth > 1:
                return ErrorCode.BRACKET_MISSING_CLOSING
            if depth < 0:
                return ErrorCode.BRACKET_MISSING_OPENING

        if depth == 1:
            return ErrorCode.BRACKET_MISSING_CLOSING
        return None
