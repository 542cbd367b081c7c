"""Entity Type Whitespace Validator: flags values and synonyms with surrounding whitespace."""

from model_linter.models import LanguageModel, StructuredEntityValue
from model_linter.validators.base import BaseValidator
from model_linter.validators.models import LintWarning, ErrorCode


class EntityTypeWhitespaceValidator(BaseValidator):
    """Reports raw entity values and synonyms that differ from their trimmed form."""

    @property
    def name(self) -> str:
        return "EntityTypeWhitespaceValidator"

    def validate(self, model: LanguageModel, locale: str) -> list[LintWarning]:
        warnings = []

        if model.entity_types is None:
            return warnings

        for entity_type, value in model.iter_entity_values():
            if isinstance(value, StructuredEntityValue):
                texts = [(ErrorCode.WHITESPACE_ENTITY_VALUE, value.value)]
                texts.extend(
                    (ErrorCode.WHITESPACE_ENTITY_SYNONYM, synonym)
                    for synonym in value.synonyms or []
                )
            else:
                texts = [(ErrorCode.WHITESPACE_ENTITY_VALUE, value)]

            for code, text in texts:
                if not self._has_superfluous_whitespace(text):
                    continue
                label = "value" if code == ErrorCode.WHITESPACE_ENTITY_VALUE else "synonym/value"
                warnings.append(self._warning(
                    code=code,
                    locale=locale,
                    message=(
                        f"{label} '{text}' has superfluous whitespace in entity type "
                        f"'{entity_type}' in '{locale}' model. "
                    ),
                    text=text,
                    entity_type=entity_type,
                ))

        return warnings
