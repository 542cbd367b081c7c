"""Duplicate Entity Value Validator: values and synonyms must be unique across entity types.

Different entity types configured to recognize the same text lead to ambiguous slot
resolution at runtime.
"""

from model_linter.models import LanguageModel, StructuredEntityValue
from model_linter.validators.base import BaseValidator
from model_linter.validators.models import LintWarning, ErrorCode


class DuplicateEntityValueValidator(BaseValidator):
    """Detects entity values and synonyms that collide after normalization.

    One lookup map covers values and synonyms alike. Values are recorded with their entity
    type as owner; synonyms are recorded with their normalized parent value as owner.
    """

    @property
    def name(self) -> str:
        return "DuplicateEntityValueValidator"

    def validate(self, model: LanguageModel, locale: str) -> list[LintWarning]:
        warnings = []

        if model.entity_types is None:
            return warnings

        owners: dict[str, str] = {}

        for entity_type, value in model.iter_entity_values():
            if isinstance(value, StructuredEntityValue):
                normalized_value = self._normalize(value.value)
                self._check_value(owners, normalized_value, entity_type, locale, warnings)
                owners[normalized_value] = self._normalize(entity_type)

                for synonym in value.synonyms or []:
                    key = self._normalize(synonym)
                    if key in owners:
                        warnings.append(self._warning(
                            code=ErrorCode.DUPLICATE_ENTITY_SYNONYM,
                            locale=locale,
                            message=(
                                f"synonym/value '{key}' is used at least twice in both entity types "
                                f"'{owners[key]}' and '{entity_type}' in '{locale}' model. "
                            ),
                            text=key,
                            entity_type=entity_type,
                        ))
                    owners[key] = normalized_value
            else:
                key = self._normalize(value)
                self._check_value(owners, key, entity_type, locale, warnings)
                owners[key] = self._normalize(entity_type)

        return warnings

    def _check_value(
        self,
        owners: dict[str, str],
        key: str,
        entity_type: str,
        locale: str,
        warnings: list[LintWarning],
    ) -> None:
        if key not in owners:
            return
        warnings.append(self._warning(
            code=ErrorCode.DUPLICATE_ENTITY_VALUE,
            locale=locale,
            message=(
                f"value '{key}' is used at least twice in both entity types "
                f"'{owners[key]}' and '{entity_type}' in '{locale}' model. "
            ),
            text=key,
            entity_type=entity_type,
        ))
