"""Typed language model: intents, phrases, entity types and their values.

Parsing converts the decoded per-locale JSON document into these models once, so every
check works on typed data. Strings are kept exactly as written: the whitespace checks
depend on seeing the raw text.
"""

from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from model_linter.exceptions import ModelStructureError


class StructuredEntityValue(BaseModel):
    """An entity value written as an object with optional synonyms."""

    model_config = ConfigDict(extra="ignore")

    value: str
    synonyms: Optional[list[str]] = None


# A value is either a bare string or a structured object
EntityValue = Union[str, StructuredEntityValue]


class EntityType(BaseModel):
    """A named category of recognizable values."""

    model_config = ConfigDict(extra="ignore")

    values: Optional[list[EntityValue]] = None


class Intent(BaseModel):
    """A user goal with its example phrases."""

    model_config = ConfigDict(extra="ignore")

    phrases: Optional[list[str]] = None


class LanguageModel(BaseModel):
    """Root of one locale's model document."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    intents: dict[str, Intent]
    entity_types: Optional[dict[str, EntityType]] = Field(default=None, alias="entityTypes")

    @classmethod
    def from_obj(cls, obj: Any, locale: str) -> "LanguageModel":
        """Validate a decoded JSON object.

        Raises:
            ModelStructureError: if the object is not a usable model for the checks
        """
        if isinstance(obj, cls):
            return obj
        try:
            return cls.model_validate(obj)
        except PydanticValidationError as e:
            problems = "; ".join(
                f"{'.'.join(str(part) for part in err['loc']) or '<root>'}: {err['msg']}"
                for err in e.errors()
            )
            raise ModelStructureError(
                locale, f"Invalid structure in '{locale}' model: {problems}"
            ) from e

    def iter_phrases(self):
        """Yield (intent_name, raw_phrase) in key order, then listed order."""
        for intent_name, intent in self.intents.items():
            for phrase in intent.phrases or []:
                yield intent_name, phrase

    def iter_entity_values(self):
        """Yield (entity_type_name, value) in key order, then listed order."""
        for entity_type_name, entity_type in (self.entity_types or {}).items():
            for value in entity_type.values or []:
                yield entity_type_name, value
