"""Typed language model."""

from model_linter.models.language_model import (
    EntityType,
    EntityValue,
    Intent,
    LanguageModel,
    StructuredEntityValue,
)

__all__ = ["EntityType", "EntityValue", "Intent", "LanguageModel", "StructuredEntityValue"]
