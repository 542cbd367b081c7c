"""Shared fixtures for the model linter tests."""

import json

import pytest
import structlog

from model_linter.config import get_settings
from model_linter.sinks import CollectingSink


@pytest.fixture(autouse=True)
def _reset_global_state():
    """The CLI configures structlog and settings are cached; undo both after each test."""
    get_settings.cache_clear()
    yield
    structlog.reset_defaults()
    get_settings.cache_clear()


@pytest.fixture
def sink():
    return CollectingSink()


@pytest.fixture
def clean_model():
    """A model that produces no warnings at all."""
    return {
        "invocation": "my test app",
        "intents": {
            "MyNameIsIntent": {
                "phrases": ["{name}", "my name is {name}", "i am {name}"],
                "inputs": [{"name": "name", "type": {"alexa": "AMAZON.US_FIRST_NAME"}}],
            },
            "HelpIntent": {"phrases": ["help", "what can i do"]},
            "StopIntent": {},
        },
        "entityTypes": {
            "color": {
                "values": [
                    {"value": "red", "synonyms": ["crimson", "scarlet"]},
                    "blue",
                ]
            },
            "size": {"values": ["small", {"value": "large"}]},
        },
    }


@pytest.fixture
def models_dir(tmp_path, clean_model):
    """A models directory with one clean and one noisy locale."""
    directory = tmp_path / "models"
    directory.mkdir()
    (directory / "en.json").write_text(json.dumps(clean_model), encoding="utf-8")
    (directory / "de.json").write_text(
        json.dumps({"intents": {"TestIntent": {"phrases": [" TEST"]}}}),
        encoding="utf-8",
    )
    return directory
