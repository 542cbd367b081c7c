"""Tests for the build hook: per-locale file loading and isolation of failures."""

import pytest

from model_linter.exceptions import ModelLoadError
from model_linter.hook import load_model, model_linter_hook, model_path


def test_model_path(tmp_path):
    assert model_path(tmp_path, "de") == tmp_path / "de.json"


def test_lints_every_locale(models_dir, sink):
    reports = model_linter_hook(locales=["en", "de"], models_dir=models_dir, sink=sink)
    assert list(reports) == ["en", "de"]
    assert reports["en"].passed is True
    assert reports["de"].passed is False
    assert sink.lines == [
        "🔺 Warning: phrase ' TEST' has superfluous whitespace in intent 'TestIntent' in 'de' model. "
    ]


def test_missing_file_does_not_stop_other_locales(models_dir, sink):
    reports = model_linter_hook(locales=["fr", "de"], models_dir=models_dir, sink=sink)
    assert reports["fr"].error is not None
    assert reports["fr"].passed is False
    assert len(reports["de"].warnings) == 1


def test_invalid_json_and_structure_are_reported_per_locale(models_dir, sink):
    (models_dir / "it.json").write_text("{oops", encoding="utf-8")
    (models_dir / "es.json").write_text('{"entityTypes": {}}', encoding="utf-8")
    reports = model_linter_hook(locales=["it", "es", "en"], models_dir=models_dir, sink=sink)
    assert "Cannot parse 'it' model" in reports["it"].error
    assert "Invalid structure in 'es' model" in reports["es"].error
    assert reports["en"].passed is True
    assert sink.warnings == []


def test_defaults_come_from_settings(models_dir, sink, monkeypatch):
    monkeypatch.setenv("MODELS_DIR", str(models_dir))
    monkeypatch.setenv("LOCALES", '["de"]')
    reports = model_linter_hook(sink=sink)
    assert list(reports) == ["de"]
    assert len(sink.warnings) == 1


def test_load_model_errors(tmp_path):
    with pytest.raises(ModelLoadError) as exc_info:
        load_model(tmp_path, "nl")
    assert exc_info.value.locale == "nl"


def test_non_utf8_file_does_not_stop_other_locales(models_dir, sink):
    (models_dir / "fr.json").write_bytes(b'{"intents": {"A": {"phrases": ["caf\xe9"]}}}')
    reports = model_linter_hook(locales=["fr", "de"], models_dir=models_dir, sink=sink)
    assert "Cannot read 'fr' model" in reports["fr"].error
    assert reports["fr"].passed is False
    assert len(reports["de"].warnings) == 1
