"""Tests for warning sinks."""

import io

from model_linter.sinks import CollectingSink, stream_sink
from model_linter.validators import ErrorCode, LintWarning, validate_model


def _warning():
    return LintWarning(
        code=ErrorCode.WHITESPACE_PHRASE,
        locale="de",
        message="phrase ' TEST' has superfluous whitespace in intent 'TestIntent' in 'de' model. ",
        text=" TEST",
        intent="TestIntent",
    )


def test_render_adds_marker():
    assert _warning().render() == (
        "🔺 Warning: phrase ' TEST' has superfluous whitespace in intent 'TestIntent' in 'de' model. "
    )


def test_stream_sink_writes_lines():
    buffer = io.StringIO()
    validate_model({"intents": {"TestIntent": {"phrases": [" TEST", "ok{"]}}}, "de", sink=stream_sink(buffer))
    assert buffer.getvalue().splitlines() == [
        "🔺 Warning: phrase ' TEST' has superfluous whitespace in intent 'TestIntent' in 'de' model. ",
        "🔺 Warning: missing closing bracket in phrase 'ok{' in intent 'TestIntent' in 'de' model. ",
    ]


def test_collecting_sink():
    sink = CollectingSink()
    assert sink.last is None
    sink(_warning())
    assert sink.last.intent == "TestIntent"
    assert len(sink.lines) == 1
    sink.clear()
    assert sink.warnings == []
