import json
import logging

import pytest

from visitorgen.observability import (
    GenerationEvent,
    compose_event_observers,
    generation_event_to_dict,
    make_event,
    make_json_event_logger,
)


def test_generation_event_to_dict_contains_all_fields() -> None:
    event = GenerationEvent(
        timestamp="2026-10-19T00:00:00+00:00",
        event="visitor.generated",
        success=True,
        metadata={"service": "unit"},
        visitor="NodeVisitor",
        method_count=4,
    )

    payload = generation_event_to_dict(event)
    assert payload["event"] == "visitor.generated"
    assert payload["visitor"] == "NodeVisitor"
    assert payload["method_count"] == 4
    assert payload["metadata"] == {"service": "unit"}
    assert payload["error_type"] is None


def test_make_event_stamps_utc_time() -> None:
    event = make_event("file.written", path="out/visitor.py")
    assert event.success is True
    assert event.timestamp.endswith("+00:00")
    assert event.path == "out/visitor.py"


def test_make_json_event_logger_emits_json_line(caplog: pytest.LogCaptureFixture) -> None:
    logger = logging.getLogger("visitorgen.observability.test")
    event_logger = make_json_event_logger(logger=logger, level=logging.INFO)
    event = GenerationEvent(
        timestamp="2026-10-19T00:00:00+00:00",
        event="run.failed",
        success=False,
        error_type="InputRootError",
        duration_ms=1.5,
    )

    with caplog.at_level(logging.INFO, logger=logger.name):
        event_logger(event)

    assert len(caplog.records) == 1
    decoded = json.loads(caplog.records[0].message)
    assert decoded["event"] == "run.failed"
    assert decoded["success"] is False
    assert decoded["error_type"] == "InputRootError"


def test_compose_event_observers_calls_each_in_order() -> None:
    calls: list[str] = []
    composed = compose_event_observers(
        lambda event: calls.append(f"first:{event.event}"),
        lambda event: calls.append(f"second:{event.event}"),
    )
    composed(make_event("declarations.collected"))
    assert calls == ["first:declarations.collected", "second:declarations.collected"]
