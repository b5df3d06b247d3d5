from __future__ import annotations

from contextlib import contextmanager
from types import SimpleNamespace
from typing import Any, Dict, Iterator, List, Tuple

import pytest

from smalledit.runtime import telemetry


class RecordingLogger:
    """Stand-in for ``telelog.Logger`` that keeps every call."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.records: List[Tuple[str, str, Dict[str, str]]] = []
        self.context: Dict[str, str] = {}
        self.profiled: List[str] = []
        self.components: List[str] = []

    def info_with(self, message: str, pairs: list) -> None:
        self.records.append(("info", message, dict(pairs)))

    def error_with(self, message: str, pairs: list) -> None:
        self.records.append(("error", message, dict(pairs)))

    def debug(self, message: str) -> None:
        self.records.append(("debug", message, {}))

    def add_context(self, key: str, value: str) -> None:
        self.context[key] = value

    def remove_context(self, key: str) -> None:
        self.context.pop(key, None)

    @contextmanager
    def profile(self, name: str) -> Iterator[None]:
        self.profiled.append(name)
        yield

    @contextmanager
    def track_component(self, name: str) -> Iterator[None]:
        self.components.append(name)
        yield


@pytest.fixture
def loggers(monkeypatch) -> Iterator[Dict[str, RecordingLogger]]:
    created: Dict[str, RecordingLogger] = {}

    def with_config(name: str, config: Any) -> RecordingLogger:
        created[name] = RecordingLogger(name)
        return created[name]

    fake_telelog = SimpleNamespace(Logger=SimpleNamespace(with_config=with_config))
    monkeypatch.setattr(telemetry, "tl", fake_telelog)
    telemetry.configure(config=object())
    yield created
    monkeypatch.undo()
    telemetry.configure()


def test_loggers_are_cached_per_name(loggers) -> None:
    first = telemetry.get_logger("smalledit.test")

    assert telemetry.get_logger("smalledit.test") is first
    assert telemetry.get_logger() is loggers["smalledit"]


def test_record_event_uses_structured_method(loggers) -> None:
    telemetry.record_event("file.saved", data={"path": "a.txt", "chars": 3})

    level, message, payload = loggers["smalledit"].records[-1]
    assert level == "info"
    assert message == "event::file.saved"
    assert payload == {"event": "file.saved", "path": "a.txt", "chars": "3"}


def test_record_event_falls_back_to_plain_method(loggers) -> None:
    telemetry.record_event("file_state.change", level="debug", data={"modified": True})

    level, message, _ = loggers["smalledit"].records[-1]
    assert level == "debug"
    assert message.startswith("event::file_state.change {")


def test_record_event_rejects_unknown_level(loggers) -> None:
    with pytest.raises(ValueError):
        telemetry.record_event("x", level="loud")


def test_span_profiles_and_clears_context(loggers) -> None:
    with telemetry.span("file::read", component="file_store", metadata={"path": "a"}) as handle:
        log = loggers["smalledit"]
        assert log.context == {"path": "a"}
        handle.add_metadata("bytes", 10)

    assert log.profiled == ["file::read"]
    assert log.components == ["file_store"]
    assert log.context == {}
    assert log.records == []


def test_span_reports_and_reraises_failures(loggers) -> None:
    with pytest.raises(RuntimeError):
        with telemetry.span("search::find_next", component=True, metadata={"term": "x"}):
            raise RuntimeError("boom")

    log = loggers["smalledit"]
    level, message, payload = log.records[-1]
    assert (level, message) == ("error", "span::fail")
    assert payload["reason"] == "boom"
    assert payload["component"] == "search::find_next"
    assert payload["term"] == "x"
    assert log.context == {}
