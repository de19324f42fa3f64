"""Unit tests for correlation ID context and logger adapter."""

import logging
import threading
import uuid

import pytest

from resolver.domain.correlation_id import (
    CorrelationLoggerAdapter,
    clear_correlation_id,
    correlation_scope,
    generate_correlation_id,
    get_correlation_id,
    set_correlation_id,
)


@pytest.fixture(name="logger_adapter")
def logger_adapter_fixture():
    """Create a CorrelationLoggerAdapter instance."""
    return CorrelationLoggerAdapter(logging.getLogger("path_resolver.test"), {})


def test_generate_correlation_id_returns_unique_uuids():
    """Generated IDs are distinct UUID strings."""
    first = generate_correlation_id()
    second = generate_correlation_id()
    uuid.UUID(first)
    assert first != second


def test_set_get_and_clear_correlation_id():
    """Setters reflect via getter until cleared."""
    set_correlation_id("lookup-1")
    assert get_correlation_id() == "lookup-1"
    clear_correlation_id()
    assert get_correlation_id() is None


def test_correlation_id_isolated_between_threads():
    """Separate threads keep independent IDs."""
    results = {}

    def worker(worker_id: str):
        set_correlation_id(f"worker-{worker_id}")
        results[worker_id] = get_correlation_id()
        clear_correlation_id()

    threads = [threading.Thread(target=worker, args=(str(i),)) for i in range(5)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    for worker_id, correlation_id in results.items():
        assert correlation_id == f"worker-{worker_id}"


def test_adapter_injects_correlation_id(logger_adapter):
    """Adapter injects correlation_id from context."""
    set_correlation_id("test-correlation-123")

    _, kwargs = logger_adapter.process("Test message", {})

    assert kwargs["extra"]["correlation_id"] == "test-correlation-123"
    clear_correlation_id()


def test_adapter_defaults_correlation_id_when_missing(logger_adapter):
    """Adapter defaults correlation_id to '-' when not set."""
    clear_correlation_id()

    _, kwargs = logger_adapter.process("Test message", {})

    assert kwargs["extra"]["correlation_id"] == "-"


def test_adapter_extracts_component(logger_adapter):
    """Component is the logger name without the project prefix."""
    _, kwargs = logger_adapter.process("Test message", {})

    assert kwargs["extra"]["component"] == "test"


def test_adapter_keeps_foreign_logger_names():
    """Loggers outside the project keep their full name."""
    adapter = CorrelationLoggerAdapter(logging.getLogger("other.module"), {})

    _, kwargs = adapter.process("Test message", {})

    assert kwargs["extra"]["component"] == "other.module"


def test_adapter_does_not_modify_original_extra(logger_adapter):
    """Original extra dict remains untouched."""
    original_extra = {"path": "./src"}

    _, kwargs = logger_adapter.process("Test message", {"extra": original_extra})

    assert original_extra == {"path": "./src"}
    assert kwargs["extra"]["path"] == "./src"


def test_correlation_scope_generates_and_clears_id():
    """A scope without an explicit ID tags the run with a fresh UUID."""
    clear_correlation_id()

    with correlation_scope() as scoped_id:
        uuid.UUID(scoped_id)
        assert get_correlation_id() == scoped_id

    assert get_correlation_id() is None


def test_correlation_scope_restores_outer_id():
    """Nested scopes hand the caller's ID back on exit."""
    set_correlation_id("outer-lookup")

    with correlation_scope("inner-lookup"):
        assert get_correlation_id() == "inner-lookup"

    assert get_correlation_id() == "outer-lookup"
    clear_correlation_id()


def test_correlation_scope_restores_id_after_error():
    """The previous ID comes back even when the scoped run raises."""
    clear_correlation_id()

    with pytest.raises(LookupError):
        with correlation_scope("failing-lookup"):
            raise LookupError("missing")

    assert get_correlation_id() is None
