"""Unit tests for the ExceptionMapper."""

import re
from functools import partial

import pytest

from servekit.errors import RuntimeUnavailableFeature, ServekitError
from servekit.exception_mapper import ExceptionMapper, NoHandlerForException

# pylint: disable=unused-argument, too-few-public-methods


def assert_log_message(records, message, level: str) -> None:
    """Assert that a log message is in the log records."""
    log_msgs = [rec.getMessage() for rec in records if rec.levelname == level]
    assert message in log_msgs


def test_dispatches_to_most_specific_handler(caplog):
    """The most specific handler runs, once, with the exception and context."""
    calls: list[tuple[str, BaseException, object]] = []

    def handle_servekit(exc, ctx):
        calls.append(("servekit", exc, ctx))

    def handle_unavailable(exc, ctx):
        calls.append(("unavailable", exc, ctx))

    mapper = ExceptionMapper(
        {ServekitError: handle_servekit, RuntimeUnavailableFeature: handle_unavailable}
    )
    exc = RuntimeUnavailableFeature("missing")
    ctx = object()

    with caplog.at_level("DEBUG"):
        mapper.handle(exc, ctx)

    assert calls == [("unavailable", exc, ctx)]
    assert_log_message(
        caplog.records,
        "Handling exception RuntimeUnavailableFeature with handler handle_unavailable",
        "DEBUG",
    )


def test_falls_back_to_ancestor_handler():
    """Subclasses without their own handler use the ancestor's."""
    seen = []
    mapper = ExceptionMapper({LookupError: lambda exc, ctx: seen.append(exc)})
    exc = KeyError("id")
    mapper.handle(exc)
    assert seen == [exc]
    assert mapper.handler_for(ValueError()) is None


def test_no_handler_logs_error_and_raises(caplog):
    """Unhandled exception types are logged and raise NoHandlerForException."""
    mapper = ExceptionMapper({})
    with caplog.at_level("ERROR"):
        with pytest.raises(
            NoHandlerForException, match="No handler found for exception ValueError"
        ) as exc_info:
            mapper.handle(ValueError("bad"))

    assert isinstance(exc_info.value.exception, ValueError)
    assert_log_message(
        caplog.records, "No handler found for exception ValueError", "ERROR"
    )


def test_handler_exception_is_logged_and_reraised(caplog):
    """Errors raised by a handler are logged and propagate."""

    def faulty_handler(exc, ctx):
        raise RuntimeError("handler error")

    mapper = ExceptionMapper({ValueError: faulty_handler})
    with caplog.at_level("ERROR"):
        with pytest.raises(RuntimeError, match="handler error"):
            mapper.handle(ValueError())

    assert_log_message(
        caplog.records,
        "Exception in handler faulty_handler while handling ValueError",
        "ERROR",
    )


def test_handler_name_falls_back_to_repr(caplog):
    """Callable objects without __name__ are logged by repr."""

    class CallableObj:
        """A callable object without a __name__ attribute."""

        def __call__(self, exc, ctx):
            pass

    mapper = ExceptionMapper({ValueError: CallableObj()})
    with caplog.at_level("DEBUG"):
        mapper.handle(ValueError())
    logs = " ".join(rec.getMessage() for rec in caplog.records)
    assert re.search(r"Handling exception ValueError with handler <.*>", logs)


def test_handler_name_from_partial(caplog):
    """Partials are logged by the wrapped function's name."""

    def record(exc, ctx, sink):
        sink.append(exc)

    sink: list[BaseException] = []
    mapper = ExceptionMapper({ValueError: partial(record, sink=sink)})
    with caplog.at_level("DEBUG"):
        mapper.handle(ValueError())
    assert len(sink) == 1
    assert_log_message(
        caplog.records, "Handling exception ValueError with handler record", "DEBUG"
    )
