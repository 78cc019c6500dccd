"""Routes raised exceptions to their registered handlers."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

from .hierarchy import find_by_class

logger = logging.getLogger(__name__)

# pylint: disable=too-few-public-methods

ExceptionHandler = Callable[[BaseException, Any], None]


class NoHandlerForException(LookupError):
    """Exception raised when no handler is registered for an exception or its ancestors."""

    def __init__(self, exception: BaseException) -> None:
        super().__init__(f"No handler found for exception {type(exception).__name__}")
        self.exception = exception


class ExceptionMapper:
    """Dispatches exceptions to handlers registered by exception type.

    The handler registered for the most specific type in the exception's
    hierarchy is used, so a handler for ``ValueError`` also covers
    ``UnicodeDecodeError`` unless a handler is registered for the subclass.

    Args:
        handlers: Mapping of exception types to handlers. Handlers are
            callables accepting the exception and a request context. The
            mapping is read on every dispatch and never modified.
    """

    def __init__(self, handlers: Mapping[type[BaseException], ExceptionHandler]) -> None:
        self._handlers = handlers

    def handler_for(self, exception: BaseException) -> ExceptionHandler | None:
        """Return the handler that would process *exception*, if any."""
        return find_by_class(self._handlers, exception)

    def handle(self, exception: BaseException, context: Any = None) -> None:
        """Handle *exception* with the most specific registered handler.

        Args:
            exception: The exception raised while serving a request.
            context: Request context passed through to the handler.

        Raises:
            NoHandlerForException: If no handler covers the exception type.
            Exception: If the handler raises an exception.
        """
        if handler := self.handler_for(exception):
            handler_name = self._get_handler_name(handler)
            logger.debug(
                "Handling exception %s with handler %s",
                type(exception).__name__,
                handler_name,
            )
            try:
                handler(exception, context)
            except Exception:  # pylint: disable=broad-except
                logger.exception(
                    "Exception in handler %s while handling %s",
                    handler_name,
                    type(exception).__name__,
                )
                raise
        else:
            logger.error("No handler found for exception %s", type(exception).__name__)
            raise NoHandlerForException(exception)

    @staticmethod
    def _get_handler_name(fn: Callable[..., None]) -> str:
        if hasattr(fn, "__name__"):
            return fn.__name__
        if hasattr(fn, "func") and hasattr(fn.func, "__name__"):
            return fn.func.__name__
        return repr(fn)
