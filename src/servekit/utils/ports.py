"""Helpers for server bind errors."""


def port_from_bind_error(exc: BaseException) -> str:
    """Return the port named in a ``host:port`` bind error message.

    Everything after the last colon of the message is returned, so
    ``"Failed to bind to 0.0.0.0:8080"`` gives ``"8080"``. A message without a
    colon is returned whole.
    """
    return str(exc).rsplit(":", 1)[-1]
