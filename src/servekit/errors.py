"""Error definitions shared across servekit."""

# ============================================================================
#                           General errors
# ============================================================================


class ServekitError(Exception):
    """Base class for servekit errors."""


# ============================================================================
#                   Optional dependency errors
# ============================================================================


class ConfigurationError(ServekitError):
    """Raised at startup when the application cannot be configured.

    This error is fatal: the process must not go on to serve requests.
    """


class UnknownDependencyError(ConfigurationError, LookupError):
    """Raised when a configured dependency name is not a known optional dependency."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown optional dependency '{name}'.")
        self.name = name


class RuntimeUnavailableFeature(ServekitError):
    """Raised mid-request when a feature needs a dependency that is not installed.

    The surrounding HTTP layer should answer the offending request with a
    server error carrying the message; the process keeps serving others.
    """

    status = 500
    title = "Internal Server Error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
