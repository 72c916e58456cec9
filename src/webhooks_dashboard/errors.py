class DashboardError(Exception):
    """Base class for dashboard errors"""


class ConfigError(DashboardError):
    """Raised when the dashboard cannot be configured at startup"""


class UpstreamTransportError(DashboardError):
    """The upstream call failed before a response was received.

    ``operation`` is the user-facing verb phrase, e.g. "fetch webhooks",
    used to build the local error message. The underlying exception is kept
    on ``cause`` for logging only and is never sent to the caller.
    """

    def __init__(self, operation: str, cause: Exception):
        super().__init__(f"Failed to {operation}: {cause}")
        self.operation = operation
        self.cause = cause
