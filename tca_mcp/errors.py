"""Protocol-level failures raised by the catalog and dispatcher."""


class TCAServerError(RuntimeError):
    """Base class for request failures that must reach the caller as errors."""


class NotFoundError(TCAServerError):
    """Raised when a documentation key, template or resource URI is unknown."""


class UnknownToolError(TCAServerError):
    """Raised when a tool call names a tool this server does not provide."""


class InvalidToolArgumentsError(TCAServerError):
    """Raised when a required tool argument is missing or has the wrong type."""
