"""Custom exception classes for the analyzer.

Every error carries an ``error_class`` so callers can tell configuration
problems (fix settings, never retry) from transient failures (retry later)
and permanent ones (retrying will not help).
"""

CONFIGURATION = "configuration"
TRANSIENT = "transient"
PERMANENT = "permanent"


class AnalyzerError(Exception):
    """Base exception for the analyzer."""

    error_class: str = PERMANENT

    def __init__(self, code: str, message: str, details=None, status_code: int = 500):
        self.code = code
        self.message = message
        self.details = details
        self.status_code = status_code
        super().__init__(message)


class ValidationError(AnalyzerError):
    """Request or configuration entity failed validation."""

    error_class = CONFIGURATION

    def __init__(self, message: str, details=None):
        super().__init__("VALIDATION_ERROR", message, details, status_code=400)


class NotFoundError(AnalyzerError):
    """Resource not found."""

    def __init__(self, resource: str, resource_id: str):
        super().__init__(
            "NOT_FOUND",
            f"{resource} '{resource_id}' not found",
            status_code=404,
        )


class ConfigurationError(AnalyzerError):
    """A required setting is missing or unusable."""

    error_class = CONFIGURATION

    def __init__(self, message: str, code: str = "CONFIGURATION_ERROR"):
        super().__init__(code, message, status_code=412)


class NoApiKeyError(ConfigurationError):
    """Text generation was requested without an API key configured."""

    def __init__(self, message: str = "Claude API key not configured"):
        super().__init__(message, code="NO_API_KEY")


class UpstreamError(AnalyzerError):
    """The text-generation collaborator failed or answered with an error."""

    error_class = TRANSIENT

    def __init__(self, message: str, upstream_status: int | None = None):
        self.upstream_status = upstream_status
        details = {"upstream_status": upstream_status} if upstream_status else None
        super().__init__("UPSTREAM_ERROR", message, details, status_code=502)


class InvalidResponseError(AnalyzerError):
    """The text-generation collaborator answered without the expected text."""

    def __init__(self, message: str = "Invalid response from Claude API"):
        super().__init__("INVALID_RESPONSE", message, status_code=502)


class TransportError(AnalyzerError):
    """A webhook request never got an HTTP answer (DNS, connect, timeout)."""

    error_class = TRANSIENT

    def __init__(self, message: str, url: str | None = None):
        self.url = url
        super().__init__("TRANSPORT_ERROR", message, {"url": url} if url else None, status_code=502)


class DeliveryError(AnalyzerError):
    """A webhook destination answered with a non-2xx status."""

    def __init__(self, upstream_status: int, body_prefix: str = ""):
        self.upstream_status = upstream_status
        self.body_prefix = body_prefix
        super().__init__(
            "DELIVERY_ERROR",
            f"HTTP {upstream_status}",
            {"upstream_status": upstream_status, "body": body_prefix},
            status_code=502,
        )
