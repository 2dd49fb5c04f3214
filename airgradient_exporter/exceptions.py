"""Exporter exceptions with log-ready messages."""


class ConfigurationError(Exception):
    """Raised when application configuration is invalid."""

    pass


class ExporterException(Exception):
    """Base exception class for exporter errors."""

    def __init__(self, message: str, error_code: str) -> None:
        self.message = message
        self.error_code = error_code
        super().__init__(message)


class UpstreamException(ExporterException):
    """Base exception for failures talking to the AirGradient API."""

    pass


class UpstreamUnavailableException(UpstreamException):
    """Exception raised when the AirGradient API cannot be reached or rejects the request."""

    def __init__(self, status_code: int | None, reason: str) -> None:
        self.status_code = status_code
        self.reason = reason
        if status_code is None:
            message = f"AirGradient API request failed: {reason}"
        else:
            message = f"AirGradient API request failed: {status_code} {reason}"
        super().__init__(message, error_code="UPSTREAM_UNAVAILABLE")


class UpstreamMalformedException(UpstreamException):
    """Exception raised when the AirGradient API response cannot be decoded."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        message = f"AirGradient API returned an unexpected response: {detail}"
        super().__init__(message, error_code="UPSTREAM_MALFORMED")


class DuplicateMetricException(ExporterException):
    """Exception raised when a gauge name is registered twice."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Gauge {name} is already registered", error_code="DUPLICATE_METRIC")


class MetricNotRegisteredException(ExporterException):
    """Exception raised when updating a gauge that was never registered."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Gauge {name} is not registered", error_code="METRIC_NOT_REGISTERED")
