"""Error taxonomy shared by the gateways and the HTTP layer"""
from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Category of a failed request, used for logging only"""

    VALIDATION = "validation"
    UPSTREAM_TRANSPORT = "upstream_transport"
    UPSTREAM_PROTOCOL = "upstream_protocol"
    UPSTREAM_CONTENT = "upstream_content"
    UNEXPECTED = "unexpected"


class GatewayError(Exception):
    """Base class for errors raised while talking to an upstream provider"""

    kind = ErrorKind.UNEXPECTED

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class UpstreamTransportError(GatewayError):
    """The request was sent but no response came back"""

    kind = ErrorKind.UPSTREAM_TRANSPORT


class UpstreamProtocolError(GatewayError):
    """Non-2xx response, or a provider-declared processing error"""

    kind = ErrorKind.UPSTREAM_PROTOCOL

    def __init__(self, message: str, status_code: Optional[int] = None, reason: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.reason = reason


class UpstreamContentError(GatewayError):
    """2xx response whose content the provider flagged, or that we could not read"""

    kind = ErrorKind.UPSTREAM_CONTENT


class TranslationError(GatewayError):
    """Any failure of the translation provider call"""

    def __init__(self, message: str, cause: Optional[GatewayError] = None):
        super().__init__(message)
        self.cause = cause
        if cause is not None:
            self.kind = cause.kind


class RateLimitExceeded(Exception):
    """Caller exceeded the request budget for the current window"""

    def __init__(self, retry_after: int):
        super().__init__(f"Rate limit exceeded, retry after {retry_after}s")
        self.retry_after = retry_after
