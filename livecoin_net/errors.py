"""Exceptions raised by the Livecoin SDK.

Every error derives from BaseError and falls into one of three families:

BaseError
├── ExchangeError - Livecoin answered, and the answer describes a failure
├── TransportError - no usable answer came back from Livecoin
└── ValidationError - the call was rejected locally, nothing was sent
"""


class BaseError(Exception):
    """Root of the Livecoin SDK errors.

    Catch this to handle any failure coming out of the SDK. It is never
    raised itself.
    """

    pass


# ============================================================================
# EXCHANGE ERRORS
# ============================================================================


class ExchangeError(BaseError):
    """The request reached Livecoin and the JSON reply reports a problem.

    Livecoin answers rejected calls with status 200 or 400 and a body such as
    ``{"success": false, "errorMessage": "..."}``, so these errors come from
    the body rather than the status code.
    """

    pass


class ApiError(ExchangeError):
    """The reply carries a non-empty ``errorMessage``."""

    def __init__(self, message: str):
        """Store the exchange's ``errorMessage``.

        Args:
            message: Text reported by Livecoin, also used as ``str(error)``.

        """
        self.message = message
        super().__init__(message)


class UnexpectedResponseShape(ExchangeError):
    """The reply is JSON, but neither an object nor an array."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


# ============================================================================
# TRANSPORT ERRORS
# ============================================================================


class TransportError(BaseError):
    """No usable reply was obtained from Livecoin.

    Raised for a URL that cannot be used, a failed or dropped connection, a
    call that outlives its timeout, a body that cannot be read in full, a
    status other than 200 or 400, and a body that is not valid JSON or does
    not match the expected type.

    Executors raise this base class directly for transport failures that fit
    none of the subclasses.
    """

    pass


class InvalidUrlError(TransportError):
    """The target URL is malformed or lacks a scheme or host."""

    def __init__(self, message: str, url: str | None = None):
        """Record the failure and the offending URL.

        Args:
            message: What is wrong with the URL.
            url: The URL that was rejected, when known.

        """
        self.message = message
        self.url = url
        super().__init__(f"{message} (url: {url})" if url else message)


class HttpConnectionError(TransportError):
    """Livecoin could not be reached, or the connection dropped."""

    def __init__(self, message: str, url: str | None = None):
        self.message = message
        self.url = url
        super().__init__(f"{message} (url: {url})" if url else message)


class TransportTimeoutError(TransportError):
    """No complete reply arrived within the configured timeout."""

    def __init__(self, message: str, timeout_seconds: float | None = None):
        """Record the failure and the timeout that expired.

        Args:
            message: What timed out.
            timeout_seconds: The expired timeout in seconds, when known.

        """
        self.message = message
        self.timeout_seconds = timeout_seconds
        if timeout_seconds:
            super().__init__(f"{message} (timeout: {timeout_seconds}s)")
        else:
            super().__init__(message)


class BodyReadError(TransportError):
    """The connection broke while the reply body was being read.

    ``body`` holds whatever was received before the failure.
    """

    def __init__(self, message: str, body: bytes = b""):
        self.message = message
        self.body = body
        super().__init__(message)


class BadHttpStatus(TransportError):
    """Livecoin answered with a status other than 200 or 400.

    The body is not decoded but is kept on ``body``, since it may explain the
    failure.
    """

    status_code: int
    message: str
    body: bytes

    def __init__(self, status_code: int, message: str, body: bytes = b""):
        """Record the status and the raw reply.

        Args:
            status_code: Numeric HTTP status.
            message: Status line as received, e.g. ``"500 Internal Server Error"``.
            body: Raw reply body.

        """
        self.status_code = status_code
        self.message = message
        self.body = body
        super().__init__(message)


## 4xx


class Unauthorized(BadHttpStatus):
    """Status 401."""

    pass


class Forbidden(BadHttpStatus):
    """Status 403."""

    pass


class NotFound(BadHttpStatus):
    """Status 404, usually a wrong resource path or base URL."""

    pass


class RateLimited(BadHttpStatus):
    """Status 429, too many calls in a short time."""

    pass


## 5xx


class InternalServerError(BadHttpStatus):
    """Status 500, or any 5xx without a dedicated class."""

    pass


class BadGateway(BadHttpStatus):
    """Status 502."""

    pass


class ServiceUnavailable(BadHttpStatus):
    """Status 503, typically during Livecoin maintenance."""

    pass


class GatewayTimeout(BadHttpStatus):
    """Status 504."""

    pass


class DeserializationError(TransportError):
    """The reply body is not valid JSON, or does not fit the expected type."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


# ============================================================================
# VALIDATION ERRORS
# ============================================================================


class ValidationError(BaseError):
    """The call was refused before any request was sent.

    Raised for an unsupported HTTP method, a malformed or negative price or
    quantity, and missing credentials on an authenticated endpoint. Fixing
    the arguments or the client configuration resolves it.
    """

    pass


class MissingCredentialsError(ValidationError):
    """An authenticated endpoint was called without an API key or secret."""

    def __init__(self, credential_type: str = "API key and API secret"):
        """Name the credentials that have to be configured.

        Args:
            credential_type: Human-readable name of what is missing.

        """
        self.credential_type = credential_type
        super().__init__(f"{credential_type} must be set to call this method")
