"""Abstract interface for HTTP executors.

This module defines the abstract base class that all HTTP executor
implementations must follow, enabling pluggable transport layers.
"""

from abc import ABC, abstractmethod


class HttpResponse:
    """Container for HTTP response data.

    Encapsulates the status line, headers and raw body bytes of an HTTP
    response. No parsing happens at this layer.
    """

    status: int
    reason: str
    content: bytes
    headers: dict[str, str]

    __slots__ = ("status", "reason", "content", "headers")

    def __init__(
        self,
        *,
        status: int,
        content: bytes = b"",
        reason: str = "",
        headers: dict[str, str] | None = None,
    ) -> None:
        """Initialize an HTTP response object.

        Args:
            status: The HTTP status code of the response.
            content: The raw response body.
            reason: The reason phrase of the status line (e.g. "OK").
            headers: Optional HTTP response headers as key-value pairs.

        """
        self.status = status
        self.content = content
        self.reason = reason
        self.headers = headers if headers is not None else {}

    @property
    def status_line(self) -> str:
        """Status code and reason phrase, e.g. ``"500 Internal Server Error"``."""
        return f"{self.status} {self.reason}".rstrip()


class HttpExecutor(ABC):
    """Abstract base class for HTTP request executors.

    An executor only moves bytes: URL building, signing and response
    interpretation are done by the caller. ``timeout`` is the executor's own
    deadline in seconds, or None when it has none.
    """

    timeout: float | None = None

    @abstractmethod
    def send_request(
        self,
        method: str,
        url: str,
        headers: dict[str, str],
        body: bytes | None = None,
        timeout: float | None = None,
    ) -> HttpResponse:
        """Send an HTTP request and read the whole response body.

        Args:
            method: The HTTP method (e.g., 'GET', 'POST', 'PUT').
            url: The absolute URL, query string included.
            headers: Request headers.
            body: Optional request body.
            timeout: Deadline for the underlying transport in seconds.
                Falls back to the executor's own ``timeout`` when None.

        Returns:
            An HttpResponse object containing the status, headers and body.

        Raises:
            TransportTimeoutError: If the transport's own deadline expires.
            HttpConnectionError: If there is a connection or network error.
            BodyReadError: If reading the body fails; carries the partial body.
            InvalidUrlError: If the transport rejects the URL.
            TransportError: If any other transport-level error occurs.

        """
        ...
