"""HTTP executor implementation using httpx.

This module provides HTTP request handling using the httpx library,
serving as the default HTTP executor for the Livecoin SDK.
"""

from typing import override

import httpx

from livecoin_net.errors import (
    BaseError,
    BodyReadError,
    HttpConnectionError,
    InvalidUrlError,
    TransportError,
    TransportTimeoutError,
)
from livecoin_net.executors.interface import HttpExecutor, HttpResponse


class HttpxHttpExecutor(HttpExecutor):
    """HTTP executor implementation using httpx.

    Provides synchronous HTTP request execution using an httpx Client. A
    pre-configured client (proxies, TLS settings, transports) may be passed in.
    """

    def __init__(
        self,
        client: httpx.Client | None = None,
        timeout: float | None = None,
    ):
        """Initialize the HTTPX HTTP executor.

        Args:
            client: Optional pre-configured httpx Client. A new one is created
                when not provided. A client passed in is never closed by the
                executor.
            timeout: Optional deadline in seconds applied when a request does
                not pass its own. Defaults to the read timeout of a client
                passed in.

        """
        self._owns_client = client is None
        if client is None:
            client = httpx.Client()
        elif timeout is None:
            timeout = client.timeout.read
        self.client = client
        self.timeout = timeout

    @override
    def send_request(
        self,
        method: str,
        url: str,
        headers: dict[str, str],
        body: bytes | None = None,
        timeout: float | None = None,
    ) -> HttpResponse:
        """Send a request with httpx and read the body into memory.

        Args:
            method: The HTTP method to use (e.g., 'GET', 'POST', 'PUT').
            url: The absolute request URL.
            headers: Request headers.
            body: Optional request body.
            timeout: Deadline in seconds; the executor default is used if None.

        Returns:
            HttpResponse containing the status line, headers and raw body.

        Raises:
            TransportTimeoutError: If the request times out.
            HttpConnectionError: If there is a connection or network error.
            BodyReadError: If the connection breaks while reading the body.
            InvalidUrlError: If httpx rejects the URL.
            TransportError: If any other transport-level error occurs.

        """
        deadline = timeout if timeout is not None else self.timeout
        try:
            with self.client.stream(
                method,
                url,
                headers=headers,
                content=body,
                timeout=deadline if deadline is not None else httpx.USE_CLIENT_DEFAULT,
            ) as response:
                chunks: list[bytes] = []
                try:
                    for chunk in response.iter_bytes():
                        chunks.append(chunk)
                except httpx.HTTPError as e:
                    raise BodyReadError(
                        f"Failed to read response body from {url}: {e}",
                        body=b"".join(chunks),
                    ) from e
                return HttpResponse(
                    status=response.status_code,
                    reason=response.reason_phrase,
                    headers=dict(response.headers),
                    content=b"".join(chunks),
                )
        except BaseError:
            raise
        except httpx.TimeoutException as e:
            raise TransportTimeoutError(
                f"{method} request to {url} timed out", timeout_seconds=deadline
            ) from e
        except (httpx.InvalidURL, httpx.UnsupportedProtocol) as e:
            raise InvalidUrlError(f"Invalid request URL: {e}", url=url) from e
        except (httpx.ConnectError, httpx.NetworkError) as e:
            raise HttpConnectionError(
                f"Network error during {method} request to {url}", url=url
            ) from e
        except Exception as e:
            raise TransportError(f"{method} request to {url} failed: {e}") from e

    def __del__(self) -> None:
        """Close the httpx client if this executor created it."""
        client = getattr(self, "client", None)
        if client is not None and getattr(self, "_owns_client", False):
            client.close()
