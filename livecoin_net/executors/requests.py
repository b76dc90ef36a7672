"""HTTP executor implementation using requests.

This module provides HTTP request handling using the popular requests library,
as an alternative to the default httpx executor.
"""

from typing import override

import requests

from livecoin_net.errors import (
    BaseError,
    BodyReadError,
    HttpConnectionError,
    InvalidUrlError,
    TransportError,
    TransportTimeoutError,
)
from livecoin_net.executors.interface import HttpExecutor, HttpResponse

CHUNK_SIZE = 8192


class RequestsHttpExecutor(HttpExecutor):
    """HTTP executor implementation using requests.

    Provides synchronous HTTP request execution using a requests Session.
    """

    def __init__(
        self,
        session: requests.Session | None = None,
        timeout: float | None = None,
    ):
        """Initialize the RequestsHttpExecutor.

        Args:
            session: Optional pre-configured requests Session. A new one is
                created when not provided.
            timeout: Optional deadline in seconds applied when a request does
                not pass its own.

        """
        self.session = session if session is not None else requests.Session()
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
        """Send a request with requests and read the body into memory.

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
            HttpConnectionError: If the connection to the server fails.
            BodyReadError: If the connection breaks while reading the body.
            InvalidUrlError: If requests rejects the URL.
            TransportError: If any other transport-level error occurs.

        """
        deadline = timeout if timeout is not None else self.timeout
        try:
            response = self.session.request(
                method,
                url,
                headers=headers,
                data=body,
                timeout=deadline,
                stream=True,
            )
            chunks: list[bytes] = []
            try:
                for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
                    chunks.append(chunk)
            except requests.RequestException as e:
                raise BodyReadError(
                    f"Failed to read response body from {url}: {e}",
                    body=b"".join(chunks),
                ) from e
            finally:
                response.close()
        except BaseError:
            raise
        except requests.Timeout as e:
            raise TransportTimeoutError(
                f"{method} request to {url} timed out", timeout_seconds=deadline
            ) from e
        except (
            requests.exceptions.InvalidURL,
            requests.exceptions.InvalidSchema,
            requests.exceptions.MissingSchema,
        ) as e:
            raise InvalidUrlError(f"Invalid request URL: {e}", url=url) from e
        except requests.ConnectionError as e:
            raise HttpConnectionError(f"Failed to connect to {url}", url=url) from e
        except Exception as e:
            raise TransportError(f"{method} request to {url} failed: {e}") from e
        return HttpResponse(
            status=response.status_code,
            reason=response.reason or "",
            headers=dict(response.headers),
            content=b"".join(chunks),
        )
