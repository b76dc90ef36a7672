"""Request execution for the Livecoin REST API.

This module turns a request descriptor (method, resource, parameters and
whether authentication is needed) into the raw bytes of the response. It
resolves the target URL, encodes parameters into the query string or a form
body, signs authenticated requests and bounds every call with a timeout.
"""

import hmac
import logging
import queue
import threading
from hashlib import sha256
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from livecoin_net.errors import (
    BadGateway,
    BadHttpStatus,
    Forbidden,
    GatewayTimeout,
    InternalServerError,
    InvalidUrlError,
    MissingCredentialsError,
    NotFound,
    RateLimited,
    ServiceUnavailable,
    TransportTimeoutError,
    Unauthorized,
    ValidationError,
)
from livecoin_net.executors import DEFAULT_HTTP_EXECUTOR, HttpExecutor
from livecoin_net.executors.interface import HttpResponse
from livecoin_net.helpers import (
    DEFAULT_API_URL,
    format_request_dump,
    format_response_dump,
    get_livecoin_client,
)
from livecoin_net.types import Params

log = logging.getLogger(__name__)

DEFAULT_TIMEOUT: float = 30.0
# Queue.get and lock waits reject anything above threading.TIMEOUT_MAX
MAX_TIMEOUT: float = min(threading.TIMEOUT_MAX / 2, 365 * 24 * 3600.0)

SUPPORTED_METHODS = ("GET", "POST", "PUT")
FORM_METHODS = ("POST", "PUT")

# Livecoin reports request errors as 400 with a JSON body, so 400 is parsed like 200
PARSEABLE_STATUSES = (200, 400)

_STATUS_ERRORS: dict[int, type[BadHttpStatus]] = {
    401: Unauthorized,
    403: Forbidden,
    404: NotFound,
    429: RateLimited,
    500: InternalServerError,
    502: BadGateway,
    503: ServiceUnavailable,
    504: GatewayTimeout,
}


def raise_response_errors(response: HttpResponse) -> None:
    """Check the HTTP status and raise for anything that is not parseable.

    Statuses 200 and 400 pass: their bodies are JSON the caller must still
    inspect. Every other status raises a BadHttpStatus subclass built from the
    status line, with the body attached.

    Args:
        response: The HTTP response to validate

    Raises:
        Unauthorized: For 401 status codes
        Forbidden: For 403 status codes
        NotFound: For 404 status codes
        RateLimited: For 429 status codes
        InternalServerError: For 500 and unmapped 5xx status codes
        BadGateway: For 502 status codes
        ServiceUnavailable: For 503 status codes
        GatewayTimeout: For 504 status codes
        BadHttpStatus: For any other status code

    """
    status = response.status
    if status in PARSEABLE_STATUSES:
        return

    error_class = _STATUS_ERRORS.get(status)
    if error_class is None:
        error_class = InternalServerError if 500 <= status < 600 else BadHttpStatus

    raise error_class(status, response.status_line, body=response.content)


def resolve_url(base_url: str, resource: str) -> str:
    """Resolve a resource path against the base URL.

    Absolute http(s) URLs are used verbatim.

    Raises:
        InvalidUrlError: If the resulting URL cannot be parsed or is not absolute

    """
    if resource.startswith(("http://", "https://")):
        url = resource
    else:
        url = f"{base_url.rstrip('/')}/{resource.lstrip('/')}"

    try:
        parts = urlsplit(url)
        _ = parts.port
    except ValueError as e:
        raise InvalidUrlError(f"Malformed URL: {e}", url=url) from e
    if not parts.scheme or not parts.netloc:
        raise InvalidUrlError("URL must include a scheme and a host", url=url)
    return url


def encode_form(params: Params | None) -> str:
    """Form-encode parameters, keys in sorted order."""
    return urlencode(sorted((params or {}).items()))


def merge_query(url: str, params: Params | None) -> str:
    """Merge parameters into the query string of a URL.

    Existing query values are replaced by parameters with the same key.
    """
    if not params:
        return url
    parts = urlsplit(url)
    kept = [
        (key, value)
        for key, value in parse_qsl(parts.query, keep_blank_values=True)
        if key not in params
    ]
    merged = sorted(kept + list(params.items()), key=lambda item: item[0])
    return urlunsplit(parts._replace(query=urlencode(merged)))


def sign_payload(secret: str, payload: str) -> str:
    """Sign a payload with HMAC-SHA256 and return uppercase hex."""
    return hmac.new(secret.encode(), payload.encode(), sha256).hexdigest().upper()


class LivecoinClient:
    """Executes signed, timeout-bounded requests against the Livecoin API.

    The credentials and base URL are fixed at construction. ``debug`` and
    ``timeout`` may be changed afterwards, but not while requests from other
    threads are in flight.

    Examples:
        .. code-block:: python

            client = LivecoinClient(api_key="key", api_secret="secret")
            raw = client.do("GET", "payment/balance", {"currency": "BTC"}, True)

    """

    debug: bool = False
    timeout: float = DEFAULT_TIMEOUT

    def __init__(
        self,
        api_key: str | None = None,
        api_secret: str | None = None,
        api_url: str = DEFAULT_API_URL,
        executor: HttpExecutor | None = None,
        timeout: float | None = None,
    ):
        """Initialize the request executor.

        Args:
            api_key: API key sent in the ``Api-key`` header
            api_secret: API secret used to sign request bodies
            api_url: Base URL resources are resolved against
            executor: Custom HTTP executor (optional, uses default if not provided)
            timeout: Seconds to wait for a response. When unset, a positive
                ``executor.timeout`` is used; otherwise 30 seconds.

        """
        self.api_key = api_key or ""
        self.api_secret = api_secret or ""
        self.api_url = api_url
        self.executor = executor if executor is not None else DEFAULT_HTTP_EXECUTOR()
        self.debug = False
        self.set_timeout(timeout if timeout is not None else self.executor.timeout)

    def set_timeout(self, timeout: float | None) -> None:
        """Set the response timeout in seconds; unset or non-positive means 30s.

        Larger values, infinity included, are capped to ``MAX_TIMEOUT``.
        """
        if timeout is None or not timeout > 0:
            timeout = DEFAULT_TIMEOUT
        self.timeout = min(timeout, MAX_TIMEOUT)

    def do(
        self,
        method: str,
        resource: str,
        params: Params | None = None,
        auth_needed: bool = False,
    ) -> bytes:
        """Send a request and return the raw response body.

        GET parameters go into the query string and no body is sent. POST and
        PUT parameters are form-encoded into the body. Authenticated requests
        carry the API key and the HMAC-SHA256 of the body, so a GET signature
        always covers the empty string.

        Args:
            method: HTTP method, one of GET, POST or PUT
            resource: Resource path (e.g. ``exchange/order_book``) or absolute URL
            params: Request parameters
            auth_needed: Whether the request must be signed

        Returns:
            bytes: The response body for status 200 or 400

        Raises:
            ValidationError: If the method is not supported
            InvalidUrlError: If the URL cannot be built
            MissingCredentialsError: If auth is needed and a credential is empty
            TransportTimeoutError: If no response arrives within the timeout
            BodyReadError: If the body cannot be read; carries the partial body
            BadHttpStatus: For any status other than 200 and 400; carries the body
            TransportError: For other transport failures

        """
        method = method.upper()
        if method not in SUPPORTED_METHODS:
            raise ValidationError(f"Unsupported HTTP method {method}")

        url = resolve_url(self.api_url, resource)
        headers = {
            "Accept": "application/json",
            "User-Agent": get_livecoin_client(),
        }

        body: bytes | None = None
        form_data = ""
        if method in FORM_METHODS:
            form_data = encode_form(params)
            body = form_data.encode()
            headers["Content-Type"] = "application/x-www-form-urlencoded"
        else:
            url = merge_query(url, params)

        if auth_needed:
            if not self.api_key or not self.api_secret:
                raise MissingCredentialsError()
            headers["Api-key"] = self.api_key
            headers["Sign"] = sign_payload(self.api_secret, form_data)

        response = self.__send_with_timeout(method, url, headers, body)
        raise_response_errors(response)
        return response.content

    def __send_with_timeout(
        self,
        method: str,
        url: str,
        headers: dict[str, str],
        body: bytes | None,
    ) -> HttpResponse:
        """Run the executor call on a worker thread and wait at most ``timeout``.

        The worker is not interrupted when the wait expires. The same timeout
        is handed to the executor, which bounds how long an abandoned worker
        keeps its connection.
        """
        timeout = self.timeout
        outcome: queue.Queue[tuple[HttpResponse | None, Exception | None]] = (
            queue.Queue(maxsize=1)
        )

        def run() -> None:
            if self.debug:
                log.info(
                    "dumpRequest:\n%s", format_request_dump(method, url, headers, body)
                )
            try:
                response = self.executor.send_request(
                    method, url, headers, body, timeout
                )
            except Exception as e:
                if self.debug:
                    log.info("dumpResponse: <none> (%s)", e)
                outcome.put((None, e))
                return
            if self.debug:
                log.info(
                    "dumpResponse:\n%s",
                    format_response_dump(
                        response.status,
                        response.reason,
                        response.headers,
                        response.content,
                    ),
                )
            outcome.put((response, None))

        threading.Thread(target=run, name="livecoin-request", daemon=True).start()

        try:
            response, error = outcome.get(timeout=timeout)
        except queue.Empty:
            raise TransportTimeoutError(
                "timeout on reading data from Livecoin API", timeout_seconds=timeout
            ) from None

        if error is not None:
            raise error
        assert response is not None
        return response
