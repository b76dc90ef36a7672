"""Python SDK for the Livecoin exchange REST API."""

from importlib.metadata import PackageNotFoundError, version

from livecoin_net.api import LivecoinApiClient
from livecoin_net.client import DEFAULT_TIMEOUT, LivecoinClient
from livecoin_net.errors import (
    ApiError,
    BadHttpStatus,
    BaseError,
    BodyReadError,
    DeserializationError,
    ExchangeError,
    HttpConnectionError,
    InvalidUrlError,
    MissingCredentialsError,
    TransportError,
    TransportTimeoutError,
    UnexpectedResponseShape,
    ValidationError,
)
from livecoin_net.executors import (
    HttpExecutor,
    HttpResponse,
    HttpxHttpExecutor,
    RequestsHttpExecutor,
)
from livecoin_net.types import (
    Balance,
    CancelledOrder,
    NewOrder,
    OrderBook,
    OrderBookLevel,
    OrderInfo,
    Restriction,
    Restrictions,
    Trade,
    Transaction,
)

try:
    __version__ = version("livecoin-net")
except PackageNotFoundError:
    __version__ = "unknown"


def get_version() -> str:
    """Return the installed SDK version."""
    return __version__


__all__ = [
    "LivecoinApiClient",
    "LivecoinClient",
    "DEFAULT_TIMEOUT",
    "get_version",
    # executors
    "HttpExecutor",
    "HttpResponse",
    "HttpxHttpExecutor",
    "RequestsHttpExecutor",
    # errors
    "BaseError",
    "ExchangeError",
    "ApiError",
    "UnexpectedResponseShape",
    "TransportError",
    "InvalidUrlError",
    "HttpConnectionError",
    "TransportTimeoutError",
    "BodyReadError",
    "BadHttpStatus",
    "DeserializationError",
    "ValidationError",
    "MissingCredentialsError",
    # types
    "Balance",
    "CancelledOrder",
    "NewOrder",
    "OrderBook",
    "OrderBookLevel",
    "OrderInfo",
    "Restriction",
    "Restrictions",
    "Trade",
    "Transaction",
]
