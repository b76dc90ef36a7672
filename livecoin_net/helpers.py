"""Helper utilities for the Livecoin Python SDK.

This module contains utility functions for client identification, typed
deserialization of API responses, debug dumps and display formatting.
"""

import inspect
import logging
from dataclasses import asdict, is_dataclass
from decimal import Decimal
from functools import lru_cache
from types import UnionType
from typing import Any, Callable, Dict, TypeVar, Union, get_args, get_origin
from urllib.parse import urlsplit

import orjson
from prettyprinter import cpprint

from livecoin_net.errors import DeserializationError
from livecoin_net.types import Json, wire_decimal

log = logging.getLogger(__name__)


# ============================================================================
# CONSTANTS
# ============================================================================

DEFAULT_API_URL: str = "https://api.livecoin.net"


# ============================================================================
# CLIENT IDENTIFICATION
# ============================================================================


@lru_cache(maxsize=1)
def get_livecoin_client() -> str:
    """Get the Livecoin client identification string."""
    import livecoin_net

    return f"LivecoinPythonSDK/{livecoin_net.__version__}"


# ============================================================================
# REFLECTION UTILITIES
# ============================================================================


def _is_decimal_annotation(annotation: Any) -> bool:
    if annotation is Decimal:
        return True
    origin = get_origin(annotation)
    return origin in (Union, UnionType) and Decimal in get_args(annotation)


@lru_cache(maxsize=32)
def _decimal_fields(func: Callable[..., Any]) -> frozenset[str]:
    """Return the names of parameters of ``func`` annotated as Decimal."""
    signature = inspect.signature(func)
    return frozenset(
        name
        for name, param in signature.parameters.items()
        if _is_decimal_annotation(param.annotation)
    )


# ============================================================================
# OBJECT CONSTRUCTION
# ============================================================================

T = TypeVar("T")


def create_with(func: Callable[..., T], data: Dict[str, Any]) -> T:
    """Build a response type from a decoded JSON object.

    Keys the constructor does not accept are dropped, so fields Livecoin adds
    later do not break decoding. Parameters annotated as ``Decimal`` are
    converted from the JSON numbers or strings the exchange sends.

    Args:
        func: Dataclass or callable taking the JSON keys as keyword arguments
        data: Decoded JSON object

    Returns:
        The constructed object

    Raises:
        TypeError: If data is not a mapping or required fields are missing
        ValueError: If a Decimal field does not hold a number

    """
    if not isinstance(data, dict):
        raise TypeError(f"Expected a JSON object, got {type(data).__name__}")
    valid_keys = inspect.signature(func).parameters.keys()
    filtered_data = {k: v for k, v in data.items() if k in valid_keys}
    for name in _decimal_fields(func):
        if name in filtered_data:
            filtered_data[name] = wire_decimal(filtered_data[name])

    return func(**filtered_data)


def create_list_with(func: Callable[..., T], data: Any) -> list[T]:
    """Create a list of objects from a JSON array of objects.

    Raises:
        TypeError: If data is not a list, or an element is not a mapping

    """
    if not isinstance(data, list):
        raise TypeError(f"Expected a JSON array, got {type(data).__name__}")
    return [create_with(func, item) for item in data]


# ============================================================================
# SERIALIZATION / DESERIALIZATION
# ============================================================================


def deserialize_response(response_body: bytes, url: str) -> Json:
    """Decode a raw reply body with orjson.

    Args:
        response_body: Body bytes as returned by the executor
        url: Requested URL or resource, quoted in the error message

    Returns:
        The decoded JSON value, of any shape

    Raises:
        DeserializationError: If the body is not valid JSON

    """
    try:
        return orjson.loads(response_body)  # type: ignore
    except orjson.JSONDecodeError as e:
        raise DeserializationError(
            f"Failed to parse JSON response from {url}: {e}"
        ) from e


# ============================================================================
# DEBUG DUMPS
# ============================================================================


def _decode_body(body: bytes | None) -> str:
    if not body:
        return ""
    return body.decode("utf-8", errors="replace")


def format_request_dump(
    method: str, url: str, headers: dict[str, str], body: bytes | None
) -> str:
    """Render an outgoing request the way it goes over the wire."""
    parts = urlsplit(url)
    target = parts.path or "/"
    if parts.query:
        target = f"{target}?{parts.query}"
    lines = [f"{method} {target} HTTP/1.1", f"Host: {parts.netloc}"]
    lines.extend(f"{name}: {value}" for name, value in headers.items())
    return "\r\n".join(lines) + "\r\n\r\n" + _decode_body(body)


def format_response_dump(
    status: int, reason: str, headers: dict[str, str], body: bytes
) -> str:
    """Render an incoming response the way it came over the wire."""
    lines = [f"HTTP/1.1 {status} {reason}".rstrip()]
    lines.extend(f"{name}: {value}" for name, value in headers.items())
    return "\r\n".join(lines) + "\r\n\r\n" + _decode_body(body)


# ============================================================================
# DISPLAY UTILITIES
# ============================================================================


def print_data(response: Any) -> None:
    """Pretty-print an SDK result with prettyprinter.

    Response dataclasses, and lists of them, are printed as dictionaries.
    """
    if is_dataclass(response) and not isinstance(response, type):
        cpprint(asdict(response))
    elif isinstance(response, list):
        cpprint(
            [
                asdict(item)
                if is_dataclass(item) and not isinstance(item, type)
                else item
                for item in response
            ]
        )
    else:
        cpprint(response)
