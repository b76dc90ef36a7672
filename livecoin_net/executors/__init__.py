"""HTTP executor implementations.

This package provides pluggable HTTP client implementations for the Livecoin
SDK, supporting the httpx and requests libraries.
"""

from livecoin_net.executors.defaults import DEFAULT_HTTP_EXECUTOR
from livecoin_net.executors.httpx import HttpxHttpExecutor
from livecoin_net.executors.interface import HttpExecutor, HttpResponse
from livecoin_net.executors.requests import RequestsHttpExecutor

__all__ = [
    "HttpExecutor",
    "HttpResponse",
    "HttpxHttpExecutor",
    "RequestsHttpExecutor",
    "DEFAULT_HTTP_EXECUTOR",
]
