import time

import pytest

from livecoin_net.api import LivecoinApiClient
from livecoin_net.client import DEFAULT_TIMEOUT, MAX_TIMEOUT, LivecoinClient
from livecoin_net.errors import TransportError, TransportTimeoutError
from livecoin_net.executors.interface import HttpResponse
from tests.mock_executors import (
    HangingHttpExecutor,
    MockHttpExecutor,
    MockSuccessfulOutput,
)


def test_hanging_executor_times_out():
    executor = HangingHttpExecutor()
    client = LivecoinClient(executor=executor, timeout=0.05)

    try:
        started = time.monotonic()
        with pytest.raises(TransportTimeoutError) as exc_info:
            client.do("GET", "exchange/restrictions")
        elapsed = time.monotonic() - started
    finally:
        executor.release.set()

    assert elapsed < 0.15
    assert "timeout on reading data from Livecoin API" in str(exc_info.value)
    assert exc_info.value.timeout_seconds == 0.05
    assert isinstance(exc_info.value, TransportError)
    assert executor.calls == 1


def test_timeout_is_passed_to_executor():
    mock_http = MockHttpExecutor()
    client = LivecoinClient(executor=mock_http, timeout=7)
    mock_http.stage_output(
        MockSuccessfulOutput(output=HttpResponse(status=200, content=b"{}"))
    )

    client.do("GET", "path")

    assert mock_http.call_log[0].arg_pack[4] == 7


def test_default_timeout():
    client = LivecoinClient(executor=MockHttpExecutor())

    assert client.timeout == DEFAULT_TIMEOUT == 30


def test_executor_timeout_is_adopted():
    client = LivecoinClient(executor=MockHttpExecutor(timeout=12.5))

    assert client.timeout == 12.5


def test_explicit_timeout_overrides_executor():
    client = LivecoinClient(executor=MockHttpExecutor(timeout=12.5), timeout=3)

    assert client.timeout == 3


@pytest.mark.parametrize("timeout", [0, -1, None, float("nan")])
def test_non_positive_timeout_means_default(timeout):
    client = LivecoinClient(executor=MockHttpExecutor(timeout=timeout), timeout=timeout)

    assert client.timeout == DEFAULT_TIMEOUT


def test_set_timeout():
    client = LivecoinApiClient(executor=MockHttpExecutor())

    client.set_timeout(5)
    assert client.timeout == 5

    client.set_timeout(0)
    assert client.timeout == DEFAULT_TIMEOUT


def test_response_within_timeout_is_returned():
    mock_http = MockHttpExecutor()
    client = LivecoinClient(executor=mock_http, timeout=5)
    mock_http.stage_output(
        MockSuccessfulOutput(output=HttpResponse(status=200, content=b"[1]"))
    )

    assert client.do("GET", "path") == b"[1]"


@pytest.mark.parametrize("timeout", [float("inf"), 1e12])
def test_huge_timeout_is_capped(timeout):
    mock_http = MockHttpExecutor()
    client = LivecoinClient(executor=mock_http, timeout=timeout)
    mock_http.stage_output(
        MockSuccessfulOutput(output=HttpResponse(status=200, content=b"{}"))
    )

    assert client.timeout == MAX_TIMEOUT
    assert client.do("GET", "path") == b"{}"
    assert mock_http.call_log[0].arg_pack[4] == MAX_TIMEOUT
