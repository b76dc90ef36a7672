import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Generator

import orjson
import pytest

from livecoin_net.api import LivecoinApiClient
from livecoin_net.executors.interface import HttpResponse
from tests.mock_executors import MockHttpExecutor, MockOutputNotExhausted

DATA_DIR = Path(__file__).parent.joinpath("data")

API_KEY = "FOO"
API_SECRET = "BAR"

log = logging.getLogger(__name__)


@pytest.fixture
def mock_http_client() -> Generator[
    tuple[LivecoinApiClient, MockHttpExecutor], None, None
]:
    mock_http = MockHttpExecutor()
    client = LivecoinApiClient(
        api_key=API_KEY,
        api_secret=API_SECRET,
        # replace real network requests with our mock
        executor=mock_http,
    )

    yield (client, mock_http)

    if len(mock_http.staged_outputs) > 0:
        raise MockOutputNotExhausted(mock_http.staged_outputs)


def json_response(payload: Any, status: int = 200, reason: str = "OK") -> HttpResponse:
    """Build an HttpResponse whose body is the JSON encoding of payload."""
    return HttpResponse(status=status, reason=reason, content=orjson.dumps(payload))


@lru_cache(maxsize=1)
def data_files() -> list[Path]:
    return list(DATA_DIR.iterdir())


@lru_cache(maxsize=16)
def json_data_files(name: str) -> list[Path]:
    return list(
        sorted(
            path
            for path in data_files()
            if path.match(f"*/{name}.*.json", case_sensitive=True)
        )
    )


def load_json(name: str, case: int = 1) -> Any:
    path = DATA_DIR / f"{name}.{case}.json"
    with open(path, "rb") as fh:
        return orjson.loads(fh.read())


def load_json_all_cases(name: str) -> list[tuple[Any, Path]]:
    """Load all json payloads for a given base name (case 1, case 2, ...)."""
    results = []
    for path in json_data_files(name):
        with open(path, "rb") as fh:
            payload = orjson.loads(fh.read())
            results.append((payload, path))
    return results
