import inspect
import logging
import threading
from collections import deque
from dataclasses import dataclass
from typing import (
    Any,
    Callable,
    Iterable,
    NamedTuple,
    Tuple,
    TypeAlias,
)

from livecoin_net.errors import TransportError
from livecoin_net.executors import HttpExecutor
from livecoin_net.executors.interface import HttpResponse

log = logging.getLogger(__name__)


class MockExecutorException(Exception):
    pass


class InputPack(NamedTuple):
    function_name: str
    arg_pack: Tuple


class MockOutput:
    pass


class MockValidationFailure(MockExecutorException):
    input_pack: InputPack
    message: str


class MockOutputExhausted(MockExecutorException):
    input_pack: InputPack


class MockOutputNotExhausted(MockExecutorException):
    remaining_staged_outputs: deque[MockOutput]


# returns false or raises MockValidationFailure on error
InputValidation: TypeAlias = Callable[[InputPack], bool]


@dataclass
class MockExceptionOutput(MockOutput):
    exception: Exception
    call_validation: InputValidation | None = None


@dataclass
class MockSuccessfulOutput(MockOutput):
    output: Any
    call_validation: InputValidation | None = None


class MockHttpExecutor(HttpExecutor):
    """Executor returning staged outputs in order.

    ``arg_pack`` of each logged call is ``(method, url, headers, body, timeout)``.
    """

    def __init__(self, timeout: float | None = None):
        self.timeout = timeout
        self.call_log: list[InputPack] = []
        self.staged_outputs: deque[MockOutput] = deque()

    def stage_output(self, output: MockOutput | Iterable[MockOutput]) -> None:
        """Stage an output to be returned by the next request."""
        if isinstance(output, Iterable):
            self.staged_outputs.extend(output)
        else:
            self.staged_outputs.append(output)

    def _execute_mock(self, input_pack: InputPack) -> Any:
        """Execute a mock operation with the given input pack."""
        self.call_log.append(input_pack)
        if not self.staged_outputs:
            raise MockOutputExhausted(input_pack)
        output = self.staged_outputs.popleft()
        if output.call_validation is not None and not output.call_validation(
            input_pack
        ):
            raise MockValidationFailure(input_pack, "Validation failed")
        if isinstance(output, MockExceptionOutput):
            raise output.exception
        elif isinstance(output, MockSuccessfulOutput):
            return output.output
        raise MockExecutorException(f"Unexpected staged mock {output=}")

    def send_request(
        self,
        method: str,
        url: str,
        headers: dict[str, str],
        body: bytes | None = None,
        timeout: float | None = None,
    ) -> HttpResponse:
        input_pack = InputPack(
            inspect.stack()[0].function, (method, url, headers, body, timeout)
        )
        return self._execute_mock(input_pack)


class HangingHttpExecutor(HttpExecutor):
    """Executor that does not answer until ``release`` is set."""

    def __init__(self, timeout: float | None = None):
        self.timeout = timeout
        self.release = threading.Event()
        self.calls = 0

    def send_request(
        self,
        method: str,
        url: str,
        headers: dict[str, str],
        body: bytes | None = None,
        timeout: float | None = None,
    ) -> HttpResponse:
        self.calls += 1
        self.release.wait(timeout=10)
        raise TransportError("released")
