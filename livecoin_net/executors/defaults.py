"""Default executor configuration.

This module defines the default HTTP executor implementation used by the
Livecoin SDK when no custom executor is provided.
"""

from typing import Type

from livecoin_net.executors.httpx import HttpxHttpExecutor
from livecoin_net.executors.interface import HttpExecutor

DEFAULT_HTTP_EXECUTOR: Type[HttpExecutor] = HttpxHttpExecutor
