"""Environment configuration setup utilities.

This module provides functions for loading environment variables from .env files
and configuring the SDK for local development.
"""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

from livecoin_net.errors import ValidationError
from livecoin_net.helpers import DEFAULT_API_URL

log = logging.getLogger(__name__)


def setup_environment() -> tuple[str, str, str, float | None]:
    """Load and return environment variables for Livecoin API configuration.

    Loads environment variables from a .env file if present, otherwise falls
    back to system environment variables. Reads environment-specific variables
    based on the ENVIRONMENT variable (defaults to 'production').

    Returns:
        Tuple:
            - api_endpoint: The API endpoint URL
            - api_key: The API key
            - api_secret: The API secret used for signing
            - timeout: Response timeout in seconds, or None when not configured

    Raises:
        ValidationError: If the configured timeout is not a number

    """
    env_file_path = Path(".env")
    if env_file_path.exists():
        log.info("Loading environment variables from .env file")
        load_dotenv(env_file_path)
    else:
        log.info(".env file not found. Falling back to Bash Environment variables.")

    environment = os.getenv("ENVIRONMENT", "production").lower()
    log.info("Using %s environment", environment)
    suffix = environment.upper()

    api_endpoint = os.environ.get(f"LIVECOIN_API_ENDPOINT_{suffix}", DEFAULT_API_URL)
    api_key = os.environ.get(f"LIVECOIN_API_KEY_{suffix}", "")
    api_secret = os.environ.get(f"LIVECOIN_API_SECRET_{suffix}", "")

    raw_timeout = os.environ.get(f"LIVECOIN_TIMEOUT_{suffix}")
    timeout: float | None = None
    if raw_timeout:
        try:
            timeout = float(raw_timeout)
        except ValueError as e:
            raise ValidationError(f"Invalid LIVECOIN_TIMEOUT_{suffix}: {e}") from e

    return api_endpoint, api_key, api_secret, timeout
