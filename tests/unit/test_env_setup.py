import pytest

from livecoin_net.env_setup import setup_environment
from livecoin_net.errors import ValidationError
from livecoin_net.helpers import DEFAULT_API_URL

ENV_NAMES = [
    "ENVIRONMENT",
    "LIVECOIN_API_ENDPOINT_PRODUCTION",
    "LIVECOIN_API_KEY_PRODUCTION",
    "LIVECOIN_API_SECRET_PRODUCTION",
    "LIVECOIN_TIMEOUT_PRODUCTION",
    "LIVECOIN_API_ENDPOINT_STAGING",
    "LIVECOIN_API_KEY_STAGING",
    "LIVECOIN_API_SECRET_STAGING",
    "LIVECOIN_TIMEOUT_STAGING",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for name in ENV_NAMES:
        # setenv first so teardown also removes values loaded from .env
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)


def test_defaults():
    assert setup_environment() == (DEFAULT_API_URL, "", "", None)


def test_production_variables(monkeypatch):
    monkeypatch.setenv("LIVECOIN_API_KEY_PRODUCTION", "key")
    monkeypatch.setenv("LIVECOIN_API_SECRET_PRODUCTION", "secret")
    monkeypatch.setenv("LIVECOIN_TIMEOUT_PRODUCTION", "12.5")

    assert setup_environment() == (DEFAULT_API_URL, "key", "secret", 12.5)


def test_environment_selects_suffix(monkeypatch):
    monkeypatch.setenv("ENVIRONMENT", "Staging")
    monkeypatch.setenv("LIVECOIN_API_ENDPOINT_STAGING", "http://localhost:8080")
    monkeypatch.setenv("LIVECOIN_API_KEY_STAGING", "staging-key")
    monkeypatch.setenv("LIVECOIN_API_KEY_PRODUCTION", "production-key")

    endpoint, api_key, _, _ = setup_environment()

    assert endpoint == "http://localhost:8080"
    assert api_key == "staging-key"


def test_dotenv_file_is_loaded(tmp_path):
    tmp_path.joinpath(".env").write_text(
        "LIVECOIN_API_KEY_PRODUCTION=from-file\nLIVECOIN_API_SECRET_PRODUCTION=s\n"
    )

    _, api_key, api_secret, _ = setup_environment()

    assert api_key == "from-file"
    assert api_secret == "s"


def test_invalid_timeout(monkeypatch):
    monkeypatch.setenv("LIVECOIN_TIMEOUT_PRODUCTION", "soon")

    with pytest.raises(ValidationError):
        setup_environment()
