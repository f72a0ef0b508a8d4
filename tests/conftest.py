import pytest
from click.testing import CliRunner

from stripe_sdk._config import Config


@pytest.fixture
def runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clean environment variables before each test."""
    monkeypatch.delenv("STRIPE_API_KEY", raising=False)
    monkeypatch.delenv("STRIPE_URL", raising=False)
    monkeypatch.delenv("STRIPE_API_VERSION", raising=False)
    monkeypatch.delenv("STRIPE_MAX_NETWORK_RETRIES", raising=False)


@pytest.fixture
def base_url() -> str:
    return "https://api.example.com/v1"


@pytest.fixture
def secret() -> str:
    return "sk_test_secret"


@pytest.fixture
def api_version() -> str:
    return "2017-06-05"


@pytest.fixture
def config(base_url: str, secret: str, api_version: str) -> Config:
    return Config(
        base_url=base_url,
        secret=secret,
        api_version=api_version,
        max_network_retries=0,
    )
