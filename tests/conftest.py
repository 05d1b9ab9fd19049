from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from pathlib import Path

import httpx
import pytest
import respx
from azure.core.credentials import AccessToken
from typer.testing import CliRunner


# Ensure the repository-local ``src`` directory is importable when the project is
# not installed as a package.
SRC_PATH = Path(__file__).resolve().parents[1] / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

# Long enough to be masked: first ten characters + "..." + last five.
FAKE_CLI_TOKEN = "eyJ0eXAiOiJKV1QiLCJhbGciOi.payload.signature-tail"  # noqa: S105
FAKE_EXPIRES_ON = 1_893_456_000


class StubCliCredential:
    """Stand-in for ``azure.identity.aio.AzureCliCredential``."""

    instances: list[StubCliCredential] = []
    token: str = FAKE_CLI_TOKEN
    error: Exception | None = None
    expires_on: int = FAKE_EXPIRES_ON

    def __init__(self, **kwargs: object) -> None:
        self.kwargs = kwargs
        self.scopes: list[str] = []
        self.closed = False
        type(self).instances.append(self)

    async def __aenter__(self) -> StubCliCredential:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        self.closed = True

    async def get_token(self, *scopes: str, **kwargs: object) -> AccessToken:
        self.scopes.extend(scopes)
        if self.error is not None:
            raise self.error
        return AccessToken(self.token, self.expires_on)


@pytest.fixture
def stub_cli_credential(monkeypatch: pytest.MonkeyPatch) -> type[StubCliCredential]:
    credential_cls = type(
        "StubCliCredential",
        (StubCliCredential,),
        {"instances": [], "token": FAKE_CLI_TOKEN, "error": None, "expires_on": FAKE_EXPIRES_ON},
    )
    monkeypatch.setattr("azcli_http.auth.azure_cli.AzureCliCredential", credential_cls)
    return credential_cls


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the config store at a temp directory and clear ``AZHTTP_*`` overrides."""

    for var in (
        "AZHTTP_API_BASE_URL",
        "AZHTTP_SCOPE",
        "AZHTTP_TENANT_ID",
        "AZHTTP_SCHEME",
        "AZHTTP_TIMEOUT",
        "AZHTTP_DEBUG",
        "AZHTTP_LOG_LEVEL",
    ):
        monkeypatch.delenv(var, raising=False)
    home = tmp_path / "azhttp-home"
    monkeypatch.setenv("AZHTTP_HOME", str(home))
    return home


class RecordingTransport(httpx.AsyncBaseTransport):
    """Async transport that records requests and answers via ``handler``."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self._handler = handler
        self.requests: list[httpx.Request] = []
        self.closed = False

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._handler(request)

    async def aclose(self) -> None:
        self.closed = True


def echo_authorization(request: httpx.Request) -> httpx.Response:
    return httpx.Response(200, text=f"auth={request.headers.get('Authorization')}")


@pytest.fixture
def echo_transport() -> RecordingTransport:
    return RecordingTransport(echo_authorization)


@pytest.fixture
def respx_mock():
    with respx.mock(assert_all_called=False) as respx_mgr:
        yield respx_mgr


@pytest.fixture
def cli_runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def make_transport() -> Callable[[Callable[[httpx.Request], httpx.Response]], RecordingTransport]:
    return RecordingTransport


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers bound to CliRunner streams once a test finishes."""

    logger = logging.getLogger("azcli_http")
    handlers = list(logger.handlers)
    level = logger.level
    yield
    logger.handlers = handlers
    logger.setLevel(level)
