from typing import Callable

import httpx
import pytest

from httpreq import Config, HttpTransport


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in (
        "HTTPREQ_TIMEOUT",
        "HTTPREQ_DISABLE_SSL_VERIFY",
        "HTTPREQ_DEBUG",
        "HTTPREQ_TRUST_STORE",
        "HTTPREQ_CA_BUNDLE",
        "SSL_CERT_FILE",
        "REQUESTS_CA_BUNDLE",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def config() -> Config:
    return Config(verify_ssl=False)


@pytest.fixture
def make_transport(config) -> Callable[..., HttpTransport]:
    """Returns a factory of transports answering through a handler function."""

    def factory(handler: Callable[[httpx.Request], httpx.Response]) -> HttpTransport:
        return HttpTransport(config, transport=httpx.MockTransport(handler))

    return factory
