import socket
from typing import cast

import pytest

from numshortener.types import LambdaContext
from numshortener.registry import Registry
from numshortener.dao.memory import ShortURLMemoryDAO
from numshortener.utils.validator import URLValidator


UNKNOWN_HOSTS = frozenset({'this-host-does-not-exist.invalid'})


def fake_dns_lookup(hostname: str) -> list:
    if hostname in UNKNOWN_HOSTS:
        raise socket.gaierror(socket.EAI_NONAME, 'Name or service not known')
    return [(socket.AF_INET, socket.SOCK_STREAM, 6, '', ('93.184.215.14', 0))]


@pytest.fixture(autouse=True)
def deployed(monkeypatch):
    """Run handlers as if deployed, so unhandled errors turn into 500 responses."""
    monkeypatch.setenv('APP_ENV', 'test')
    monkeypatch.delenv('AWS_SAM_LOCAL', raising=False)


@pytest.fixture
def context() -> LambdaContext:
    return cast(LambdaContext, {'function_name': 'numshortener'})


@pytest.fixture
def registry() -> Registry:
    return Registry(ShortURLMemoryDAO())


@pytest.fixture
def validator() -> URLValidator:
    return URLValidator(resolver=fake_dns_lookup, timeout=1.0)
