"""Pytest configuration and fixtures for sidebyside.

HTTP is never sent over the network: GSA requests go through an
httpx.MockTransport that answers per host.
"""

from collections.abc import Callable, Iterator

import httpx
import pytest

from sidebyside.core.config import get_settings
from sidebyside.domain.value_objects.core import HostQueryArgsPair, QueryArguments
from sidebyside.infrastructure.external.search.gsa_formatter import GsaFormatter

SAMPLE_GSA_XML = """<?xml version="1.0" encoding="UTF-8" standalone="no"?>
<GSP VER="3.2">
<TM>0.052</TM>
<Q>cats</Q>
<PARAM name="q" value="cats" original_value="cats"/>
<RES SN="1" EN="3">
<M>3</M>
<R N="1">
<U>http://example.com/cats</U>
<UE>http://example.com/cats</UE>
<T>All about &lt;b&gt;cats&lt;/b&gt;</T>
<RK>9</RK>
<S>Cats are small carnivorous mammals.</S>
<LANG>en</LANG>
<HAS><L/><C SZ="12k" CID="a1b2c3" ENC="UTF-8"/></HAS>
</R>
<R N="2" L="2">
<U>http://example.com/cats/more</U>
<RK>8</RK>
</R>
<R N="3" L="1">
<U>http://example.org/felines</U>
<T>Felines</T>
<HAS><L/></HAS>
</R>
</RES>
</GSP>
"""

NO_RESULTS_GSA_XML = """<?xml version="1.0" encoding="UTF-8" standalone="no"?>
<GSP VER="3.2">
<TM>0.010</TM>
<Q>zzzz</Q>
</GSP>
"""


@pytest.fixture(autouse=True)
def _clear_settings_cache() -> Iterator[None]:
    """Each test sees settings built from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def sample_gsa_xml() -> str:
    return SAMPLE_GSA_XML


@pytest.fixture
def no_results_gsa_xml() -> str:
    return NO_RESULTS_GSA_XML


@pytest.fixture
def gsa_formatter() -> GsaFormatter:
    """GSA formatter with default frontend and an explicit collection."""
    return GsaFormatter(
        HostQueryArgsPair(
            "search.example.com",
            QueryArguments(collection="default_collection", frontend="", extra_params=""),
        )
    )


@pytest.fixture
def mock_client_factory() -> Iterator[Callable[..., httpx.Client]]:
    """Build httpx clients whose responses come from a handler; closed after the test."""
    clients: list[httpx.Client] = []

    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.Client:
        client = httpx.Client(transport=httpx.MockTransport(handler))
        clients.append(client)
        return client

    yield _make
    for client in clients:
        client.close()
