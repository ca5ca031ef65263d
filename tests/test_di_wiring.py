import asyncio

import httpx
import pytest
from dependency_injector import providers

from fakes import FakeService, infection, page
from stealer_search.client import SearchClient
from stealer_search.config import Settings
from stealer_search.containers import AppContainer
from stealer_search.services.search_session import SearchSession


@pytest.fixture
def container():
    c = AppContainer()
    c.config.override(
        providers.Singleton(
            Settings,
            api_base_url="https://search.test",
            api_key="secret",
            default_page_size=25,
            verbosity_level="DEBUG",
        )
    )
    try:
        yield c
    finally:
        c.unwire()
        c.reset_singletons()


def test_can_resolve_core_services(container: AppContainer):
    logger = container.logger()
    assert logger is not None

    client = container.search_client()
    assert isinstance(client, SearchClient)
    assert client.http_client.headers["Authorization"] == "Bearer secret"
    assert client.http_client.base_url.host == "search.test"

    session = container.search_session()
    assert isinstance(session, SearchSession)
    assert session.page_size == 25
    asyncio.run(client.aclose())


def test_sessions_do_not_share_state(container: AppContainer):
    first = container.search_session()
    second = container.search_session()
    assert first.filters is not second.filters
    assert first.pagination is not second.pagination

    first.filters.add_row()
    assert len(second.filters) == 1


def test_session_wired_to_overridden_transport(container: AppContainer):
    service = FakeService(httpx.Response(200, json=page([infection("1")], next_token="t")))
    container.http_client.override(
        providers.Object(
            httpx.AsyncClient(
                base_url="https://search.test",
                transport=httpx.MockTransport(service),
            )
        )
    )

    session = container.search_session()
    session.filters.update_value(0, "example.com")

    async def scenario():
        async with session.client:
            return await session.search()

    asyncio.run(scenario())

    assert service.requests == [{"size": 25, "domains": ["example.com"]}]
    assert session.pagination.token == "t"
