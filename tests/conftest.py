import httpx
import pytest

from stealer_search.client import SearchClient
from stealer_search.helpers import init_logger


@pytest.fixture
def logger():
    return init_logger("test_stealer_search", "DEBUG")


@pytest.fixture
def make_client(logger):
    def _make(service):
        http_client = httpx.AsyncClient(
            base_url="https://search.test",
            headers={"Authorization": "Bearer secret"},
            transport=httpx.MockTransport(service),
        )
        return SearchClient(http_client=http_client, logger=logger)

    return _make
