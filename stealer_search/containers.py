"""Dependency injection containers for the stealer-search application."""

from __future__ import annotations

from dependency_injector import containers, providers

from stealer_search.client import SearchClient, create_http_client
from stealer_search.config import Settings
from stealer_search.helpers import init_logger
from stealer_search.models import FilterModel
from stealer_search.services.pagination import PaginationController
from stealer_search.services.search_session import SearchSession


class AppContainer(containers.DeclarativeContainer):
    """Main application container."""

    config = providers.Singleton(Settings)
    logger = providers.Singleton(
        init_logger,
        "stealer_search",
        config.provided.verbosity_level,
    )

    # One transport per process, carrying the static bearer credential.
    http_client = providers.Singleton(
        create_http_client,
        base_url=config.provided.api_base_url,
        api_key=config.provided.api_key,
    )

    search_client = providers.Factory(
        SearchClient,
        http_client=http_client,
        logger=logger,
    )

    filter_model = providers.Factory(FilterModel)
    pagination = providers.Factory(PaginationController, logger=logger)

    search_session = providers.Factory(
        SearchSession,
        client=search_client,
        filters=filter_model,
        pagination=pagination,
        page_size=config.provided.default_page_size,
        logger=logger,
    )
