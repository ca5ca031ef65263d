"""Infostealer infections search."""
import asyncio
from argparse import Namespace
from typing import Sequence

from dependency_injector import providers
from dependency_injector.wiring import inject, Provide
from verboselogs import VerboseLogger

from stealer_search.containers import AppContainer
from stealer_search.dates import parse_local_datetime
from stealer_search.helpers import init_logger, parse_options, to_json
from stealer_search.models import DEFAULT_FIELD, FieldName, FilterModel, SearchError
from stealer_search.services.aggregates import ResultView
from stealer_search.services.search_session import SearchSession

DESCRIPTION = "Search infostealer infection logs."


def apply_filters(filters: FilterModel, raw_filters: Sequence[str]) -> None:
    """Load ``FIELD=VALUE`` command-line filters into the filter model.

    The first ``domains`` filter fills the pinned default row; every other
    filter gets a row of its own. Date fields accept local date-times.

    Parameters
    ----------
    filters : stealer_search.models.FilterModel
        The session's filters.
    raw_filters : sequence of str
        The raw ``--filter`` arguments.

    Raises
    ------
    ValueError
        If a filter is malformed, names an unknown field or carries an
        invalid date.

    """
    pinned_filled = False

    for raw in raw_filters:
        name, sep, value = raw.partition("=")
        if not sep:
            raise ValueError(f"Invalid filter {raw!r}: expected FIELD=VALUE")

        field = FieldName.parse(name)

        if field is DEFAULT_FIELD and not pinned_filled:
            index = next(i for i, row in enumerate(filters.rows) if row.locked)
            pinned_filled = True
        else:
            index = filters.add_row(field)

        if field.is_date:
            filters.update_date(index, parse_local_datetime(value))
        else:
            filters.update_value(index, value)


async def fetch_pages(
    session: SearchSession, pages: int, fetch_all: bool = False
) -> tuple[list[ResultView], SearchError | None]:
    """Search, then keep following continuation tokens.

    Stops after ``pages`` pages (unless ``fetch_all``), when the service
    returns no token, or on the first failure.
    """
    views: list[ResultView] = []

    while True:
        outcome = await session.search()
        if isinstance(outcome, SearchError):
            return views, outcome

        if session.view is not None:
            views.append(session.view)

        if not session.pagination.is_continuing:
            break
        if not fetch_all and len(views) >= pages:
            break

    return views, None


@inject
async def main(
    args: Namespace,
    session: SearchSession = Provide[AppContainer.search_session],
    logger: VerboseLogger = Provide[AppContainer.logger],
) -> int:
    """Program's entrypoint."""
    try:
        apply_filters(session.filters, args.filters)
    except ValueError as err:
        logger.error(str(err))
        return 2

    if args.size is not None:
        session.page_size = args.size

    if args.next_token:
        session.pagination.resume(args.next_token)

    async with session.client:
        views, error = await fetch_pages(session, max(args.pages, 1), args.all)

    if views:
        print(to_json(views))

    if error is not None:
        logger.debug(f"Last request: {session.build_request()}")
        return 1

    logger.info(f"Next: {session.pagination.token or 'end of results'}")
    return 0


def run(argv: Sequence[str] | None = None) -> int:
    """Console script entrypoint."""
    args: Namespace = parse_options(DESCRIPTION, argv)

    app_container = AppContainer()
    if args.verbose:
        app_container.logger.override(
            providers.Singleton(init_logger, "stealer_search", args.verbose)
        )

    app_container.wire(modules=[__name__])
    try:
        return asyncio.run(main(args))
    finally:
        app_container.unwire()


if __name__ == "__main__":
    raise SystemExit(run())
