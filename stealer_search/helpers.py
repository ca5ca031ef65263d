"""Helper functions."""
import logging
from argparse import ArgumentParser, Namespace
from dataclasses import asdict, is_dataclass
from datetime import date, datetime
from json import JSONEncoder, dumps
from typing import Any, Sequence

import coloredlogs
import verboselogs
from pydantic import BaseModel
from verboselogs import VerboseLogger

LOG_LEVELS: dict[str, int] = {
    "INFO": logging.INFO,
    "VERBOSE": verboselogs.VERBOSE,
    "DEBUG": logging.DEBUG,
    "SPAM": verboselogs.SPAM,
}


class EnhancedJSONEncoder(JSONEncoder):
    """Enhanced JSON encoder for specific classes."""

    def default(self, o: Any) -> Any:  # type: ignore[override]
        """Handle custom types JSON serialization."""
        if isinstance(o, BaseModel):
            return o.model_dump(mode="json")
        if is_dataclass(o) and not isinstance(o, type):
            return asdict(o)
        if isinstance(o, (datetime, date)):
            return o.isoformat()
        if isinstance(o, set):
            return list(o)
        return super().default(o)


def to_json(content: Any) -> str:
    """Serialize search output for the terminal.

    Parameters
    ----------
    content : Any
        The data to serialize.

    Returns
    -------
    str
        Indented JSON text.

    """
    return dumps(
        content,
        ensure_ascii=False,
        cls=EnhancedJSONEncoder,
        indent=4,
    )


def parse_options(
    description: str, argv: Sequence[str] | None = None
) -> Namespace:
    """Parse command-line arguments.

    Parameters
    ----------
    description : str
        The program's description.
    argv : sequence of str, optional
        Arguments to parse instead of ``sys.argv``.

    Returns
    -------
    argparse.Namespace
        Parsed command-line arguments as an object.

    """
    parser = ArgumentParser(description=description)

    parser.add_argument(
        "-f",
        "--filter",
        metavar="FIELD=VALUE",
        dest="filters",
        action="append",
        default=[],
        help="add a search filter (repeatable), e.g. domains=example.com or "
        "infection_date_from='2024-01-31 08:00'",
    )
    parser.add_argument(
        "-s",
        "--size",
        metavar="PAGE_SIZE",
        type=str,
        default=None,
        help="number of records per page (values below 1 are raised to 1)",
    )
    pages = parser.add_mutually_exclusive_group()
    pages.add_argument(
        "--pages",
        type=int,
        default=1,
        help="how many pages to fetch (default: 1)",
    )
    pages.add_argument(
        "--all",
        action="store_true",
        help="keep fetching pages until the service stops returning a token",
    )
    parser.add_argument(
        "--next",
        metavar="TOKEN",
        dest="next_token",
        type=str,
        default=None,
        help="resume from a continuation token returned by a previous search",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="increase logs output verbosity (default: info, -v: verbose, "
        "-vv: debug, -vvv: spam)",
    )

    args: Namespace = parser.parse_args(argv)

    return args


def init_logger(
    name: str,
    verbosity_level: str | int,
    formatting: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
) -> VerboseLogger:
    """Initialize the program's logger.

    Parameters
    ----------
    name : str
        The logger's name.
    verbosity_level : str or int
        Level name (INFO, VERBOSE, DEBUG, SPAM) or a ``-v`` count.
    formatting : str, optional
        The log format.

    Returns
    -------
    verboselogs.VerboseLogger
        The logger.

    """
    levels: list[str] = list(LOG_LEVELS)

    if isinstance(verbosity_level, int):
        level_name = levels[max(0, min(verbosity_level, len(levels) - 1))]
    else:
        level_name = verbosity_level.upper()

    level = LOG_LEVELS.get(level_name, logging.INFO)
    logger = VerboseLogger(name, level)

    coloredlogs.install(
        logger=logger,
        level=level,
        fmt=formatting,
        isatty=True,
    )

    return logger
