"""Logging setup shared by the command-line entry points."""

import logging

from rich.logging import RichHandler

from momi_site.config import LOG_LEVEL


def setup_logging(level: str | None = None) -> None:
    logging.basicConfig(
        level=(level or LOG_LEVEL).upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
    )
