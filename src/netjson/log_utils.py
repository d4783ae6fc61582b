"""Logging utilities for Net-JSON.

Log records from the codec quote module, cell and net names taken from the
files being decoded, so the Rich handler installed here renders messages
literally (no markup) and writes to stderr, away from the CLI's report.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "netjson"


def make_handler(console: Optional[Console] = None) -> RichHandler:
    """Builds the Rich handler used for Net-JSON log output.

    Args:
        console: Console to render into. Defaults to one on stderr.
    """
    return RichHandler(
        console=console or Console(stderr=True),
        rich_tracebacks=True,
        markup=False,
        show_path=False,
    )


def setup_logging(quiet: bool = False, console: Optional[Console] = None) -> None:
    """Configures logging for the CLI.

    Installs the handler from ``make_handler`` unless the root logger already
    has one, and sets the level on both the root and the ``netjson`` logger.

    Args:
        quiet: If True, show only warnings and errors. Otherwise show
            everything down to DEBUG.
        console: Optional console for the handler (see ``make_handler``).
    """
    level = logging.WARNING if quiet else logging.DEBUG

    root = logging.getLogger()
    if not root.hasHandlers():
        logging.basicConfig(
            level=level,
            format="%(message)s",
            datefmt="[%X]",
            handlers=[make_handler(console)],
        )
    else:
        root.setLevel(level)
    logging.getLogger(PACKAGE_LOGGER).setLevel(level)
