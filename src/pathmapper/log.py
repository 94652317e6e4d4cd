"""Logging helper module."""

from logging import (
    DEBUG,
    INFO,
    Formatter,
    Logger,
    StreamHandler,
    basicConfig,
    getLogger,
)
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathmapper.args import Args

LOG_FILE = "pathmapper.log"


def init_logging(args: "Args") -> None:
    """Initialize logging for the command line tool.

    Should be called once when the tool starts.
    """
    basicConfig(
        level=INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        filename=LOG_FILE,
        filemode="w",
    )

    root_logger = getLogger()

    if args.verbose:
        # Mirror debug output to the console only when asked for
        console_handler = StreamHandler()
        console_handler.setLevel(DEBUG)
        console_handler.setFormatter(Formatter("%(levelname)s: %(message)s"))
        root_logger.addHandler(console_handler)
        root_logger.setLevel(DEBUG)
        root_logger.info("Debug logging enabled.")


def get_logger(name: str) -> Logger:
    """Proxy for logging.getLogger."""
    return getLogger(name)
