"""Parse and organize command line args."""

from collections.abc import Callable
from pathlib import Path

import typed_argparse as tap

from pathmapper.errors import ConfigError


class Args(tap.TypedArgs):
    """Command line args."""

    paths: list[str] | None = tap.arg(
        positional=True,
        nargs="*",
        help="Raw paths to map (read from stdin, one per line, when omitted)",
        default=[],
    )
    path: Path | None = tap.arg(help="Working directory", default=None)
    config: Path | None = tap.arg(help="Config file to use", default=None)
    no_config: bool = tap.arg(help="Do not look for config files", default=False)
    table: bool = tap.arg(help="Print results as a table", default=False)
    verbose: bool = tap.arg(help="Enables verbose (DEBUG) logging", default=False)
    version: bool = tap.arg(help="Show version and exit", default=False)

    @property
    def working_dir(self) -> Path:
        """Get the directory searched for a local config file.

        Raises:
            ConfigError: If the directory does not exist.

        """
        work_dir = (self.path or Path.cwd()).expanduser().resolve()
        if not work_dir.is_dir():
            msg = f"Working directory {work_dir} is not a directory"
            raise ConfigError(msg)
        return work_dir


def bind_and_run(app_main: Callable[[Args], None]) -> None:
    """Parse args and run the app passing the parsed args."""
    tap.Parser(Args).bind(app_main).run()
