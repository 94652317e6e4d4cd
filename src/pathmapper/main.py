"""pathmapper CLI entry point."""

import sys
from collections.abc import Iterable, Iterator
from importlib.metadata import PackageNotFoundError, version
from typing import TextIO

from rich.console import Console
from rich.table import Table
from rich.text import Text

from pathmapper.args import Args, bind_and_run
from pathmapper.config_loader import build_extra_mapper, load_config
from pathmapper.errors import ConfigError
from pathmapper.file_path import FilePath
from pathmapper.log import get_logger, init_logging
from pathmapper.mapper import PathMapper


def show_version() -> None:
    """Print the installed pathmapper version and exit."""
    try:
        app_version = version("pathmapper")
    except PackageNotFoundError:
        app_version = "(version unknown)"
    print(f"pathmapper {app_version}")  # noqa: T201
    sys.exit(0)


def read_raw_paths(stream: TextIO) -> Iterator[str]:
    """Yield raw paths from a text stream, one per non-blank line."""
    for line in stream:
        raw_path = line.rstrip("\r\n")
        if raw_path.strip():
            yield raw_path


def render_table(results: Iterable[FilePath], console: Console) -> None:
    """Render mapping results as a table."""
    table = Table(
        show_header=True,
        header_style="bold cyan",
        show_edge=False,
        show_lines=False,
        box=None,
    )
    table.add_column("Raw", style="dim", no_wrap=False)
    table.add_column("Mapped", style="green", no_wrap=False)
    table.add_column("Kind", justify="center")

    for result in results:
        table.add_row(
            # Text keeps brackets in paths from being read as rich markup
            Text(result.raw),
            Text(result.display),
            "mapped" if result.is_mapped else "normal",
        )

    console.print(table)


def run(args: Args) -> None:
    """Map the requested paths and print the results."""
    if args.version:
        show_version()

    init_logging(args)
    logger = get_logger(__name__)

    try:
        config = load_config(args)
    except ConfigError as e:
        print(f"error: {e}", file=sys.stderr)  # noqa: T201
        sys.exit(1)

    mapper = PathMapper(extra_mapper=build_extra_mapper(config))
    raw_paths = args.paths or list(read_raw_paths(sys.stdin))
    results = mapper.map_paths(raw_paths)
    logger.info(
        "Mapped %d of %d paths",
        sum(1 for result in results if result.is_mapped),
        len(results),
    )

    if args.table:
        render_table(results, Console())
        return
    for result in results:
        print(result.display)  # noqa: T201


def main() -> None:
    """Run the pathmapper command line tool."""
    bind_and_run(run)


if __name__ == "__main__":
    main()
