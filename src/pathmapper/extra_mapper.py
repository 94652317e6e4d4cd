"""Extra path mappers consulted before the built-in rules.

A host program can plug in its own mapping logic, for example to resolve
paths inside its workspace, by implementing the ExtraPathMapper protocol.
"""

from collections.abc import Iterable
from typing import NamedTuple, Protocol, runtime_checkable

from pathmapper.log import get_logger
from pathmapper.rules import normalize_separators

logger = get_logger(__name__)


@runtime_checkable
class ExtraPathMapper(Protocol):
    """Protocol for caller supplied path mappers.

    Implementations may keep state that changes between calls. The path
    mapper never caches what an extra mapper returns, so it is asked again
    on every call.
    """

    def map_path(self, path: str) -> str | None:
        """Map a raw path.

        Args:
            path: The raw path as given to the path mapper.

        Returns:
            A replacement identifier, or None to let the built-in rules run.

        """
        ...


class NoExtraPathMapper:
    """Extra mapper that never claims a path."""

    def map_path(self, path: str) -> str | None:  # noqa: ARG002
        """Decline every path."""
        return None


class PrefixRewrite(NamedTuple):
    """Replace a leading path prefix with an identifier prefix."""

    prefix: str
    replacement: str


class PrefixPathMapper:
    """Rewrite paths that start with one of the configured prefixes.

    The first matching prefix wins. The remainder after the prefix has its
    backslashes turned into forward slashes, the same way the built-in
    rules treat captured paths.
    """

    def __init__(self, rewrites: Iterable[PrefixRewrite]) -> None:
        """Initialize the mapper.

        Args:
            rewrites: Prefix rewrites, highest priority first.

        """
        self._rewrites = tuple(rewrites)
        self.claimed = 0
        logger.debug("Created PrefixPathMapper with %d rewrites", len(self._rewrites))

    @property
    def rewrites(self) -> tuple[PrefixRewrite, ...]:
        """Get the configured rewrites in priority order."""
        return self._rewrites

    def map_path(self, path: str) -> str | None:
        """Rewrite the path if it starts with a configured prefix.

        Args:
            path: The raw path.

        Returns:
            The rewritten identifier, or None if no prefix matches.

        """
        for rewrite in self._rewrites:
            if path.startswith(rewrite.prefix):
                self.claimed += 1
                remainder = normalize_separators(path[len(rewrite.prefix) :])
                return f"{rewrite.replacement}{remainder}"
        return None
