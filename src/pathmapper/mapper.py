"""Map raw source paths to canonical identifiers.

The PathMapper memoizes the outcome of the built-in rules per raw path
and offers every path to an optional extra mapper first.
"""

from collections.abc import Iterable, Sequence

from pathmapper.extra_mapper import ExtraPathMapper
from pathmapper.file_path import FilePath, MappedPath
from pathmapper.log import get_logger
from pathmapper.rules import DEFAULT_RULES, PathClassifier, PathRule

logger = get_logger(__name__)


class PathMapper:
    """Translate raw paths from debug info into shareable identifiers.

    Results of the built-in rules are cached for the lifetime of the mapper
    and never evicted. Paths claimed by the extra mapper bypass the cache
    entirely, so the extra mapper runs again on every call.

    The mapper is not thread safe. Use one instance per worker or lock
    around each call.
    """

    def __init__(
        self,
        extra_mapper: ExtraPathMapper | None = None,
        rules: Sequence[PathRule] | None = None,
    ) -> None:
        """Initialize the path mapper.

        Args:
            extra_mapper: Optional mapper consulted before the cache and the
                built-in rules.
            rules: Rules to use instead of the built-in ones, highest
                priority first.

        """
        self._cache: dict[str, FilePath] = {}
        self._extra_mapper = extra_mapper
        self.classifier = PathClassifier(DEFAULT_RULES if rules is None else rules)
        logger.debug(
            "Created PathMapper with %d rules, extra mapper: %s",
            len(self.classifier.rules),
            type(extra_mapper).__name__ if extra_mapper is not None else None,
        )

    @property
    def extra_mapper(self) -> ExtraPathMapper | None:
        """Get the extra mapper, if one is configured."""
        return self._extra_mapper

    @property
    def cache_size(self) -> int:
        """Get the number of memoized paths."""
        return len(self._cache)

    def map_path(self, raw_path: str) -> FilePath:
        """Map a raw path to a FilePath.

        Args:
            raw_path: The path as found in debug info or profiler samples.

        Returns:
            MappedPath if the extra mapper or a built-in rule recognized the
            path, NormalPath with the unchanged input otherwise.

        """
        if self._extra_mapper is not None:
            mapped = self._extra_mapper.map_path(raw_path)
            if mapped:
                logger.debug("Extra mapper claimed %s", raw_path)
                return MappedPath(raw=raw_path, mapped=mapped)

        cached = self._cache.get(raw_path)
        if cached is not None:
            logger.debug("Cache hit for %s", raw_path)
            return cached

        value = self.classifier.classify(raw_path)
        logger.debug("Cache miss for %s, mapped: %s", raw_path, value.is_mapped)
        self._cache[raw_path] = value
        return value

    def map_paths(self, raw_paths: Iterable[str]) -> list[FilePath]:
        """Map several raw paths in order.

        Args:
            raw_paths: Paths to map.

        Returns:
            One FilePath per input path.

        """
        return [self.map_path(raw_path) for raw_path in raw_paths]
