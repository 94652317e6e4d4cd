"""Path classification rules.

Recognize the path shapes produced by the Rust toolchain and compute
canonical identifiers from the captured fragments. Rules are tried in
order and the first match wins.
"""

import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from pathmapper.errors import RulePatternError
from pathmapper.file_path import FilePath, MappedPath, NormalPath
from pathmapper.log import get_logger

logger = get_logger(__name__)

RUST_REPO = "github.com/rust-lang/rust"
"""Repository hosting the compiler's bundled standard library sources."""


_GLOBAL_FLAGS = re.compile(r"(?:\(\?[aiLmsux]+\))*")


def _anchor_end(pattern: str) -> str:
    """Require a pattern to end at the end of the string.

    Uses \\Z rather than $, which would also accept a trailing newline.
    Leading global flags such as ``(?i)`` must stay at the very start.
    """
    flags = _GLOBAL_FLAGS.match(pattern).group()
    body = pattern[len(flags) :]
    if "x" in flags:
        # A trailing comment in verbose mode would swallow the closing group
        body += "\n"
    return rf"{flags}(?:{body})\Z"


def normalize_separators(path: str) -> str:
    """Replace every backslash in a path fragment with a forward slash."""
    return path.replace("\\", "/")


@dataclass(frozen=True)
class PathRule:
    """A single rule matching a path shape and producing an identifier.

    The pattern is compiled when the rule is created. A rule is either
    matched from the start of the raw path or searched anywhere inside it;
    in both cases the pattern must end at the end of the string.
    """

    name: str
    """Short name used in logs."""

    pattern: str
    """Regular expression source with named groups."""

    canonicalize: Callable[[re.Match[str]], str]
    """Build the canonical identifier from a successful match."""

    anchored_start: bool = True
    """Match only at the start of the path instead of searching it."""

    _regex: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Compile the rule pattern.

        Raises:
            RulePatternError: If the pattern is not a valid regular expression.

        """
        try:
            regex = re.compile(_anchor_end(self.pattern))
        except re.error as e:
            raise RulePatternError(self.name, self.pattern, str(e)) from e
        object.__setattr__(self, "_regex", regex)

    def match(self, raw_path: str) -> re.Match[str] | None:
        """Match the rule against a raw path.

        Args:
            raw_path: The path to test.

        Returns:
            The match object, or None if the path has a different shape.

        """
        if self.anchored_start:
            return self._regex.match(raw_path)
        return self._regex.search(raw_path)

    def apply(self, raw_path: str) -> str | None:
        """Compute the canonical identifier for a raw path.

        Args:
            raw_path: The path to map.

        Returns:
            The canonical identifier, or None if the rule does not match.

        """
        match = self.match(raw_path)
        if match is None:
            return None
        return self.canonicalize(match)


def _rustc_source_identifier(match: re.Match[str]) -> str:
    path = normalize_separators(match.group("path"))
    return f"git:{RUST_REPO}:{path}:{match.group('rev')}"


def _cargo_dependency_identifier(match: re.Match[str]) -> str:
    path = normalize_separators(match.group("path"))
    return (
        f"cargo:{match.group('registry')}:"
        f"{match.group('crate')}-{match.group('version')}:{path}"
    )


RUSTC_SOURCE_RULE = PathRule(
    name="rustc-source",
    pattern=r"/rustc/(?P<rev>[0-9a-f]+)\\?[/\\](?P<path>.*)",
    canonicalize=_rustc_source_identifier,
)
"""Paths into the standard library sources bundled with rustc."""

CARGO_DEPENDENCY_RULE = PathRule(
    name="cargo-dependency",
    pattern=(
        r"[/\\]\.cargo[/\\]registry[/\\]src[/\\](?P<registry>[^/\\]+)[/\\]"
        r"(?P<crate>[^/]+)-(?P<version>[0-9]+\.[0-9]+\.[0-9]+)[/\\](?P<path>.*)"
    ),
    canonicalize=_cargo_dependency_identifier,
    anchored_start=False,
)
"""Paths into a crate unpacked in the local Cargo registry cache."""

DEFAULT_RULES: tuple[PathRule, ...] = (RUSTC_SOURCE_RULE, CARGO_DEPENDENCY_RULE)
"""Built-in rules in priority order."""


class PathClassifier:
    """Classify raw paths using an ordered list of rules."""

    def __init__(self, rules: Sequence[PathRule] = DEFAULT_RULES) -> None:
        """Initialize the classifier.

        Args:
            rules: Rules to try, highest priority first.

        """
        self._rules = tuple(rules)

    @property
    def rules(self) -> tuple[PathRule, ...]:
        """Get the rules in priority order."""
        return self._rules

    def classify(self, raw_path: str) -> FilePath:
        """Classify a raw path into a canonical identifier.

        Args:
            raw_path: The path to classify.

        Returns:
            MappedPath from the first matching rule, or NormalPath holding
            the unchanged input when no rule matches.

        """
        for rule in self._rules:
            mapped = rule.apply(raw_path)
            if mapped is not None:
                logger.debug("Rule %s matched %s", rule.name, raw_path)
                return MappedPath(raw=raw_path, mapped=mapped)
        return NormalPath(raw_path)
