"""Result types produced by the path mapper.

A mapped source path is either returned unchanged (`NormalPath`) or
rewritten to a canonical identifier (`MappedPath`).
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class NormalPath:
    """A path that no mapping rule applied to."""

    path: str
    """The input path, unchanged."""

    @property
    def raw(self) -> str:
        """Get the original input path."""
        return self.path

    @property
    def display(self) -> str:
        """Get the string a host should show for this path."""
        return self.path

    @property
    def is_mapped(self) -> bool:
        """Normal paths are never mapped."""
        return False


@dataclass(frozen=True)
class MappedPath:
    """A path rewritten to a location-independent identifier.

    The identifier comes from a built-in rule (prefixed with ``git:`` or
    ``cargo:``) or from an extra mapper supplied by the host.
    """

    raw: str
    """The exact input string given to the mapper."""

    mapped: str
    """The canonical identifier."""

    @property
    def display(self) -> str:
        """Get the string a host should show for this path."""
        return self.mapped

    @property
    def is_mapped(self) -> bool:
        """Mapped paths are always mapped."""
        return True


FilePath = NormalPath | MappedPath
"""Result of mapping a single raw path."""
