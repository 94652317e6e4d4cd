"""Tests for the extra mapper implementations."""

from pathmapper.extra_mapper import (
    ExtraPathMapper,
    NoExtraPathMapper,
    PrefixPathMapper,
    PrefixRewrite,
)
from pathmapper.file_path import MappedPath
from pathmapper.mapper import PathMapper


class TestNoExtraPathMapper:
    """Test the extra mapper that declines everything."""

    def test_declines(self) -> None:
        """Every path is declined."""
        extra = NoExtraPathMapper()
        assert extra.map_path("/rustc/abc/library/core/src/lib.rs") is None
        assert extra.map_path("") is None

    def test_implements_protocol(self) -> None:
        """NoExtraPathMapper satisfies the ExtraPathMapper protocol."""
        assert isinstance(NoExtraPathMapper(), ExtraPathMapper)


class TestPrefixPathMapper:
    """Test prefix based rewriting."""

    def test_rewrites_matching_prefix(self) -> None:
        """A path under a configured prefix is rewritten."""
        extra = PrefixPathMapper([PrefixRewrite("/home/ci/build/", "workspace:")])
        assert extra.map_path("/home/ci/build/src/main.rs") == "workspace:src/main.rs"

    def test_normalizes_remainder(self) -> None:
        """Backslashes after the prefix become forward slashes."""
        extra = PrefixPathMapper([PrefixRewrite("C:\\build\\", "workspace:")])
        assert extra.map_path("C:\\build\\src\\main.rs") == "workspace:src/main.rs"

    def test_declines_other_paths(self) -> None:
        """Paths outside every prefix are declined."""
        extra = PrefixPathMapper([PrefixRewrite("/home/ci/build/", "workspace:")])
        assert extra.map_path("/home/u/project/src/main.rs") is None
        assert extra.claimed == 0

    def test_first_prefix_wins(self) -> None:
        """Rewrites are tried in order."""
        extra = PrefixPathMapper(
            [
                PrefixRewrite("/home/ci/", "ci:"),
                PrefixRewrite("/home/ci/build/", "workspace:"),
            ],
        )
        assert extra.map_path("/home/ci/build/src/main.rs") == "ci:build/src/main.rs"

    def test_counts_claimed_paths(self) -> None:
        """The mapper counts every path it claims."""
        extra = PrefixPathMapper([PrefixRewrite("/w/", "workspace:")])
        mapper = PathMapper(extra_mapper=extra)

        mapper.map_path("/w/a.rs")
        mapper.map_path("/w/a.rs")
        mapper.map_path("/elsewhere/b.rs")

        assert extra.claimed == 2
        assert extra.rewrites == (PrefixRewrite("/w/", "workspace:"),)

    def test_used_by_path_mapper(self) -> None:
        """Prefix rewrites run ahead of the built-in rules."""
        mapper = PathMapper(
            extra_mapper=PrefixPathMapper([PrefixRewrite("/rustc/", "toolchain:")]),
        )

        result = mapper.map_path("/rustc/abc/library/core/src/lib.rs")

        assert result == MappedPath(
            raw="/rustc/abc/library/core/src/lib.rs",
            mapped="toolchain:abc/library/core/src/lib.rs",
        )
