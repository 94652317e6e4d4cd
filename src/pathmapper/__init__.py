"""Map raw source file paths to stable, shareable identifiers.

Recognize paths into the Rust standard library sources and into the local
Cargo registry cache and rewrite them to location independent identifiers.
"""

from pathmapper.errors import ConfigError, PathMapperError, RulePatternError
from pathmapper.extra_mapper import (
    ExtraPathMapper,
    NoExtraPathMapper,
    PrefixPathMapper,
    PrefixRewrite,
)
from pathmapper.file_path import FilePath, MappedPath, NormalPath
from pathmapper.mapper import PathMapper
from pathmapper.rules import (
    CARGO_DEPENDENCY_RULE,
    DEFAULT_RULES,
    RUSTC_SOURCE_RULE,
    PathClassifier,
    PathRule,
)

__all__ = [
    "CARGO_DEPENDENCY_RULE",
    "DEFAULT_RULES",
    "RUSTC_SOURCE_RULE",
    "ConfigError",
    "ExtraPathMapper",
    "FilePath",
    "MappedPath",
    "NoExtraPathMapper",
    "NormalPath",
    "PathClassifier",
    "PathMapper",
    "PathMapperError",
    "PathRule",
    "PrefixPathMapper",
    "PrefixRewrite",
    "RulePatternError",
]
