"""Exceptions raised by pathmapper.

Unrecognized paths are never an error. These exceptions cover defects in
rule definitions and problems loading user configuration.
"""


class PathMapperError(Exception):
    """Base exception for pathmapper errors."""


class RulePatternError(PathMapperError):
    """Raised when a path rule pattern fails to compile.

    A malformed rule pattern is a programming defect, so this is raised when
    the rule is constructed and never while mapping a path.
    """

    def __init__(self, rule_name: str, pattern: str, reason: str) -> None:
        """Initialize rule pattern error.

        Args:
            rule_name: Name of the rule whose pattern is invalid.
            pattern: The regular expression source that failed to compile.
            reason: Description of the compilation failure.

        """
        self.rule_name = rule_name
        self.pattern = pattern
        super().__init__(f"Invalid pattern for rule '{rule_name}': {reason}")


class ConfigError(PathMapperError):
    """Raised when an explicitly requested config file cannot be used."""
