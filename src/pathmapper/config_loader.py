"""Configuration loader for pathmapper."""

import tomllib
from pathlib import Path
from typing import TYPE_CHECKING

from pydantic import BaseModel, Field, ValidationError

from pathmapper.errors import ConfigError
from pathmapper.extra_mapper import ExtraPathMapper, PrefixPathMapper, PrefixRewrite
from pathmapper.log import get_logger

if TYPE_CHECKING:
    from pathmapper.args import Args

logger = get_logger(__name__)

CONFIG_DIR = ".pathmapper"
CONFIG_FILE = "config.toml"


class PrefixConfig(BaseModel):
    """A single ``[[prefix]]`` table."""

    prefix: str = Field(min_length=1)
    replacement: str = Field(min_length=1)


class PathMapperConfig(BaseModel):
    """Contents of a pathmapper config file."""

    prefix: list[PrefixConfig] = Field(default_factory=list)

    @property
    def rewrites(self) -> list[PrefixRewrite]:
        """Get the configured prefix rewrites in file order."""
        return [PrefixRewrite(entry.prefix, entry.replacement) for entry in self.prefix]


def read_config(config_path: Path) -> PathMapperConfig:
    """Read and validate a config file.

    Args:
        config_path: Path to the TOML file.

    Returns:
        The validated configuration.

    Raises:
        ConfigError: If the file cannot be read, parsed or validated.

    """
    try:
        with config_path.open("rb") as f:
            data = tomllib.load(f)
        return PathMapperConfig.model_validate(data)
    except (OSError, tomllib.TOMLDecodeError, ValidationError) as e:
        msg = f"Failed to load config from {config_path}: {e}"
        raise ConfigError(msg) from e


def load_config(args: "Args") -> PathMapperConfig:
    """Load configuration with priority: CLI > local > global.

    Args:
        args: Parsed command line arguments

    Returns:
        The first configuration that loads, or an empty one.

    Raises:
        ConfigError: If the config file given on the command line is unusable.

    """
    # Priority 1: Command line argument
    if args.config:
        return read_config(args.config)

    if args.no_config:
        return PathMapperConfig()

    # Priority 2: Local configuration, then priority 3: global configuration
    for config_path in (
        args.working_dir / CONFIG_DIR / CONFIG_FILE,
        Path.home() / CONFIG_DIR / CONFIG_FILE,
    ):
        if not config_path.exists():
            continue
        try:
            config = read_config(config_path)
        except ConfigError as e:
            logger.debug("Skipping config: %s", e)
            continue
        logger.debug("Loaded config from %s", config_path)
        return config

    return PathMapperConfig()


def build_extra_mapper(config: PathMapperConfig) -> ExtraPathMapper | None:
    """Create the extra mapper described by a configuration.

    Args:
        config: Loaded configuration.

    Returns:
        A PrefixPathMapper if any prefixes are configured, otherwise None.

    """
    if not config.prefix:
        return None
    return PrefixPathMapper(config.rewrites)
