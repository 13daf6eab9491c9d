"""Configuration loading and management for flamefold.

Configuration sources are merged in priority order:
    1. Defaults (defined in FlameConfig)
    2. Global config (~/.flamefold.toml)
    3. Project config (./flamefold.toml)
    4. Explicit config file
    5. Environment variables (FLAMEFOLD_* prefix)
    6. CLI overrides (passed as kwargs)

Example:
    >>> config = load_config(title="api-server", sort_input=False)
    >>> config.title
    'api-server'
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Literal, Optional, get_type_hints

from .exceptions import ConfigurationError, InvalidConfigError

Verbosity = Literal["quiet", "normal", "verbose"]


@dataclass(frozen=True)
class FlameConfig:
    """Settings for reading collapsed stacks and rendering the flamegraph page.

    Attributes:
        Input handling:
            sort_input: Sort lines by frame path before building.  The
                builder assumes prefix-grouped input; disable only for
                input that is already sorted.
            skip_comments: Ignore lines starting with ``#``

        Page rendering:
            title: Page title and heading
            width: Flamegraph width in pixels
            cell_height: Height of one frame row in pixels
            min_frame_size: Frames narrower than this (pixels) are hidden

        Output control:
            verbosity: Logging verbosity level
    """

    # Input handling
    sort_input: bool = True
    skip_comments: bool = True

    # Page rendering
    title: str = "flamefold"
    width: int = 960
    cell_height: int = 18
    min_frame_size: int = 5

    # Output control
    verbosity: Verbosity = "normal"

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if not self.title.strip():
            raise InvalidConfigError("title", self.title, "must not be empty")
        if self.width < 1:
            raise InvalidConfigError("width", self.width, "must be at least 1")
        if self.cell_height < 1:
            raise InvalidConfigError("cell_height", self.cell_height, "must be at least 1")
        if self.min_frame_size < 0:
            raise InvalidConfigError("min_frame_size", self.min_frame_size, "must be non-negative")
        if self.verbosity not in ("quiet", "normal", "verbose"):
            raise InvalidConfigError(
                "verbosity", self.verbosity, "expected quiet, normal or verbose"
            )


def load_config(config_file: Optional[Path] = None, **overrides) -> FlameConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags).  ``None``
            values are ignored so unset CLI options do not mask file values.

    Returns:
        Validated FlameConfig instance

    Raises:
        ConfigurationError: If a config file is invalid or missing
    """
    merged: dict = {}

    global_config = Path.home() / ".flamefold.toml"
    if global_config.exists():
        merged.update(_load_toml_file(global_config))

    project_config = Path.cwd() / "flamefold.toml"
    if project_config.exists():
        merged.update(_load_toml_file(project_config))

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        merged.update(_load_toml_file(config_file))

    merged.update(_load_env_vars())

    # Convert verbosity boolean flags to string
    if overrides.pop("verbose", False):
        overrides["verbosity"] = "verbose"
    if overrides.pop("quiet", False):
        overrides["verbosity"] = "quiet"

    merged.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return FlameConfig(**merged)
    except TypeError as e:
        # Unknown field in config
        raise ConfigurationError(f"Invalid configuration: {e}")


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from FLAMEFOLD_* environment variables.

    Supported environment variables:
        FLAMEFOLD_SORT_INPUT: bool (true/false/1/0)
        FLAMEFOLD_SKIP_COMMENTS: bool
        FLAMEFOLD_TITLE: str
        FLAMEFOLD_WIDTH: int
        FLAMEFOLD_CELL_HEIGHT: int
        FLAMEFOLD_MIN_FRAME_SIZE: int
        FLAMEFOLD_VERBOSITY: quiet/normal/verbose
    """
    type_hints = get_type_hints(FlameConfig)

    result: dict[str, Any] = {}

    for field_name in FlameConfig.__dataclass_fields__:
        env_key = f"FLAMEFOLD_{field_name.upper()}"
        env_value = os.environ.get(env_key)

        if env_value is None:
            continue

        try:
            result[field_name] = _parse_env_value(env_value, type_hints[field_name])
        except ValueError as e:
            raise InvalidConfigError(env_key, env_value, str(e))

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse an environment variable string to the field's type.

    Raises:
        ValueError: If value can't be parsed to expected type
    """
    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        elif lower in ("false", "0", "no", "off"):
            return False
        else:
            raise ValueError(f"expected true/false, got '{value}'")

    if type_hint is int:
        return int(value)

    # String (including Literal types like Verbosity)
    return value


def _load_toml_file(path: Path) -> dict:
    """Load TOML file and return parsed dict.

    Raises:
        ConfigurationError: If the file cannot be read or parsed
    """
    try:
        # Python 3.11+ has tomllib in stdlib
        import tomllib
    except ModuleNotFoundError:
        # Fallback to tomli for Python 3.9-3.10
        import tomli as tomllib  # type: ignore

    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigurationError(f"Invalid config file '{path}': {e}")
