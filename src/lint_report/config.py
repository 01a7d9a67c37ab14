"""Configuration loading and management for lint-report.

Configuration sources are merged in priority order:
    1. Defaults (defined in ReportConfig)
    2. Global config (~/.lint-report.toml)
    3. Project config (./lint-report.toml)
    4. Explicit config file
    5. Environment variables (LINT_REPORT_* prefix)
    6. CLI overrides (passed as kwargs)

Example:
    >>> config = load_config(color=False, verbose=True)
    >>> config.verbosity
    'verbose'
    >>> config.color
    False
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Literal, Optional, get_type_hints

from .exceptions import ConfigurationError, InvalidConfigError

Verbosity = Literal["quiet", "normal", "verbose"]

VERBOSITY_LEVELS = ("quiet", "normal", "verbose")

ENV_PREFIX = "LINT_REPORT_"
CONFIG_FILENAME = "lint-report.toml"


@dataclass(frozen=True)
class ReportConfig:
    """Configuration for report rendering.

    Attributes:
        color: Force color on (True) or off (False); None detects it from
            the output terminal
        formatter: Name of the registered formatter to use
        verbosity: Logging verbosity level
    """

    color: Optional[bool] = None
    formatter: str = "stylish"
    verbosity: Verbosity = "normal"

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.color is not None and not isinstance(self.color, bool):
            raise InvalidConfigError("color", self.color, "expected true, false or unset")
        if not isinstance(self.formatter, str) or not self.formatter:
            raise InvalidConfigError("formatter", self.formatter, "expected a formatter name")
        if self.verbosity not in VERBOSITY_LEVELS:
            raise InvalidConfigError(
                "verbosity", self.verbosity, f"expected one of {', '.join(VERBOSITY_LEVELS)}"
            )


def load_config(config_file: Optional[Path] = None, **overrides) -> ReportConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags). ``verbose``
            and ``quiet`` booleans are folded into ``verbosity``; a value of
            None means "not given" and is ignored.

    Returns:
        Validated ReportConfig instance

    Raises:
        ConfigurationError: If a config file is missing or unreadable
        InvalidConfigError: If a value is invalid
    """
    merged: dict = {}

    # 1. Global config
    global_config = Path.home() / f".{CONFIG_FILENAME}"
    if global_config.exists():
        merged.update(_load_toml_file(global_config))

    # 2. Project config
    project_config = Path.cwd() / CONFIG_FILENAME
    if project_config.exists():
        merged.update(_load_toml_file(project_config))

    # 3. Explicit config file
    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(
                f"Config file not found: {config_file}", details={"path": str(config_file)}
            )
        merged.update(_load_toml_file(config_file))

    # 4. Environment variables
    merged.update(_load_env_vars())

    # 5. CLI overrides
    if overrides.pop("verbose", False):
        overrides["verbosity"] = "verbose"
    if overrides.pop("quiet", False):
        overrides["verbosity"] = "quiet"
    merged.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return ReportConfig(**merged)
    except TypeError as e:
        # Unknown field in config
        raise ConfigurationError(f"Invalid configuration: {e}")


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from LINT_REPORT_* environment variables.

    Supported environment variables:
        LINT_REPORT_COLOR: true/false, or auto to detect
        LINT_REPORT_FORMATTER: formatter name
        LINT_REPORT_VERBOSITY: quiet/normal/verbose

    Returns:
        Dict of field_name -> parsed_value for any LINT_REPORT_* vars found.
    """
    type_hints = get_type_hints(ReportConfig)

    result: dict[str, Any] = {}

    for field_name in ReportConfig.__dataclass_fields__:
        env_key = f"{ENV_PREFIX}{field_name.upper()}"
        env_value = os.environ.get(env_key)

        if env_value is None:
            continue

        type_hint = type_hints.get(field_name)
        if type_hint is None:
            continue

        try:
            result[field_name] = _parse_env_value(env_value, type_hint)
        except ValueError as e:
            raise InvalidConfigError(field_name, env_value, f"{env_key}: {e}")

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse environment variable string to the correct type.

    Raises:
        ValueError: If value can't be parsed to expected type
    """
    # Optional[X] is Union[X, None]; "auto" leaves it unset
    args = getattr(type_hint, "__args__", ())
    if type(None) in args:
        if value.lower() in ("", "auto"):
            return None
        non_none_types = [t for t in args if t is not type(None)]
        if non_none_types:
            type_hint = non_none_types[0]

    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        elif lower in ("false", "0", "no", "off"):
            return False
        else:
            raise ValueError(f"expected true/false, got '{value}'")

    # String (including Literal types like Verbosity)
    return value


def _load_toml_file(path: Path) -> dict:
    """Load TOML file and return parsed dict.

    The report settings may live at top level or under a ``[lint-report]``
    table.

    Raises:
        ConfigurationError: If the file can't be read or parsed
    """
    try:
        # Python 3.11+ has tomllib in stdlib
        import tomllib
    except ModuleNotFoundError:
        # Fallback to tomli for Python 3.10
        import tomli as tomllib  # type: ignore

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigurationError(f"Invalid config file '{path}': {e}", details={"path": str(path)})

    section = data.get("lint-report")
    if isinstance(section, dict):
        return section
    return data
