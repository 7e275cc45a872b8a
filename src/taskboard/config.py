"""Configuration loading for Taskboard."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from taskboard.board import (
    DEFAULT_COLUMN_DEFINITIONS,
    ColumnDefinition,
    parse_quick_column_setup,
)

CONFIG_FILE_NAME = "taskboard.yaml"


class ConfigError(Exception):
    """Raised when configuration is invalid or missing."""


@dataclass
class LoggingConfig:
    """Logging settings. None defers to environment variables and defaults."""

    dir: str | None = None
    level: str | None = None
    console: bool = True


@dataclass
class BoardConfig:
    """Board configuration.

    Column definitions are fixed for the life of a board.
    """

    columns: tuple[ColumnDefinition, ...] = DEFAULT_COLUMN_DEFINITIONS
    use_fallback_data: bool = False
    database: str = "taskboard.db"
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> BoardConfig:
        """Create config from dictionary.

        `columns` takes precedence over `quick_setup`; with neither, the
        default columns are used.

        Args:
            data: Configuration dictionary from YAML.

        Returns:
            Parsed configuration object.

        Raises:
            ConfigError: If column definitions are invalid.
        """
        if data.get("columns"):
            columns = tuple(_parse_column(raw) for raw in data["columns"])
        elif data.get("quick_setup"):
            columns = tuple(parse_quick_column_setup(str(data["quick_setup"])))
        else:
            columns = DEFAULT_COLUMN_DEFINITIONS

        ids = [column.id for column in columns]
        duplicates = sorted({cid for cid in ids if ids.count(cid) > 1})
        if duplicates:
            raise ConfigError(f"Duplicate column ids: {', '.join(duplicates)}")
        if not columns:
            raise ConfigError("At least one column is required")

        logging_data = data.get("logging") or {}
        logging_config = LoggingConfig(
            dir=logging_data.get("dir"),
            level=logging_data.get("level"),
            console=bool(logging_data.get("console", True)),
        )

        return cls(
            columns=columns,
            use_fallback_data=bool(data.get("use_fallback_data", False)),
            database=str(data.get("database", "taskboard.db")),
            logging=logging_config,
        )


def _parse_column(raw: Any) -> ColumnDefinition:
    if not isinstance(raw, dict):
        raise ConfigError(f"Column entry must be a mapping, got {type(raw).__name__}")
    if not raw.get("id"):
        raise ConfigError(f"Column entry missing id: {raw}")

    status_values = raw.get("status_values") or []
    if isinstance(status_values, str):
        status_values = [status_values]

    return ColumnDefinition(
        id=str(raw["id"]),
        title=str(raw.get("title", raw["id"])),
        status_values=tuple(str(value) for value in status_values),
        color=raw.get("color"),
    )


def load_config(config_path: Path | str | None = None) -> BoardConfig:
    """Load board configuration from a YAML file.

    Args:
        config_path: Path to taskboard.yaml. When None, ./taskboard.yaml is
            used if present, otherwise defaults.

    Returns:
        Parsed configuration object.

    Raises:
        ConfigError: If an explicitly given file doesn't exist or any file is invalid.
    """
    if config_path is None:
        config_path = Path.cwd() / CONFIG_FILE_NAME
        if not config_path.exists():
            return BoardConfig()
    config_path = Path(config_path)

    if not config_path.exists():
        raise ConfigError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Configuration must be a YAML mapping, got {type(data).__name__}")

    return BoardConfig.from_dict(data)
