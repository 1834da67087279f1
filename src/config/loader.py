"""YAML configuration loader.

Configuration comes from two places:

  1. config/config.yaml  -- spreadsheet layout: column headers and
                            summary file names
  2. Settings            -- runtime values (paths, limits, host, log level)
                            from environment variables and ``.env``

load_config() reads the YAML layer only; runtime values are read from
Settings directly.  The ``build_*`` helpers turn the YAML dict into the
typed objects the services take.
"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from src.models.columns import ColumnMapping, SummaryColumns
from src.models.summary import DEFAULT_SUMMARY_FILES, SummaryKind
from src.utils.errors import ConfigurationError


def load_config(path: str = "config/config.yaml") -> dict[str, Any]:
    """Load the YAML layout configuration.

    Args:
        path: Path to the YAML configuration file.  A missing file yields
              an empty dict, so every builder falls back to its defaults.

    Returns:
        The parsed configuration dictionary.
    """
    config_path = Path(path)
    if not config_path.exists():
        return {}

    with open(config_path, encoding="utf-8") as f:
        try:
            config = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ConfigurationError(
                message=f"Invalid YAML: {exc}", source=str(config_path)
            ) from exc

    if not isinstance(config, dict):
        raise ConfigurationError(
            message="Top level of the config file must be a mapping",
            source=str(config_path),
        )
    return config


def build_column_mapping(config: dict[str, Any]) -> ColumnMapping:
    """Build the release-workbook ColumnMapping from the ``columns`` section."""
    section = config.get("columns") or {}
    try:
        return ColumnMapping(**section)
    except (TypeError, ValidationError) as exc:
        raise ConfigurationError(message=f"Invalid columns section: {exc}") from exc


def build_summary_columns(config: dict[str, Any]) -> SummaryColumns:
    section = (config.get("summary") or {}).get("columns") or {}
    try:
        return SummaryColumns(**section)
    except (TypeError, ValidationError) as exc:
        raise ConfigurationError(message=f"Invalid summary.columns section: {exc}") from exc


def build_summary_files(config: dict[str, Any]) -> dict[SummaryKind, str]:
    """Merge ``summary.files`` over the default kind -> file name table."""
    files = dict(DEFAULT_SUMMARY_FILES)
    section = (config.get("summary") or {}).get("files") or {}
    for kind, file_name in section.items():
        try:
            files[SummaryKind(kind)] = str(file_name)
        except ValueError as exc:
            raise ConfigurationError(message=f"Unknown summary kind in config: {kind}") from exc
    return files
