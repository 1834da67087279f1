"""Configuration module — exports Settings and the YAML config helpers."""

from src.config.loader import (
    build_column_mapping,
    build_summary_columns,
    build_summary_files,
    load_config,
)
from src.config.settings import Settings

__all__ = [
    "Settings",
    "build_column_mapping",
    "build_summary_columns",
    "build_summary_files",
    "load_config",
]
