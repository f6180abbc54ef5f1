"""Configuration schema and loading for cabinet layout files.

Public API:
    - LayoutConfiguration: Root configuration model
    - CabinetConfig: Carcass dimensions and bay defaults
    - FrontsConfig: Door reveals and double-door limit
    - load_config: Load configuration from a JSON file
    - load_config_from_dict: Load configuration from a dictionary
    - ConfigError: Exception for configuration errors
    - merge_config_with_cli: Apply command line overrides
    - config_to_dimensions: Convert config to CabinetDimensions
    - config_to_defaults: Convert config to partition defaults

Example:
    >>> from pathlib import Path
    >>> from cabinet_layout.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("base-cabinet.json"))
    ...     print(f"Cabinet width: {config.cabinet.width_mm} mm")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from cabinet_layout.application.config.adapter import (
    config_to_defaults,
    config_to_dimensions,
)
from cabinet_layout.application.config.loader import (
    ConfigError,
    format_json_path,
    load_config,
    load_config_from_dict,
)
from cabinet_layout.application.config.merger import merge_config_with_cli
from cabinet_layout.application.config.schema import (
    SUPPORTED_VERSIONS,
    CabinetConfig,
    FrontsConfig,
    LayoutConfiguration,
)

__all__ = [
    "CabinetConfig",
    "ConfigError",
    "FrontsConfig",
    "LayoutConfiguration",
    "SUPPORTED_VERSIONS",
    "config_to_defaults",
    "config_to_dimensions",
    "format_json_path",
    "load_config",
    "load_config_from_dict",
    "merge_config_with_cli",
]
