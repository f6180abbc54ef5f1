"""Layout configuration loading.

Reads JSON layout files and validates them against ``LayoutConfiguration``.
Every failure surfaces as a ``ConfigError`` whose ``error_type`` names the
stage that failed, so the CLI can report it without a traceback.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from cabinet_layout.application.config.schema import LayoutConfiguration

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Exception raised for configuration-related errors.

    Attributes:
        message: The primary error message
        error_type: One of file_not_found, permission_denied, file_read_error,
            json_parse or validation
        path: Path to the configuration file (if applicable)
        details: Per-error details (JSON path and message for validation,
            line and column for JSON syntax errors)
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


def format_json_path(loc: tuple[str | int, ...]) -> str:
    """Format a pydantic location tuple as a JSON path.

    Examples:
        >>> format_json_path(("cabinet", "width_mm"))
        'cabinet.width_mm'
        >>> format_json_path(("partitions", "bays", 1, "door_mode"))
        'partitions.bays[1].door_mode'
    """
    path = ""
    for segment in loc:
        if isinstance(segment, int):
            path += f"[{segment}]"
        else:
            path = f"{path}.{segment}" if path else str(segment)
    return path


def _validation_error(error: PydanticValidationError, path: Path | None) -> ConfigError:
    details = [
        {
            "path": format_json_path(err["loc"]),
            "message": err["msg"],
            "value": err.get("input"),
            "error_type": err["type"],
        }
        for err in error.errors()
    ]
    lines = ["Configuration validation failed:"]
    for detail in details:
        suffix = f" (got: {detail['value']!r})" if detail["value"] is not None else ""
        lines.append(f"  - {detail['path']}: {detail['message']}{suffix}")
    return ConfigError(
        message="\n".join(lines),
        error_type="validation",
        path=path,
        details=details,
    )


def _read_json(path: Path) -> Any:
    if not path.exists():
        raise ConfigError(
            message=f"Config file not found: {path}",
            error_type="file_not_found",
            path=path,
        )

    try:
        content = path.read_text(encoding="utf-8")
    except PermissionError:
        raise ConfigError(
            message=f"Permission denied reading config file: {path}",
            error_type="permission_denied",
            path=path,
        )
    except OSError as e:
        raise ConfigError(
            message=f"Error reading config file: {path}: {e}",
            error_type="file_read_error",
            path=path,
        )

    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            message=(
                f"Invalid JSON in config file: {path} "
                f"(line {e.lineno}, column {e.colno}): {e.msg}"
            ),
            error_type="json_parse",
            path=path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        )


def load_config(path: Path) -> LayoutConfiguration:
    """Load and validate a layout configuration from a JSON file.

    Args:
        path: Path to the JSON configuration file

    Returns:
        A validated LayoutConfiguration instance

    Raises:
        ConfigError: If the file cannot be read, parsed or validated.

    Example:
        >>> try:
        ...     config = load_config(Path("base-cabinet.json"))
        ... except ConfigError as e:
        ...     for detail in e.details:
        ...         print(f"{detail['path']}: {detail['message']}")
    """
    logger.debug(f"Loading layout configuration from {path}")
    data = _read_json(path)
    try:
        return LayoutConfiguration.model_validate(data)
    except PydanticValidationError as e:
        raise _validation_error(e, path)


def load_config_from_dict(data: dict[str, Any]) -> LayoutConfiguration:
    """Validate a layout configuration held in memory.

    Raises:
        ConfigError: If the data fails validation.
    """
    try:
        return LayoutConfiguration.model_validate(data)
    except PydanticValidationError as e:
        raise _validation_error(e, None)
