"""CLI command implementations for the cabinet-layout application.

This package contains subcommands for the cabinet-layout CLI, including:
- validate: Validate a layout configuration file
"""

from cabinet_layout.cli.commands.validate import display_load_error, validate_command

__all__ = ["display_load_error", "validate_command"]
