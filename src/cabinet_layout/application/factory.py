"""Service factory for dependency injection."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cabinet_layout.application.commands import GenerateLayoutCommand
    from cabinet_layout.infrastructure.formatters import (
        JsonExporter,
        LayoutReportFormatter,
    )


@dataclass
class ServiceFactory:
    """Factory for creating service instances.

    The CLI obtains every collaborator here, so tests can swap in a factory
    with stubbed services through ``set_factory``.
    """

    def create_generate_command(self) -> "GenerateLayoutCommand":
        """Create a GenerateLayoutCommand."""
        from cabinet_layout.application.commands import GenerateLayoutCommand

        return GenerateLayoutCommand()

    def get_layout_report_formatter(self) -> "LayoutReportFormatter":
        """Create the text report formatter."""
        from cabinet_layout.infrastructure.formatters import LayoutReportFormatter

        return LayoutReportFormatter()

    def get_json_exporter(self) -> "JsonExporter":
        """Create the JSON exporter."""
        from cabinet_layout.infrastructure.formatters import JsonExporter

        return JsonExporter()


# Default factory instance
_default_factory: ServiceFactory | None = None


def get_factory() -> ServiceFactory:
    """Get the default service factory."""
    global _default_factory
    if _default_factory is None:
        _default_factory = ServiceFactory()
    return _default_factory


def set_factory(factory: ServiceFactory | None) -> None:
    """Set a custom factory (for testing)."""
    global _default_factory
    _default_factory = factory


def reset_factory() -> None:
    """Reset the factory to default (for testing cleanup)."""
    global _default_factory
    _default_factory = None
