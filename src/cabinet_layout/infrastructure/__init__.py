"""Infrastructure layer - output formatting and export."""

from .formatters import JsonExporter, LayoutReportFormatter

__all__ = [
    "JsonExporter",
    "LayoutReportFormatter",
]
