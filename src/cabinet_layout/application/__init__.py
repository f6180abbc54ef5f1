"""Application layer - use cases and orchestration."""

from .commands import GenerateLayoutCommand, validate_dimensions
from .dtos import LayoutOutput
from .factory import ServiceFactory, get_factory, reset_factory, set_factory

__all__ = [
    "GenerateLayoutCommand",
    "LayoutOutput",
    "ServiceFactory",
    "get_factory",
    "reset_factory",
    "set_factory",
    "validate_dimensions",
]
