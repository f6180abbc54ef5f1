"""Pytest configuration and shared fixtures for cabinet layout tests."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from cabinet_layout.domain import CabinetDimensions, PartitionConfig, default_partition_config

if TYPE_CHECKING:
    from cabinet_layout.application.commands import GenerateLayoutCommand


FIXTURES_PATH = Path(__file__).parent / "fixtures" / "configs"


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "integration: end-to-end tests through the CLI")


# =============================================================================
# Shared fixtures for command creation
# =============================================================================


@pytest.fixture
def generate_command() -> "GenerateLayoutCommand":
    """Create a GenerateLayoutCommand instance using the factory."""
    from cabinet_layout.application.factory import get_factory

    return get_factory().create_generate_command()


@pytest.fixture
def fixtures_path() -> Path:
    """Directory holding the sample layout files."""
    return FIXTURES_PATH


# =============================================================================
# Domain fixtures
# =============================================================================


@pytest.fixture
def defaults() -> PartitionConfig:
    """Built-in partition defaults: one double-door bay with two shelves."""
    return default_partition_config()


@pytest.fixture
def base_dims() -> CabinetDimensions:
    """A 600 x 600 x 720 mm base cabinet with an 18 mm carcass.

    Interior: x 18..582, z 118..702 (100 mm toe kick), depth 582.
    """
    return CabinetDimensions(width_mm=600.0, depth_mm=600.0, height_mm=720.0)
