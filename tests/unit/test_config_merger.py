"""Unit tests for configuration merger and adapter.

These tests verify:
- CLI args override config values when provided
- CLI args are ignored when None
- Merged config leaves the input untouched
- Adapter correctly converts config to domain inputs
"""

import pytest
from pydantic import ValidationError

from cabinet_layout.application.config import (
    CabinetConfig,
    FrontsConfig,
    LayoutConfiguration,
    config_to_defaults,
    config_to_dimensions,
    merge_config_with_cli,
)
from cabinet_layout.domain.value_objects import DoorMode, PartitionMode


class TestMergeConfigWithCli:
    """Tests for merge_config_with_cli function."""

    @pytest.fixture
    def base_config(self) -> LayoutConfiguration:
        """Create a base configuration for testing."""
        return LayoutConfiguration(
            schema_version="1.0",
            cabinet=CabinetConfig(width_mm=800.0, height_mm=720.0, depth_mm=560.0, shelves=3),
            partitions={"mode": "vertical", "count": 1},
        )

    def test_no_overrides_returns_equivalent_config(
        self, base_config: LayoutConfiguration
    ) -> None:
        merged = merge_config_with_cli(base_config)
        assert merged == base_config
        assert merged is not base_config

    def test_width_override(self, base_config: LayoutConfiguration) -> None:
        merged = merge_config_with_cli(base_config, width=900.0)
        assert merged.cabinet.width_mm == 900.0
        assert merged.cabinet.height_mm == 720.0

    def test_all_overrides(self, base_config: LayoutConfiguration) -> None:
        merged = merge_config_with_cli(
            base_config,
            width=1000.0,
            height=900.0,
            depth=600.0,
            panel_thickness=19.0,
            shelves=4,
        )
        assert merged.cabinet.width_mm == 1000.0
        assert merged.cabinet.height_mm == 900.0
        assert merged.cabinet.depth_mm == 600.0
        assert merged.cabinet.panel_thickness_mm == 19.0
        assert merged.cabinet.shelves == 4

    def test_input_is_unchanged(self, base_config: LayoutConfiguration) -> None:
        merged = merge_config_with_cli(base_config, width=900.0)
        merged.partitions["count"] = 5
        assert base_config.cabinet.width_mm == 800.0
        assert base_config.partitions["count"] == 1

    def test_invalid_override_raises(self, base_config: LayoutConfiguration) -> None:
        with pytest.raises(ValidationError):
            merge_config_with_cli(base_config, width=10.0)


class TestConfigAdapter:
    """Tests for config_to_dimensions and config_to_defaults."""

    def test_dimensions(self) -> None:
        config = LayoutConfiguration(
            schema_version="1.0",
            cabinet=CabinetConfig(
                width_mm=900.0,
                depth_mm=560.0,
                height_mm=800.0,
                panel_thickness_mm=19.0,
                back_thickness_mm=6.0,
                toe_kick_height_mm=0.0,
            ),
            fronts=FrontsConfig(edge_reveal_mm=3.0, center_gap_mm=4.0, min_leaf_width_mm=120.0),
        )
        dims = config_to_dimensions(config)
        assert dims.width_mm == 900.0
        assert dims.panel_thickness_mm == 19.0
        assert dims.interior_depth_mm == pytest.approx(554.0)
        assert dims.interior_bottom_mm == pytest.approx(19.0)
        assert dims.edge_reveal_mm == 3.0
        assert dims.center_gap_mm == 4.0
        assert dims.min_leaf_width_mm == 120.0

    def test_defaults_follow_cabinet_settings(self) -> None:
        config = LayoutConfiguration(
            schema_version="1.0",
            cabinet=CabinetConfig(front=DoorMode.EMPTY, shelves=5),
        )
        defaults = config_to_defaults(config)
        assert defaults.mode is PartitionMode.NONE
        assert defaults.bays[0].door_mode is DoorMode.EMPTY
        assert defaults.bays[0].shelf_count == 5
