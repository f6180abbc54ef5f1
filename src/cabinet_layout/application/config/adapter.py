"""Convert validated configuration models into domain inputs."""

from __future__ import annotations

from cabinet_layout.application.config.schema import LayoutConfiguration
from cabinet_layout.domain.entities import PartitionConfig, default_partition_config
from cabinet_layout.domain.services import CabinetDimensions


def config_to_dimensions(config: LayoutConfiguration) -> CabinetDimensions:
    """Build the carcass dimensions the layout planner works inside.

    Args:
        config: A validated LayoutConfiguration instance

    Returns:
        CabinetDimensions combining the cabinet and fronts blocks.
    """
    cabinet = config.cabinet
    fronts = config.fronts
    return CabinetDimensions(
        width_mm=cabinet.width_mm,
        depth_mm=cabinet.depth_mm,
        height_mm=cabinet.height_mm,
        panel_thickness_mm=cabinet.panel_thickness_mm,
        back_thickness_mm=cabinet.back_thickness_mm,
        toe_kick_height_mm=cabinet.toe_kick_height_mm,
        toe_kick_depth_mm=cabinet.toe_kick_depth_mm,
        shelf_thickness_mm=cabinet.shelf_thickness_mm,
        edge_reveal_mm=fronts.edge_reveal_mm,
        top_reveal_mm=fronts.top_reveal_mm,
        bottom_reveal_mm=fronts.bottom_reveal_mm,
        center_gap_mm=fronts.center_gap_mm,
        min_leaf_width_mm=fronts.min_leaf_width_mm,
    )


def config_to_defaults(config: LayoutConfiguration) -> PartitionConfig:
    """Partition defaults built from the cabinet's front and shelf settings."""
    return default_partition_config(
        front=config.cabinet.front,
        shelves=config.cabinet.shelves,
    )
