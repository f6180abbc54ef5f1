"""Pydantic models for cabinet layout configuration files.

The ``partitions`` block stays a raw mapping: partition trees may be partial,
arbitrarily nested and carry keys from other tools. The domain normalizer
interprets it and reports what it had to repair.
"""

from __future__ import annotations

from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

from cabinet_layout.domain.constants import (
    DEFAULT_DEPTH_MM,
    DEFAULT_HEIGHT_MM,
    DEFAULT_PANEL_THICKNESS_MM,
    DEFAULT_SHELF_COUNT,
    DEFAULT_TOE_KICK_DEPTH_MM,
    DEFAULT_TOE_KICK_HEIGHT_MM,
    DEFAULT_WIDTH_MM,
    MAX_SHELF_COUNT,
    MIN_DOUBLE_LEAF_WIDTH_MM,
    REVEAL_BOTTOM_MM,
    REVEAL_CENTER_MM,
    REVEAL_EDGE_MM,
    REVEAL_TOP_MM,
)
from cabinet_layout.domain.value_objects import DoorMode

# Supported schema versions for configuration files
# Version 1.0: Carcass dimensions, fronts and partition tree
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})


class CabinetConfig(BaseModel):
    """Carcass dimensions and defaults for new bays.

    Attributes:
        width_mm: Outer width (50 to 3000 mm).
        depth_mm: Outer depth (50 to 1200 mm).
        height_mm: Outer height including the toe kick (50 to 3000 mm).
        panel_thickness_mm: Carcass panel thickness (up to 100 mm).
        back_thickness_mm: Back panel thickness; defaults to the panel.
        toe_kick_height_mm: Toe kick height; 0 disables the toe kick.
        toe_kick_depth_mm: Toe kick setback; 0 disables the toe kick.
        shelf_thickness_mm: Shelf thickness; defaults to the panel.
        front: Door mode for bays that do not set one.
        shelves: Shelf count for bays that do not set one (0 to 20).
    """

    model_config = ConfigDict(extra="forbid")

    width_mm: float = Field(default=DEFAULT_WIDTH_MM, ge=50.0, le=3000.0)
    depth_mm: float = Field(default=DEFAULT_DEPTH_MM, ge=50.0, le=1200.0)
    height_mm: float = Field(default=DEFAULT_HEIGHT_MM, ge=50.0, le=3000.0)
    panel_thickness_mm: float = Field(
        default=DEFAULT_PANEL_THICKNESS_MM, gt=0.0, le=100.0
    )
    back_thickness_mm: float | None = Field(default=None, ge=0.0, le=100.0)
    toe_kick_height_mm: float = Field(
        default=DEFAULT_TOE_KICK_HEIGHT_MM, ge=0.0, le=500.0
    )
    toe_kick_depth_mm: float = Field(
        default=DEFAULT_TOE_KICK_DEPTH_MM, ge=0.0, le=500.0
    )
    shelf_thickness_mm: float | None = Field(default=None, gt=0.0, le=100.0)
    front: DoorMode = DoorMode.DOORS_DOUBLE
    shelves: int = Field(
        default=DEFAULT_SHELF_COUNT,
        ge=0,
        le=MAX_SHELF_COUNT,
        description="Default shelf count for new bays",
    )

    @model_validator(mode="after")
    def validate_panel_fits(self) -> "CabinetConfig":
        """Reject panels that leave no interior width."""
        if self.panel_thickness_mm * 2 >= self.width_mm:
            raise ValueError(
                f"panel_thickness_mm ({self.panel_thickness_mm}) must be less than "
                f"half of width_mm ({self.width_mm})"
            )
        return self


class FrontsConfig(BaseModel):
    """Door reveals and the double-door limit."""

    model_config = ConfigDict(extra="forbid")

    edge_reveal_mm: float = Field(default=REVEAL_EDGE_MM, ge=0.0, le=50.0)
    top_reveal_mm: float = Field(default=REVEAL_TOP_MM, ge=0.0, le=50.0)
    bottom_reveal_mm: float = Field(default=REVEAL_BOTTOM_MM, ge=0.0, le=50.0)
    center_gap_mm: float = Field(default=REVEAL_CENTER_MM, ge=0.0, le=50.0)
    min_leaf_width_mm: float = Field(
        default=MIN_DOUBLE_LEAF_WIDTH_MM,
        gt=0.0,
        le=1500.0,
        description="Narrowest leaf a double front may have",
    )


class LayoutConfiguration(BaseModel):
    """Root configuration model for a cabinet layout file.

    Attributes:
        schema_version: Version string in format "major.minor" (e.g., "1.0")
        cabinet: Carcass dimensions and bay defaults
        fronts: Door reveals
        partitions: Raw partition tree, normalized by the layout engine

    Example:
        >>> config = LayoutConfiguration(
        ...     schema_version="1.0",
        ...     cabinet=CabinetConfig(width_mm=900.0),
        ...     partitions={"mode": "vertical", "count": 1},
        ... )
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(..., pattern=r"^\d+\.\d+$")
    cabinet: CabinetConfig = Field(default_factory=CabinetConfig)
    fronts: FrontsConfig = Field(default_factory=FrontsConfig)
    partitions: dict[str, Any] = Field(
        default_factory=dict,
        description="Partition tree; any subset of keys, normalized on use",
    )

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Validate that schema version is supported.

        Newer minor versions within a supported major version are accepted
        for forward compatibility.
        """
        if v in SUPPORTED_VERSIONS:
            return v

        major_version = int(v.split(".")[0])
        supported_majors = {int(sv.split(".")[0]) for sv in SUPPORTED_VERSIONS}
        if major_version in supported_majors:
            return v

        raise ValueError(
            f"Unsupported schema version '{v}'. "
            f"Supported versions: {sorted(SUPPORTED_VERSIONS)}"
        )
