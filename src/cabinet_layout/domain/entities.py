"""Canonical partition tree.

``PartitionConfig`` and ``BayConfig`` form an explicit recursive value type.
Instances are only produced by the partition normalizer (or built directly by
callers that already hold valid data, such as the built-in defaults), so every
other component can rely on the tree invariants:

- ``len(bays) == count + 1`` at every depth
- nested orientation is perpendicular to the parent orientation
- ``positions_mm`` is non-empty and strictly increasing in positions layout
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any

from .constants import DEFAULT_SHELF_COUNT, MAX_PARTITION_COUNT
from .value_objects import (
    BayMode,
    DoorMode,
    Orientation,
    PartitionLayout,
    PartitionMode,
)

__all__ = [
    "BayConfig",
    "PartitionConfig",
    "default_partition_config",
]


@dataclass(frozen=True)
class BayConfig:
    """One bay of a partition node.

    Attributes:
        mode: Leaf (fronts and shelves) or further subdivided.
        shelf_count: Requested number of shelves for a leaf bay.
        door_mode: Requested front for a leaf bay.
        subpartitions: Nested partition node, present only for
            ``BayMode.SUBPARTITIONS``.
        extras: Raw keys the engine does not interpret, preserved verbatim so
            a round trip does not drop caller extensions.
    """

    mode: BayMode = BayMode.FRONTS_SHELVES
    shelf_count: int = DEFAULT_SHELF_COUNT
    door_mode: DoorMode = DoorMode.DOORS_DOUBLE
    subpartitions: PartitionConfig | None = None
    extras: dict[str, Any] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        if self.shelf_count < 0:
            raise ValueError("Shelf count cannot be negative")
        if self.mode is BayMode.SUBPARTITIONS and self.subpartitions is None:
            raise ValueError("Sub-partition bays require a nested partition node")
        if self.mode is BayMode.FRONTS_SHELVES and self.subpartitions is not None:
            raise ValueError("Only sub-partition bays may carry a nested partition node")

    @property
    def is_leaf(self) -> bool:
        """True when the bay holds fronts and shelves."""
        return self.mode is BayMode.FRONTS_SHELVES

    def to_dict(self) -> dict[str, Any]:
        """Canonical mapping form, accepted back by the normalizer."""
        data: dict[str, Any] = {
            "mode": self.mode.value,
            "shelf_count": self.shelf_count,
            "door_mode": self.door_mode.value,
        }
        if self.subpartitions is not None:
            data["subpartitions"] = self.subpartitions.to_dict()
        for key, value in self.extras.items():
            data.setdefault(key, copy.deepcopy(value))
        return data


@dataclass(frozen=True)
class PartitionConfig:
    """A partition node: how one region is split into bays.

    Attributes:
        mode: Whether (and along which axis) this node subdivides.
        count: Number of dividers; the node holds ``count + 1`` bays.
        orientation: Axis along which this node arranges its bays.
        layout: Even spacing or explicit positions.
        positions_mm: Divider faces for positions layout, strictly increasing.
        panel_thickness_mm: Divider thickness override; None falls back to
            the carcass panel thickness.
        bays: Bays in spatial order along the axis.
    """

    mode: PartitionMode = PartitionMode.NONE
    count: int = 0
    orientation: Orientation = Orientation.VERTICAL
    layout: PartitionLayout = PartitionLayout.EVEN
    positions_mm: tuple[float, ...] = ()
    panel_thickness_mm: float | None = None
    bays: tuple[BayConfig, ...] = (BayConfig(),)

    def __post_init__(self) -> None:
        if not 0 <= self.count <= MAX_PARTITION_COUNT:
            raise ValueError(f"Partition count must be between 0 and {MAX_PARTITION_COUNT}")
        if len(self.bays) != self.count + 1:
            raise ValueError(
                f"Partition node with count {self.count} needs {self.count + 1} bays, "
                f"got {len(self.bays)}"
            )
        for bay in self.bays:
            sub = bay.subpartitions
            if sub is not None and sub.orientation is not self.orientation.perpendicular:
                raise ValueError(
                    f"Nested partitions must be {self.orientation.perpendicular.value} "
                    f"under a {self.orientation.value} node"
                )

    @property
    def is_partitioned(self) -> bool:
        """True when the node actually subdivides its region."""
        return self.mode is not PartitionMode.NONE

    def to_dict(self) -> dict[str, Any]:
        """Canonical mapping form, accepted back by the normalizer."""
        return {
            "mode": self.mode.value,
            "count": self.count,
            "orientation": self.orientation.value,
            "layout": self.layout.value,
            "positions_mm": list(self.positions_mm),
            "panel_thickness_mm": self.panel_thickness_mm,
            "bays": [bay.to_dict() for bay in self.bays],
        }


def default_partition_config(
    front: DoorMode = DoorMode.DOORS_DOUBLE,
    shelves: int = DEFAULT_SHELF_COUNT,
    orientation: Orientation = Orientation.VERTICAL,
) -> PartitionConfig:
    """Built-in fallback defaults: an unpartitioned node with one leaf bay.

    Args:
        front: Door mode for the template bay.
        shelves: Shelf count for the template bay.
        orientation: Orientation inherited when the mode is ``none``.

    Returns:
        A valid PartitionConfig usable as normalizer defaults.
    """
    return PartitionConfig(
        mode=PartitionMode.NONE,
        count=0,
        orientation=orientation,
        layout=PartitionLayout.EVEN,
        positions_mm=(),
        panel_thickness_mm=None,
        bays=(BayConfig(shelf_count=shelves, door_mode=front),),
    )
