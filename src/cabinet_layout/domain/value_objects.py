"""Value objects for the cabinet layout engine.

Enums use ``(str, Enum)`` so they serialize to JSON without adapters. The
derived placement types are immutable and recomputed on every solve.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class PartitionMode(str, Enum):
    """Whether a partition node subdivides its region, and along which axis.

    Attributes:
        NONE: No subdivision; the node holds a single bay.
        VERTICAL: Vertical dividers split the region along its width.
        HORIZONTAL: Horizontal dividers split the region along its height.
    """

    NONE = "none"
    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"


class Orientation(str, Enum):
    """Axis along which a partition node arranges its own bays."""

    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"

    @property
    def perpendicular(self) -> Orientation:
        """The orientation a nested node under this one must use."""
        if self is Orientation.VERTICAL:
            return Orientation.HORIZONTAL
        return Orientation.VERTICAL

    @property
    def axis(self) -> str:
        """Coordinate axis split by dividers of this orientation."""
        return "x" if self is Orientation.VERTICAL else "z"

    def as_mode(self) -> PartitionMode:
        """Partition mode that subdivides along this orientation."""
        return PartitionMode(self.value)


class PartitionLayout(str, Enum):
    """Strategy for placing dividers inside a partition node.

    Attributes:
        EVEN: Dividers split the span into equal bays.
        POSITIONS: Dividers sit at explicit millimeter offsets.
    """

    EVEN = "even"
    POSITIONS = "positions"


class BayMode(str, Enum):
    """Whether a bay is a leaf or is subdivided again."""

    FRONTS_SHELVES = "fronts_shelves"
    SUBPARTITIONS = "subpartitions"


class DoorMode(str, Enum):
    """Front configuration of a leaf bay.

    Attributes:
        NONE: No front handling requested.
        EMPTY: Open bay, explicitly without doors.
        DOORS_LEFT: Single door hinged on the left.
        DOORS_RIGHT: Single door hinged on the right.
        DOORS_DOUBLE: Pair of doors meeting at a center gap.
    """

    NONE = "none"
    EMPTY = "empty"
    DOORS_LEFT = "doors_left"
    DOORS_RIGHT = "doors_right"
    DOORS_DOUBLE = "doors_double"

    @property
    def has_doors(self) -> bool:
        """True when the mode produces at least one door leaf."""
        return self in (DoorMode.DOORS_LEFT, DoorMode.DOORS_RIGHT, DoorMode.DOORS_DOUBLE)


@dataclass(frozen=True)
class BayRange:
    """Resolved 1-D footprint of one bay along its partition axis.

    Attributes:
        index: Position of the bay among its siblings (0-based).
        start_mm: Lower bound along the axis.
        end_mm: Upper bound along the axis.
        axis: ``"x"`` for bays between vertical dividers, ``"z"`` for bays
            stacked between horizontal dividers.
        label: Optional display label used when naming placements.
    """

    index: int
    start_mm: float
    end_mm: float
    axis: str = "x"
    label: str | None = None

    def __post_init__(self) -> None:
        if self.index < 0:
            raise ValueError("Bay index must be non-negative")
        if self.end_mm < self.start_mm:
            raise ValueError("Bay range end must not precede its start")
        if self.axis not in ("x", "z"):
            raise ValueError(f"axis must be 'x' or 'z', got '{self.axis}'")

    @property
    def width_mm(self) -> float:
        """Extent of the bay along its axis."""
        return self.end_mm - self.start_mm

    @property
    def display_label(self) -> str:
        """Label used in placement names."""
        return self.label or f"Bay {self.index + 1}"


@dataclass(frozen=True)
class DoorPlacement:
    """A planned door leaf, in cabinet millimeters."""

    name: str
    bay_index: int
    x_start_mm: float
    width_mm: float
    height_mm: float
    bottom_z_mm: float


@dataclass(frozen=True)
class ShelfPlacement:
    """A planned shelf, in cabinet millimeters.

    Attributes:
        name: Display name, unique per bay when the cabinet has several bays.
        bay_index: Index of the bay range the shelf spans.
        width_mm: Shelf width (the bay width).
        depth_mm: Shelf depth after front setback and rear clearance.
        top_z_mm: Height of the shelf's top face.
        x_start_mm: Left edge of the shelf.
        thickness_mm: Shelf material thickness.
        front_offset_mm: Setback of the shelf front from the carcass front.
    """

    name: str
    bay_index: int
    width_mm: float
    depth_mm: float
    top_z_mm: float
    x_start_mm: float
    thickness_mm: float
    front_offset_mm: float

    @property
    def bottom_z_mm(self) -> float:
        """Height of the shelf's bottom face."""
        return self.top_z_mm - self.thickness_mm


@dataclass(frozen=True)
class DoubleDoorValidity:
    """Outcome of the double-door pre-check for one bay.

    Attributes:
        allowed: Whether a double front fits the bay.
        leaf_width_mm: Width each leaf would get, None when the bay could not
            be resolved at all.
        min_leaf_width_mm: Minimum leaf width the check enforced.
        reason: Human-readable explanation when not allowed.
    """

    allowed: bool
    leaf_width_mm: float | None
    min_leaf_width_mm: float
    reason: str | None = None


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle in the cabinet front plane (x across, z up)."""

    left: float
    right: float
    bottom: float
    top: float

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.top - self.bottom

    def span(self, orientation: Orientation) -> tuple[float, float]:
        """Bounds of the rectangle along the axis split by ``orientation``."""
        if orientation is Orientation.VERTICAL:
            return self.left, self.right
        return self.bottom, self.top

    def slice(self, orientation: Orientation, start: float, end: float) -> Rect:
        """Sub-rectangle between ``start`` and ``end`` along the split axis."""
        if orientation is Orientation.VERTICAL:
            return Rect(left=start, right=end, bottom=self.bottom, top=self.top)
        return Rect(left=self.left, right=self.right, bottom=start, top=end)


@dataclass(frozen=True)
class DividerPlacement:
    """A planned divider panel between two sibling bays.

    Attributes:
        name: Display name, e.g. ``"Partition 1"`` or ``"Partition 2.1"``.
        orientation: Vertical dividers split x, horizontal dividers split z.
        face_mm: Lower face of the divider along its split axis (the left
            face for vertical dividers, the bottom face for horizontal ones).
        thickness_mm: Divider thickness.
        span_start_mm: Start of the divider along the other axis.
        span_end_mm: End of the divider along the other axis.
    """

    name: str
    orientation: Orientation
    face_mm: float
    thickness_mm: float
    span_start_mm: float
    span_end_mm: float
