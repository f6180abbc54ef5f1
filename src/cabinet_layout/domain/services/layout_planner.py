"""Whole-cabinet layout planning.

Runs the bay range solver recursively over a canonical partition tree and
plans fronts and shelves for every leaf bay. Vertical nodes split their
rectangle along x, horizontal nodes along z. All coordinates are cabinet
millimeters in the front plane: x from the left outer face, z from the floor.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass, field

from ..constants import (
    DEFAULT_PANEL_THICKNESS_MM,
    DEFAULT_TOE_KICK_DEPTH_MM,
    DEFAULT_TOE_KICK_HEIGHT_MM,
    MIN_DOUBLE_LEAF_WIDTH_MM,
    REVEAL_BOTTOM_MM,
    REVEAL_CENTER_MM,
    REVEAL_EDGE_MM,
    REVEAL_TOP_MM,
)
from ..entities import BayConfig, PartitionConfig
from ..results import FrontPlan, LayoutContractError
from ..value_objects import (
    BayRange,
    DividerPlacement,
    DoorPlacement,
    DoubleDoorValidity,
    Orientation,
    Rect,
    ShelfPlacement,
)
from .bay_range_solver import format_mm, plan_bay_ranges
from .front_planner import check_double_door, plan_fronts
from .shelf_planner import plan_shelves

__all__ = [
    "BayRegion",
    "CabinetDimensions",
    "CabinetLayout",
    "double_door_validity",
    "plan_cabinet_layout",
]


@dataclass(frozen=True)
class CabinetDimensions:
    """Carcass geometry the layout is planned inside.

    Attributes:
        width_mm: Outer width.
        depth_mm: Outer depth.
        height_mm: Outer height, including the toe kick.
        panel_thickness_mm: Side, top and bottom panel thickness.
        back_thickness_mm: Back panel thickness; None uses the panel thickness.
        toe_kick_height_mm: Toe kick height; counts only with a positive depth.
        toe_kick_depth_mm: Toe kick setback.
        shelf_thickness_mm: Shelf thickness; None uses the panel thickness.
        edge_reveal_mm: Gap between a door and its opening edge.
        top_reveal_mm: Gap above doors.
        bottom_reveal_mm: Gap below doors.
        center_gap_mm: Gap between adjacent door leaves.
        min_leaf_width_mm: Narrowest leaf a double front may have.
    """

    width_mm: float
    depth_mm: float
    height_mm: float
    panel_thickness_mm: float = DEFAULT_PANEL_THICKNESS_MM
    back_thickness_mm: float | None = None
    toe_kick_height_mm: float = DEFAULT_TOE_KICK_HEIGHT_MM
    toe_kick_depth_mm: float = DEFAULT_TOE_KICK_DEPTH_MM
    shelf_thickness_mm: float | None = None
    edge_reveal_mm: float = REVEAL_EDGE_MM
    top_reveal_mm: float = REVEAL_TOP_MM
    bottom_reveal_mm: float = REVEAL_BOTTOM_MM
    center_gap_mm: float = REVEAL_CENTER_MM
    min_leaf_width_mm: float = MIN_DOUBLE_LEAF_WIDTH_MM

    def __post_init__(self) -> None:
        for name, value in vars(self).items():
            if value is not None and not math.isfinite(value):
                raise LayoutContractError(f"{name} must be finite, got {value}")

    @property
    def has_toe_kick(self) -> bool:
        return self.toe_kick_height_mm > 0 and self.toe_kick_depth_mm > 0

    @property
    def effective_back_thickness_mm(self) -> float:
        if self.back_thickness_mm is None:
            return self.panel_thickness_mm
        return self.back_thickness_mm

    @property
    def effective_shelf_thickness_mm(self) -> float:
        if self.shelf_thickness_mm is None:
            return self.panel_thickness_mm
        return self.shelf_thickness_mm

    @property
    def interior_bottom_mm(self) -> float:
        """Top face of the bottom panel."""
        toe_kick = self.toe_kick_height_mm if self.has_toe_kick else 0.0
        return toe_kick + self.panel_thickness_mm

    @property
    def interior_depth_mm(self) -> float:
        return self.depth_mm - self.effective_back_thickness_mm

    @property
    def interior_rect(self) -> Rect:
        """Clear opening between the carcass panels."""
        return Rect(
            left=self.panel_thickness_mm,
            right=self.width_mm - self.panel_thickness_mm,
            bottom=self.interior_bottom_mm,
            top=self.height_mm - self.panel_thickness_mm,
        )


@dataclass(frozen=True)
class BayRegion:
    """A placed bay and the rectangle it occupies.

    Attributes:
        path: Index of the bay at every depth, e.g. ``(1, 0)``.
        label: Display label, e.g. ``"Bay 2.1"``.
        rect: Clear rectangle of the bay.
        bay: The bay's configuration.
    """

    path: tuple[int, ...]
    label: str
    rect: Rect
    bay: BayConfig

    @property
    def is_leaf(self) -> bool:
        return self.bay.is_leaf


@dataclass(frozen=True)
class CabinetLayout:
    """Everything planned for one cabinet."""

    dimensions: CabinetDimensions
    bays: tuple[BayRegion, ...] = field(default_factory=tuple)
    dividers: tuple[DividerPlacement, ...] = field(default_factory=tuple)
    fronts: tuple[DoorPlacement, ...] = field(default_factory=tuple)
    shelves: tuple[ShelfPlacement, ...] = field(default_factory=tuple)
    warnings: tuple[str, ...] = field(default_factory=tuple)

    @property
    def leaf_bays(self) -> tuple[BayRegion, ...]:
        return tuple(region for region in self.bays if region.is_leaf)

    def find(self, path: Sequence[int]) -> BayRegion | None:
        """Region at exactly ``path``, or None."""
        target = tuple(path)
        for region in self.bays:
            if region.path == target:
                return region
        return None

    def children(self, path: Sequence[int]) -> list[BayRegion]:
        """Placed bays directly below ``path``; ``()`` gives the top level."""
        parent = tuple(path)
        return [
            region
            for region in self.bays
            if len(region.path) == len(parent) + 1 and region.path[:-1] == parent
        ]

    def bay_at(self, path: Sequence[int]) -> BayRegion | None:
        """Resolve a selection path, clamping every index into range.

        Negative indices select the first bay and indices past the end select
        the last one. The walk stops at the deepest bay the path reaches.

        Returns:
            The selected region, or None when the path is empty or nothing
            was placed.
        """
        current: BayRegion | None = None
        prefix: tuple[int, ...] = ()
        for index in path:
            siblings = self.children(prefix)
            if not siblings:
                break
            current = siblings[min(max(int(index), 0), len(siblings) - 1)]
            prefix = current.path
        return current


def plan_cabinet_layout(config: PartitionConfig, dims: CabinetDimensions) -> CabinetLayout:
    """Plan bays, dividers, fronts and shelves for a whole cabinet.

    Args:
        config: Canonical partition tree (see ``normalize_partitions``).
        dims: Carcass dimensions and front settings.

    Returns:
        CabinetLayout with every placed element and the solver warnings in
        traversal order.

    Raises:
        LayoutContractError: If the carcass leaves a negative interior.
    """
    interior = dims.interior_rect
    if interior.width < 0 or interior.height < 0:
        raise LayoutContractError(
            f"Carcass leaves a negative interior ({format_mm(interior.width)} wide, "
            f"{format_mm(interior.height)} high)"
        )
    planner = _Planner(dims)
    planner.visit(config, interior, path=())
    return planner.finish()


def double_door_validity(
    config: PartitionConfig,
    dims: CabinetDimensions,
    bay_path: Sequence[int] | int,
) -> DoubleDoorValidity:
    """Check whether the leaf bay at ``bay_path`` could take double doors.

    Uses the same bay rectangle and the same reveals the planner would use if
    the bay carried doors.

    Args:
        config: Canonical partition tree.
        dims: Carcass dimensions and front settings.
        bay_path: Bay index, or a path of indices for nested bays.

    Returns:
        DoubleDoorValidity; ``allowed`` is False for unknown paths and for
        bays that are subdivided.
    """
    path = (bay_path,) if isinstance(bay_path, int) else tuple(bay_path)
    layout = plan_cabinet_layout(config, dims)
    region = layout.find(path) if path else None
    if region is None or not region.is_leaf:
        where = ".".join(str(index + 1) for index in path) or "(empty path)"
        return DoubleDoorValidity(
            allowed=False,
            leaf_width_mm=None,
            min_leaf_width_mm=dims.min_leaf_width_mm,
            reason=f"No leaf bay at {where}.",
        )
    return check_double_door(
        region.rect.width,
        edge_reveal_mm=dims.edge_reveal_mm,
        center_gap_mm=dims.center_gap_mm,
        min_leaf_width_mm=dims.min_leaf_width_mm,
    )


def _label(path: tuple[int, ...]) -> str:
    return "Bay " + ".".join(str(index + 1) for index in path)


class _Planner:
    """Accumulates one cabinet's layout during the recursive walk."""

    def __init__(self, dims: CabinetDimensions) -> None:
        self.dims = dims
        self.regions: list[BayRegion] = []
        self.dividers: list[DividerPlacement] = []
        self.warnings: list[str] = []

    def visit(self, node: PartitionConfig, rect: Rect, path: tuple[int, ...]) -> None:
        orientation = node.orientation
        start, end = rect.span(orientation)
        plan = plan_bay_ranges(node, start, end, self.dims.panel_thickness_mm)
        prefix = f"{_label(path)}: " if path else ""
        self.warnings.extend(prefix + message for message in plan.warnings)

        if orientation is Orientation.VERTICAL:
            across = (rect.bottom, rect.top)
        else:
            across = (rect.left, rect.right)
        for number, face in enumerate(plan.divider_faces_mm, start=1):
            name = ".".join([str(index + 1) for index in path] + [str(number)])
            self.dividers.append(
                DividerPlacement(
                    name=f"Partition {name}",
                    orientation=orientation,
                    face_mm=face,
                    thickness_mm=plan.divider_thickness_mm,
                    span_start_mm=across[0],
                    span_end_mm=across[1],
                )
            )

        ranges = plan.ranges
        for missing in range(len(ranges), len(node.bays)):
            self.warnings.append(
                f"Omitted {_label(path + (missing,))} because the partition layout left no room for it."
            )

        for bay_range in ranges:
            bay = node.bays[bay_range.index]
            child_path = path + (bay_range.index,)
            self.regions.append(
                BayRegion(
                    path=child_path,
                    label=_label(child_path),
                    rect=rect.slice(orientation, bay_range.start_mm, bay_range.end_mm),
                    bay=bay,
                )
            )
            if bay.subpartitions is not None:
                self.visit(bay.subpartitions, self.regions[-1].rect, child_path)

    def finish(self) -> CabinetLayout:
        leaves = [region for region in self.regions if region.is_leaf]
        total = len(leaves)
        fronts: list[DoorPlacement] = []
        shelves: list[ShelfPlacement] = []
        for ordinal, region in enumerate(leaves):
            front_plan = self._plan_fronts(region, ordinal, total)
            fronts.extend(front_plan.placements)
            self.warnings.extend(front_plan.warnings)

            shelf_plan = plan_shelves(
                region.bay.shelf_count,
                region.rect.height,
                self.dims.effective_shelf_thickness_mm,
                [
                    BayRange(
                        index=ordinal,
                        start_mm=region.rect.left,
                        end_mm=region.rect.right,
                        label=region.label,
                    )
                ],
                self.dims.interior_depth_mm,
                interior_bottom_z_mm=region.rect.bottom,
                total_bays=total,
            )
            shelves.extend(shelf_plan.placements)
            prefix = f"{region.label}: " if total > 1 else ""
            self.warnings.extend(prefix + message for message in shelf_plan.warnings)

        return CabinetLayout(
            dimensions=self.dims,
            bays=tuple(self.regions),
            dividers=tuple(self.dividers),
            fronts=tuple(fronts),
            shelves=tuple(shelves),
            warnings=tuple(self.warnings),
        )

    def _plan_fronts(self, region: BayRegion, ordinal: int, total: int) -> FrontPlan:
        return plan_fronts(
            region.bay.door_mode,
            region.rect.width,
            region.rect.height,
            self.dims.edge_reveal_mm,
            self.dims.top_reveal_mm,
            self.dims.bottom_reveal_mm,
            self.dims.center_gap_mm,
            bay_index=ordinal,
            bay_label=region.label,
            total_bays=total,
            origin_x_mm=region.rect.left,
            origin_z_mm=region.rect.bottom,
        )
