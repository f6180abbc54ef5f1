"""Shelf placement.

Shelves are spaced evenly in a bay's clear height. When the requested count
leaves less than ``MIN_VERTICAL_GAP_MM`` between shelves, the count is
reduced one at a time until the gap fits or no shelf is left.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from ..constants import (
    EPSILON_MM,
    FRONT_SETBACK_MM,
    MIN_BAY_WIDTH_MM,
    MIN_DEPTH_MM,
    MIN_VERTICAL_GAP_MM,
    REAR_CLEARANCE_MM,
)
from ..results import LayoutContractError, ShelfPlan
from ..value_objects import BayRange, ShelfPlacement
from .bay_range_solver import format_mm

__all__ = ["plan_shelves", "resolve_shelf_gap", "shelf_name"]


def shelf_name(bay: BayRange, total_bays: int) -> str:
    if total_bays <= 1:
        return "Shelf"
    return f"Shelf ({bay.display_label})"


def resolve_shelf_gap(
    requested_count: int, clear_height_mm: float, shelf_thickness_mm: float
) -> tuple[int, float]:
    """Find the largest shelf count whose spacing meets the minimum gap.

    Args:
        requested_count: Shelves asked for.
        clear_height_mm: Clear height of the bay.
        shelf_thickness_mm: Shelf material thickness.

    Returns:
        ``(count, gap_mm)``; ``(0, 0.0)`` when no shelf fits.
    """
    count = max(int(requested_count), 0)
    while count > 0:
        remaining = clear_height_mm - shelf_thickness_mm * count
        if remaining <= EPSILON_MM:
            count -= 1
            continue
        gap = remaining / (count + 1)
        if gap >= MIN_VERTICAL_GAP_MM:
            return count, gap
        count -= 1
    return 0, 0.0


def plan_shelves(
    requested_count: int,
    clear_height_mm: float,
    shelf_thickness_mm: float,
    bay_ranges: Sequence[BayRange],
    interior_depth_mm: float,
    *,
    interior_bottom_z_mm: float = 0.0,
    total_bays: int | None = None,
) -> ShelfPlan:
    """Plan shelves for one or more bays sharing the same clear height.

    Args:
        requested_count: Shelves requested per bay.
        clear_height_mm: Clear height of the bays.
        shelf_thickness_mm: Shelf material thickness.
        bay_ranges: Bay ranges (x axis) receiving the shelves.
        interior_depth_mm: Interior depth of the carcass.
        interior_bottom_z_mm: Height of the bays' floor.
        total_bays: Bay count used for naming; defaults to ``len(bay_ranges)``.

    Returns:
        ShelfPlan with placements bay by bay, bottom up.

    Raises:
        LayoutContractError: If any length is not finite.

    Example:
        >>> plan = plan_shelves(10, 200.0, 18.0, [BayRange(0, 0.0, 500.0)], 560.0)
        >>> plan.shelf_count
        4
    """
    for name, value in (
        ("clear_height_mm", clear_height_mm),
        ("shelf_thickness_mm", shelf_thickness_mm),
        ("interior_depth_mm", interior_depth_mm),
        ("interior_bottom_z_mm", interior_bottom_z_mm),
    ):
        if not math.isfinite(value):
            raise LayoutContractError(f"{name} must be finite, got {value}")

    requested = max(int(requested_count), 0)
    if requested == 0:
        return ShelfPlan()
    if shelf_thickness_mm <= 0:
        return ShelfPlan(
            warnings=(f"Skipped shelves because shelf thickness {format_mm(shelf_thickness_mm)} is not positive.",)
        )

    depth = interior_depth_mm - FRONT_SETBACK_MM - REAR_CLEARANCE_MM
    if depth <= MIN_DEPTH_MM:
        return ShelfPlan(
            warnings=(f"Skipped shelves because the usable depth {format_mm(depth)} is too shallow.",)
        )

    count, gap = resolve_shelf_gap(requested, clear_height_mm, shelf_thickness_mm)
    warnings: list[str] = []
    if count < requested:
        warnings.append(
            f"Reduced shelves from {requested} to {count} to keep at least "
            f"{format_mm(MIN_VERTICAL_GAP_MM)} between shelves."
        )
    if count == 0:
        return ShelfPlan(warnings=tuple(warnings))

    named_bays = len(bay_ranges) if total_bays is None else total_bays
    placements: list[ShelfPlacement] = []
    for bay in bay_ranges:
        if bay.width_mm <= MIN_BAY_WIDTH_MM:
            continue
        name = shelf_name(bay, named_bays)
        for k in range(count):
            bottom = interior_bottom_z_mm + gap + k * (shelf_thickness_mm + gap)
            placements.append(
                ShelfPlacement(
                    name=name,
                    bay_index=bay.index,
                    width_mm=bay.width_mm,
                    depth_mm=depth,
                    top_z_mm=bottom + shelf_thickness_mm,
                    x_start_mm=bay.start_mm,
                    thickness_mm=shelf_thickness_mm,
                    front_offset_mm=FRONT_SETBACK_MM,
                )
            )

    if not placements:
        warnings.append(f"Skipped shelves because no bay is wider than {format_mm(MIN_BAY_WIDTH_MM)}.")
        return ShelfPlan(warnings=tuple(warnings))

    return ShelfPlan(
        placements=tuple(placements),
        shelf_count=count,
        gap_mm=gap,
        warnings=tuple(warnings),
    )
