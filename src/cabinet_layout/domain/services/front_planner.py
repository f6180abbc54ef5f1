"""Door front planning for a single bay.

Fronts are inset: a bay's doors are planned inside the bay's own clear
opening, with reveals taken off every edge. Infeasible fronts never raise;
they produce no placements and a warning that says what ran out.
"""

from __future__ import annotations

import math

from ..constants import (
    EPSILON_MM,
    MIN_DOUBLE_LEAF_WIDTH_MM,
    REVEAL_CENTER_MM,
    REVEAL_EDGE_MM,
)
from ..results import FrontPlan, LayoutContractError
from ..value_objects import DoorMode, DoorPlacement, DoubleDoorValidity
from .bay_range_solver import format_mm

__all__ = ["check_double_door", "door_name", "plan_fronts"]

_SUFFIXES = {
    "hinge_left": "Hinge Left",
    "hinge_right": "Hinge Right",
    "double_left": "Left",
    "double_right": "Right",
}


def door_name(kind: str, bay_index: int, total_bays: int, bay_label: str | None = None) -> str:
    """Display name for a door leaf.

    Single-bay cabinets get ``"Door (Hinge Left)"``; otherwise the bay label
    is included, as in ``"Door (Bay 2, Left)"``.
    """
    suffix = _SUFFIXES.get(kind, "Door")
    if total_bays <= 1:
        return f"Door ({suffix})"
    label = bay_label or f"Bay {bay_index + 1}"
    return f"Door ({label}, {suffix})"


def plan_fronts(
    door_mode: DoorMode,
    clear_width_mm: float,
    clear_height_mm: float,
    edge_reveal_mm: float,
    top_reveal_mm: float,
    bottom_reveal_mm: float,
    center_gap_mm: float,
    *,
    right_edge_reveal_mm: float | None = None,
    bay_index: int = 0,
    bay_label: str | None = None,
    total_bays: int = 1,
    origin_x_mm: float = 0.0,
    origin_z_mm: float = 0.0,
) -> FrontPlan:
    """Plan the door leaves of one bay.

    Args:
        door_mode: Requested front for the bay.
        clear_width_mm: Width of the bay opening.
        clear_height_mm: Height of the bay opening.
        edge_reveal_mm: Gap between the left door edge and the opening (and
            the right edge too, unless ``right_edge_reveal_mm`` is given).
        top_reveal_mm: Gap above the doors.
        bottom_reveal_mm: Gap below the doors.
        center_gap_mm: Gap between the two leaves of a double front.
        right_edge_reveal_mm: Separate right-edge reveal, used when the bay
            shares an edge with a neighboring front.
        bay_index: Index of the bay, used in names.
        bay_label: Label used in names instead of ``"Bay N"``.
        total_bays: Number of bays in the cabinet; one bay drops the label.
        origin_x_mm: Left edge of the opening in cabinet coordinates.
        origin_z_mm: Bottom edge of the opening in cabinet coordinates.

    Returns:
        FrontPlan with zero, one or two placements.

    Raises:
        LayoutContractError: If any length is not finite.
    """
    right_reveal = edge_reveal_mm if right_edge_reveal_mm is None else right_edge_reveal_mm
    _require_finite(
        clear_width_mm=clear_width_mm,
        clear_height_mm=clear_height_mm,
        edge_reveal_mm=edge_reveal_mm,
        right_edge_reveal_mm=right_reveal,
        top_reveal_mm=top_reveal_mm,
        bottom_reveal_mm=bottom_reveal_mm,
        center_gap_mm=center_gap_mm,
        origin_x_mm=origin_x_mm,
        origin_z_mm=origin_z_mm,
    )

    if not door_mode.has_doors:
        return FrontPlan()

    subject = (bay_label or f"Bay {bay_index + 1}").lower()
    reveals = (edge_reveal_mm, right_reveal, top_reveal_mm, bottom_reveal_mm, center_gap_mm)
    if any(reveal < 0 for reveal in reveals):
        return _skipped(f"Skipped doors for {subject} because a reveal was negative.")

    usable_width = clear_width_mm - edge_reveal_mm - right_reveal
    if usable_width <= EPSILON_MM:
        return _skipped(f"Skipped doors for {subject} because reveals consumed the width.")

    usable_height = clear_height_mm - top_reveal_mm - bottom_reveal_mm
    if usable_height <= EPSILON_MM:
        return _skipped(f"Skipped doors for {subject} because reveals consumed the height.")

    base_x = origin_x_mm + edge_reveal_mm
    bottom_z = origin_z_mm + bottom_reveal_mm

    def leaf(kind: str, x_start: float, width: float) -> DoorPlacement:
        return DoorPlacement(
            name=door_name(kind, bay_index, total_bays, bay_label),
            bay_index=bay_index,
            x_start_mm=x_start,
            width_mm=width,
            height_mm=usable_height,
            bottom_z_mm=bottom_z,
        )

    if door_mode is DoorMode.DOORS_LEFT:
        return FrontPlan(placements=(leaf("hinge_left", base_x, usable_width),))
    if door_mode is DoorMode.DOORS_RIGHT:
        return FrontPlan(placements=(leaf("hinge_right", base_x, usable_width),))

    split_width = usable_width - center_gap_mm
    if split_width <= EPSILON_MM:
        return _skipped(
            f"Skipped double doors for {subject} because the gap exceeded the width."
        )
    leaf_width = split_width / 2.0
    if leaf_width <= EPSILON_MM:
        return _skipped(
            f"Skipped double doors for {subject} because each leaf would be too narrow."
        )
    return FrontPlan(
        placements=(
            leaf("double_left", base_x, leaf_width),
            leaf("double_right", base_x + leaf_width + center_gap_mm, leaf_width),
        )
    )


def check_double_door(
    bay_width_mm: float,
    *,
    edge_reveal_mm: float = REVEAL_EDGE_MM,
    right_edge_reveal_mm: float | None = None,
    center_gap_mm: float = REVEAL_CENTER_MM,
    min_leaf_width_mm: float = MIN_DOUBLE_LEAF_WIDTH_MM,
) -> DoubleDoorValidity:
    """Check whether a double front fits a bay, without planning it.

    Derives the leaf width exactly the way ``plan_fronts`` does and compares
    it against ``min_leaf_width_mm``.

    Args:
        bay_width_mm: Clear width of the bay opening.
        edge_reveal_mm: Left (and default right) edge reveal.
        right_edge_reveal_mm: Separate right-edge reveal.
        center_gap_mm: Gap between the leaves.
        min_leaf_width_mm: Narrowest acceptable leaf.

    Returns:
        DoubleDoorValidity describing the outcome.

    Raises:
        LayoutContractError: If any length is not finite.

    Example:
        >>> check_double_door(1000.0).leaf_width_mm
        497.0
    """
    right_reveal = edge_reveal_mm if right_edge_reveal_mm is None else right_edge_reveal_mm
    _require_finite(
        bay_width_mm=bay_width_mm,
        edge_reveal_mm=edge_reveal_mm,
        right_edge_reveal_mm=right_reveal,
        center_gap_mm=center_gap_mm,
        min_leaf_width_mm=min_leaf_width_mm,
    )

    if bay_width_mm <= EPSILON_MM:
        return DoubleDoorValidity(
            allowed=False,
            leaf_width_mm=None,
            min_leaf_width_mm=min_leaf_width_mm,
            reason="The bay has no usable width.",
        )
    if min(edge_reveal_mm, right_reveal, center_gap_mm) < 0:
        return DoubleDoorValidity(
            allowed=False,
            leaf_width_mm=None,
            min_leaf_width_mm=min_leaf_width_mm,
            reason="Reveals must not be negative.",
        )

    split_width = bay_width_mm - edge_reveal_mm - right_reveal - center_gap_mm
    if split_width <= EPSILON_MM:
        return DoubleDoorValidity(
            allowed=False,
            leaf_width_mm=0.0,
            min_leaf_width_mm=min_leaf_width_mm,
            reason="Reveals and the center gap consume the bay width.",
        )

    leaf_width = split_width / 2.0
    if leaf_width <= EPSILON_MM or leaf_width < min_leaf_width_mm:
        return DoubleDoorValidity(
            allowed=False,
            leaf_width_mm=leaf_width,
            min_leaf_width_mm=min_leaf_width_mm,
            reason=(
                f"Each leaf would be {format_mm(leaf_width)} wide "
                f"(minimum {format_mm(min_leaf_width_mm)})."
            ),
        )
    return DoubleDoorValidity(
        allowed=True,
        leaf_width_mm=leaf_width,
        min_leaf_width_mm=min_leaf_width_mm,
    )


def _skipped(message: str) -> FrontPlan:
    return FrontPlan(warnings=(message,))


def _require_finite(**values: float) -> None:
    for name, value in values.items():
        if not math.isfinite(value):
            raise LayoutContractError(f"{name} must be finite, got {value}")
