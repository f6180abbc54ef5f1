"""Bay range resolution.

Converts one canonical partition node into concrete bay boundaries along its
split axis. Vertical nodes split x; horizontal nodes split z. Positions in a
``positions`` layout are measured in the same coordinate frame as the
interior bounds passed in, so a nested node uses cabinet coordinates too.
"""

from __future__ import annotations

import math

from ..constants import EPSILON_MM, MIN_BAY_WIDTH_MM
from ..entities import PartitionConfig
from ..results import BayRangePlan, LayoutContractError
from ..value_objects import BayRange, PartitionLayout

__all__ = ["format_mm", "plan_bay_ranges", "resolve_bay_ranges"]


def format_mm(value: float) -> str:
    """Format a length for warning messages, e.g. ``"12.500 mm"``."""
    return f"{value:.3f} mm"


def resolve_bay_ranges(
    node: PartitionConfig,
    interior_start_mm: float,
    interior_end_mm: float,
    panel_thickness_mm: float,
) -> list[BayRange]:
    """Resolve the bay ranges of one partition node.

    Args:
        node: Canonical partition node.
        interior_start_mm: Lower interior bound along the split axis.
        interior_end_mm: Upper interior bound along the split axis.
        panel_thickness_mm: Carcass panel thickness, used for dividers
            unless the node overrides it.

    Returns:
        Bay ranges in axis order. Empty when no bay can be placed.

    Raises:
        LayoutContractError: If the span is negative or any input is not
            finite.

    Example:
        >>> node = PartitionConfig(
        ...     mode=PartitionMode.VERTICAL, count=1, bays=(BayConfig(), BayConfig())
        ... )
        >>> [(r.start_mm, r.end_mm) for r in resolve_bay_ranges(node, 18.0, 582.0, 18.0)]
        [(18.0, 291.0), (309.0, 582.0)]
    """
    return list(
        plan_bay_ranges(node, interior_start_mm, interior_end_mm, panel_thickness_mm).ranges
    )


def plan_bay_ranges(
    node: PartitionConfig,
    interior_start_mm: float,
    interior_end_mm: float,
    panel_thickness_mm: float,
) -> BayRangePlan:
    """Resolve bay ranges along with divider faces and warnings.

    Same contract as ``resolve_bay_ranges``; the plan additionally carries
    the accepted divider faces, the divider thickness and the reasons any
    requested divider or bay was dropped.
    """
    for name, value in (
        ("interior_start_mm", interior_start_mm),
        ("interior_end_mm", interior_end_mm),
        ("panel_thickness_mm", panel_thickness_mm),
    ):
        if not math.isfinite(value):
            raise LayoutContractError(f"{name} must be finite, got {value}")
    if interior_end_mm < interior_start_mm:
        raise LayoutContractError(
            f"Interior span is negative ({interior_start_mm} to {interior_end_mm})"
        )
    if any(not math.isfinite(position) for position in node.positions_mm):
        raise LayoutContractError("Partition positions must be finite")

    axis = node.orientation.axis
    span = interior_end_mm - interior_start_mm
    if span < MIN_BAY_WIDTH_MM:
        return BayRangePlan(
            warnings=(
                f"Interior span {format_mm(span)} is below the minimum bay width "
                f"{format_mm(MIN_BAY_WIDTH_MM)}.",
            )
        )

    if not node.is_partitioned or (node.layout is PartitionLayout.EVEN and node.count == 0):
        return BayRangePlan(
            ranges=(BayRange(index=0, start_mm=interior_start_mm, end_mm=interior_end_mm, axis=axis),),
        )

    override = node.panel_thickness_mm
    if override is not None and override >= span - EPSILON_MM:
        return BayRangePlan(
            warnings=(
                f"Partition thickness {format_mm(override)} does not fit the interior "
                f"span {format_mm(span)}; no bays placed.",
            )
        )
    thickness = override if override is not None else panel_thickness_mm
    if thickness <= 0:
        return BayRangePlan(
            warnings=(f"Partition thickness {format_mm(thickness)} must be positive; no bays placed.",)
        )

    warnings: list[str] = []
    if node.layout is PartitionLayout.POSITIONS:
        faces = _explicit_faces(node.positions_mm, interior_start_mm, interior_end_mm, thickness, warnings)
    else:
        faces = _even_faces(node.count, interior_start_mm, span, thickness, warnings)

    ranges = _ranges_from_faces(faces, interior_start_mm, interior_end_mm, thickness, axis, warnings)
    return BayRangePlan(
        ranges=tuple(ranges),
        divider_faces_mm=tuple(faces),
        divider_thickness_mm=thickness,
        warnings=tuple(warnings),
    )


def _even_faces(
    count: int, start: float, span: float, thickness: float, warnings: list[str]
) -> list[float]:
    available = span - count * thickness
    if available < MIN_BAY_WIDTH_MM * (count + 1):
        warnings.append(
            f"Requested {count} partitions but interior width only allows bays of at least "
            f"{format_mm(MIN_BAY_WIDTH_MM)}; skipping even partitions."
        )
        return []

    bay_width = available / (count + 1)
    if bay_width < MIN_BAY_WIDTH_MM:
        warnings.append(
            f"Requested {count} partitions but resulting bay width {format_mm(bay_width)} "
            f"is below minimum {format_mm(MIN_BAY_WIDTH_MM)}; skipping even partitions."
        )
        return []

    return [start + (index + 1) * bay_width + index * thickness for index in range(count)]


def _explicit_faces(
    positions: tuple[float, ...],
    start: float,
    end: float,
    thickness: float,
    warnings: list[str],
) -> list[float]:
    faces: list[float] = []
    previous: float | None = None
    for raw_offset in sorted(positions):
        if previous is not None and abs(raw_offset - previous) <= EPSILON_MM:
            warnings.append(f"Ignored duplicate partition at {format_mm(raw_offset)} (positions mode).")
            continue

        clamped = min(max(raw_offset, start), end - thickness)
        if abs(clamped - raw_offset) > EPSILON_MM:
            warnings.append(
                f"Clamped partition from {format_mm(raw_offset)} to {format_mm(clamped)} "
                "to stay within cabinet interior."
            )

        if faces and abs(clamped - faces[-1]) <= EPSILON_MM:
            warnings.append(
                f"Ignored partition at {format_mm(raw_offset)} because it overlaps another after clamping."
            )
            continue

        left_gap = clamped - (faces[-1] + thickness if faces else start)
        if left_gap < MIN_BAY_WIDTH_MM - EPSILON_MM:
            warnings.append(
                f"Ignored partition at {format_mm(raw_offset)} because the bay to its left would be "
                f"{format_mm(max(left_gap, 0.0))} wide (minimum {format_mm(MIN_BAY_WIDTH_MM)})."
            )
            continue

        right_gap = end - (clamped + thickness)
        if right_gap < MIN_BAY_WIDTH_MM - EPSILON_MM:
            warnings.append(
                f"Ignored partition at {format_mm(raw_offset)} because the bay to its right would be "
                f"{format_mm(max(right_gap, 0.0))} wide (minimum {format_mm(MIN_BAY_WIDTH_MM)})."
            )
            continue

        faces.append(clamped)
        previous = raw_offset
    return faces


def _ranges_from_faces(
    faces: list[float],
    start: float,
    end: float,
    thickness: float,
    axis: str,
    warnings: list[str],
) -> list[BayRange]:
    ranges: list[BayRange] = []
    current = start
    for face in faces:
        if face - current < MIN_BAY_WIDTH_MM - EPSILON_MM:
            break
        ranges.append(BayRange(index=len(ranges), start_mm=current, end_mm=face, axis=axis))
        current = face + thickness
        if end - current < MIN_BAY_WIDTH_MM - EPSILON_MM:
            break

    tail = end - current
    if tail >= MIN_BAY_WIDTH_MM - EPSILON_MM:
        ranges.append(BayRange(index=len(ranges), start_mm=current, end_mm=end, axis=axis))
    else:
        warnings.append(
            f"Dropped the last bay because it would be {format_mm(max(tail, 0.0))} wide "
            f"(minimum {format_mm(MIN_BAY_WIDTH_MM)})."
        )
    return ranges
