"""Result types returned by the layout solvers.

Solvers never raise for infeasible configurations. They return a smaller
result and explain what was dropped through the ``warnings`` tuple, so a
caller can show every message for one solve in a deterministic order.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .entities import PartitionConfig
from .value_objects import BayRange, DoorPlacement, ShelfPlacement


class LayoutContractError(ValueError):
    """Raised when a solver receives numbers no layout could satisfy.

    This covers programmer errors such as a negative interior span or
    non-finite lengths, never a configuration that merely does not fit.
    """

    pass


def unique_warnings(warnings: list[str]) -> tuple[str, ...]:
    """De-duplicate warnings, keeping the first occurrence of each."""
    return tuple(dict.fromkeys(warnings))


@dataclass(frozen=True)
class NormalizationResult:
    """Canonical partition tree plus the warnings raised while building it.

    Attributes:
        config: The normalized partition tree.
        warnings: De-duplicated warning messages in first-seen order.
    """

    config: PartitionConfig
    warnings: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class BayRangePlan:
    """Resolved bay ranges for one partition node.

    Attributes:
        ranges: Bay ranges in axis order; empty when the node is infeasible.
        divider_faces_mm: Lower face of every accepted divider.
        divider_thickness_mm: Thickness used for the dividers.
        warnings: Explanations for rejected or adjusted dividers.
    """

    ranges: tuple[BayRange, ...] = field(default_factory=tuple)
    divider_faces_mm: tuple[float, ...] = field(default_factory=tuple)
    divider_thickness_mm: float = 0.0
    warnings: tuple[str, ...] = field(default_factory=tuple)

    @property
    def is_feasible(self) -> bool:
        """True when at least one bay could be placed."""
        return len(self.ranges) > 0


@dataclass(frozen=True)
class FrontPlan:
    """Door placements for one bay."""

    placements: tuple[DoorPlacement, ...] = field(default_factory=tuple)
    warnings: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class ShelfPlan:
    """Shelf placements for a set of bay ranges.

    Attributes:
        placements: Shelves for every eligible bay, bay by bay, bottom up.
        shelf_count: Shelves per bay after any reduction.
        gap_mm: Vertical clearance between shelves, 0.0 when none fit.
        warnings: Reduction and infeasibility messages.
    """

    placements: tuple[ShelfPlacement, ...] = field(default_factory=tuple)
    shelf_count: int = 0
    gap_mm: float = 0.0
    warnings: tuple[str, ...] = field(default_factory=tuple)
