"""Domain services for cabinet layout.

This package provides the layout pipeline:
- Partition tree normalization
- Bay range resolution (even and positions layouts)
- Door front and shelf planning per bay
- Whole-cabinet recursive planning
"""

from .bay_range_solver import format_mm, plan_bay_ranges, resolve_bay_ranges
from .front_planner import check_double_door, door_name, plan_fronts
from .layout_planner import (
    BayRegion,
    CabinetDimensions,
    CabinetLayout,
    double_door_validity,
    plan_cabinet_layout,
)
from .partition_normalizer import normalize_partitions, orient_bay
from .shelf_planner import plan_shelves, resolve_shelf_gap, shelf_name

__all__ = [
    "BayRegion",
    "CabinetDimensions",
    "CabinetLayout",
    "check_double_door",
    "door_name",
    "double_door_validity",
    "format_mm",
    "normalize_partitions",
    "orient_bay",
    "plan_bay_ranges",
    "plan_cabinet_layout",
    "plan_fronts",
    "plan_shelves",
    "resolve_bay_ranges",
    "resolve_shelf_gap",
    "shelf_name",
]
