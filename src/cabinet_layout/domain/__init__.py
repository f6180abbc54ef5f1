"""Domain layer - the layout engine, free of I/O."""

from .entities import BayConfig, PartitionConfig, default_partition_config
from .results import (
    BayRangePlan,
    FrontPlan,
    LayoutContractError,
    NormalizationResult,
    ShelfPlan,
)
from .services import (
    BayRegion,
    CabinetDimensions,
    CabinetLayout,
    check_double_door,
    double_door_validity,
    normalize_partitions,
    plan_bay_ranges,
    plan_cabinet_layout,
    plan_fronts,
    plan_shelves,
    resolve_bay_ranges,
)
from .value_objects import (
    BayMode,
    BayRange,
    DividerPlacement,
    DoorMode,
    DoorPlacement,
    DoubleDoorValidity,
    Orientation,
    PartitionLayout,
    PartitionMode,
    Rect,
    ShelfPlacement,
)

__all__ = [
    "BayConfig",
    "BayMode",
    "BayRange",
    "BayRangePlan",
    "BayRegion",
    "CabinetDimensions",
    "CabinetLayout",
    "DividerPlacement",
    "DoorMode",
    "DoorPlacement",
    "DoubleDoorValidity",
    "FrontPlan",
    "LayoutContractError",
    "NormalizationResult",
    "Orientation",
    "PartitionConfig",
    "PartitionLayout",
    "PartitionMode",
    "Rect",
    "ShelfPlacement",
    "ShelfPlan",
    "check_double_door",
    "default_partition_config",
    "double_door_validity",
    "normalize_partitions",
    "plan_bay_ranges",
    "plan_cabinet_layout",
    "plan_fronts",
    "plan_shelves",
    "resolve_bay_ranges",
]
