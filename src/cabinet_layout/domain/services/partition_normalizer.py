"""Partition tree normalization.

Turns a loosely typed partition mapping (any subset of keys, any value types,
arbitrarily nested) into a canonical ``PartitionConfig`` tree. This is the
only place raw configuration is interpreted; every solver downstream relies
on the invariants the tree guarantees.

Normalization never raises for bad configuration values. Anything it has to
repair is reported as a warning, de-duplicated in first-seen order.
"""

from __future__ import annotations

import copy
import math
from collections.abc import Mapping
from dataclasses import replace
from enum import Enum
from typing import Any, TypeVar

from ..constants import MAX_PARTITION_COUNT, MAX_SHELF_COUNT
from ..entities import BayConfig, PartitionConfig
from ..results import NormalizationResult, unique_warnings
from ..value_objects import (
    BayMode,
    DoorMode,
    Orientation,
    PartitionLayout,
    PartitionMode,
)

__all__ = ["normalize_partitions", "orient_bay"]

E = TypeVar("E", bound=Enum)

_BAY_KEYS = frozenset({"mode", "shelf_count", "door_mode", "subpartitions"})
_STATE_KEY = "fronts_shelves_state"


def normalize_partitions(
    raw: Mapping[str, Any] | PartitionConfig,
    defaults: PartitionConfig,
) -> NormalizationResult:
    """Normalize a raw partition mapping against defaults.

    Args:
        raw: Loosely typed partition mapping, or an already canonical tree.
        defaults: Valid tree supplying fallbacks and the template bay.

    Returns:
        NormalizationResult with the canonical tree and its warnings.

    Raises:
        TypeError: If ``raw`` is not a mapping or ``defaults`` is not a
            PartitionConfig.

    Example:
        >>> result = normalize_partitions(
        ...     {"mode": "vertical", "count": 2}, default_partition_config()
        ... )
        >>> len(result.config.bays)
        3
    """
    if isinstance(raw, PartitionConfig):
        raw = raw.to_dict()
    if not isinstance(raw, Mapping):
        raise TypeError(f"raw partitions must be a mapping, got {type(raw).__name__}")
    if not isinstance(defaults, PartitionConfig):
        raise TypeError(
            f"defaults must be a PartitionConfig, got {type(defaults).__name__}"
        )

    warnings: list[str] = []
    config = _normalize_node(
        raw,
        defaults,
        template=defaults.bays[0],
        parent=None,
        path="partitions",
        warnings=warnings,
    )
    return NormalizationResult(config=config, warnings=unique_warnings(warnings))


def orient_bay(bay: BayConfig, parent: Orientation) -> BayConfig:
    """Force a bay's nested node perpendicular to ``parent``, recursively.

    This is the single place the perpendicular rule is applied to existing
    trees; raw input goes through the same rule in ``_normalize_node``.
    """
    if bay.subpartitions is None:
        return bay
    return replace(bay, subpartitions=_orient_node(bay.subpartitions, parent.perpendicular))


def _orient_node(node: PartitionConfig, orientation: Orientation) -> PartitionConfig:
    mode = node.mode if node.mode is PartitionMode.NONE else orientation.as_mode()
    return replace(
        node,
        mode=mode,
        orientation=orientation,
        bays=tuple(orient_bay(bay, orientation) for bay in node.bays),
    )


def _normalize_node(
    raw: Mapping[str, Any],
    defaults: PartitionConfig,
    *,
    template: BayConfig,
    parent: Orientation | None,
    path: str,
    warnings: list[str],
) -> PartitionConfig:
    if parent is None:
        mode = _resolve_enum(raw, "mode", PartitionMode, defaults.mode, path, warnings)
        if mode is PartitionMode.NONE:
            orientation = defaults.orientation
        else:
            orientation = Orientation(mode.value)
    else:
        orientation = parent.perpendicular
        mode = _resolve_nested_mode(raw, orientation, parent, path, warnings)
        raw_orientation = _coerce_enum(raw.get("orientation"), Orientation)
        if raw_orientation is not None and raw_orientation is not orientation:
            warnings.append(_perpendicular_warning(orientation, parent))

    node_template = orient_bay(template, orientation)
    raw_bays = raw.get("bays")
    if raw_bays is not None and not isinstance(raw_bays, (list, tuple)):
        warnings.append(f"Ignored {path}.bays because it is not a list.")
        raw_bays = None
    raw_bays = list(raw_bays or [])

    if mode is PartitionMode.NONE:
        first = _normalize_bay(
            raw_bays[0] if raw_bays else None,
            node_template,
            orientation,
            f"{path}.bays[0]",
            warnings,
        )
        if not first.is_leaf:
            warnings.append(
                f"{path} has no partitions; bay 1 reverted to fronts and shelves."
            )
            first = BayConfig(
                shelf_count=first.shelf_count,
                door_mode=first.door_mode,
                extras=first.extras,
            )
        return PartitionConfig(
            mode=PartitionMode.NONE,
            count=0,
            orientation=orientation,
            layout=PartitionLayout.EVEN,
            positions_mm=(),
            panel_thickness_mm=_resolve_thickness(raw, defaults, path, warnings),
            bays=(first,),
        )

    fallback_count = len(raw_bays) - 1 if raw_bays else defaults.count
    count = _resolve_count(raw, fallback_count, path, warnings)
    layout = _resolve_enum(raw, "layout", PartitionLayout, defaults.layout, path, warnings)
    positions: tuple[float, ...] = ()
    if layout is PartitionLayout.POSITIONS:
        positions = _resolve_positions(raw, defaults, path, warnings)
        if not positions:
            warnings.append(
                f"{path} uses positions layout without valid positions; using even layout."
            )
            layout = PartitionLayout.EVEN
        else:
            if len(positions) > MAX_PARTITION_COUNT:
                warnings.append(
                    f"{path} lists {len(positions)} positions; kept the first "
                    f"{MAX_PARTITION_COUNT}."
                )
                positions = positions[:MAX_PARTITION_COUNT]
            if count != len(positions):
                warnings.append(
                    f"{path}.count adjusted from {count} to {len(positions)} "
                    "to match positions."
                )
                count = len(positions)

    bays = [
        _normalize_bay(raw_bay, node_template, orientation, f"{path}.bays[{index}]", warnings)
        for index, raw_bay in enumerate(raw_bays[: count + 1])
    ]
    while len(bays) < count + 1:
        bays.append(node_template)

    return PartitionConfig(
        mode=mode,
        count=len(bays) - 1,
        orientation=orientation,
        layout=layout,
        positions_mm=positions,
        panel_thickness_mm=_resolve_thickness(raw, defaults, path, warnings),
        bays=tuple(bays),
    )


def _resolve_nested_mode(
    raw: Mapping[str, Any],
    orientation: Orientation,
    parent: Orientation,
    path: str,
    warnings: list[str],
) -> PartitionMode:
    value = raw.get("mode")
    if value is None:
        return orientation.as_mode()
    mode = _coerce_enum(value, PartitionMode)
    if mode is None:
        warnings.append(
            f"Ignored unknown mode {value!r} at {path}; using {orientation.value}."
        )
        return orientation.as_mode()
    if mode is PartitionMode.NONE:
        return mode
    if mode is not orientation.as_mode():
        warnings.append(_perpendicular_warning(orientation, parent))
    return orientation.as_mode()


def _perpendicular_warning(child: Orientation, parent: Orientation) -> str:
    return (
        f"Sub-partitions orientation forced to {child.value} "
        f"to remain perpendicular to {parent.value}."
    )


def _normalize_bay(
    raw_bay: Any,
    template: BayConfig,
    orientation: Orientation,
    path: str,
    warnings: list[str],
) -> BayConfig:
    if raw_bay is None:
        return template
    if isinstance(raw_bay, BayConfig):
        raw_bay = raw_bay.to_dict()
    if not isinstance(raw_bay, Mapping):
        warnings.append(f"Replaced {path} with the default bay because it is not a mapping.")
        return template

    state = raw_bay.get(_STATE_KEY)
    state = state if isinstance(state, Mapping) else {}

    mode = _resolve_enum(raw_bay, "mode", BayMode, template.mode, path, warnings)

    shelf_source = raw_bay if raw_bay.get("shelf_count") is not None else state
    shelf_count = _resolve_shelf_count(shelf_source, template.shelf_count, path, warnings)

    door_source = raw_bay if raw_bay.get("door_mode") is not None else state
    door_mode = _resolve_enum(door_source, "door_mode", DoorMode, template.door_mode, path, warnings)

    subpartitions = None
    if mode is BayMode.SUBPARTITIONS:
        raw_sub = raw_bay.get("subpartitions")
        if isinstance(raw_sub, PartitionConfig):
            raw_sub = raw_sub.to_dict()
        if raw_sub is None and template.subpartitions is not None:
            raw_sub = template.subpartitions.to_dict()
        if raw_sub is not None and not isinstance(raw_sub, Mapping):
            warnings.append(f"Ignored {path}.subpartitions because it is not a mapping.")
            raw_sub = None
        nested = orientation.perpendicular
        subpartitions = _normalize_node(
            raw_sub or {},
            PartitionConfig(
                mode=nested.as_mode(),
                orientation=nested,
                bays=(orient_bay(template, nested),),
            ),
            template=template,
            parent=orientation,
            path=f"{path}.subpartitions",
            warnings=warnings,
        )

    extras = copy.deepcopy(dict(template.extras))
    extras.update(
        {key: copy.deepcopy(value) for key, value in raw_bay.items() if key not in _BAY_KEYS}
    )
    return BayConfig(
        mode=mode,
        shelf_count=shelf_count,
        door_mode=door_mode,
        subpartitions=subpartitions,
        extras=extras,
    )


def _resolve_count(
    raw: Mapping[str, Any], fallback: int, path: str, warnings: list[str]
) -> int:
    value = raw.get("count")
    count = _coerce_int(value)
    if count is None:
        if value is not None:
            warnings.append(f"Ignored invalid count {value!r} at {path}; using {fallback}.")
        count = fallback
    if count < 0:
        warnings.append(f"Clamped {path}.count from {count} to 0.")
        return 0
    if count > MAX_PARTITION_COUNT:
        warnings.append(f"Clamped {path}.count from {count} to {MAX_PARTITION_COUNT}.")
        return MAX_PARTITION_COUNT
    return count


def _resolve_shelf_count(
    source: Mapping[str, Any], fallback: int, path: str, warnings: list[str]
) -> int:
    value = source.get("shelf_count")
    count = _coerce_int(value)
    if count is None:
        if value is not None:
            warnings.append(
                f"Ignored invalid shelf_count {value!r} at {path}; using {fallback}."
            )
        return fallback
    if count < 0:
        warnings.append(f"Clamped {path}.shelf_count from {count} to 0.")
        return 0
    if count > MAX_SHELF_COUNT:
        warnings.append(f"Clamped {path}.shelf_count from {count} to {MAX_SHELF_COUNT}.")
        return MAX_SHELF_COUNT
    return count


def _resolve_positions(
    raw: Mapping[str, Any],
    defaults: PartitionConfig,
    path: str,
    warnings: list[str],
) -> tuple[float, ...]:
    if "positions_mm" not in raw:
        return tuple(defaults.positions_mm)
    value = raw.get("positions_mm")
    if value is None:
        return ()
    if not isinstance(value, (list, tuple)):
        warnings.append(f"Ignored {path}.positions_mm because it is not a list.")
        return ()

    accepted: list[float] = []
    for entry in value:
        position = _coerce_float(entry)
        if position is None or position < 0:
            warnings.append(f"Ignored invalid partition position {entry!r} at {path}.")
            continue
        accepted.append(position)
    return tuple(sorted(set(accepted)))


def _resolve_thickness(
    raw: Mapping[str, Any],
    defaults: PartitionConfig,
    path: str,
    warnings: list[str],
) -> float | None:
    if "panel_thickness_mm" not in raw:
        return defaults.panel_thickness_mm
    value = raw.get("panel_thickness_mm")
    if value is None:
        return None
    thickness = _coerce_float(value)
    if thickness is None or thickness <= 0:
        warnings.append(
            f"Ignored panel_thickness_mm {value!r} at {path}; using the carcass panel thickness."
        )
        return None
    return thickness


def _resolve_enum(
    source: Mapping[str, Any],
    key: str,
    enum_cls: type[E],
    fallback: E,
    path: str,
    warnings: list[str],
) -> E:
    value = source.get(key)
    if value is None:
        return fallback
    member = _coerce_enum(value, enum_cls)
    if member is None:
        warnings.append(
            f"Ignored unknown {key} {value!r} at {path}; using {fallback.value}."
        )
        return fallback
    return member


def _coerce_enum(value: Any, enum_cls: type[E]) -> E | None:
    if isinstance(value, enum_cls):
        return value
    if not isinstance(value, str):
        return None
    try:
        return enum_cls(value.strip().lower())
    except ValueError:
        return None


def _coerce_int(value: Any) -> int | None:
    """Coerce to int; floats round half away from zero, booleans are rejected."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            return int(text, 10)
        except ValueError:
            value = _coerce_float(text)
            if value is None:
                return None
    if isinstance(value, float):
        if not math.isfinite(value):
            return None
        return int(math.copysign(math.floor(abs(value) + 0.5), value))
    return None


def _coerce_float(value: Any) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    return number if math.isfinite(number) else None
