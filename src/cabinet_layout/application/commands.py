"""Application commands (use cases) for cabinet layout."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from cabinet_layout.application.config.adapter import (
    config_to_defaults,
    config_to_dimensions,
)
from cabinet_layout.application.config.schema import LayoutConfiguration
from cabinet_layout.domain import (
    CabinetDimensions,
    DoubleDoorValidity,
    LayoutContractError,
    double_door_validity,
    normalize_partitions,
    plan_cabinet_layout,
)

from .dtos import LayoutOutput

logger = logging.getLogger(__name__)


def validate_dimensions(dims: CabinetDimensions) -> list[str]:
    """Return blocking problems with the carcass dimensions."""
    errors: list[str] = []
    if dims.width_mm <= 0:
        errors.append("Width must be positive")
    if dims.height_mm <= 0:
        errors.append("Height must be positive")
    if dims.depth_mm <= 0:
        errors.append("Depth must be positive")
    if dims.panel_thickness_mm <= 0:
        errors.append("Panel thickness must be positive")
    elif dims.panel_thickness_mm * 2 >= dims.width_mm:
        errors.append("Panel thickness must be less than half the cabinet width")
    if errors:
        return errors

    interior = dims.interior_rect
    if interior.height <= 0:
        errors.append("Cabinet height leaves no interior space above the toe kick and panels")
    if dims.interior_depth_mm <= 0:
        errors.append("Back thickness must be less than the cabinet depth")
    return errors


class GenerateLayoutCommand:
    """Command to normalize a partition tree and plan the cabinet layout."""

    def execute(self, config: LayoutConfiguration) -> LayoutOutput:
        """Execute the layout generation command.

        Args:
            config: A validated (and possibly CLI-merged) configuration.

        Returns:
            LayoutOutput with the normalized tree, the layout and warnings, or
            with errors when the dimensions cannot hold a layout.
        """
        dims = config_to_dimensions(config)
        errors = validate_dimensions(dims)
        if errors:
            logger.debug(f"Layout rejected with {len(errors)} dimension error(s)")
            return LayoutOutput(errors=errors)

        normalized = normalize_partitions(config.partitions, config_to_defaults(config))
        logger.debug(
            f"Normalized partitions: mode={normalized.config.mode.value}, "
            f"count={normalized.config.count}, warnings={len(normalized.warnings)}"
        )

        try:
            layout = plan_cabinet_layout(normalized.config, dims)
        except LayoutContractError as e:
            return LayoutOutput(
                config=normalized.config,
                warnings=list(normalized.warnings),
                errors=[str(e)],
            )

        logger.debug(
            f"Planned {len(layout.bays)} bays, {len(layout.dividers)} dividers, "
            f"{len(layout.fronts)} fronts, {len(layout.shelves)} shelves"
        )
        return LayoutOutput(
            config=normalized.config,
            layout=layout,
            warnings=[*normalized.warnings, *layout.warnings],
        )

    def check_double_door(
        self, config: LayoutConfiguration, bay_path: Sequence[int]
    ) -> DoubleDoorValidity:
        """Check whether the bay at ``bay_path`` can take a double front.

        Raises:
            LayoutContractError: If the dimensions cannot hold a layout.
        """
        dims = config_to_dimensions(config)
        errors = validate_dimensions(dims)
        if errors:
            raise LayoutContractError("; ".join(errors))
        normalized = normalize_partitions(config.partitions, config_to_defaults(config))
        result = double_door_validity(normalized.config, dims, bay_path)
        logger.debug(f"Double door check for bay path {tuple(bay_path)}: allowed={result.allowed}")
        return result
