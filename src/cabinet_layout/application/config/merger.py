"""Command line overrides for layout configurations.

Precedence is CLI arguments > config file values > schema defaults. Only
arguments that are not None override the file.
"""

from __future__ import annotations

from cabinet_layout.application.config.schema import (
    CabinetConfig,
    LayoutConfiguration,
)


def merge_config_with_cli(
    config: LayoutConfiguration,
    *,
    width: float | None = None,
    height: float | None = None,
    depth: float | None = None,
    panel_thickness: float | None = None,
    shelves: int | None = None,
) -> LayoutConfiguration:
    """Apply command line overrides to a loaded configuration.

    The merged cabinet block is re-validated, so an override that breaks a
    schema bound raises pydantic's ValidationError like any bad file would.

    Args:
        config: The configuration loaded from file
        width: Override for cabinet.width_mm
        height: Override for cabinet.height_mm
        depth: Override for cabinet.depth_mm
        panel_thickness: Override for cabinet.panel_thickness_mm
        shelves: Override for cabinet.shelves

    Returns:
        A new LayoutConfiguration; the input is not modified.

    Example:
        >>> merged = merge_config_with_cli(config, width=900.0)
        >>> merged.cabinet.width_mm
        900.0
    """
    overrides = {
        "width_mm": width,
        "height_mm": height,
        "depth_mm": depth,
        "panel_thickness_mm": panel_thickness,
        "shelves": shelves,
    }
    cabinet_data = config.cabinet.model_dump()
    cabinet_data.update({key: value for key, value in overrides.items() if value is not None})

    return config.model_copy(
        update={"cabinet": CabinetConfig.model_validate(cabinet_data)},
        deep=True,
    )
