"""Output formatters and exporters for cabinet layouts."""

from __future__ import annotations

import json
from typing import Any

from cabinet_layout.application.dtos import LayoutOutput
from cabinet_layout.domain import (
    BayRegion,
    CabinetLayout,
    DividerPlacement,
    DoorPlacement,
    ShelfPlacement,
)


class LayoutReportFormatter:
    """Formats a planned layout as fixed-width text tables."""

    def format(self, output: LayoutOutput) -> str:
        """Format the whole report: bays, dividers, fronts, shelves, warnings."""
        if not output.is_valid or output.layout is None:
            lines = ["LAYOUT ERRORS", "=" * 70]
            lines.extend(f"  - {error}" for error in output.errors)
            return "\n".join(lines)

        layout = output.layout
        dims = layout.dimensions
        sections = [
            "CABINET LAYOUT",
            "=" * 70,
            f"Cabinet: {dims.width_mm:.1f} W x {dims.height_mm:.1f} H x {dims.depth_mm:.1f} D mm, "
            f"panel {dims.panel_thickness_mm:.1f} mm",
            "",
            self.format_bays(layout),
            "",
            self.format_dividers(list(layout.dividers)),
            "",
            self.format_fronts(list(layout.fronts)),
            "",
            self.format_shelves(list(layout.shelves)),
        ]
        if output.warnings:
            sections.extend(["", self.format_warnings(output.warnings)])
        return "\n".join(sections)

    def format_bays(self, layout: CabinetLayout) -> str:
        if not layout.bays:
            return "No bays placed."

        lines = [
            "BAYS",
            "-" * 70,
            f"{'Bay':<12} {'Left':>9} {'Right':>9} {'Bottom':>9} {'Top':>9}  {'Contents'}",
            "-" * 70,
        ]
        for region in layout.bays:
            lines.append(
                f"{self._indent(region) + region.label:<12} {region.rect.left:>9.1f} "
                f"{region.rect.right:>9.1f} {region.rect.bottom:>9.1f} "
                f"{region.rect.top:>9.1f}  {self._contents(region)}"
            )
        return "\n".join(lines)

    def format_dividers(self, dividers: list[DividerPlacement]) -> str:
        if not dividers:
            return "No dividers."

        lines = [
            "DIVIDERS",
            "-" * 70,
            f"{'Name':<16} {'Orientation':<12} {'Face':>9} {'Thick':>7} {'Span':>17}",
            "-" * 70,
        ]
        for divider in dividers:
            span = f"{divider.span_start_mm:.1f}-{divider.span_end_mm:.1f}"
            lines.append(
                f"{divider.name:<16} {divider.orientation.value:<12} "
                f"{divider.face_mm:>9.1f} {divider.thickness_mm:>7.1f} {span:>17}"
            )
        return "\n".join(lines)

    def format_fronts(self, fronts: list[DoorPlacement]) -> str:
        if not fronts:
            return "No fronts."

        lines = [
            "FRONTS",
            "-" * 70,
            f"{'Name':<28} {'X':>9} {'Width':>9} {'Bottom':>9} {'Height':>9}",
            "-" * 70,
        ]
        for door in fronts:
            lines.append(
                f"{door.name:<28} {door.x_start_mm:>9.1f} {door.width_mm:>9.1f} "
                f"{door.bottom_z_mm:>9.1f} {door.height_mm:>9.1f}"
            )
        return "\n".join(lines)

    def format_shelves(self, shelves: list[ShelfPlacement]) -> str:
        if not shelves:
            return "No shelves."

        lines = [
            "SHELVES",
            "-" * 70,
            f"{'Name':<20} {'X':>9} {'Width':>9} {'Depth':>9} {'Top Z':>9}",
            "-" * 70,
        ]
        for shelf in shelves:
            lines.append(
                f"{shelf.name:<20} {shelf.x_start_mm:>9.1f} {shelf.width_mm:>9.1f} "
                f"{shelf.depth_mm:>9.1f} {shelf.top_z_mm:>9.1f}"
            )
        return "\n".join(lines)

    def format_warnings(self, warnings: list[str]) -> str:
        lines = ["WARNINGS", "-" * 70]
        lines.extend(f"  - {warning}" for warning in warnings)
        return "\n".join(lines)

    @staticmethod
    def _indent(region: BayRegion) -> str:
        return "  " * (len(region.path) - 1)

    @staticmethod
    def _contents(region: BayRegion) -> str:
        if not region.is_leaf:
            sub = region.bay.subpartitions
            count = sub.count + 1 if sub is not None else 0
            return f"{count} sub-bays"
        bay = region.bay
        return f"{bay.door_mode.value}, {bay.shelf_count} shelves"


class JsonExporter:
    """Exports the normalized partition tree and the planned layout as JSON.

    Lengths are rounded to three decimals.
    """

    def export(self, output: LayoutOutput) -> str:
        """Export layout output as JSON string."""
        data: dict[str, Any] = {
            "errors": list(output.errors),
            "warnings": list(output.warnings),
        }
        if output.config is not None:
            data["partitions"] = output.config.to_dict()
        if output.layout is not None:
            data["layout"] = self._format_layout(output.layout)
        return json.dumps(_round_floats(data), indent=2)

    def _format_layout(self, layout: CabinetLayout) -> dict[str, Any]:
        return {
            "bays": [
                {
                    "path": list(region.path),
                    "label": region.label,
                    "is_leaf": region.is_leaf,
                    "left_mm": region.rect.left,
                    "right_mm": region.rect.right,
                    "bottom_mm": region.rect.bottom,
                    "top_mm": region.rect.top,
                }
                for region in layout.bays
            ],
            "dividers": [
                {
                    "name": divider.name,
                    "orientation": divider.orientation.value,
                    "face_mm": divider.face_mm,
                    "thickness_mm": divider.thickness_mm,
                    "span_start_mm": divider.span_start_mm,
                    "span_end_mm": divider.span_end_mm,
                }
                for divider in layout.dividers
            ],
            "fronts": [
                {
                    "name": door.name,
                    "bay_index": door.bay_index,
                    "x_start_mm": door.x_start_mm,
                    "width_mm": door.width_mm,
                    "height_mm": door.height_mm,
                    "bottom_z_mm": door.bottom_z_mm,
                }
                for door in layout.fronts
            ],
            "shelves": [
                {
                    "name": shelf.name,
                    "bay_index": shelf.bay_index,
                    "x_start_mm": shelf.x_start_mm,
                    "width_mm": shelf.width_mm,
                    "depth_mm": shelf.depth_mm,
                    "top_z_mm": shelf.top_z_mm,
                    "thickness_mm": shelf.thickness_mm,
                    "front_offset_mm": shelf.front_offset_mm,
                }
                for shelf in layout.shelves
            ],
        }


def _round_floats(value: Any) -> Any:
    if isinstance(value, float):
        return round(value, 3)
    if isinstance(value, dict):
        return {key: _round_floats(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_round_floats(item) for item in value]
    return value
