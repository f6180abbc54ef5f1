"""Unit tests for bay range resolution.

These tests verify:
- Even layouts split the span into equal bays between dividers
- Positions layouts clamp, de-duplicate and drop narrow bays with warnings
- Infeasible nodes return no ranges instead of raising
- Contract violations raise LayoutContractError
"""

import math

import pytest

from cabinet_layout.domain.entities import BayConfig, PartitionConfig
from cabinet_layout.domain.results import LayoutContractError
from cabinet_layout.domain.services import format_mm, plan_bay_ranges, resolve_bay_ranges
from cabinet_layout.domain.value_objects import Orientation, PartitionLayout, PartitionMode


def make_node(
    count: int,
    *,
    orientation: Orientation = Orientation.VERTICAL,
    positions: tuple[float, ...] = (),
    thickness: float | None = None,
) -> PartitionConfig:
    """Build a canonical partition node with default bays."""
    return PartitionConfig(
        mode=orientation.as_mode(),
        count=count,
        orientation=orientation,
        layout=PartitionLayout.POSITIONS if positions else PartitionLayout.EVEN,
        positions_mm=positions,
        panel_thickness_mm=thickness,
        bays=tuple(BayConfig() for _ in range(count + 1)),
    )


class TestFormatMm:
    """Tests for the warning length format."""

    def test_three_decimals(self) -> None:
        assert format_mm(12.5) == "12.500 mm"
        assert format_mm(0) == "0.000 mm"


class TestEvenLayout:
    """Tests for evenly spaced dividers."""

    def test_unpartitioned_node_is_single_bay(self) -> None:
        ranges = resolve_bay_ranges(PartitionConfig(), 18.0, 582.0, 18.0)
        assert [(r.start_mm, r.end_mm) for r in ranges] == [(18.0, 582.0)]

    def test_zero_count_is_single_bay(self) -> None:
        ranges = resolve_bay_ranges(make_node(0), 0.0, 500.0, 18.0)
        assert len(ranges) == 1
        assert ranges[0].width_mm == pytest.approx(500.0)

    def test_single_divider(self) -> None:
        ranges = resolve_bay_ranges(make_node(1), 18.0, 582.0, 18.0)
        assert [(r.start_mm, r.end_mm) for r in ranges] == [
            (pytest.approx(18.0), pytest.approx(291.0)),
            (pytest.approx(309.0), pytest.approx(582.0)),
        ]

    def test_two_dividers_equal_bays(self) -> None:
        plan = plan_bay_ranges(make_node(2), 18.0, 582.0, 18.0)
        assert plan.divider_faces_mm == (pytest.approx(194.0), pytest.approx(388.0))
        assert plan.divider_thickness_mm == 18.0
        assert [r.width_mm for r in plan.ranges] == [pytest.approx(176.0)] * 3
        assert [r.index for r in plan.ranges] == [0, 1, 2]
        assert plan.warnings == ()

    def test_ranges_are_monotonic_and_separated_by_thickness(self) -> None:
        ranges = resolve_bay_ranges(make_node(5), 0.0, 1200.0, 18.0)
        for left, right in zip(ranges, ranges[1:]):
            assert right.start_mm - left.end_mm == pytest.approx(18.0)
        assert ranges[0].start_mm == 0.0
        assert ranges[-1].end_mm == pytest.approx(1200.0)

    def test_horizontal_node_uses_z_axis(self) -> None:
        ranges = resolve_bay_ranges(
            make_node(1, orientation=Orientation.HORIZONTAL), 118.0, 702.0, 18.0
        )
        assert all(r.axis == "z" for r in ranges)
        assert ranges[0].end_mm == pytest.approx(401.0)

    def test_override_thickness(self) -> None:
        plan = plan_bay_ranges(make_node(1, thickness=12.0), 0.0, 512.0, 18.0)
        assert plan.divider_thickness_mm == 12.0
        assert plan.ranges[0].end_mm == pytest.approx(250.0)
        assert plan.ranges[1].start_mm == pytest.approx(262.0)

    def test_too_many_dividers_skips_partitions(self) -> None:
        """Dividers that would leave bays below the minimum are not placed."""
        plan = plan_bay_ranges(make_node(20), 0.0, 100.0, 18.0)
        assert plan.divider_faces_mm == ()
        assert len(plan.ranges) == 1
        assert "skipping even partitions" in plan.warnings[0]


class TestPositionsLayout:
    """Tests for explicit divider positions."""

    def test_positions_place_dividers(self) -> None:
        plan = plan_bay_ranges(make_node(2, positions=(200.0, 400.0)), 0.0, 800.0, 18.0)
        assert plan.divider_faces_mm == (200.0, 400.0)
        assert [(r.start_mm, r.end_mm) for r in plan.ranges] == [
            (0.0, 200.0),
            (218.0, 400.0),
            (418.0, 800.0),
        ]
        assert plan.warnings == ()

    def test_near_duplicate_is_ignored(self) -> None:
        """A position within tolerance of the previous one is dropped."""
        plan = plan_bay_ranges(make_node(3, positions=(10.0, 10.0001, 500.0)), 0.0, 518.0, 18.0)
        assert plan.divider_faces_mm == (10.0,)
        assert [(r.start_mm, r.end_mm) for r in plan.ranges] == [(0.0, 10.0), (28.0, 518.0)]
        assert "Ignored duplicate partition at 10.000 mm (positions mode)." in plan.warnings
        assert (
            "Ignored partition at 500.000 mm because the bay to its right would be "
            "0.000 mm wide (minimum 5.000 mm)."
        ) in plan.warnings

    def test_out_of_range_position_is_clamped(self) -> None:
        """A clamped divider flush with the far panel leaves no bay and is dropped."""
        plan = plan_bay_ranges(make_node(1, positions=(900.0,)), 0.0, 600.0, 18.0)
        assert plan.divider_faces_mm == ()
        assert [(r.start_mm, r.end_mm) for r in plan.ranges] == [(0.0, 600.0)]
        assert plan.warnings == (
            "Clamped partition from 900.000 mm to 582.000 mm to stay within cabinet interior.",
            "Ignored partition at 900.000 mm because the bay to its right would be "
            "0.000 mm wide (minimum 5.000 mm).",
        )

    def test_divider_without_room_on_its_right_is_rejected(self) -> None:
        plan = plan_bay_ranges(make_node(2, positions=(200.0, 580.0)), 18.0, 582.0, 18.0)
        assert plan.divider_faces_mm == (200.0,)
        assert [(r.start_mm, r.end_mm) for r in plan.ranges] == [(18.0, 200.0), (218.0, 582.0)]
        assert any("bay to its right would be 0.000 mm wide" in w for w in plan.warnings)
        assert not any(w.startswith("Dropped the last bay") for w in plan.warnings)

    def test_narrow_left_bay_rejects_divider(self) -> None:
        plan = plan_bay_ranges(make_node(2, positions=(100.0, 120.0)), 0.0, 600.0, 18.0)
        assert plan.divider_faces_mm == (100.0,)
        assert len(plan.ranges) == 2
        assert any("bay to its left would be 2.000 mm wide" in w for w in plan.warnings)

    def test_positions_use_interior_frame(self) -> None:
        """Positions are measured in the same frame as the interior bounds."""
        plan = plan_bay_ranges(make_node(1, positions=(300.0,)), 18.0, 582.0, 18.0)
        assert plan.ranges[0].start_mm == 18.0
        assert plan.ranges[0].end_mm == 300.0


class TestInfeasible:
    """Tests for spans and thicknesses no bay fits in."""

    def test_span_below_minimum(self) -> None:
        plan = plan_bay_ranges(make_node(1), 0.0, 4.0, 18.0)
        assert not plan.is_feasible
        assert "below the minimum bay width" in plan.warnings[0]

    def test_override_equal_to_span_is_infeasible(self) -> None:
        plan = plan_bay_ranges(make_node(1, thickness=100.0), 0.0, 100.0, 18.0)
        assert plan.ranges == ()
        assert "does not fit the interior span" in plan.warnings[0]

    def test_non_positive_panel_thickness(self) -> None:
        plan = plan_bay_ranges(make_node(1), 0.0, 500.0, 0.0)
        assert plan.ranges == ()
        assert "must be positive" in plan.warnings[0]


class TestContract:
    """Tests for programmer errors."""

    def test_negative_span_raises(self) -> None:
        with pytest.raises(LayoutContractError):
            resolve_bay_ranges(make_node(1), 500.0, 100.0, 18.0)

    @pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf])
    def test_non_finite_input_raises(self, bad: float) -> None:
        with pytest.raises(LayoutContractError):
            resolve_bay_ranges(make_node(1), 0.0, bad, 18.0)

    def test_non_finite_position_raises(self) -> None:
        node = make_node(1, positions=(math.inf,))
        with pytest.raises(LayoutContractError):
            plan_bay_ranges(node, 0.0, 500.0, 18.0)

    def test_contract_error_is_value_error(self) -> None:
        assert issubclass(LayoutContractError, ValueError)
