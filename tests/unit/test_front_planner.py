"""Unit tests for door front planning and the double-door check."""

import math

import pytest

from cabinet_layout.domain.results import LayoutContractError
from cabinet_layout.domain.services import check_double_door, door_name, plan_fronts
from cabinet_layout.domain.value_objects import DoorMode


class TestDoorName:
    """Tests for door display names."""

    def test_single_bay_names(self) -> None:
        assert door_name("hinge_left", 0, 1) == "Door (Hinge Left)"
        assert door_name("hinge_right", 0, 1) == "Door (Hinge Right)"
        assert door_name("double_left", 0, 1) == "Door (Left)"
        assert door_name("double_right", 0, 1) == "Door (Right)"

    def test_multi_bay_names_include_bay(self) -> None:
        assert door_name("double_left", 1, 3) == "Door (Bay 2, Left)"
        assert door_name("hinge_right", 0, 2, "Bay 1.2") == "Door (Bay 1.2, Hinge Right)"


class TestPlanFronts:
    """Tests for plan_fronts."""

    def test_double_doors_are_symmetric(self) -> None:
        """1000 mm opening with 2 mm reveals gives two 497 mm leaves."""
        plan = plan_fronts(DoorMode.DOORS_DOUBLE, 1000.0, 700.0, 2.0, 2.0, 2.0, 2.0)
        left, right = plan.placements
        assert left.width_mm == pytest.approx(497.0)
        assert right.width_mm == pytest.approx(497.0)
        assert left.x_start_mm == pytest.approx(2.0)
        assert right.x_start_mm == pytest.approx(left.x_start_mm + 497.0 + 2.0)
        assert left.name == "Door (Left)"
        assert right.name == "Door (Right)"
        assert plan.warnings == ()

    def test_door_height_and_bottom(self) -> None:
        plan = plan_fronts(DoorMode.DOORS_LEFT, 500.0, 700.0, 2.0, 3.0, 4.0, 2.0)
        (door,) = plan.placements
        assert door.height_mm == pytest.approx(693.0)
        assert door.bottom_z_mm == pytest.approx(4.0)
        assert door.width_mm == pytest.approx(496.0)
        assert door.name == "Door (Hinge Left)"

    def test_single_right_door(self) -> None:
        plan = plan_fronts(DoorMode.DOORS_RIGHT, 500.0, 700.0, 2.0, 2.0, 2.0, 2.0)
        assert [door.name for door in plan.placements] == ["Door (Hinge Right)"]

    def test_origin_offsets_placements(self) -> None:
        plan = plan_fronts(
            DoorMode.DOORS_LEFT,
            273.0,
            584.0,
            2.0,
            2.0,
            2.0,
            2.0,
            origin_x_mm=18.0,
            origin_z_mm=118.0,
        )
        (door,) = plan.placements
        assert door.x_start_mm == pytest.approx(20.0)
        assert door.bottom_z_mm == pytest.approx(120.0)

    def test_separate_right_reveal(self) -> None:
        plan = plan_fronts(
            DoorMode.DOORS_DOUBLE, 273.0, 584.0, 2.0, 2.0, 2.0, 2.0, right_edge_reveal_mm=1.0
        )
        left, right = plan.placements
        assert left.width_mm == pytest.approx(134.0)
        assert right.x_start_mm + right.width_mm == pytest.approx(272.0)

    @pytest.mark.parametrize("mode", [DoorMode.NONE, DoorMode.EMPTY])
    def test_no_door_modes_return_empty(self, mode: DoorMode) -> None:
        plan = plan_fronts(mode, 500.0, 700.0, 2.0, 2.0, 2.0, 2.0)
        assert plan.placements == ()
        assert plan.warnings == ()

    def test_reveals_consume_width(self) -> None:
        plan = plan_fronts(DoorMode.DOORS_LEFT, 3.0, 700.0, 2.0, 2.0, 2.0, 2.0)
        assert plan.placements == ()
        assert plan.warnings == ("Skipped doors for bay 1 because reveals consumed the width.",)

    def test_reveals_consume_height(self) -> None:
        plan = plan_fronts(DoorMode.DOORS_LEFT, 500.0, 4.0, 2.0, 2.0, 2.0, 2.0)
        assert plan.placements == ()
        assert "consumed the height" in plan.warnings[0]

    def test_negative_reveal_is_skipped(self) -> None:
        plan = plan_fronts(DoorMode.DOORS_DOUBLE, 500.0, 700.0, -1.0, 2.0, 2.0, 2.0)
        assert plan.placements == ()
        assert "negative" in plan.warnings[0]

    def test_gap_exceeding_width(self) -> None:
        plan = plan_fronts(
            DoorMode.DOORS_DOUBLE, 10.0, 700.0, 2.0, 2.0, 2.0, 10.0, bay_label="Bay 3"
        )
        assert plan.placements == ()
        assert plan.warnings == (
            "Skipped double doors for bay 3 because the gap exceeded the width.",
        )

    def test_non_finite_raises(self) -> None:
        with pytest.raises(LayoutContractError):
            plan_fronts(DoorMode.DOORS_DOUBLE, math.nan, 700.0, 2.0, 2.0, 2.0, 2.0)


class TestCheckDoubleDoor:
    """Tests for check_double_door."""

    def test_wide_bay_is_allowed(self) -> None:
        validity = check_double_door(1000.0)
        assert validity.allowed
        assert validity.leaf_width_mm == pytest.approx(497.0)
        assert validity.min_leaf_width_mm == 140.0
        assert validity.reason is None

    def test_narrow_bay_reports_leaf_width(self) -> None:
        validity = check_double_door(200.0)
        assert not validity.allowed
        assert validity.leaf_width_mm == pytest.approx(97.0)
        assert validity.reason == "Each leaf would be 97.000 mm wide (minimum 140.000 mm)."

    def test_boundary_leaf_is_allowed(self) -> None:
        assert check_double_door(286.0).allowed
        assert not check_double_door(285.9).allowed

    def test_zero_width_has_no_leaf(self) -> None:
        validity = check_double_door(0.0)
        assert not validity.allowed
        assert validity.leaf_width_mm is None

    def test_reveals_consume_width(self) -> None:
        validity = check_double_door(5.0)
        assert not validity.allowed
        assert validity.leaf_width_mm == 0.0

    def test_negative_reveal(self) -> None:
        validity = check_double_door(500.0, edge_reveal_mm=-2.0)
        assert not validity.allowed
        assert validity.leaf_width_mm is None

    def test_matches_plan_fronts(self) -> None:
        """The check derives the same leaf width the planner places."""
        plan = plan_fronts(
            DoorMode.DOORS_DOUBLE, 640.0, 700.0, 2.0, 2.0, 2.0, 3.0, right_edge_reveal_mm=1.5
        )
        validity = check_double_door(
            640.0, edge_reveal_mm=2.0, right_edge_reveal_mm=1.5, center_gap_mm=3.0
        )
        assert validity.leaf_width_mm == pytest.approx(plan.placements[0].width_mm)

    def test_custom_minimum(self) -> None:
        validity = check_double_door(200.0, min_leaf_width_mm=90.0)
        assert validity.allowed
        assert validity.min_leaf_width_mm == 90.0

    def test_non_finite_raises(self) -> None:
        with pytest.raises(LayoutContractError):
            check_double_door(math.inf)
