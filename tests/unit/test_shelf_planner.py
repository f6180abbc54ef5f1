"""Unit tests for shelf placement."""

import math

import pytest

from cabinet_layout.domain.results import LayoutContractError
from cabinet_layout.domain.services import plan_shelves, resolve_shelf_gap, shelf_name
from cabinet_layout.domain.value_objects import BayRange


@pytest.fixture
def single_bay() -> list[BayRange]:
    return [BayRange(index=0, start_mm=0.0, end_mm=500.0)]


class TestResolveShelfGap:
    """Tests for the decreasing shelf count search."""

    def test_requested_count_fits(self) -> None:
        count, gap = resolve_shelf_gap(2, 584.0, 18.0)
        assert count == 2
        assert gap == pytest.approx((584.0 - 36.0) / 3)

    def test_reduces_until_gap_fits(self) -> None:
        count, gap = resolve_shelf_gap(10, 200.0, 18.0)
        assert count == 4
        assert gap == pytest.approx(25.6)

    def test_nothing_fits(self) -> None:
        assert resolve_shelf_gap(3, 30.0, 18.0) == (0, 0.0)

    def test_zero_requested(self) -> None:
        assert resolve_shelf_gap(0, 500.0, 18.0) == (0, 0.0)


class TestPlanShelves:
    """Tests for plan_shelves."""

    def test_reduction_boundary(self, single_bay: list[BayRange]) -> None:
        """Reduced shelves and gaps exactly fill the clear height."""
        plan = plan_shelves(10, 200.0, 18.0, single_bay, 560.0)
        n = plan.shelf_count
        assert n == 4
        assert n * (18.0 + plan.gap_mm) + plan.gap_mm == pytest.approx(200.0, abs=1e-6)
        assert plan.warnings == (
            "Reduced shelves from 10 to 4 to keep at least 20.000 mm between shelves.",
        )

    def test_placements_bottom_up(self, single_bay: list[BayRange]) -> None:
        plan = plan_shelves(4, 200.0, 18.0, single_bay, 560.0)
        tops = [shelf.top_z_mm for shelf in plan.placements]
        assert tops == [
            pytest.approx(25.6 + 18.0),
            pytest.approx(2 * 25.6 + 2 * 18.0),
            pytest.approx(3 * 25.6 + 3 * 18.0),
            pytest.approx(4 * 25.6 + 4 * 18.0),
        ]
        assert plan.warnings == ()

    def test_shelf_depth_and_offset(self, single_bay: list[BayRange]) -> None:
        plan = plan_shelves(1, 400.0, 18.0, single_bay, 560.0)
        (shelf,) = plan.placements
        assert shelf.depth_mm == pytest.approx(555.0)
        assert shelf.front_offset_mm == 3.0
        assert shelf.width_mm == pytest.approx(500.0)
        assert shelf.name == "Shelf"

    def test_interior_bottom_offsets_shelves(self, single_bay: list[BayRange]) -> None:
        plan = plan_shelves(1, 400.0, 18.0, single_bay, 560.0, interior_bottom_z_mm=118.0)
        (shelf,) = plan.placements
        assert shelf.bottom_z_mm == pytest.approx(118.0 + (400.0 - 18.0) / 2)

    def test_every_bay_gets_shelves(self) -> None:
        bays = [
            BayRange(index=0, start_mm=18.0, end_mm=291.0),
            BayRange(index=1, start_mm=309.0, end_mm=582.0),
        ]
        plan = plan_shelves(2, 584.0, 18.0, bays, 582.0)
        assert len(plan.placements) == 4
        assert [shelf.name for shelf in plan.placements] == [
            "Shelf (Bay 1)",
            "Shelf (Bay 1)",
            "Shelf (Bay 2)",
            "Shelf (Bay 2)",
        ]

    def test_narrow_bay_is_skipped(self) -> None:
        bays = [
            BayRange(index=0, start_mm=0.0, end_mm=4.0),
            BayRange(index=1, start_mm=22.0, end_mm=500.0),
        ]
        plan = plan_shelves(1, 400.0, 18.0, bays, 560.0)
        assert [shelf.bay_index for shelf in plan.placements] == [1]

    def test_all_bays_too_narrow(self) -> None:
        """Without an eligible bay the plan reports no shelves at all."""
        bays = [
            BayRange(index=0, start_mm=0.0, end_mm=4.0),
            BayRange(index=1, start_mm=22.0, end_mm=27.0),
        ]
        plan = plan_shelves(1, 400.0, 18.0, bays, 560.0)
        assert plan.placements == ()
        assert plan.shelf_count == 0
        assert plan.gap_mm == 0.0
        assert plan.warnings == ("Skipped shelves because no bay is wider than 5.000 mm.",)

    def test_zero_requested_is_empty(self, single_bay: list[BayRange]) -> None:
        plan = plan_shelves(0, 400.0, 18.0, single_bay, 560.0)
        assert plan.placements == ()
        assert plan.warnings == ()

    def test_shallow_cabinet(self, single_bay: list[BayRange]) -> None:
        plan = plan_shelves(2, 400.0, 18.0, single_bay, 10.0)
        assert plan.placements == ()
        assert "too shallow" in plan.warnings[0]

    def test_non_positive_thickness(self, single_bay: list[BayRange]) -> None:
        plan = plan_shelves(2, 400.0, 0.0, single_bay, 560.0)
        assert plan.placements == ()
        assert "not positive" in plan.warnings[0]

    def test_no_room_for_any_shelf(self, single_bay: list[BayRange]) -> None:
        plan = plan_shelves(2, 50.0, 18.0, single_bay, 560.0)
        assert plan.placements == ()
        assert plan.shelf_count == 0
        assert plan.warnings == (
            "Reduced shelves from 2 to 0 to keep at least 20.000 mm between shelves.",
        )

    def test_non_finite_raises(self, single_bay: list[BayRange]) -> None:
        with pytest.raises(LayoutContractError):
            plan_shelves(2, math.nan, 18.0, single_bay, 560.0)


class TestShelfName:
    """Tests for shelf display names."""

    def test_single_bay(self) -> None:
        assert shelf_name(BayRange(index=0, start_mm=0.0, end_mm=1.0), 1) == "Shelf"

    def test_uses_bay_label(self) -> None:
        bay = BayRange(index=2, start_mm=0.0, end_mm=1.0, label="Bay 2.1")
        assert shelf_name(bay, 3) == "Shelf (Bay 2.1)"
