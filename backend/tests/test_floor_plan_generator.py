"""Tests for floorplan/services/floor_plan_generator.py."""
import pytest

from floorplan.services import floor_plan_generator
from floorplan.services.floor_plan_generator import (
    FloorPlanGenerator, GenerationOutcome, design_floor_plans, generate_floor_plans,
)
from floorplan.services.layout_engine import generate_floor_plan
from floorplan.services.plan_types import RoomType, UserRequirements


class TestGenerateFloorPlans:
    def test_three_variants_in_order(self, scenario_one):
        plans = generate_floor_plans(scenario_one)
        assert plans == [generate_floor_plan(scenario_one, variant) for variant in (0, 1, 2)]

    def test_scenario_one_results(self, scenario_one):
        plans = generate_floor_plans(scenario_one)
        assert len(plans) == 3
        for plan in plans:
            assert (plan.width, plan.height, plan.wall_thickness) == (12, 10, 0.15)
        linear_types = {r.type for r in plans[0].rooms}
        assert linear_types == {
            RoomType.BEDROOM, RoomType.ENSUITE, RoomType.CORRIDOR, RoomType.COMMON,
        }

    def test_deterministic(self, family_home):
        assert generate_floor_plans(family_home) == generate_floor_plans(family_home)

    def test_generator_class(self, family_home):
        assert FloorPlanGenerator().generate(family_home) == generate_floor_plans(family_home)

    def test_errors_propagate(self, scenario_one, monkeypatch):
        def boom(requirements):
            raise RuntimeError("layout failed")

        monkeypatch.setattr(FloorPlanGenerator, "generate", lambda self, req: boom(req))
        with pytest.raises(RuntimeError, match="layout failed"):
            generate_floor_plans(scenario_one)


class TestDesignFloorPlans:
    def test_valid_requirements(self, scenario_one):
        outcome = design_floor_plans(scenario_one)
        assert outcome.ok
        assert outcome.errors == []
        assert len(outcome.plans) == 3

    def test_invalid_requirements_skip_generation(self, monkeypatch):
        def fail(requirements):
            raise AssertionError("generation must not run")

        monkeypatch.setattr(floor_plan_generator, "generate_floor_plans", fail)
        outcome = design_floor_plans(UserRequirements(plot_width=12, plot_depth=10))

        assert not outcome.ok
        assert outcome.plans == []
        assert outcome.errors[0].field == "rooms"

    def test_outcome_defaults(self):
        assert GenerationOutcome().ok
