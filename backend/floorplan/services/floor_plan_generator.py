# backend/floorplan/services/floor_plan_generator.py
from typing import List
from dataclasses import dataclass, field
import logging

from .layout_engine import generate_floor_plan
from .plan_types import (
    FloorPlanResult, LayoutVariant, PlanStyle, UserRequirements, ValidationError,
)
from .requirements_validator import validate_requirements

logger = logging.getLogger(__name__)


class FloorPlanGenerator:
    """Rule-based generator producing one plan per layout variant"""

    variants = (LayoutVariant.LINEAR, LayoutVariant.L_SHAPED, LayoutVariant.SPLIT)

    def generate(self, requirements: UserRequirements) -> List[FloorPlanResult]:
        """Generate 3 floor plan layout variants"""
        logger.info(
            f"Generating floor plans for: {requirements.plot_width}m x {requirements.plot_depth}m, "
            f"{len(requirements.bedrooms)} bed, {len(requirements.bathrooms)} bath, "
            f"{len(requirements.common_areas)} common ({PlanStyle(requirements.style).value})"
        )

        return [generate_floor_plan(requirements, variant) for variant in self.variants]


@dataclass
class GenerationOutcome:
    """Either the validation errors that blocked generation, or the plans."""
    errors: List[ValidationError] = field(default_factory=list)
    plans: List[FloorPlanResult] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


def generate_floor_plans(requirements: UserRequirements) -> List[FloorPlanResult]:
    """Main entry point for floor plan generation (variants 0, 1, 2 in order)"""
    try:
        generator = FloorPlanGenerator()
        plans = generator.generate(requirements)
        logger.info(f"Successfully generated {len(plans)} floor plan(s)")
        return plans
    except Exception as e:
        logger.error(f"Error generating floor plans: {e}")
        raise


def design_floor_plans(requirements: UserRequirements) -> GenerationOutcome:
    """
    Validate requirements, then generate only if they pass.

    Args:
        requirements: Plot, style and room lists

    Returns:
        GenerationOutcome with errors (nothing generated) or three plans
    """
    errors = validate_requirements(requirements)
    if errors:
        logger.info(f"Generation blocked by {len(errors)} validation error(s)")
        return GenerationOutcome(errors=errors)

    return GenerationOutcome(plans=generate_floor_plans(requirements))
