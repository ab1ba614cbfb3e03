# backend/floorplan/services/layout_engine.py
"""
Layout engine: one requirements set + one variant -> one FloorPlanResult.

Usage:
    from .layout_engine import generate_floor_plan

    plan = generate_floor_plan(requirements, LayoutVariant.SPLIT)

The engine trusts its input. Requirements must pass validate_requirements()
first; invalid input yields degenerate rectangles, not errors.
"""

from typing import Optional, Union
import logging

from .. import config
from .plan_integrity import LayoutIntegrityError, check_floor_plan
from .plan_types import FloorPlanResult, LayoutVariant, PlanBuilder, UserRequirements
from .room_placement import LAYOUT_STRATEGIES
from .zones import allocate_zones

logger = logging.getLogger(__name__)


def generate_floor_plan(
    requirements: UserRequirements,
    variant: Union[LayoutVariant, int] = LayoutVariant.LINEAR,
    strict: Optional[bool] = None,
) -> FloorPlanResult:
    """
    Generate a single floor plan layout.

    Args:
        requirements: Validated requirements
        variant: Layout variant (0 linear, 1 L-shaped, anything else split)
        strict: Raise LayoutIntegrityError on geometry problems instead of
            logging them; defaults to the FLOORPLAN_STRICT_GEOMETRY setting

    Returns:
        FloorPlanResult covering the whole plot
    """
    variant = LayoutVariant.from_index(int(variant))
    strict = config.STRICT_GEOMETRY if strict is None else strict

    zone_plan = allocate_zones(requirements, variant)
    rooms = LAYOUT_STRATEGIES[variant](requirements, zone_plan)

    plan = (
        PlanBuilder(width=requirements.plot_width, height=requirements.plot_depth,
                    wall_thickness=zone_plan.settings.wall)
        .extend(rooms)
        .build()
    )

    report = check_floor_plan(plan)
    if not report.passed:
        if strict:
            raise LayoutIntegrityError(int(variant), report.issues)
        for issue in report.issues:
            logger.warning(f"{variant.name} layout: {issue.code} - {issue.message}")

    logger.debug(f"{variant.name} layout placed {len(plan.rooms)} rooms")
    return plan
