# backend/floorplan/routers/plans.py
# Requirements validation, plan generation and wizard defaults

from fastapi import APIRouter, HTTPException, Query
import logging

from .. import schemas
from ..services.floor_plan_generator import design_floor_plans
from ..services.plan_integrity import LayoutIntegrityError
from ..services.requirements_validator import validate_requirements
from ..services.room_sizing import (
    UnknownRoomCategory,
    create_default_requirements,
    new_room_config,
    plot_area,
    plot_coverage,
    total_room_area,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/plans", tags=["plans"])


@router.post("/validate", response_model=schemas.ValidationResponse)
async def validate_plan_requirements(body: schemas.RequirementsSchema):
    """Check requirements without generating; reports area totals for the wizard."""
    requirements = body.to_requirements()
    errors = validate_requirements(requirements)

    return schemas.ValidationResponse(
        valid=not errors,
        errors=[schemas.ValidationErrorSchema.from_error(e) for e in errors],
        total_area=total_room_area(requirements),
        plot_area=plot_area(requirements),
        coverage=plot_coverage(requirements),
    )


@router.post(
    "/generate",
    response_model=schemas.GenerateResponse,
    response_model_exclude_none=True,
)
async def generate_plans(body: schemas.RequirementsSchema):
    """Generate the three layout variants for a set of requirements."""
    requirements = body.to_requirements()

    try:
        outcome = design_floor_plans(requirements)
    except LayoutIntegrityError as e:
        logger.error(f"Generated plan failed integrity checks: {e}")
        raise HTTPException(status_code=500, detail=str(e))

    if not outcome.ok:
        logger.warning(f"Rejected requirements: {[e.message for e in outcome.errors]}")
        raise HTTPException(
            status_code=400,
            detail={
                "message": "Requirements are not valid",
                "errors": [e.to_dict() for e in outcome.errors],
            },
        )

    return schemas.GenerateResponse(
        count=len(outcome.plans),
        plans=[schemas.FloorPlanSchema.from_result(p) for p in outcome.plans],
    )


@router.get("/defaults", response_model=schemas.RequirementsSchema)
async def get_default_requirements():
    """Starting point for a new wizard session."""
    return schemas.RequirementsSchema.from_requirements(create_default_requirements())


@router.get(
    "/room-templates/{category}",
    response_model=schemas.RoomConfigSchema,
    response_model_exclude_none=True,
)
async def get_room_template(category: str, position: int = Query(1, ge=1)):
    """Default config for the room added at `position` in a category."""
    try:
        room = new_room_config(category, position)
    except UnknownRoomCategory:
        raise HTTPException(status_code=404, detail=f"Unknown room category: {category}")

    return schemas.RoomConfigSchema.from_config(room)
