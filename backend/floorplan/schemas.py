from pydantic import BaseModel, Field
from typing import Optional, List

from .services.plan_types import (
    Door, DoorDirection, DoorSwing, FloorPlanResult, PlanStyle, Room,
    RoomConfig, RoomType, UserRequirements, ValidationError,
)

# Request and response bodies use the camelCase names of the wizard;
# Python code may use either name.


# Requirement Schemas
class RoomConfigSchema(BaseModel):
    id: str
    name: str = ""
    min_size: float = Field(..., alias="minSize")
    max_size: float = Field(..., alias="maxSize")
    preferred_size: float = Field(..., alias="preferredSize")
    num_doors: int = Field(1, alias="numDoors", ge=0)
    has_ensuite: Optional[bool] = Field(None, alias="hasEnsuite")

    class Config:
        populate_by_name = True

    def to_config(self) -> RoomConfig:
        return RoomConfig(
            id=self.id,
            name=self.name,
            min_size=self.min_size,
            max_size=self.max_size,
            preferred_size=self.preferred_size,
            num_doors=self.num_doors,
            has_ensuite=self.has_ensuite,
        )

    @classmethod
    def from_config(cls, room: RoomConfig) -> "RoomConfigSchema":
        return cls.model_validate(room.to_dict())


class RequirementsSchema(BaseModel):
    plot_width: float = Field(..., alias="plotWidth", gt=0)
    plot_depth: float = Field(..., alias="plotDepth", gt=0)
    style: PlanStyle = PlanStyle.COMPACT
    bedrooms: List[RoomConfigSchema] = []
    bathrooms: List[RoomConfigSchema] = []
    common_areas: List[RoomConfigSchema] = Field(default_factory=list, alias="commonAreas")
    num_bedrooms: int = Field(0, alias="numBedrooms", ge=0)
    num_bathrooms: int = Field(0, alias="numBathrooms", ge=0)
    has_garage: bool = Field(False, alias="hasGarage")
    has_study: bool = Field(False, alias="hasStudy")
    has_dining: bool = Field(False, alias="hasDining")

    class Config:
        populate_by_name = True

    def to_requirements(self) -> UserRequirements:
        return UserRequirements(
            plot_width=self.plot_width,
            plot_depth=self.plot_depth,
            style=self.style,
            bedrooms=tuple(r.to_config() for r in self.bedrooms),
            bathrooms=tuple(r.to_config() for r in self.bathrooms),
            common_areas=tuple(r.to_config() for r in self.common_areas),
            num_bedrooms=self.num_bedrooms,
            num_bathrooms=self.num_bathrooms,
            has_garage=self.has_garage,
            has_study=self.has_study,
            has_dining=self.has_dining,
        )

    @classmethod
    def from_requirements(cls, requirements: UserRequirements) -> "RequirementsSchema":
        return cls.model_validate(requirements.to_dict())


# Validation Schemas
class ValidationErrorSchema(BaseModel):
    field: str
    message: str

    @classmethod
    def from_error(cls, error: ValidationError) -> "ValidationErrorSchema":
        return cls(field=error.field, message=error.message)


class ValidationResponse(BaseModel):
    valid: bool
    errors: List[ValidationErrorSchema] = []
    total_area: float = Field(..., alias="totalArea")
    plot_area: float = Field(..., alias="plotArea")
    coverage: float

    class Config:
        populate_by_name = True


# Floor Plan Schemas
class DoorSchema(BaseModel):
    x: float
    y: float
    direction: DoorDirection
    swing: DoorSwing

    @classmethod
    def from_door(cls, door: Door) -> "DoorSchema":
        return cls(x=door.x, y=door.y, direction=door.direction, swing=door.swing)


class RoomSchema(BaseModel):
    id: str
    type: RoomType
    label: str
    x: float
    y: float
    w: float
    h: float
    doors: List[DoorSchema] = []
    has_ensuite: Optional[bool] = Field(None, alias="hasEnsuite")

    class Config:
        populate_by_name = True

    @classmethod
    def from_room(cls, room: Room) -> "RoomSchema":
        return cls(
            id=room.id, type=room.type, label=room.label,
            x=room.x, y=room.y, w=room.w, h=room.h,
            doors=[DoorSchema.from_door(d) for d in room.doors],
            has_ensuite=room.has_ensuite,
        )


class FloorPlanSchema(BaseModel):
    width: float
    height: float
    rooms: List[RoomSchema] = []
    wall_thickness: float = Field(..., alias="wallThickness")

    class Config:
        populate_by_name = True

    @classmethod
    def from_result(cls, plan: FloorPlanResult) -> "FloorPlanSchema":
        return cls(
            width=plan.width,
            height=plan.height,
            rooms=[RoomSchema.from_room(r) for r in plan.rooms],
            wall_thickness=plan.wall_thickness,
        )


class GenerateResponse(BaseModel):
    count: int
    plans: List[FloorPlanSchema]
