# backend/floorplan/services/plan_types.py
# Value types shared by the validator, the layout engine and the API layer.
#
# All types are frozen; sequences are tuples. to_dict()/from_dict() use the
# camelCase field names of the stored project records so a plan round-trips
# through persistence unchanged.

from typing import Any, Dict, List, Optional, Tuple
from dataclasses import dataclass, field
from enum import Enum, IntEnum


# =============================================================================
# CONSTANTS & ENUMS
# =============================================================================

WALL_THICKNESS = 0.15  # meters - outer wall, shared by every result


class PlanStyle(str, Enum):
    COMPACT = "compact"
    SPACIOUS = "spacious"


class RoomType(str, Enum):
    BEDROOM = "bedroom"
    BATHROOM = "bathroom"
    ENSUITE = "ensuite"
    CORRIDOR = "corridor"
    COMMON = "common"


class DoorDirection(str, Enum):
    """Side of the doorway the swing arc occupies (also the wall it sits on)."""
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"


class DoorSwing(str, Enum):
    CW = "cw"
    CCW = "ccw"


class LayoutVariant(IntEnum):
    """The three layout algorithms, indexed as callers see them."""
    LINEAR = 0
    L_SHAPED = 1
    SPLIT = 2

    @classmethod
    def from_index(cls, index: int) -> "LayoutVariant":
        if index == 0:
            return cls.LINEAR
        if index == 1:
            return cls.L_SHAPED
        return cls.SPLIT


# =============================================================================
# REQUIREMENTS
# =============================================================================

@dataclass(frozen=True)
class RoomConfig:
    """A requested room and its size constraints (m²)."""
    id: str
    name: str
    min_size: float
    max_size: float
    preferred_size: float
    num_doors: int = 1          # collected from the wizard, not used for placement
    has_ensuite: Optional[bool] = None

    def to_dict(self) -> Dict[str, Any]:
        data = {
            'id': self.id,
            'name': self.name,
            'minSize': self.min_size,
            'maxSize': self.max_size,
            'preferredSize': self.preferred_size,
            'numDoors': self.num_doors,
        }
        if self.has_ensuite is not None:
            data['hasEnsuite'] = self.has_ensuite
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RoomConfig":
        return cls(
            id=str(data['id']),
            name=str(data.get('name', '')),
            min_size=float(data['minSize']),
            max_size=float(data['maxSize']),
            preferred_size=float(data['preferredSize']),
            num_doors=int(data.get('numDoors', 1)),
            has_ensuite=data.get('hasEnsuite'),
        )


@dataclass(frozen=True)
class UserRequirements:
    """Plot, style and the ordered room lists to lay out.

    Order matters: the first bedroom is the master in the split layout, and
    list order is left-to-right / top-to-bottom placement order everywhere.
    The num_*/has_* fields are wizard bookkeeping kept for lossless storage.
    """
    plot_width: float
    plot_depth: float
    style: PlanStyle = PlanStyle.COMPACT
    bedrooms: Tuple[RoomConfig, ...] = ()
    bathrooms: Tuple[RoomConfig, ...] = ()
    common_areas: Tuple[RoomConfig, ...] = ()
    num_bedrooms: int = 0
    num_bathrooms: int = 0
    has_garage: bool = False
    has_study: bool = False
    has_dining: bool = False

    @property
    def all_rooms(self) -> Tuple[RoomConfig, ...]:
        return self.bedrooms + self.bathrooms + self.common_areas

    @property
    def is_spacious(self) -> bool:
        return self.style == PlanStyle.SPACIOUS

    def to_dict(self) -> Dict[str, Any]:
        return {
            'plotWidth': self.plot_width,
            'plotDepth': self.plot_depth,
            'numBedrooms': self.num_bedrooms,
            'numBathrooms': self.num_bathrooms,
            'hasGarage': self.has_garage,
            'hasStudy': self.has_study,
            'hasDining': self.has_dining,
            'style': PlanStyle(self.style).value,
            'bedrooms': [r.to_dict() for r in self.bedrooms],
            'bathrooms': [r.to_dict() for r in self.bathrooms],
            'commonAreas': [r.to_dict() for r in self.common_areas],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "UserRequirements":
        return cls(
            plot_width=float(data['plotWidth']),
            plot_depth=float(data['plotDepth']),
            style=PlanStyle(data.get('style', PlanStyle.COMPACT.value)),
            bedrooms=tuple(RoomConfig.from_dict(r) for r in data.get('bedrooms', [])),
            bathrooms=tuple(RoomConfig.from_dict(r) for r in data.get('bathrooms', [])),
            common_areas=tuple(RoomConfig.from_dict(r) for r in data.get('commonAreas', [])),
            num_bedrooms=int(data.get('numBedrooms', 0)),
            num_bathrooms=int(data.get('numBathrooms', 0)),
            has_garage=bool(data.get('hasGarage', False)),
            has_study=bool(data.get('hasStudy', False)),
            has_dining=bool(data.get('hasDining', False)),
        )


@dataclass(frozen=True)
class ValidationError:
    """A single requirements problem; collected and returned, never raised."""
    field: str
    message: str

    def to_dict(self) -> Dict[str, str]:
        return {'field': self.field, 'message': self.message}


# =============================================================================
# GENERATED PLAN
# =============================================================================

@dataclass(frozen=True)
class Door:
    x: float
    y: float
    direction: DoorDirection
    swing: DoorSwing

    def to_dict(self) -> Dict[str, Any]:
        return {
            'x': self.x,
            'y': self.y,
            'direction': DoorDirection(self.direction).value,
            'swing': DoorSwing(self.swing).value,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Door":
        return cls(
            x=float(data['x']),
            y=float(data['y']),
            direction=DoorDirection(data['direction']),
            swing=DoorSwing(data['swing']),
        )


@dataclass(frozen=True)
class Room:
    """A placed room: axis-aligned rectangle in plot coordinates (meters)."""
    id: str
    type: RoomType
    label: str
    x: float
    y: float
    w: float
    h: float
    doors: Tuple[Door, ...] = ()
    has_ensuite: Optional[bool] = None

    @property
    def right(self) -> float:
        return self.x + self.w

    @property
    def bottom(self) -> float:
        return self.y + self.h

    @property
    def area(self) -> float:
        return self.w * self.h

    def to_dict(self) -> Dict[str, Any]:
        data = {
            'id': self.id,
            'type': RoomType(self.type).value,
            'label': self.label,
            'x': self.x,
            'y': self.y,
            'w': self.w,
            'h': self.h,
            'doors': [d.to_dict() for d in self.doors],
        }
        if self.has_ensuite is not None:
            data['hasEnsuite'] = self.has_ensuite
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Room":
        return cls(
            id=str(data['id']),
            type=RoomType(data['type']),
            label=str(data.get('label', '')),
            x=float(data['x']),
            y=float(data['y']),
            w=float(data['w']),
            h=float(data['h']),
            doors=tuple(Door.from_dict(d) for d in data.get('doors', [])),
            has_ensuite=data.get('hasEnsuite'),
        )


@dataclass(frozen=True)
class FloorPlanResult:
    width: float
    height: float
    rooms: Tuple[Room, ...] = ()
    wall_thickness: float = WALL_THICKNESS

    def rooms_of_type(self, room_type: RoomType) -> List[Room]:
        return [r for r in self.rooms if r.type == room_type]

    def to_dict(self) -> Dict[str, Any]:
        return {
            'width': self.width,
            'height': self.height,
            'rooms': [r.to_dict() for r in self.rooms],
            'wallThickness': self.wall_thickness,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FloorPlanResult":
        return cls(
            width=float(data['width']),
            height=float(data['height']),
            rooms=tuple(Room.from_dict(r) for r in data.get('rooms', [])),
            wall_thickness=float(data.get('wallThickness', WALL_THICKNESS)),
        )


@dataclass
class PlanBuilder:
    """Collects rooms in paint order and freezes them into a FloorPlanResult."""
    width: float
    height: float
    wall_thickness: float = WALL_THICKNESS
    rooms: List[Room] = field(default_factory=list)

    def extend(self, rooms: List[Room]) -> "PlanBuilder":
        self.rooms.extend(rooms)
        return self

    def build(self) -> FloorPlanResult:
        return FloorPlanResult(
            width=self.width,
            height=self.height,
            rooms=tuple(self.rooms),
            wall_thickness=self.wall_thickness,
        )
