"""Shared requirement fixtures for floor plan tests."""
import pytest
from fastapi.testclient import TestClient

from floorplan.services.plan_types import PlanStyle, RoomConfig, UserRequirements


def make_room(room_id, name, preferred, min_size, max_size, has_ensuite=None):
    """RoomConfig with the common defaults filled in."""
    return RoomConfig(
        id=room_id,
        name=name,
        min_size=min_size,
        max_size=max_size,
        preferred_size=preferred,
        has_ensuite=has_ensuite,
    )


@pytest.fixture(name="make_room")
def make_room_fixture():
    """Factory for RoomConfig values."""
    return make_room


@pytest.fixture
def master_bedroom():
    return make_room("bed-1", "Master Bedroom", 25, 18, 35, has_ensuite=True)


@pytest.fixture
def living_room():
    return make_room("common-1", "Living Room", 35, 20, 50)


@pytest.fixture
def scenario_one(master_bedroom, living_room):
    """12 x 10 compact plot: master bedroom with ensuite and one living room."""
    return UserRequirements(
        plot_width=12,
        plot_depth=10,
        style=PlanStyle.COMPACT,
        bedrooms=(master_bedroom,),
        common_areas=(living_room,),
    )


@pytest.fixture
def family_home():
    """15 x 12 spacious plot with every room category populated."""
    return UserRequirements(
        plot_width=15,
        plot_depth=12,
        style=PlanStyle.SPACIOUS,
        bedrooms=(
            make_room("bed-1", "Master Bedroom", 25, 18, 35, has_ensuite=True),
            make_room("bed-2", "Bedroom 2", 15, 12, 20, has_ensuite=False),
            make_room("bed-3", "Bedroom 3", 15, 12, 20, has_ensuite=True),
        ),
        bathrooms=(
            make_room("bath-1", "Bathroom 1", 8, 4, 15),
            make_room("bath-2", "Bathroom 2", 6, 4, 15),
        ),
        common_areas=(
            make_room("common-1", "Living Room", 35, 20, 50),
            make_room("common-2", "Kitchen", 18, 12, 30),
            make_room("common-3", "Dining Room", 14, 12, 30),
        ),
    )


@pytest.fixture
def scenario_one_body():
    """Scenario one as the camelCase JSON the wizard posts."""
    return {
        "plotWidth": 12,
        "plotDepth": 10,
        "style": "compact",
        "bedrooms": [{
            "id": "bed-1", "name": "Master Bedroom",
            "minSize": 18, "maxSize": 35, "preferredSize": 25,
            "numDoors": 1, "hasEnsuite": True,
        }],
        "bathrooms": [],
        "commonAreas": [{
            "id": "common-1", "name": "Living Room",
            "minSize": 20, "maxSize": 50, "preferredSize": 35, "numDoors": 1,
        }],
    }


@pytest.fixture
def client():
    from floorplan.main import app
    return TestClient(app)
