"""API tests for floorplan/routers/plans.py and the app shell."""
import pytest


class TestAppShell:
    def test_root(self, client):
        body = client.get("/").json()
        assert body["status"] == "running"
        assert body["message"] == "Floor Plan Designer API"
        assert "/api/v1/plans/generate" in body["endpoints"]

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
        assert response.json()["version"] == "1.0.0"


class TestValidateEndpoint:
    def test_valid(self, client, scenario_one_body):
        response = client.post("/api/v1/plans/validate", json=scenario_one_body)
        assert response.status_code == 200
        assert response.json() == {
            "valid": True,
            "errors": [],
            "totalArea": 60.0,
            "plotArea": 120.0,
            "coverage": 50.0,
        }

    def test_invalid(self, client, scenario_one_body):
        scenario_one_body["bathrooms"] = [{
            "id": "bath-1", "name": "Bathroom 1",
            "minSize": 4, "maxSize": 15, "preferredSize": 16,
        }]
        body = client.post("/api/v1/plans/validate", json=scenario_one_body).json()
        assert body["valid"] is False
        assert body["errors"] == [
            {"field": "bathroom-0", "message": '"Bathroom 1" too large. Maximum: 15 m²'},
        ]


class TestGenerateEndpoint:
    def test_three_plans(self, client, scenario_one_body):
        response = client.post("/api/v1/plans/generate", json=scenario_one_body)
        assert response.status_code == 200
        body = response.json()
        assert body["count"] == 3
        for plan in body["plans"]:
            assert (plan["width"], plan["height"], plan["wallThickness"]) == (12, 10, 0.15)
        assert [r["type"] for r in body["plans"][0]["rooms"]] == [
            "bedroom", "ensuite", "corridor", "common",
        ]

    def test_plan_rooms_serialized_camel_case(self, client, scenario_one_body):
        plans = client.post("/api/v1/plans/generate", json=scenario_one_body).json()["plans"]
        bedroom = plans[0]["rooms"][0]
        assert bedroom["id"] == "bed-1"
        assert bedroom["hasEnsuite"] is True
        assert bedroom["doors"][0] == {
            "x": pytest.approx(2.21), "y": pytest.approx(4.49),
            "direction": "down", "swing": "cw",
        }
        assert "hasEnsuite" not in plans[0]["rooms"][1]

    def test_no_rooms_rejected(self, client):
        response = client.post("/api/v1/plans/generate", json={"plotWidth": 12, "plotDepth": 10})
        assert response.status_code == 400
        detail = response.json()["detail"]
        assert detail["errors"] == [{"field": "rooms", "message": "Add at least one room"}]
        assert detail["message"]

    def test_capacity_exceeded(self, client):
        bedroom = {"minSize": 12, "maxSize": 35, "preferredSize": 30}
        body = {
            "plotWidth": 10,
            "plotDepth": 8,
            "bedrooms": [dict(bedroom, id=f"bed-{i}", name=f"Bedroom {i}") for i in range(1, 4)],
        }
        response = client.post("/api/v1/plans/generate", json=body)
        assert response.status_code == 400
        (error,) = response.json()["detail"]["errors"]
        assert error["field"] == "rooms"
        assert "(90 m²)" in error["message"]
        assert "(76 m²)" in error["message"]


class TestMalformedBodies:
    @pytest.mark.parametrize("patch", [
        {"plotWidth": 0},
        {"plotDepth": -3},
        {"style": "palatial"},
        {"plotWidth": "wide"},
    ])
    def test_rejected_with_422(self, client, scenario_one_body, patch):
        scenario_one_body.update(patch)
        response = client.post("/api/v1/plans/generate", json=scenario_one_body)
        assert response.status_code == 422
        assert response.json()["detail"]

    def test_missing_plot(self, client):
        response = client.post("/api/v1/plans/validate", json={"bedrooms": []})
        assert response.status_code == 422
        assert response.json()["message"].startswith("Malformed requirements")

    def test_room_missing_sizes(self, client, scenario_one_body):
        del scenario_one_body["commonAreas"][0]["preferredSize"]
        response = client.post("/api/v1/plans/validate", json=scenario_one_body)
        assert response.status_code == 422


class TestWizardEndpoints:
    def test_defaults(self, client):
        body = client.get("/api/v1/plans/defaults").json()
        assert body["plotWidth"] == 12
        assert body["plotDepth"] == 10
        assert body["style"] == "compact"
        assert body["bedrooms"] == [] and body["bathrooms"] == [] and body["commonAreas"] == []

    def test_bedroom_template(self, client):
        body = client.get("/api/v1/plans/room-templates/bedrooms").json()
        assert body == {
            "id": "bed-1", "name": "Master Bedroom",
            "minSize": 18, "maxSize": 35, "preferredSize": 25,
            "numDoors": 1, "hasEnsuite": True,
        }

    def test_common_template_position(self, client):
        body = client.get("/api/v1/plans/room-templates/commonAreas", params={"position": 2}).json()
        assert body["id"] == "common-2"
        assert body["name"] == "Kitchen"
        assert "hasEnsuite" not in body

    def test_unknown_category(self, client):
        response = client.get("/api/v1/plans/room-templates/garages")
        assert response.status_code == 404

    def test_position_must_be_positive(self, client):
        response = client.get("/api/v1/plans/room-templates/bathrooms", params={"position": 0})
        assert response.status_code == 422
