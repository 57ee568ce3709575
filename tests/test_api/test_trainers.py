"""
Integration tests for trainer API endpoints.

The application runs against an in-memory MongoDB collection injected
through the collection dependency.
"""

import pytest
from unittest.mock import AsyncMock, patch
from bson import ObjectId
from fastapi.testclient import TestClient

from trainerdb.api.dependencies import get_collection
from trainerdb.exceptions import RepositoryError
from trainerdb.models.document_models import Trainer
from trainerdb.main import app


class TestTrainerAPI:
    """Test class for trainer API endpoints."""

    @pytest.fixture
    def client(self, trainer_collection):
        """Create test client bound to the in-memory collection."""
        app.dependency_overrides[get_collection] = lambda: trainer_collection
        yield TestClient(app)
        app.dependency_overrides.clear()

    @pytest.fixture
    def marcus_data(self):
        return {"name": "Marcus", "age": 25, "city": "Nuporanga-SP"}

    @pytest.fixture
    def leticia_data(self):
        return {"name": "Leticia Presoto", "age": 25, "city": "Orlandia-SP"}

    def test_list_trainers_empty(self, client):
        """Test listing trainers when the collection is empty."""
        response = client.get("/api/v1/trainers")

        assert response.status_code == 200
        data = response.json()
        assert data["items"] == []
        assert data["total_count"] == 0

    def test_create_trainer_success(self, client, marcus_data):
        """Test successful trainer creation."""
        response = client.post("/api/v1/trainers", json=marcus_data)

        assert response.status_code == 201
        data = response.json()
        assert ObjectId.is_valid(data["id"])
        assert data["name"] == "Marcus"
        assert data["age"] == 25
        assert data["city"] == "Nuporanga-SP"

    def test_create_trainer_validation_error(self, client):
        response = client.post("/api/v1/trainers", json={"name": "Marcus", "age": -1, "city": "X"})

        assert response.status_code == 422

    def test_create_trainer_ignores_client_id(self, client, marcus_data):
        response = client.post("/api/v1/trainers", json={**marcus_data, "id": "client-side"})

        assert response.status_code == 201
        assert response.json()["id"] != "client-side"

    def test_get_trainer_by_id(self, client, marcus_data):
        created = client.post("/api/v1/trainers", json=marcus_data).json()

        response = client.get(f"/api/v1/trainers/{created['id']}")

        assert response.status_code == 200
        assert response.json() == created

    def test_get_trainer_not_found(self, client):
        response = client.get(f"/api/v1/trainers/{ObjectId()}")

        assert response.status_code == 404
        assert "not found" in response.json()["detail"]

    def test_get_trainer_invalid_id_not_found(self, client):
        response = client.get("/api/v1/trainers/not-an-id")

        assert response.status_code == 404

    def test_get_trainer_by_name(self, client, marcus_data, leticia_data):
        client.post("/api/v1/trainers", json=marcus_data)
        client.post("/api/v1/trainers", json=leticia_data)

        response = client.get("/api/v1/trainers/by-name/Leticia Presoto")

        assert response.status_code == 200
        assert response.json()["city"] == "Orlandia-SP"

    def test_get_trainer_by_name_not_found(self, client):
        response = client.get("/api/v1/trainers/by-name/Nobody")

        assert response.status_code == 404

    def test_delete_trainer_by_id(self, client, marcus_data):
        created = client.post("/api/v1/trainers", json=marcus_data).json()

        response = client.delete(f"/api/v1/trainers/{created['id']}")

        assert response.status_code == 204
        assert client.get(f"/api/v1/trainers/{created['id']}").status_code == 404

    def test_delete_trainer_not_found(self, client):
        response = client.delete(f"/api/v1/trainers/{ObjectId()}")

        assert response.status_code == 404

    def test_delete_by_name_scenario(self, client, marcus_data, leticia_data):
        """Create two trainers, delete one by name, list the rest."""
        client.post("/api/v1/trainers", json=marcus_data)
        client.post("/api/v1/trainers", json=leticia_data)

        assert client.delete("/api/v1/trainers/by-name/Marcus").status_code == 204
        assert client.delete("/api/v1/trainers/by-name/Marcus").status_code == 404

        data = client.get("/api/v1/trainers").json()
        assert data["total_count"] == 1
        assert data["items"][0]["name"] == "Leticia Presoto"

    def test_list_trainers_pagination_and_filters(self, client):
        for i in range(3):
            client.post("/api/v1/trainers", json={"name": f"Trainer {i}", "age": i, "city": "Uberlandia-SP"})
        client.post("/api/v1/trainers", json={"name": "Marcus", "age": 25, "city": "Nuporanga-SP"})

        page = client.get("/api/v1/trainers", params={"skip": 0, "limit": 2}).json()
        by_city = client.get("/api/v1/trainers", params={"city": "uber%"}).json()
        by_name = client.get("/api/v1/trainers", params={"name": "Marcus"}).json()

        assert page["total_count"] == 4
        assert len(page["items"]) == 2
        assert page["has_next"] is True
        assert page["total_pages"] == 2
        assert by_city["total_count"] == 3
        assert [t["name"] for t in by_name["items"]] == ["Marcus"]

    def test_list_trainers_invalid_limit(self, client):
        response = client.get("/api/v1/trainers", params={"limit": 0})

        assert response.status_code == 422

    def test_repository_error_returns_500(self, client, marcus_data):
        with patch(
            "trainerdb.services.trainer_service.TrainerService.create_trainer",
            new=AsyncMock(side_effect=RepositoryError("create", "connection lost")),
        ):
            response = client.post("/api/v1/trainers", json=marcus_data)

        assert response.status_code == 500
        assert "connection lost" in response.json()["detail"]

    def test_create_trainer_large_age(self, client):
        response = client.post("/api/v1/trainers", json={"name": "Elder", "age": 200, "city": "X"})

        assert response.status_code == 201
        assert response.json()["age"] == 200


class TestStoredTrainersOverAPI:
    """Trainers saved through the repository must read back over HTTP."""

    @pytest.fixture
    def client(self, trainer_collection):
        app.dependency_overrides[get_collection] = lambda: trainer_collection
        yield TestClient(app)
        app.dependency_overrides.clear()

    @pytest.mark.parametrize("trainer", [
        Trainer(name="Elder", age=200, city="X"),
        Trainer(name="  ", age=3, city="Y"),
        Trainer(name="Baby", age=0, city="Nuporanga-SP"),
        Trainer(name="Wanderer", age=30, city="C" * 500),
    ], ids=["large-age", "blank-name", "zero-age", "long-city"])
    async def test_stored_trainer_lists_and_gets(self, client, trainer_repository, trainer):
        saved = await trainer_repository.save(trainer)

        listed = client.get("/api/v1/trainers")
        assert listed.status_code == 200
        items = listed.json()["items"]
        assert len(items) == 1
        assert items[0]["id"] == saved.id

        fetched = client.get(f"/api/v1/trainers/{saved.id}")
        assert fetched.status_code == 200
        data = fetched.json()
        assert data["name"] == trainer.name
        assert data["age"] == trainer.age
        assert data["city"] == trainer.city
