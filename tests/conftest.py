"""
Shared fixtures for the trainer repository tests.
"""

import os

os.environ.setdefault("SKIP_DB_INIT", "true")

import pytest
from mongomock_motor import AsyncMongoMockClient

from trainerdb.config.settings import Settings
from trainerdb.models.document_models import Trainer
from trainerdb.repositories.trainer_repository import TrainerRepository


@pytest.fixture
def test_settings():
    """Settings pointing at a throwaway database."""
    return Settings(
        mongodb_url="mongodb://localhost:27017",
        mongodb_database="test_dbtrainers",
        mongodb_collection="trainers",
        skip_db_init=False,
    )


@pytest.fixture
def mongo_client():
    """Create an in-memory MongoDB client for testing."""
    return AsyncMongoMockClient()


@pytest.fixture
def trainer_collection(mongo_client, test_settings):
    """Empty trainer collection on the in-memory client."""
    return mongo_client[test_settings.mongodb_database][test_settings.mongodb_collection]


@pytest.fixture
def trainer_repository(trainer_collection):
    """TrainerRepository bound to the in-memory collection."""
    return TrainerRepository(trainer_collection)


@pytest.fixture
def marcus():
    return Trainer(name="Marcus", age=25, city="Nuporanga-SP")


@pytest.fixture
def leticia():
    return Trainer(name="Leticia Presoto", age=25, city="Orlandia-SP")
