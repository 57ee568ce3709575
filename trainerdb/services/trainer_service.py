"""
Trainer Service Module

This module provides business logic for trainer operations on top of the
trainer repository: input validation and explicit not-found signalling.
"""

from typing import Any, Dict, Optional
from motor.motor_asyncio import AsyncIOMotorCollection
import logging

from trainerdb.exceptions import TrainerNotFoundError
from trainerdb.models.document_models import Trainer
from trainerdb.repositories.base_repository import PaginationParams, PaginatedResult
from trainerdb.repositories.trainer_repository import TrainerRepository

logger = logging.getLogger(__name__)


class TrainerService:
    """
    Service class for trainer-related business logic.

    Repository lookups return None for a missing trainer; this service turns
    that into TrainerNotFoundError so callers get one explicit signal.
    """

    def __init__(self, collection: AsyncIOMotorCollection):
        """
        Initialize the trainer service with a collection handle.

        Args:
            collection: Motor collection holding trainer documents
        """
        self.collection = collection
        self.trainer_repository = TrainerRepository(collection)

    async def create_trainer(self, trainer_data: Dict[str, Any]) -> Trainer:
        """
        Create a new trainer with validation.

        Args:
            trainer_data: Trainer data dictionary

        Returns:
            Trainer: Created trainer with its assigned id

        Raises:
            ValueError: If validation fails
        """
        required_fields = ['name', 'age', 'city']
        for field in required_fields:
            if trainer_data.get(field) is None or trainer_data.get(field) == "":
                raise ValueError(f"Required field '{field}' is missing or empty")

        age = trainer_data['age']
        if isinstance(age, bool) or not isinstance(age, int) or age < 0:
            raise ValueError("Age must be a non-negative integer")

        trainer = Trainer(
            name=trainer_data['name'],
            age=trainer_data['age'],
            city=trainer_data['city'],
        )
        created = await self.trainer_repository.save(trainer)

        logger.info(f"Created trainer: {created.id} - {created.name}")
        return created

    async def get_trainer_by_id(self, trainer_id: str) -> Trainer:
        """
        Get trainer by ID.

        Raises:
            TrainerNotFoundError: If no trainer has this id
        """
        trainer = await self.trainer_repository.find_by_id(trainer_id)
        if trainer is None:
            logger.warning(f"Trainer not found: {trainer_id}")
            raise TrainerNotFoundError(trainer_id)
        return trainer

    async def get_trainer_by_name(self, name: str) -> Trainer:
        """
        Get the first trainer with the given name.

        Raises:
            TrainerNotFoundError: If no trainer has this name
        """
        trainer = await self.trainer_repository.find_by_name(name)
        if trainer is None:
            logger.warning(f"Trainer not found: {name}")
            raise TrainerNotFoundError(name)
        return trainer

    async def list_trainers(self,
                            pagination: PaginationParams,
                            name: Optional[str] = None,
                            city: Optional[str] = None) -> PaginatedResult:
        """Get a page of trainers, optionally filtered by name or city pattern."""
        return await self.trainer_repository.find_paginated(pagination, name=name, city=city)

    async def delete_trainer_by_id(self, trainer_id: str) -> None:
        """
        Delete a trainer by ID.

        Raises:
            TrainerNotFoundError: If nothing was deleted
        """
        deleted = await self.trainer_repository.delete_by_id(trainer_id)
        if not deleted:
            raise TrainerNotFoundError(trainer_id)
        logger.info(f"Deleted trainer: {trainer_id}")

    async def delete_trainer_by_name(self, name: str) -> None:
        """
        Delete the first trainer with the given name.

        Raises:
            TrainerNotFoundError: If nothing was deleted
        """
        deleted = await self.trainer_repository.delete_by_name(name)
        if not deleted:
            raise TrainerNotFoundError(name)
        logger.info(f"Deleted trainer: {name}")
