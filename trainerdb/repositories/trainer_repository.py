"""
Trainer Repository Module

This module provides data access operations for Trainer entities, with
lookups and deletes keyed either by the store-assigned id or by name.
"""

from typing import List, Optional
from motor.motor_asyncio import AsyncIOMotorCollection
import logging

from trainerdb.models.document_models import Trainer
from trainerdb.repositories.base_repository import (
    BaseRepository, FilterCondition, FilterOperator,
    PaginationParams, PaginatedResult
)

logger = logging.getLogger(__name__)

# Upper bound on documents returned by find_all
DEFAULT_FIND_ALL_LIMIT = 100_000


class TrainerRepository(BaseRepository[Trainer]):
    """
    Repository for the Trainer entity.

    Names are not unique: saving two trainers with the same name stores two
    documents, and name-based operations act on the first match.
    """

    def __init__(self, collection: AsyncIOMotorCollection):
        super().__init__(collection, Trainer)

    def get_primary_key_field(self) -> str:
        """Get the primary key field name for Trainer documents."""
        return "_id"

    async def save(self, trainer: Trainer) -> Trainer:
        """
        Store a trainer as a new document.

        Args:
            trainer: Trainer to store; any id it carries is not written

        Returns:
            Trainer: The stored trainer with its assigned id
        """
        saved = await self.create(trainer)
        logger.info(f"Inserted: {saved.name} ({saved.id})")
        return saved

    async def find_all(self, limit: int = DEFAULT_FIND_ALL_LIMIT) -> List[Trainer]:
        """
        Get up to `limit` trainers in store-native order.

        Returns:
            List[Trainer]: Decoded trainers, empty if the collection is empty
        """
        return await self.get_all(limit=limit)

    async def find_by_id(self, trainer_id: str) -> Optional[Trainer]:
        """
        Get a trainer by its id.

        Returns:
            Optional[Trainer]: The trainer, or None if no document matches
        """
        return await self.get_by_id(trainer_id)

    async def find_by_name(self, name: str) -> Optional[Trainer]:
        """
        Get the first trainer with the given name.

        Returns:
            Optional[Trainer]: The trainer, or None if no document matches
        """
        return await self.find_one({"name": name}, operation="find_by_name")

    async def delete_by_id(self, trainer_id: str) -> int:
        """
        Delete the trainer with the given id.

        Returns:
            int: Number of deleted trainers (0 or 1)
        """
        return await self.delete(trainer_id)

    async def delete_by_name(self, name: str) -> int:
        """
        Delete the first trainer with the given name.

        Returns:
            int: Number of deleted trainers (0 or 1)
        """
        return await self.delete_one({"name": name}, operation="delete_by_name")

    async def find_paginated(self, pagination: PaginationParams,
                             name: Optional[str] = None,
                             city: Optional[str] = None) -> PaginatedResult:
        """
        Get a page of trainers, optionally filtered by exact name or city.

        Args:
            pagination: Pagination parameters
            name: Exact name to match
            city: City pattern with SQL-style wildcards, matched case-insensitively

        Returns:
            PaginatedResult: Page of trainers with metadata
        """
        filters = []
        if name is not None:
            filters.append(FilterCondition("name", FilterOperator.EQ, name))
        if city is not None:
            filters.append(FilterCondition("city", FilterOperator.ILIKE, city))

        return await self.get_paginated(pagination, filters=filters or None)
