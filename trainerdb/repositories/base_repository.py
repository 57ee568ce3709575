"""
Base Repository Module

This module provides an abstract base repository class with common CRUD operations
and utilities for pagination and filtering over a MongoDB collection.
"""

import re
from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar
from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorCollection
from pydantic import ValidationError
from pymongo import ASCENDING, DESCENDING
from pymongo.errors import PyMongoError
import logging

from trainerdb.exceptions import RepositoryError
from trainerdb.models.document_models import DocumentModel

logger = logging.getLogger(__name__)

# Generic type for document models
ModelType = TypeVar("ModelType", bound=DocumentModel)


class FilterOperator:
    """Enumeration of supported filter operators."""
    EQ = "eq"           # Equal
    NE = "ne"           # Not equal
    GT = "gt"           # Greater than
    GTE = "gte"         # Greater than or equal
    LT = "lt"           # Less than
    LTE = "lte"         # Less than or equal
    LIKE = "like"       # SQL-style % and _ wildcards
    ILIKE = "ilike"     # Case-insensitive LIKE
    IN = "in"           # Value in list
    NOT_IN = "not_in"   # Value not in list
    IS_NULL = "is_null" # Missing or null
    IS_NOT_NULL = "is_not_null"  # Present and not null


class FilterCondition:
    """Represents a single filter condition."""

    def __init__(self, field: str, operator: str, value: Any = None):
        self.field = field
        self.operator = operator
        self.value = value

    def __repr__(self):
        return f"FilterCondition(field='{self.field}', operator='{self.operator}', value={self.value})"


class PaginationParams:
    """Parameters for pagination."""

    def __init__(self, skip: int = 0, limit: int = 100, max_limit: int = 1000):
        self.skip = max(0, skip)
        self.limit = min(max(1, limit), max_limit)
        self.max_limit = max_limit

    def __repr__(self):
        return f"PaginationParams(skip={self.skip}, limit={self.limit})"


class PaginatedResult:
    """Container for paginated query results."""

    def __init__(self, items: List[Any], total_count: int, pagination: PaginationParams):
        self.items = items
        self.total_count = total_count
        self.pagination = pagination

    @property
    def has_next(self) -> bool:
        """Check if there are more items after the current page."""
        return (self.pagination.skip + self.pagination.limit) < self.total_count

    @property
    def has_previous(self) -> bool:
        """Check if there are items before the current page."""
        return self.pagination.skip > 0

    @property
    def page_number(self) -> int:
        """Calculate current page number (1-based)."""
        return (self.pagination.skip // self.pagination.limit) + 1

    @property
    def total_pages(self) -> int:
        """Calculate total number of pages."""
        return (self.total_count + self.pagination.limit - 1) // self.pagination.limit

    def __repr__(self):
        return (f"PaginatedResult(items={len(self.items)}, total_count={self.total_count}, "
                f"page={self.page_number}/{self.total_pages})")


def like_to_regex(pattern: str) -> str:
    """Translate a SQL LIKE pattern into an anchored regular expression."""
    parts = []
    for char in pattern:
        if char == "%":
            parts.append(".*")
        elif char == "_":
            parts.append(".")
        else:
            parts.append(re.escape(char))
    return "^" + "".join(parts) + "$"


class BaseRepository(Generic[ModelType], ABC):
    """
    Abstract base repository class providing common CRUD operations.

    This class implements the Repository pattern over a single MongoDB
    collection. Documents are decoded into fresh model instances on every
    read; nothing is cached between calls.
    """

    def __init__(self, collection: AsyncIOMotorCollection, model_class: Type[ModelType]):
        """
        Initialize the repository with a collection handle and model class.

        Args:
            collection: Motor collection holding this repository's documents
            model_class: Document model class for this repository
        """
        self.collection = collection
        self.model_class = model_class

    # Abstract methods that must be implemented by subclasses

    @abstractmethod
    def get_primary_key_field(self) -> str:
        """
        Get the name of the primary key field for this collection.

        Returns:
            str: Name of the primary key field
        """
        pass

    # Common CRUD operations

    async def create(self, instance: ModelType) -> ModelType:
        """
        Insert a new document built from the given instance.

        Args:
            instance: Model to store; its id is ignored

        Returns:
            ModelType: A copy of the instance carrying the assigned id

        Raises:
            RepositoryError: If the insert fails
        """
        try:
            result = await self.collection.insert_one(instance.to_document())
            created = instance.model_copy(update={"id": str(result.inserted_id)})
            logger.debug(f"Created {self.model_class.__name__} with ID: {created.id}")
            return created
        except PyMongoError as e:
            logger.error(f"Failed to create {self.model_class.__name__}: {e}")
            raise RepositoryError("create", str(e)) from e

    async def get_by_id(self, record_id: Any) -> Optional[ModelType]:
        """
        Retrieve a record by its primary key.

        Args:
            record_id: Primary key value

        Returns:
            Optional[ModelType]: The record if found, None otherwise
        """
        key = self._primary_key_value(record_id)
        if key is None:
            logger.debug(f"Invalid {self.model_class.__name__} ID: {record_id!r}")
            return None
        return await self.find_one({self.get_primary_key_field(): key}, operation="get_by_id")

    async def find_one(self, query: Dict[str, Any],
                       operation: str = "find_one") -> Optional[ModelType]:
        """
        Retrieve the first record matching a raw query.

        Args:
            query: MongoDB query document
            operation: Operation name reported on failure

        Returns:
            Optional[ModelType]: The first matching record, None if none match
        """
        try:
            document = await self.collection.find_one(query)
            if document is None:
                logger.debug(f"No {self.model_class.__name__} matched {query}")
                return None
            logger.debug(f"Retrieved {self.model_class.__name__} matching {query}")
            return self.model_class.from_document(document)
        except (PyMongoError, ValidationError) as e:
            logger.error(f"Failed to find {self.model_class.__name__} matching {query}: {e}")
            raise RepositoryError(operation, str(e)) from e

    async def get_all(self,
                      filters: Optional[List[FilterCondition]] = None,
                      order_by: Optional[str] = None,
                      order_desc: bool = False,
                      limit: Optional[int] = None) -> List[ModelType]:
        """
        Retrieve all records matching the given filters.

        Args:
            filters: List of filter conditions
            order_by: Field name to order by; store-native order when omitted
            order_desc: Whether to order in descending order
            limit: Maximum number of records to return

        Returns:
            List[ModelType]: List of matching records
        """
        try:
            query = self._build_query(filters) if filters else {}
            cursor = self.collection.find(query, **self._find_options(order_by, order_desc, limit=limit))
            records = [self.model_class.from_document(document) async for document in cursor]
            logger.debug(f"Retrieved {len(records)} {self.model_class.__name__} records")
            return records
        except (PyMongoError, ValidationError) as e:
            logger.error(f"Failed to get all {self.model_class.__name__} records: {e}")
            raise RepositoryError("get_all", str(e)) from e

    async def get_paginated(self,
                            pagination: PaginationParams,
                            filters: Optional[List[FilterCondition]] = None,
                            order_by: Optional[str] = None,
                            order_desc: bool = False) -> PaginatedResult:
        """
        Retrieve paginated records matching the given filters.

        Args:
            pagination: Pagination parameters
            filters: List of filter conditions
            order_by: Field name to order by
            order_desc: Whether to order in descending order

        Returns:
            PaginatedResult: Paginated results with metadata
        """
        try:
            query = self._build_query(filters) if filters else {}
            total_count = await self.collection.count_documents(query)

            cursor = self.collection.find(
                query,
                **self._find_options(order_by, order_desc,
                                     skip=pagination.skip, limit=pagination.limit)
            )
            records = [self.model_class.from_document(document) async for document in cursor]

            logger.debug(f"Retrieved paginated {self.model_class.__name__} records: "
                         f"{len(records)}/{total_count} (page {pagination.skip//pagination.limit + 1})")

            return PaginatedResult(
                items=records,
                total_count=total_count,
                pagination=pagination
            )
        except (PyMongoError, ValidationError) as e:
            logger.error(f"Failed to get paginated {self.model_class.__name__} records: {e}")
            raise RepositoryError("get_paginated", str(e)) from e

    async def delete(self, record_id: Any) -> int:
        """
        Delete a record by its primary key.

        Args:
            record_id: Primary key value

        Returns:
            int: Number of deleted records (0 or 1)
        """
        key = self._primary_key_value(record_id)
        if key is None:
            logger.warning(f"{self.model_class.__name__} with ID {record_id!r} not found for deletion")
            return 0
        return await self.delete_one({self.get_primary_key_field(): key}, operation="delete")

    async def delete_one(self, query: Dict[str, Any], operation: str = "delete_one") -> int:
        """
        Delete the first record matching a raw query.

        Args:
            query: MongoDB query document
            operation: Operation name reported on failure

        Returns:
            int: Number of deleted records (0 or 1)
        """
        try:
            result = await self.collection.delete_one(query)
            deleted = result.deleted_count
            if deleted:
                logger.debug(f"Deleted {self.model_class.__name__} matching {query}")
            else:
                logger.warning(f"{self.model_class.__name__} matching {query} not found for deletion")
            return deleted
        except PyMongoError as e:
            logger.error(f"Failed to delete {self.model_class.__name__} matching {query}: {e}")
            raise RepositoryError(operation, str(e)) from e

    async def exists(self, record_id: Any) -> bool:
        """
        Check if a record exists by its primary key.

        Args:
            record_id: Primary key value

        Returns:
            bool: True if record exists, False otherwise
        """
        key = self._primary_key_value(record_id)
        if key is None:
            return False
        try:
            count = await self.collection.count_documents({self.get_primary_key_field(): key})
            return count > 0
        except PyMongoError as e:
            logger.error(f"Failed to check existence of {self.model_class.__name__} with ID {record_id}: {e}")
            raise RepositoryError("exists", str(e)) from e

    async def count(self, filters: Optional[List[FilterCondition]] = None) -> int:
        """
        Count records matching the given filters.

        Args:
            filters: List of filter conditions

        Returns:
            int: Number of matching records
        """
        try:
            query = self._build_query(filters) if filters else {}
            count = await self.collection.count_documents(query)
            logger.debug(f"Counted {count} {self.model_class.__name__} records")
            return count
        except PyMongoError as e:
            logger.error(f"Failed to count {self.model_class.__name__} records: {e}")
            raise RepositoryError("count", str(e)) from e

    # Utility methods

    def _primary_key_value(self, record_id: Any) -> Any:
        """
        Convert an external id into the stored primary key value.

        Returns None when the id cannot match any stored document.
        """
        if self.get_primary_key_field() != "_id" or isinstance(record_id, ObjectId):
            return record_id
        if isinstance(record_id, str) and ObjectId.is_valid(record_id):
            return ObjectId(record_id)
        return None

    def _find_options(self, order_by: Optional[str], order_desc: bool,
                      skip: int = 0, limit: Optional[int] = None) -> Dict[str, Any]:
        options: Dict[str, Any] = {}
        if order_by:
            options["sort"] = [(order_by, DESCENDING if order_desc else ASCENDING)]
        if skip:
            options["skip"] = skip
        if limit:
            options["limit"] = limit
        return options

    def _build_query(self, filters: List[FilterCondition]) -> Dict[str, Any]:
        """
        Translate filter conditions into a MongoDB query document.

        Args:
            filters: List of filter conditions

        Returns:
            Dict[str, Any]: Query document; empty when no condition applies
        """
        conditions = []

        for filter_condition in filters:
            field = filter_condition.field
            if field == "id":
                field = self.get_primary_key_field()
            elif field not in self.model_class.model_fields:
                logger.warning(f"Field '{field}' not found in {self.model_class.__name__}")
                continue

            operator = filter_condition.operator
            value = filter_condition.value

            if operator == FilterOperator.EQ:
                conditions.append({field: {"$eq": value}})
            elif operator == FilterOperator.NE:
                conditions.append({field: {"$ne": value}})
            elif operator == FilterOperator.GT:
                conditions.append({field: {"$gt": value}})
            elif operator == FilterOperator.GTE:
                conditions.append({field: {"$gte": value}})
            elif operator == FilterOperator.LT:
                conditions.append({field: {"$lt": value}})
            elif operator == FilterOperator.LTE:
                conditions.append({field: {"$lte": value}})
            elif operator == FilterOperator.LIKE:
                conditions.append({field: {"$regex": like_to_regex(value)}})
            elif operator == FilterOperator.ILIKE:
                conditions.append({field: {"$regex": like_to_regex(value), "$options": "i"}})
            elif operator == FilterOperator.IN:
                if isinstance(value, (list, tuple)):
                    conditions.append({field: {"$in": list(value)}})
            elif operator == FilterOperator.NOT_IN:
                if isinstance(value, (list, tuple)):
                    conditions.append({field: {"$nin": list(value)}})
            elif operator == FilterOperator.IS_NULL:
                conditions.append({field: None})
            elif operator == FilterOperator.IS_NOT_NULL:
                conditions.append({field: {"$ne": None}})
            else:
                logger.warning(f"Unsupported filter operator: {operator}")

        if not conditions:
            return {}
        if len(conditions) == 1:
            return conditions[0]
        return {"$and": conditions}

    def create_filter(self, field: str, operator: str, value: Any = None) -> FilterCondition:
        """
        Create a filter condition.

        Args:
            field: Field name
            operator: Filter operator
            value: Filter value

        Returns:
            FilterCondition: Created filter condition
        """
        return FilterCondition(field, operator, value)

    def create_range_filters(self,
                             field: str,
                             minimum: Optional[Any] = None,
                             maximum: Optional[Any] = None) -> List[FilterCondition]:
        """
        Create inclusive range filter conditions.

        Args:
            field: Name of the field
            minimum: Lower bound (inclusive)
            maximum: Upper bound (inclusive)

        Returns:
            List[FilterCondition]: List of range filters
        """
        filters = []

        if minimum is not None:
            filters.append(FilterCondition(field, FilterOperator.GTE, minimum))

        if maximum is not None:
            filters.append(FilterCondition(field, FilterOperator.LTE, maximum))

        return filters
