"""
Database Configuration Module

This module handles MongoDB client construction, collection access, health
checks, and connection utilities. The client is created once per process and
passed explicitly to whatever needs it.
"""

import asyncio
import logging
from typing import Optional
from motor.motor_asyncio import (
    AsyncIOMotorClient,
    AsyncIOMotorCollection,
    AsyncIOMotorDatabase,
)
from pymongo.errors import AutoReconnect, ConnectionFailure, PyMongoError
from trainerdb.config.settings import Settings, get_settings

# Configure logging
logger = logging.getLogger(__name__)

HEALTHCHECK_COLLECTION = "_healthcheck"


def create_client(settings: Optional[Settings] = None) -> AsyncIOMotorClient:
    """
    Create the MongoDB client. No connection is made until the first operation.

    Args:
        settings: Application settings, defaults to the cached settings

    Returns:
        AsyncIOMotorClient: Client bound to the configured URI
    """
    settings = settings or get_settings()
    client = AsyncIOMotorClient(
        settings.mongodb_url,
        serverSelectionTimeoutMS=settings.mongodb_server_selection_timeout_ms,
        maxPoolSize=settings.mongodb_max_pool_size,
    )
    logger.debug(f"Created MongoDB client for {settings.mongodb_url}")
    return client


def get_database(client: AsyncIOMotorClient,
                 settings: Optional[Settings] = None) -> AsyncIOMotorDatabase:
    """Get the configured working database."""
    settings = settings or get_settings()
    return client[settings.mongodb_database]


def get_trainer_collection(client: AsyncIOMotorClient,
                           settings: Optional[Settings] = None) -> AsyncIOMotorCollection:
    """Get the configured trainer collection."""
    settings = settings or get_settings()
    return get_database(client, settings)[settings.mongodb_collection]


async def retry_database_operation(
    operation,
    max_retries: int = 3,
    retry_delay: float = 1.0,
    backoff_factor: float = 2.0
):
    """
    Retry database operations with exponential backoff.

    Args:
        operation: Async function to retry
        max_retries: Maximum number of retry attempts
        retry_delay: Initial delay between retries in seconds
        backoff_factor: Multiplier for delay on each retry

    Returns:
        Result of the operation

    Raises:
        ConnectionFailure: If all retry attempts fail
    """
    last_exception = None

    for attempt in range(max_retries + 1):
        try:
            return await operation()
        except (ConnectionFailure, AutoReconnect) as e:
            last_exception = e
            if attempt < max_retries:
                delay = retry_delay * (backoff_factor ** attempt)
                logger.warning(
                    f"Database operation failed (attempt {attempt + 1}/{max_retries + 1}): {e}. "
                    f"Retrying in {delay:.1f} seconds..."
                )
                await asyncio.sleep(delay)
            else:
                logger.error(f"Database operation failed after {max_retries + 1} attempts: {e}")
        except Exception as e:
            # Don't retry for non-connection related errors
            logger.error(f"Database operation failed with non-retryable error: {e}")
            raise

    raise last_exception


async def ping_database(client: AsyncIOMotorClient) -> None:
    """
    Ping the server, raising if it cannot be reached.

    Raises:
        ConnectionFailure: If the server is unreachable
    """
    await client.admin.command("ping")


async def check_database_connection(client: AsyncIOMotorClient,
                                    max_retries: int = 2,
                                    retry_delay: float = 1.0) -> bool:
    """
    Check if database connection is healthy.

    Returns:
        bool: True if connection is healthy, False otherwise
    """
    try:
        async def _check_connection():
            await ping_database(client)
            return True

        return await retry_database_operation(
            _check_connection, max_retries=max_retries, retry_delay=retry_delay
        )
    except Exception as e:
        logger.error(f"Database health check failed: {e}")
        return False


async def get_database_info(client: AsyncIOMotorClient,
                            settings: Optional[Settings] = None) -> Optional[dict]:
    """
    Get database information and statistics.

    Returns:
        dict: Database information or None if connection fails
    """
    settings = settings or get_settings()
    try:
        async def _get_info():
            server_info = await client.server_info()
            database = get_database(client, settings)
            collection_names = await database.list_collection_names()
            collection_exists = settings.mongodb_collection in collection_names

            info = {
                "version": server_info.get("version"),
                "database_name": settings.mongodb_database,
                "collection_name": settings.mongodb_collection,
                "collection_exists": collection_exists,
            }

            if collection_exists:
                collection = database[settings.mongodb_collection]
                info["document_count"] = await collection.count_documents({})

            return info

        return await retry_database_operation(_get_info)
    except Exception as e:
        logger.error(f"Failed to get database info: {e}")
        return None


async def init_database(client: AsyncIOMotorClient,
                        settings: Optional[Settings] = None,
                        max_retries: int = 3,
                        retry_delay: float = 1.0):
    """
    Verify connectivity and make sure the trainer collection exists.

    Raises:
        PyMongoError: If the server is unreachable or the collection
            cannot be created
    """
    settings = settings or get_settings()
    if settings.skip_db_init:
        logger.info("Database initialization skipped (SKIP_DB_INIT=True)")
        return

    try:
        async def _init_db():
            await ping_database(client)
            database = get_database(client, settings)
            collection_names = await database.list_collection_names()
            if settings.mongodb_collection not in collection_names:
                await database.create_collection(settings.mongodb_collection)
                logger.info(f"Created collection '{settings.mongodb_collection}'")
            else:
                logger.info(f"Collection '{settings.mongodb_collection}' already exists")

        await retry_database_operation(
            _init_db, max_retries=max_retries, retry_delay=retry_delay
        )
        logger.info(f"Database '{settings.mongodb_database}' initialized successfully")

    except PyMongoError as e:
        logger.error(f"Database initialization failed: {e}")
        raise


async def drop_database(client: AsyncIOMotorClient,
                        settings: Optional[Settings] = None):
    """Drop the working database. Destructive; used for demo cleanup."""
    settings = settings or get_settings()
    await client.drop_database(settings.mongodb_database)
    logger.info(f"Dropped database '{settings.mongodb_database}'")


async def close_database(client: AsyncIOMotorClient):
    """
    Close database connections with proper cleanup.
    This will be called during application shutdown.
    """
    try:
        client.close()
        logger.info("Database connections closed successfully")
    except Exception as e:
        logger.warning(f"Error closing database connections: {e}")


class DatabaseConnectionManager:
    """
    Database connection manager with health monitoring utilities.
    """

    def __init__(self, client: AsyncIOMotorClient, settings: Optional[Settings] = None):
        self.client = client
        self.settings = settings or get_settings()

    async def health_check(self) -> dict:
        """
        Comprehensive database health check.

        Returns:
            dict: Health check results with connection status and server info
        """
        health_info = {
            "status": "unhealthy",
            "database_info": None,
            "error": None
        }

        try:
            is_healthy = await check_database_connection(self.client)
            if not is_healthy:
                health_info["error"] = "Database connection failed"
                return health_info

            health_info["database_info"] = await get_database_info(self.client, self.settings)
            health_info["status"] = "healthy"

        except Exception as e:
            health_info["error"] = str(e)
            logger.error(f"Database health check failed: {e}")

        return health_info

    async def test_crud_operations(self) -> dict:
        """
        Write, read, and delete a probe document in a scratch collection.

        Returns:
            dict: Test results for each operation
        """
        test_results = {
            "insert": False,
            "find": False,
            "delete": False,
            "error": None
        }

        collection = get_database(self.client, self.settings)[HEALTHCHECK_COLLECTION]
        try:
            result = await collection.insert_one({"probe": True})
            test_results["insert"] = True

            document = await collection.find_one({"_id": result.inserted_id})
            if document and document.get("probe") is True:
                test_results["find"] = True

            delete_result = await collection.delete_one({"_id": result.inserted_id})
            test_results["delete"] = delete_result.deleted_count == 1

        except Exception as e:
            test_results["error"] = str(e)
            logger.error(f"CRUD operations test failed: {e}")

        return test_results
