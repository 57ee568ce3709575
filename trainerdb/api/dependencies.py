"""
API Dependencies Module

This module contains dependency functions for FastAPI endpoints. The MongoDB
client is created at startup and kept on the application state; these
dependencies hand it to each request.
"""

from fastapi import Depends, Request
from motor.motor_asyncio import AsyncIOMotorCollection

from trainerdb.config.database import DatabaseConnectionManager, get_trainer_collection
from trainerdb.config.settings import get_settings
from trainerdb.services.trainer_service import TrainerService


def get_collection(request: Request) -> AsyncIOMotorCollection:
    """
    Trainer collection dependency for FastAPI endpoints.

    Returns:
        AsyncIOMotorCollection: Collection bound to the application's client
    """
    return get_trainer_collection(request.app.state.mongo_client, get_settings())


def get_connection_manager(request: Request) -> DatabaseConnectionManager:
    """Connection manager created at application startup."""
    return request.app.state.connection_manager


def get_trainer_service(
    collection: AsyncIOMotorCollection = Depends(get_collection)
) -> TrainerService:
    """Trainer service bound to the request's collection."""
    return TrainerService(collection)
