"""
Repository Layer Package

This package contains the repository classes for data access operations.
Repositories provide an abstraction layer between the service layer and the
MongoDB collections, implementing the Repository pattern.
"""

from .base_repository import BaseRepository
from .trainer_repository import TrainerRepository

__all__ = [
    "BaseRepository",
    "TrainerRepository",
]
