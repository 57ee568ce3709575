# Data models module

from .document_models import DocumentModel, Trainer
from .pydantic_models import (
    # Trainer schemas
    TrainerCreate, TrainerResponse, TrainerListResponse,
)

__all__ = [
    # Document models
    "DocumentModel", "Trainer",
    # Pydantic schemas
    "TrainerCreate", "TrainerResponse", "TrainerListResponse",
]
