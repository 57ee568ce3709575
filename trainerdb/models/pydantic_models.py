"""
Pydantic models for API request/response validation and serialization.

This module contains the Pydantic schemas used by the trainer endpoints.
"""

from typing import List
from pydantic import BaseModel, Field, field_validator, ConfigDict


# Base schemas
class BaseSchema(BaseModel):
    """Base schema with common configuration."""
    model_config = ConfigDict(from_attributes=True, protected_namespaces=())


# Trainer schemas
class TrainerBase(BaseSchema):
    """Base trainer schema; same limits as the stored Trainer entity."""
    name: str = Field(..., min_length=1)
    age: int = Field(..., ge=0)
    city: str


class TrainerCreate(TrainerBase):
    """Schema for creating a new trainer."""

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        """Reject names made only of whitespace."""
        if not v.strip():
            raise ValueError('name must not be blank')
        return v.strip()


class TrainerResponse(TrainerBase):
    """Schema for trainer response data."""
    id: str


class TrainerListResponse(BaseSchema):
    """Schema for a page of trainers."""
    items: List[TrainerResponse]
    total_count: int
    skip: int
    limit: int
    has_next: bool
    has_previous: bool
    page_number: int
    total_pages: int
