"""
Trainer API Routes

This module provides REST API endpoints for trainer management operations:
create, list, lookup by id or name, and delete by id or name.
"""

from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from trainerdb.api.dependencies import get_trainer_service
from trainerdb.exceptions import RepositoryError, TrainerNotFoundError
from trainerdb.models.pydantic_models import (
    TrainerCreate, TrainerResponse, TrainerListResponse
)
from trainerdb.repositories.base_repository import PaginationParams
from trainerdb.services.trainer_service import TrainerService

router = APIRouter()


@router.get("/trainers", response_model=TrainerListResponse)
async def list_trainers(
    skip: int = Query(0, ge=0, description="Number of trainers to skip"),
    limit: int = Query(100, ge=1, le=1000, description="Maximum number of trainers to return"),
    name: Optional[str] = Query(None, description="Filter by exact name"),
    city: Optional[str] = Query(None, description="Filter by city pattern, % and _ wildcards"),
    service: TrainerService = Depends(get_trainer_service)
):
    """
    List trainers with pagination and optional filtering.

    Args:
        skip: Number of trainers to skip
        limit: Page size
        name: Optional exact name filter
        city: Optional city pattern filter
        service: Trainer service

    Returns:
        TrainerListResponse: Page of trainers
    """
    try:
        page = await service.list_trainers(
            PaginationParams(skip=skip, limit=limit), name=name, city=city
        )

        return TrainerListResponse(
            items=[TrainerResponse.model_validate(trainer) for trainer in page.items],
            total_count=page.total_count,
            skip=page.pagination.skip,
            limit=page.pagination.limit,
            has_next=page.has_next,
            has_previous=page.has_previous,
            page_number=page.page_number,
            total_pages=page.total_pages,
        )

    except RepositoryError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to retrieve trainers: {str(e)}"
        )


@router.post("/trainers", response_model=TrainerResponse, status_code=status.HTTP_201_CREATED)
async def create_trainer(
    trainer_data: TrainerCreate,
    service: TrainerService = Depends(get_trainer_service)
):
    """
    Create a new trainer.

    Args:
        trainer_data: Trainer creation data
        service: Trainer service

    Returns:
        TrainerResponse: Created trainer with its assigned id
    """
    try:
        trainer = await service.create_trainer(trainer_data.model_dump())

        return TrainerResponse.model_validate(trainer)

    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )
    except RepositoryError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to create trainer: {str(e)}"
        )


@router.get("/trainers/by-name/{name}", response_model=TrainerResponse)
async def get_trainer_by_name(
    name: str,
    service: TrainerService = Depends(get_trainer_service)
):
    """
    Get the first trainer with the given name.

    Args:
        name: Trainer name
        service: Trainer service

    Returns:
        TrainerResponse: Trainer details
    """
    try:
        trainer = await service.get_trainer_by_name(name)
        return TrainerResponse.model_validate(trainer)

    except TrainerNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except RepositoryError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to retrieve trainer: {str(e)}"
        )


@router.get("/trainers/{trainer_id}", response_model=TrainerResponse)
async def get_trainer(
    trainer_id: str,
    service: TrainerService = Depends(get_trainer_service)
):
    """
    Get trainer details by ID.

    Args:
        trainer_id: Trainer identifier
        service: Trainer service

    Returns:
        TrainerResponse: Trainer details
    """
    try:
        trainer = await service.get_trainer_by_id(trainer_id)
        return TrainerResponse.model_validate(trainer)

    except TrainerNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except RepositoryError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to retrieve trainer: {str(e)}"
        )


@router.delete("/trainers/by-name/{name}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_trainer_by_name(
    name: str,
    service: TrainerService = Depends(get_trainer_service)
):
    """Delete the first trainer with the given name."""
    try:
        await service.delete_trainer_by_name(name)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    except TrainerNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except RepositoryError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to delete trainer: {str(e)}"
        )


@router.delete("/trainers/{trainer_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_trainer(
    trainer_id: str,
    service: TrainerService = Depends(get_trainer_service)
):
    """Delete a trainer by ID."""
    try:
        await service.delete_trainer_by_id(trainer_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    except TrainerNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except RepositoryError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to delete trainer: {str(e)}"
        )
