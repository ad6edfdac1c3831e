# synthdata/routers/generations.py
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from typing import List
from loguru import logger

from synthdata.dependencies import get_dataset_service, get_generation_service
from synthdata.models.auth import User
from synthdata.schemas.generation import GenerationCreate, GenerationResponse
from synthdata.services.dataset_service import DatasetService
from synthdata.services.generation_service import GenerationService
from synthdata.services.security import get_current_user

router = APIRouter(
    responses={404: {"description": "Not found"}},
)


@router.get("/", response_model=List[GenerationResponse], summary="List generation runs with their metrics")
def list_generations_endpoint(
    user: User = Depends(get_current_user),
    service: GenerationService = Depends(get_generation_service),
):
    return service.list_generations(user.id)


@router.post("/", response_model=GenerationResponse, status_code=status.HTTP_201_CREATED, summary="Record a generation run")
def create_generation_endpoint(
    payload: GenerationCreate,
    user: User = Depends(get_current_user),
    datasets: DatasetService = Depends(get_dataset_service),
    service: GenerationService = Depends(get_generation_service),
):
    """
    Records a synthetic-data generation for a dataset, along with its
    privacy metrics, utility metrics and compliance report.

    - **model_type**: ctgan, tvae or gaussian_copula
    - **row_count**: 100 to 1,000,000
    - **epsilon**: 0.1 to 10
    - **k_anonymity**: 2 to 20
    """
    dataset = datasets.get_dataset(user.id, payload.dataset_id)
    if not dataset:
        raise HTTPException(status_code=404, detail="Dataset not found")
    try:
        return service.create_generation(user.id, dataset, payload)
    except SQLAlchemyError as e:
        logger.error(f"Error in create_generation_endpoint: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")


@router.get("/{generation_id}", response_model=GenerationResponse, summary="Get a generation run by ID")
def get_generation_endpoint(
    generation_id: str,
    user: User = Depends(get_current_user),
    service: GenerationService = Depends(get_generation_service),
):
    generation = service.get_generation(user.id, generation_id)
    if not generation:
        raise HTTPException(status_code=404, detail="Generation not found")
    return generation
