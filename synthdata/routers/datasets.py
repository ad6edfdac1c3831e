# synthdata/routers/datasets.py
from fastapi import APIRouter, Depends, HTTPException, UploadFile, File, Form, Query, status
from sqlalchemy.exc import SQLAlchemyError
from typing import List, Optional
from loguru import logger

from synthdata.dependencies import get_dataset_service, get_template_service
from synthdata.models.auth import User
from synthdata.schemas.dataset import DatasetFromTemplate, DatasetResponse
from synthdata.services.dataset_service import CSV_CONTENT_TYPE, DatasetService
from synthdata.services.security import get_current_user
from synthdata.services.template_service import TemplateService

router = APIRouter(
    responses={404: {"description": "Not found"}},
)


def _owned_project(service: DatasetService, user: User, project_id: str):
    project = service.get_project(user.id, project_id)
    if not project:
        raise HTTPException(status_code=404, detail="Project not found")
    return project


@router.get("/", response_model=List[DatasetResponse], summary="List datasets")
def list_datasets_endpoint(
    project_id: Optional[str] = Query(None, description="Restrict to one project"),
    user: User = Depends(get_current_user),
    service: DatasetService = Depends(get_dataset_service),
):
    return service.list_datasets(user.id, project_id)


@router.post("/upload", response_model=DatasetResponse, status_code=status.HTTP_201_CREATED, summary="Upload a CSV dataset")
async def upload_dataset_endpoint(
    project_id: str = Form(..., description="Target project"),
    file: UploadFile = File(..., description="CSV file"),
    name: Optional[str] = Form(None, description="Dataset name, defaults to the file name"),
    description: str = Form("", description="Dataset description"),
    user: User = Depends(get_current_user),
    service: DatasetService = Depends(get_dataset_service),
):
    """
    Derives a schema from the header row of the uploaded CSV and records the dataset.
    Only the header and the line count are read; no row data is stored.
    """
    if file.content_type != CSV_CONTENT_TYPE:
        raise HTTPException(status_code=400, detail="Please upload a CSV file")

    project = _owned_project(service, user, project_id)
    content = await file.read()
    try:
        return service.create_from_upload(project, file.filename, content, name=name, description=description)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except SQLAlchemyError as e:
        logger.error(f"Error in upload_dataset_endpoint: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")


@router.post("/from-template", response_model=DatasetResponse, status_code=status.HTTP_201_CREATED, summary="Create a dataset from a template")
def create_from_template_endpoint(
    payload: DatasetFromTemplate,
    user: User = Depends(get_current_user),
    service: DatasetService = Depends(get_dataset_service),
    templates: TemplateService = Depends(get_template_service),
):
    project = _owned_project(service, user, payload.project_id)
    template = templates.get_template(payload.template_id)
    if not template:
        raise HTTPException(status_code=404, detail="Template not found")
    try:
        return service.create_from_template(project, template)
    except SQLAlchemyError as e:
        logger.error(f"Error in create_from_template_endpoint: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")


@router.get("/{dataset_id}", response_model=DatasetResponse, summary="Get a dataset by ID")
def get_dataset_endpoint(
    dataset_id: str,
    user: User = Depends(get_current_user),
    service: DatasetService = Depends(get_dataset_service),
):
    dataset = service.get_dataset(user.id, dataset_id)
    if not dataset:
        raise HTTPException(status_code=404, detail="Dataset not found")
    return dataset
