# synthdata/routers/projects.py
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from typing import List
from loguru import logger

from synthdata.dependencies import get_project_service
from synthdata.models.auth import User
from synthdata.schemas.project import ProjectCreate, ProjectResponse
from synthdata.services.project_service import ProjectService
from synthdata.services.security import get_current_user

router = APIRouter(
    responses={404: {"description": "Not found"}},
)


@router.get("/", response_model=List[ProjectResponse], summary="List the user's projects")
def list_projects_endpoint(
    user: User = Depends(get_current_user),
    service: ProjectService = Depends(get_project_service),
):
    """
    Lists the signed-in user's projects, newest first.
    """
    return service.list_projects(user.id)


@router.post("/", response_model=ProjectResponse, status_code=status.HTTP_201_CREATED, summary="Create a project")
def create_project_endpoint(
    payload: ProjectCreate,
    user: User = Depends(get_current_user),
    service: ProjectService = Depends(get_project_service),
):
    """
    Creates a project owned by the signed-in user.

    - **name**: project name (required)
    - **description**: free text
    - **industry**: one of fintech, banking, insurance, telco, healthcare
    """
    try:
        return service.create_project(user.id, payload)
    except SQLAlchemyError as e:
        logger.error(f"Error in create_project_endpoint: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")


@router.get("/{project_id}", response_model=ProjectResponse, summary="Get a project by ID")
def get_project_endpoint(
    project_id: str,
    user: User = Depends(get_current_user),
    service: ProjectService = Depends(get_project_service),
):
    project = service.get_project(user.id, project_id)
    if not project:
        raise HTTPException(status_code=404, detail="Project not found")
    return project
