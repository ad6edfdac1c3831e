# synthdata/routers/templates.py
from fastapi import APIRouter, Depends
from typing import List

from synthdata.dependencies import get_template_service
from synthdata.schemas.dataset import TemplateResponse
from synthdata.services.security import get_current_user
from synthdata.services.template_service import TemplateService

router = APIRouter(dependencies=[Depends(get_current_user)])


@router.get("/", response_model=List[TemplateResponse], summary="List dataset templates")
def list_templates_endpoint(service: TemplateService = Depends(get_template_service)):
    return service.list_templates()
