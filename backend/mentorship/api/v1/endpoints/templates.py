"""Session template endpoints"""
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from ....core.deps import get_catalog, unwrap
from ....models.api import ApplyTemplateRequest, OutcomeResponse
from ....models.template import (
    SessionTemplate,
    SessionTemplateCreate,
    TemplateCategory,
    TemplateDifficulty,
)
from ....templates.catalog import TemplateCatalog

router = APIRouter()


@router.post("", response_model=SessionTemplate, status_code=status.HTTP_201_CREATED)
def create_template(request: SessionTemplateCreate, catalog: TemplateCatalog = Depends(get_catalog)):
    return catalog.create_template(request)


@router.get("", response_model=List[SessionTemplate])
def list_templates(
    category: Optional[TemplateCategory] = Query(None),
    difficulty: Optional[TemplateDifficulty] = Query(None),
    catalog: TemplateCatalog = Depends(get_catalog),
):
    """Templates matching the filters, most used first"""
    return catalog.get_templates(category, difficulty)


@router.get("/{template_id}", response_model=SessionTemplate)
def get_template(template_id: str, catalog: TemplateCatalog = Depends(get_catalog)):
    template = catalog.get_template(template_id)
    if template is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Template not found")
    return template


@router.post("/{template_id}/apply", response_model=OutcomeResponse)
def apply_template(
    template_id: str,
    request: ApplyTemplateRequest,
    catalog: TemplateCatalog = Depends(get_catalog),
):
    session_id = unwrap(catalog.use_template(request.session_id, template_id))
    return OutcomeResponse(id=session_id)
