"""Onboarding template routes."""
from typing import List

from fastapi import APIRouter

from idp_service import data
from idp_service.api.schemas.portal import TemplateRead

router = APIRouter()


@router.get("", response_model=List[TemplateRead], summary="Templates, most popular first")
async def list_templates():
    return await data.list_templates()
