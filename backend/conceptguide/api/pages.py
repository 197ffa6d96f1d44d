"""Page endpoints: home listing, concept detail and a health check."""
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import HTMLResponse
from pydantic import BaseModel

from conceptguide.application.concept_app_service import ConceptAppService
from conceptguide.container import (
    get_concept_app_service,
    get_detail_renderer,
    get_listing_renderer,
)
from conceptguide.rendering.pages import DetailPageRenderer, ListingPageRenderer

router = APIRouter(tags=["pages"])


# ------------------------------------------------------------------
# Pydantic schemas
# ------------------------------------------------------------------
class HealthResponse(BaseModel):
    status: str
    concepts: int


# ------------------------------------------------------------------
# Health check
# ------------------------------------------------------------------
@router.get("/health", response_model=HealthResponse)
def health(svc: ConceptAppService = Depends(get_concept_app_service)):
    return HealthResponse(status="ok", concepts=svc.count())


# ------------------------------------------------------------------
# Pages
# ------------------------------------------------------------------
@router.get("/", response_class=HTMLResponse)
def home(
    svc: ConceptAppService = Depends(get_concept_app_service),
    renderer: ListingPageRenderer = Depends(get_listing_renderer),
):
    page = renderer.render(svc.resolve_listing())
    return HTMLResponse(content=page.html)


@router.get("/concepts/{slug}", response_class=HTMLResponse)
def concept_page(
    slug: str,
    svc: ConceptAppService = Depends(get_concept_app_service),
    renderer: DetailPageRenderer = Depends(get_detail_renderer),
):
    result = svc.resolve_detail(slug)
    if not result.is_success:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=result.error)
    page = renderer.render(result.value)
    return HTMLResponse(content=page.html)
