"""Dependency injection container — wires implementations to interfaces."""
from __future__ import annotations
from functools import lru_cache

from conceptguide.application.concept_app_service import ConceptAppService
from conceptguide.core import config
from conceptguide.persistence.repositories.static.static_concept_repository import StaticConceptRepository
from conceptguide.rendering.pages import DetailPageRenderer, ListingPageRenderer
from conceptguide.rendering.seo import SiteSettings


@lru_cache(maxsize=1)
def get_concept_repo() -> StaticConceptRepository:
    return StaticConceptRepository.from_file(config.CONCEPTS_DATA_PATH)


@lru_cache(maxsize=1)
def get_concept_app_service() -> ConceptAppService:
    return ConceptAppService(repo=get_concept_repo())


@lru_cache(maxsize=1)
def get_site_settings() -> SiteSettings:
    return SiteSettings(base_url=config.BASE_URL, name=config.SITE_NAME, tagline=config.SITE_TAGLINE)


def get_listing_renderer() -> ListingPageRenderer:
    return ListingPageRenderer(get_site_settings())


def get_detail_renderer() -> DetailPageRenderer:
    return DetailPageRenderer(get_site_settings())
