"""Application service — orchestrates repository read → domain projection."""
from __future__ import annotations
import logging

from conceptguide.domain.common.result import Result
from conceptguide.domain.concept.models import DetailView, ListingView
from conceptguide.domain.concept.service import ConceptDomainService
from conceptguide.persistence.interfaces.concept_repository import ConceptRepository

logger = logging.getLogger(__name__)


class ConceptAppService:
    def __init__(self, repo: ConceptRepository):
        self._repo = repo
        self._domain = ConceptDomainService()

    # ------------------------------------------------------------------
    # LISTING
    # ------------------------------------------------------------------
    def resolve_listing(self) -> ListingView:
        return self._domain.build_listing(self._repo.list_all())

    # ------------------------------------------------------------------
    # DETAIL
    # ------------------------------------------------------------------
    def resolve_detail(self, slug: str) -> Result[DetailView]:
        concept = self._repo.get_by_slug(slug)
        if not concept:
            logger.info("No concept for slug '%s'", slug)
            return Result.not_found(f"Concept '{slug}' not found.")
        return Result.ok(self._domain.build_detail(concept, self._repo.list_all()))

    def count(self) -> int:
        return len(self._repo.list_all())
