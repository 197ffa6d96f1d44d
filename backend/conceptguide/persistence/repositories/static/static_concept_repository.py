"""In-memory implementation of ConceptRepository over the bundled data file."""
from __future__ import annotations
import logging
from typing import Dict, Iterable, Optional, Tuple

from conceptguide.domain.concept.models import Concept
from conceptguide.domain.concept.rules import find_dangling_references
from conceptguide.persistence.interfaces.concept_repository import ConceptRepository
from conceptguide.persistence.loader import load_concepts

logger = logging.getLogger(__name__)


class StaticConceptRepository(ConceptRepository):
    """
    Holds the catalog for the process lifetime. Records are frozen and the
    containers are tuples/dicts that are never written after __init__, so one
    instance is shared by every request.
    """

    def __init__(self, concepts: Iterable[Concept] = ()):
        self._concepts: Tuple[Concept, ...] = tuple(concepts)
        self._by_slug: Dict[str, Concept] = {}
        for concept in self._concepts:
            # First record wins, matching a front-to-back scan
            self._by_slug.setdefault(concept.slug, concept)

        for slug, missing in find_dangling_references(self._concepts):
            logger.warning("Concept '%s' lists unknown related concept '%s'", slug, missing)

    @classmethod
    def from_file(cls, path: str) -> "StaticConceptRepository":
        return cls(load_concepts(path))

    def list_all(self) -> Tuple[Concept, ...]:
        return self._concepts

    def get_by_slug(self, slug: str) -> Optional[Concept]:
        return self._by_slug.get(slug)

    def __len__(self) -> int:
        return len(self._concepts)
