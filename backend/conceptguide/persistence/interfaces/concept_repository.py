"""Abstract read-only repository interface for concept records."""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Optional, Sequence

from conceptguide.domain.concept.models import Concept


class ConceptRepository(ABC):

    @abstractmethod
    def list_all(self) -> Sequence[Concept]:
        """Return every concept in data-file order, unmodified."""
        ...

    @abstractmethod
    def get_by_slug(self, slug: str) -> Optional[Concept]:
        """Return the concept with this slug, or None."""
        ...
