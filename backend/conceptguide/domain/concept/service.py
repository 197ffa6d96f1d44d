"""Domain service — pure projections from concept records to view models."""
from __future__ import annotations
from typing import Sequence, Tuple

from conceptguide.domain.concept.models import (
    Concept,
    ConceptSummary,
    DetailView,
    ListingView,
    RelatedConcept,
)


class ConceptDomainService:
    """
    Pure domain operations, no I/O.
    The application layer fetches records from the repository and hands them here.
    """

    def summarize(self, concept: Concept) -> ConceptSummary:
        return ConceptSummary(
            slug=concept.slug,
            title=concept.title,
            description=concept.description,
            category=concept.category,
            difficulty=concept.difficulty,
        )

    def collect_categories(self, concepts: Sequence[Concept]) -> Tuple[str, ...]:
        """Unique category labels, ascending."""
        return tuple(sorted({c.category for c in concepts}))

    def build_listing(self, concepts: Sequence[Concept]) -> ListingView:
        return ListingView(
            concepts=tuple(self.summarize(c) for c in concepts),
            categories=self.collect_categories(concepts),
        )

    def related_for(self, concept: Concept, concepts: Sequence[Concept]) -> Tuple[RelatedConcept, ...]:
        """
        Related summaries in store order. References to unknown slugs and
        references back to the concept itself produce nothing.
        """
        wanted = set(concept.related_concepts)
        return tuple(
            RelatedConcept(slug=c.slug, title=c.title, category=c.category)
            for c in concepts
            if c.slug in wanted and c.slug != concept.slug
        )

    def build_detail(self, concept: Concept, concepts: Sequence[Concept]) -> DetailView:
        return DetailView(concept=concept, related=self.related_for(concept, concepts))
