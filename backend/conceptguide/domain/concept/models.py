"""Concept domain models. Pure Python, no file or HTTP dependencies."""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class ConceptContent:
    introduction: str
    key_points: Tuple[str, ...] = ()
    use_cases: Tuple[str, ...] = ()
    example: str = ""
    common_pitfalls: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Concept:
    slug: str
    title: str
    description: str
    category: str
    difficulty: str  # Beginner | Intermediate | Advanced
    content: ConceptContent
    keywords: Tuple[str, ...] = ()
    related_concepts: Tuple[str, ...] = ()
    image_description: str = ""  # carried from the data file, never rendered


# ------------------------------------------------------------------
# View models handed from resolvers to renderers
# ------------------------------------------------------------------
@dataclass(frozen=True)
class ConceptSummary:
    """Listing card projection. Body content is never part of a summary."""
    slug: str
    title: str
    description: str
    category: str
    difficulty: str


@dataclass(frozen=True)
class RelatedConcept:
    slug: str
    title: str
    category: str


@dataclass(frozen=True)
class ListingView:
    concepts: Tuple[ConceptSummary, ...] = ()
    categories: Tuple[str, ...] = ()


@dataclass(frozen=True)
class DetailView:
    concept: Concept
    related: Tuple[RelatedConcept, ...] = field(default_factory=tuple)
