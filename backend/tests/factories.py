"""Builders for concept records and raw JSON records used across tests."""
from datetime import datetime, timezone

from conceptguide.domain.concept.models import Concept, ConceptContent

FIXED_NOW = datetime(2025, 3, 14, 9, 30, tzinfo=timezone.utc)


def build_concept(slug, category="Algorithms", related=(), difficulty="Beginner", **overrides) -> Concept:
    fields = dict(
        slug=slug,
        title=slug.replace("-", " ").title(),
        description=f"About {slug}.",
        category=category,
        difficulty=difficulty,
        keywords=(slug, "programming"),
        content=ConceptContent(
            introduction=f"Intro to {slug}.",
            key_points=("point one", "point two"),
            use_cases=("use one",),
            example="print('hi')",
            common_pitfalls=("pitfall one",),
        ),
        related_concepts=tuple(related),
        image_description="unused",
    )
    fields.update(overrides)
    return Concept(**fields)


def raw_record(slug, **overrides) -> dict:
    record = {
        "slug": slug,
        "title": slug.title(),
        "description": "A description.",
        "category": "Algorithms",
        "difficulty": "Beginner",
        "keywords": ["a", "b"],
        "content": {
            "introduction": "Intro.",
            "keyPoints": ["k1"],
            "useCases": ["u1"],
            "example": "x = 1",
            "commonPitfalls": ["p1"],
        },
        "relatedConcepts": [],
        "imageDescription": "picture",
    }
    record.update(overrides)
    return record
