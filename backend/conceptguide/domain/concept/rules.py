"""Shape rules for concept records read from the bundled data file."""
from __future__ import annotations
import re
from typing import Iterable, List, Tuple

from conceptguide.domain.common.result import Result
from conceptguide.domain.concept.models import Concept

DIFFICULTY_LEVELS = ("Beginner", "Intermediate", "Advanced")

# Slugs go into /concepts/{slug} URLs unquoted
SLUG_PATTERN = re.compile(r"[a-z0-9]+(?:-[a-z0-9]+)*")

REQUIRED_STRING_FIELDS = ("slug", "title", "description", "category", "difficulty")
REQUIRED_CONTENT_STRINGS = ("introduction", "example")
REQUIRED_CONTENT_LISTS = ("keyPoints", "useCases", "commonPitfalls")


def _is_string_list(value) -> bool:
    return isinstance(value, list) and all(isinstance(v, str) for v in value)


def validate_concept_record(data) -> Result[dict]:
    """Checks one raw record has every field the renderers rely on."""
    if not isinstance(data, dict):
        return Result.fail(f"Concept record must be an object, got {type(data).__name__}.")

    label = data.get("slug") or "<missing slug>"
    for name in REQUIRED_STRING_FIELDS:
        value = data.get(name)
        if not isinstance(value, str) or not value.strip():
            return Result.fail(f"Concept '{label}': '{name}' is required and must be a non-empty string.")

    if not SLUG_PATTERN.fullmatch(data["slug"]):
        return Result.fail(
            f"Concept '{label}': 'slug' must be lowercase letters, digits and single hyphens."
        )

    if data["difficulty"] not in DIFFICULTY_LEVELS:
        return Result.fail(
            f"Concept '{label}': 'difficulty' must be one of {', '.join(DIFFICULTY_LEVELS)}, "
            f"got '{data['difficulty']}'."
        )

    for name in ("keywords", "relatedConcepts"):
        if name in data and not _is_string_list(data[name]):
            return Result.fail(f"Concept '{label}': '{name}' must be a list of strings.")

    content = data.get("content")
    if not isinstance(content, dict):
        return Result.fail(f"Concept '{label}': 'content' is required and must be an object.")
    for name in REQUIRED_CONTENT_STRINGS:
        if not isinstance(content.get(name), str):
            return Result.fail(f"Concept '{label}': 'content.{name}' must be a string.")
    for name in REQUIRED_CONTENT_LISTS:
        if not _is_string_list(content.get(name, [])):
            return Result.fail(f"Concept '{label}': 'content.{name}' must be a list of strings.")

    return Result.ok(data)


def find_duplicate_slugs(concepts: Iterable[Concept]) -> List[str]:
    seen: set[str] = set()
    duplicates: List[str] = []
    for concept in concepts:
        if concept.slug in seen and concept.slug not in duplicates:
            duplicates.append(concept.slug)
        seen.add(concept.slug)
    return duplicates


def find_dangling_references(concepts: Iterable[Concept]) -> List[Tuple[str, str]]:
    """
    Returns (slug, missing_slug) pairs for related references that point
    nowhere. Resolution drops these; callers may only report them.
    """
    concepts = list(concepts)
    known = {c.slug for c in concepts}
    return [
        (c.slug, ref)
        for c in concepts
        for ref in c.related_concepts
        if ref not in known
    ]
