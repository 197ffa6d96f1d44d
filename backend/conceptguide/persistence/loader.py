"""Bundled JSON data file → immutable concept records."""
from __future__ import annotations
import json
import logging
from typing import Tuple

from conceptguide.domain.concept.models import Concept, ConceptContent
from conceptguide.domain.concept.rules import find_duplicate_slugs, validate_concept_record

logger = logging.getLogger(__name__)


class ConceptDataError(RuntimeError):
    """The concept data file is missing or malformed. Fatal at startup."""


def _record_to_concept(data: dict) -> Concept:
    content = data["content"]
    return Concept(
        slug=data["slug"],
        title=data["title"],
        description=data["description"],
        category=data["category"],
        difficulty=data["difficulty"],
        keywords=tuple(data.get("keywords", [])),
        content=ConceptContent(
            introduction=content["introduction"],
            key_points=tuple(content.get("keyPoints", [])),
            use_cases=tuple(content.get("useCases", [])),
            example=content["example"],
            common_pitfalls=tuple(content.get("commonPitfalls", [])),
        ),
        related_concepts=tuple(data.get("relatedConcepts", [])),
        image_description=data.get("imageDescription", ""),
    )


def parse_concepts(raw) -> Tuple[Concept, ...]:
    """Validate an already-decoded JSON document and build the records."""
    if not isinstance(raw, list):
        raise ConceptDataError(f"Concept data must be a JSON array, got {type(raw).__name__}.")

    concepts = []
    for index, record in enumerate(raw):
        validation = validate_concept_record(record)
        if not validation.is_success:
            raise ConceptDataError(f"Record #{index}: {validation.error}")
        concepts.append(_record_to_concept(record))

    duplicates = find_duplicate_slugs(concepts)
    if duplicates:
        raise ConceptDataError(f"Duplicate concept slugs: {', '.join(duplicates)}.")
    return tuple(concepts)


def load_concepts(path: str) -> Tuple[Concept, ...]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = json.load(f)
    except FileNotFoundError as e:
        raise ConceptDataError(f"Concept data file not found: {path}") from e
    except OSError as e:
        raise ConceptDataError(f"Concept data file cannot be read: {path} ({e})") from e
    except UnicodeDecodeError as e:
        raise ConceptDataError(f"Concept data file is not valid UTF-8: {path} ({e})") from e
    except json.JSONDecodeError as e:
        raise ConceptDataError(f"Concept data file is not valid JSON: {path} ({e})") from e

    concepts = parse_concepts(raw)
    logger.info("Loaded %d concepts from %s", len(concepts), path)
    return concepts
