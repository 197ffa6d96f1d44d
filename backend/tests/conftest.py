"""Shared fixtures: small hand-built catalogs and a fixed clock."""
import pytest

from factories import FIXED_NOW, build_concept


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_NOW


@pytest.fixture
def sample_catalog():
    return [
        build_concept("a", related=["b", "z", "a"]),
        build_concept("b", category="Design Patterns", difficulty="Advanced"),
        build_concept("c", related=["b"]),
    ]
