"""API tests using FastAPI TestClient."""
import logging

import pytest
from fastapi.testclient import TestClient

from conceptguide import container
from conceptguide.application.concept_app_service import ConceptAppService
from conceptguide.container import (
    get_concept_app_service,
    get_detail_renderer,
    get_listing_renderer,
)
from conceptguide.core import config
from conceptguide.main import app
from conceptguide.persistence.loader import ConceptDataError
from conceptguide.persistence.repositories.static.static_concept_repository import StaticConceptRepository
from conceptguide.rendering.pages import DetailPageRenderer, ListingPageRenderer
from conceptguide.rendering.seo import SiteSettings
from factories import FIXED_NOW, build_concept

SITE = SiteSettings(base_url="https://concepts.test")


@pytest.fixture(scope="module")
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture
def fixture_client():
    """Client backed by a tiny hand-built catalog instead of the bundled file."""
    catalog = [
        build_concept("a", related=["b", "z"]),
        build_concept("b", category="Design Patterns"),
    ]
    svc = ConceptAppService(repo=StaticConceptRepository(catalog))
    app.dependency_overrides[get_concept_app_service] = lambda: svc
    app.dependency_overrides[get_listing_renderer] = lambda: ListingPageRenderer(SITE, clock=lambda: FIXED_NOW)
    app.dependency_overrides[get_detail_renderer] = lambda: DetailPageRenderer(SITE, clock=lambda: FIXED_NOW)
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


# ------------------------------------------------------------------
# Health
# ------------------------------------------------------------------
def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "ok"
    assert body["concepts"] > 0


# ------------------------------------------------------------------
# Bundled catalog
# ------------------------------------------------------------------
def test_home_page(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/html")
    assert resp.text.count('<script type="application/ld+json">') == 1
    assert '"@type": "WebSite"' in resp.text
    assert 'href="/concepts/binary-search"' in resp.text


def test_concept_page(client):
    resp = client.get("/concepts/binary-search")
    assert resp.status_code == 200
    assert "<h1>Binary Search</h1>" in resp.text
    assert resp.text.count('<script type="application/ld+json">') == 2
    assert '"@type": "Article"' in resp.text
    assert '"@type": "BreadcrumbList"' in resp.text


def test_unknown_concept_is_404(client):
    resp = client.get("/concepts/no-such-thing")
    assert resp.status_code == 404
    assert "no-such-thing" in resp.json()["detail"]


def test_stylesheet_served(client):
    resp = client.get("/static/styles.css")
    assert resp.status_code == 200
    assert ".badge-beginner" in resp.text


# ------------------------------------------------------------------
# Overridden catalog
# ------------------------------------------------------------------
def test_dangling_related_reference_skipped(fixture_client):
    resp = fixture_client.get("/concepts/a")
    assert resp.status_code == 200
    assert resp.text.count('class="related-card"') == 1
    assert 'href="/concepts/b"' in resp.text
    assert "/concepts/z" not in resp.text


def test_home_uses_configured_base_url(fixture_client):
    resp = fixture_client.get("/")
    assert '<link rel="canonical" href="https://concepts.test" />' in resp.text
    assert '<span class="badge badge-category">Algorithms</span>' in resp.text
    assert '<span class="badge badge-category">Design Patterns</span>' in resp.text


# ------------------------------------------------------------------
# Startup
# ------------------------------------------------------------------
@pytest.fixture
def broken_data_path(monkeypatch, tmp_path):
    monkeypatch.setattr(config, "CONCEPTS_DATA_PATH", str(tmp_path / "missing.json"))
    container.get_concept_repo.cache_clear()
    try:
        yield
    finally:
        container.get_concept_repo.cache_clear()


def test_startup_fails_on_missing_data(broken_data_path, caplog):
    with caplog.at_level(logging.ERROR):
        with pytest.raises(ConceptDataError, match="not found"):
            with TestClient(app):
                pass
    assert "concept data failed to load" in caplog.text
