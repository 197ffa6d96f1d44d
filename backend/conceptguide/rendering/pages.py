"""HTML page renderers for the home listing and concept detail pages."""
from __future__ import annotations
import html
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, Iterable, Optional

from conceptguide.domain.concept.models import ConceptSummary, DetailView, ListingView, RelatedConcept
from conceptguide.rendering.seo import (
    PageMetadata,
    SiteSettings,
    article_schema,
    breadcrumb_schema,
    concept_breadcrumbs,
    concept_url,
    head_tags,
    home_url,
    website_schema,
)

Clock = Callable[[], datetime]

HOME_KEYWORDS = (
    "programming concepts, algorithms, design patterns, javascript, "
    "software development, coding tutorials"
)
HOME_SOCIAL_DESCRIPTION = (
    "Master essential programming concepts including algorithms, design patterns, "
    "JavaScript fundamentals, and backend development."
)
HOME_DESCRIPTION = (
    "Master essential programming concepts including algorithms, design patterns, "
    "JavaScript fundamentals, and backend development. Comprehensive guides for "
    "developers at all levels."
)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class RenderedPage:
    html: str
    metadata: PageMetadata


def badge_class(difficulty: str) -> str:
    return f"badge badge-{difficulty.lower()}"


def _bullets(items: Iterable[str]) -> str:
    return "\n".join(f"<li>{html.escape(item)}</li>" for item in items)


def layout(meta: PageMetadata, site: SiteSettings, body: str, year: int) -> str:
    return f"""<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    {head_tags(meta, site)}
    <link rel="stylesheet" href="/static/styles.css" />
  </head>
  <body>
    <main class="container">
{body}
      <footer class="site-footer">
        <p>&copy; {year} {html.escape(site.name)}. Rendered server-side for optimal SEO.</p>
      </footer>
    </main>
  </body>
</html>
"""


class _PageRenderer:
    def __init__(self, site: SiteSettings, clock: Optional[Clock] = None):
        self._site = site
        self._clock = clock or _utcnow


class ListingPageRenderer(_PageRenderer):

    def metadata(self, view: ListingView) -> PageMetadata:
        return PageMetadata(
            title=f"{self._site.name} | {self._site.tagline}",
            description=HOME_DESCRIPTION,
            social_description=HOME_SOCIAL_DESCRIPTION,
            canonical_url=home_url(self._site),
            og_type="website",
            keywords=HOME_KEYWORDS,
            structured_data=(website_schema(self._site),),
        )

    def _card(self, concept: ConceptSummary) -> str:
        e = html.escape
        href = f"/concepts/{e(concept.slug)}"
        return f"""        <article class="concept-card">
          <div class="card-meta">
            <span class="{e(badge_class(concept.difficulty))}">{e(concept.difficulty)}</span>
            <span class="card-category">{e(concept.category)}</span>
          </div>
          <h3><a href="{href}">{e(concept.title)}</a></h3>
          <p class="card-description">{e(concept.description)}</p>
          <a class="learn-more" href="{href}">Learn More &rarr;</a>
        </article>"""

    def render(self, view: ListingView) -> RenderedPage:
        meta = self.metadata(view)
        badges = "\n".join(
            f'          <span class="badge badge-category">{html.escape(c)}</span>'
            for c in view.categories
        )
        cards = "\n".join(self._card(c) for c in view.concepts)
        body = f"""      <header class="hero">
        <h1>Programming Concepts</h1>
        <p>Explore essential programming concepts, algorithms, and design patterns.
        Each concept includes clear explanations, practical examples, and best practices.</p>
      </header>
      <section id="concepts">
        <h2>Browse by Category</h2>
        <div class="category-list">
{badges}
        </div>
        <div class="concept-grid">
{cards}
        </div>
      </section>"""
        return RenderedPage(html=layout(meta, self._site, body, self._clock().year), metadata=meta)


class DetailPageRenderer(_PageRenderer):

    def metadata(self, view: DetailView) -> PageMetadata:
        concept = view.concept
        crumbs = concept_breadcrumbs(self._site, concept)
        return PageMetadata(
            title=f"{concept.title} | {self._site.name}",
            description=concept.description,
            canonical_url=concept_url(self._site, concept.slug),
            og_type="article",
            keywords=", ".join(concept.keywords),
            article_section=concept.category,
            structured_data=(
                article_schema(self._site, concept, self._clock()),
                breadcrumb_schema(crumbs),
            ),
        )

    def _related(self, related: Iterable[RelatedConcept]) -> str:
        e = html.escape
        links = "\n".join(
            f"""          <a class="related-card" href="/concepts/{e(r.slug)}">
            <div class="card-category">{e(r.category)}</div>
            <div class="related-title">{e(r.title)}</div>
          </a>"""
            for r in related
        )
        return f"""      <section class="related-concepts">
        <h2>Related Concepts</h2>
        <div class="related-grid">
{links}
        </div>
      </section>"""

    def render(self, view: DetailView) -> RenderedPage:
        e = html.escape
        concept = view.concept
        content = concept.content
        meta = self.metadata(view)
        related = self._related(view.related) if view.related else ""
        body = f"""      <nav class="breadcrumb" aria-label="Breadcrumb">
        <a href="/">Home</a> <span>/</span>
        <a href="/#concepts">Concepts</a> <span>/</span>
        <span>{e(concept.title)}</span>
      </nav>
      <article>
        <header class="article-header">
          <div class="card-meta">
            <span class="{e(badge_class(concept.difficulty))}">{e(concept.difficulty)}</span>
            <span class="card-category">{e(concept.category)}</span>
          </div>
          <h1>{e(concept.title)}</h1>
          <p class="lead">{e(concept.description)}</p>
        </header>
        <div class="article-body">
          <section>
            <h2>Introduction</h2>
            <p>{e(content.introduction)}</p>
          </section>
          <section>
            <h2>Key Points</h2>
            <ul>
{_bullets(content.key_points)}
            </ul>
          </section>
          <section>
            <h2>Common Use Cases</h2>
            <ul>
{_bullets(content.use_cases)}
            </ul>
          </section>
          <section>
            <h2>Code Example</h2>
            <pre><code>{e(content.example)}</code></pre>
          </section>
          <section>
            <h2>Common Pitfalls</h2>
            <ul>
{_bullets(content.common_pitfalls)}
            </ul>
          </section>
        </div>
{related}
      </article>
      <nav class="back-link">
        <a href="/">&larr; Back to All Concepts</a>
      </nav>"""
        return RenderedPage(html=layout(meta, self._site, body, self._clock().year), metadata=meta)
