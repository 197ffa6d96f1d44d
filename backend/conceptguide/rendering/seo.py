"""
SEO metadata builders
=====================

Canonical URLs, Schema.org JSON-LD objects and the Open Graph / Twitter
head tags shared by both page types. Everything here is a pure function of
its arguments.
"""
from __future__ import annotations
import html
import json
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional, Sequence, Tuple

from conceptguide.domain.concept.models import Concept

SCHEMA_CONTEXT = "https://schema.org"
DATE_PUBLISHED = "2024-01-01"
SEARCH_TERM = "search_term_string"


@dataclass(frozen=True)
class SiteSettings:
    base_url: str
    name: str = "Programming Concepts Guide"
    tagline: str = "Learn Essential Dev Skills"
    description: str = (
        "Comprehensive guide to essential programming concepts, algorithms, and design patterns"
    )

    @property
    def root(self) -> str:
        return self.base_url.rstrip("/")


@dataclass(frozen=True)
class PageMetadata:
    title: str
    description: str
    canonical_url: str
    og_type: str = "website"
    keywords: str = ""
    article_section: Optional[str] = None
    # Shorter text for Open Graph and Twitter cards; falls back to description
    social_description: Optional[str] = None
    structured_data: Tuple[Dict[str, Any], ...] = field(default_factory=tuple)


# ------------------------------------------------------------------
# URLs
# ------------------------------------------------------------------
def home_url(site: SiteSettings) -> str:
    return site.root


def concept_url(site: SiteSettings, slug: str) -> str:
    return f"{site.root}/concepts/{slug}"


# ------------------------------------------------------------------
# Schema.org objects
# ------------------------------------------------------------------
def website_schema(site: SiteSettings) -> Dict[str, Any]:
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "WebSite",
        "name": site.name,
        "description": site.description,
        "url": home_url(site),
        "potentialAction": {
            "@type": "SearchAction",
            "target": f"{site.root}/concepts/{{{SEARCH_TERM}}}",
            "query-input": f"required name={SEARCH_TERM}",
        },
    }


def _organization(site: SiteSettings, with_logo: bool = False) -> Dict[str, Any]:
    org: Dict[str, Any] = {"@type": "Organization", "name": site.name}
    if with_logo:
        org["logo"] = {"@type": "ImageObject", "url": f"{site.root}/logo.png"}
    return org


def article_schema(site: SiteSettings, concept: Concept, modified: datetime) -> Dict[str, Any]:
    page_url = concept_url(site, concept.slug)
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "Article",
        "headline": concept.title,
        "description": concept.description,
        "author": _organization(site),
        "publisher": _organization(site, with_logo=True),
        "datePublished": DATE_PUBLISHED,
        "dateModified": modified.isoformat(),
        "mainEntityOfPage": {"@type": "WebPage", "@id": page_url},
        "keywords": ", ".join(concept.keywords),
        "articleSection": concept.category,
        "about": {
            "@type": "Thing",
            "name": concept.title,
            "description": concept.description,
        },
    }


def breadcrumb_schema(items: Sequence[Tuple[str, str]]) -> Dict[str, Any]:
    """
    Args:
        items: (name, absolute_url) pairs, outermost first
    """
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "BreadcrumbList",
        "itemListElement": [
            {"@type": "ListItem", "position": i, "name": name, "item": url}
            for i, (name, url) in enumerate(items, 1)
        ],
    }


def concept_breadcrumbs(site: SiteSettings, concept: Concept) -> List[Tuple[str, str]]:
    return [
        ("Home", home_url(site)),
        ("Concepts", f"{site.root}/concepts"),
        (concept.title, concept_url(site, concept.slug)),
    ]


# ------------------------------------------------------------------
# Markup
# ------------------------------------------------------------------
def json_ld_script(data: Dict[str, Any]) -> str:
    # "<" is escaped so a value can never close the surrounding <script>
    payload = json.dumps(data, ensure_ascii=False).replace("<", "\\u003c")
    return f'<script type="application/ld+json">{payload}</script>'


def head_tags(meta: PageMetadata, site: SiteSettings) -> str:
    e = html.escape
    social = meta.social_description or meta.description
    tags = [
        f"<title>{e(meta.title)}</title>",
        f'<meta name="description" content="{e(meta.description)}" />',
    ]
    if meta.keywords:
        tags.append(f'<meta name="keywords" content="{e(meta.keywords)}" />')

    # Open Graph
    tags.append(f'<meta property="og:type" content="{e(meta.og_type)}" />')
    tags.append(f'<meta property="og:title" content="{e(meta.title)}" />')
    tags.append(f'<meta property="og:description" content="{e(social)}" />')
    tags.append(f'<meta property="og:url" content="{e(meta.canonical_url)}" />')
    tags.append(f'<meta property="og:site_name" content="{e(site.name)}" />')
    if meta.article_section:
        tags.append(f'<meta property="article:section" content="{e(meta.article_section)}" />')
        if meta.keywords:
            tags.append(f'<meta property="article:tag" content="{e(meta.keywords)}" />')

    # Twitter Card
    tags.append('<meta name="twitter:card" content="summary_large_image" />')
    tags.append(f'<meta name="twitter:title" content="{e(meta.title)}" />')
    tags.append(f'<meta name="twitter:description" content="{e(social)}" />')

    tags.append(f'<link rel="canonical" href="{e(meta.canonical_url)}" />')
    tags.append('<meta name="robots" content="index, follow" />')
    tags.extend(json_ld_script(block) for block in meta.structured_data)
    return "\n    ".join(tags)
