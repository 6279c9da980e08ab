"""Maps raw REST API records into canonical content records.

Every function here is pure and total: missing or malformed optional fields
fall back to the defaults below, nothing raises.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from wpcontent.schemas.normalized import Author, Category, Page, Post, PostDetail
from wpcontent.schemas.raw import RawApiRecord

DEFAULT_FEATURED_MEDIA = "default-image-url.jpg"
UNKNOWN_CATEGORY = "Unknown Category"

FEATURED_MEDIA_KEY = "wp:featuredmedia"
TERMS_KEY = "wp:term"

SEO_HEAD_JSON = "yoast_head_json"
SEO_HEAD_HTML = "yoast_head"


def _rendered(value: Any) -> str:
    """Unwrap the ``{"rendered": ...}`` wrapper used for rich-text fields."""
    if isinstance(value, dict):
        value = value.get("rendered")
    return value if isinstance(value, str) else ""


def _text(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _safe_int(value: Any) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (ValueError, TypeError):
        return None


def _first(value: Any) -> Any:
    if isinstance(value, list) and value:
        return value[0]
    return None


def _embedded(raw: RawApiRecord) -> Dict[str, Any]:
    embedded = raw.get("_embedded")
    return embedded if isinstance(embedded, dict) else {}


def _featured_media(raw: RawApiRecord) -> str:
    media = _first(_embedded(raw).get(FEATURED_MEDIA_KEY))
    url = media.get("source_url") if isinstance(media, dict) else None
    return url if isinstance(url, str) and url else DEFAULT_FEATURED_MEDIA


def _primary_term(raw: RawApiRecord) -> Dict[str, Any]:
    # Terms are grouped by taxonomy; only the first group's first term counts
    term = _first(_first(_embedded(raw).get(TERMS_KEY)))
    return term if isinstance(term, dict) else {}


def _term_field(raw: RawApiRecord, field: str) -> str:
    value = _primary_term(raw).get(field)
    return value if isinstance(value, str) and value else UNKNOWN_CATEGORY


def normalize_post(raw: RawApiRecord, source_endpoint: Optional[str] = None) -> Post:
    link = raw.get("link")
    return Post(
        title=_rendered(raw.get("title")),
        excerpt=_rendered(raw.get("excerpt")),
        content=_rendered(raw.get("content")),
        date=_text(raw.get("date")),
        slug=_text(raw.get("slug")),
        featured_media=_featured_media(raw),
        category=_term_field(raw, "name"),
        link=link if isinstance(link, str) else None,
        source_endpoint=source_endpoint,
    )


def normalize_post_detail(
    raw: RawApiRecord,
    source_endpoint: Optional[str] = None,
    seo_field: str = SEO_HEAD_JSON,
) -> PostDetail:
    post = normalize_post(raw, source_endpoint)
    return PostDetail(
        **post.model_dump(),
        author=_safe_int(raw.get("author")),
        category_slug=_term_field(raw, "slug"),
        seo=raw.get(seo_field),
    )


def normalize_page(raw: RawApiRecord, seo_field: str = SEO_HEAD_JSON) -> Page:
    return Page(
        title=_rendered(raw.get("title")),
        content=_rendered(raw.get("content")),
        seo=raw.get(seo_field),
    )


def normalize_category(
    raw: RawApiRecord,
    source_endpoint: Optional[str] = None,
    seo_field: str = SEO_HEAD_HTML,
) -> Category:
    return Category(
        id=_safe_int(raw.get("id")) or 0,
        name=_text(raw.get("name")),
        description=_text(raw.get("description")),
        seo=raw.get(seo_field),
        source_endpoint=source_endpoint,
    )


def normalize_author(raw: RawApiRecord, source_endpoint: Optional[str] = None) -> Author:
    return Author(
        id=_safe_int(raw.get("id")) or 0,
        name=_text(raw.get("name")),
        source_endpoint=source_endpoint,
    )
