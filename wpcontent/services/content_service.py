"""Retrieval API: the public content operations used by the site build."""

from __future__ import annotations

from typing import List, Optional, Union

from wpcontent.core.config import settings
from wpcontent.core.endpoints import EndpointRegistry
from wpcontent.core.exceptions import EmptyResultError
from wpcontent.core.logging import get_logger
from wpcontent.ingestion.failover import with_failover
from wpcontent.ingestion.fetcher import ContentFetcher
from wpcontent.ingestion.normalizer import (
    normalize_author,
    normalize_category,
    normalize_page,
    normalize_post,
    normalize_post_detail,
)
from wpcontent.schemas.normalized import Author, Category, Page, Post, PostDetail
from wpcontent.schemas.raw import FetchParams

log = get_logger("content_service")

DEFAULT_PER_PAGE = 10
# The REST API caps per_page at 100; slugs beyond the first page are not fetched.
SLUGS_PER_PAGE = 100


def parse_author_id(author_id: Union[int, str]) -> int:
    """Accept an author id as an integer or its decimal string form."""
    if isinstance(author_id, bool):
        raise ValueError(f"Invalid author id: {author_id!r}")
    if isinstance(author_id, int):
        return author_id
    try:
        return int(str(author_id).strip(), 10)
    except ValueError:
        raise ValueError(f"Invalid author id: {author_id!r}") from None


class ContentService:
    """Fetches and normalizes content records.

    Single-source operations read from ``registry.site`` and propagate the
    first failure. Failover operations try ``registry.primary`` then
    ``registry.secondary`` and tag results with the endpoint that answered.
    """

    def __init__(
        self,
        registry: Optional[EndpointRegistry] = None,
        fetcher: Optional[ContentFetcher] = None,
    ):
        self.registry = registry or EndpointRegistry.from_settings(settings)
        self.fetcher = fetcher or ContentFetcher()

    # -------------------------------------------------------------------------
    # Single source
    # -------------------------------------------------------------------------
    async def get_page_info(self, slug: str) -> Page:
        records = await self.fetcher.fetch(
            self.registry.site, "pages", FetchParams(slug=slug), single=True
        )
        return normalize_page(records[0])

    async def get_latest_articles(
        self, per_page: int = DEFAULT_PER_PAGE, endpoint_override: Optional[str] = None
    ) -> List[Post]:
        """Newest posts first, in the order the backend returns them."""
        base_url = self.registry.resolve(endpoint_override) if endpoint_override else self.registry.site
        records = await self.fetcher.fetch(
            base_url, "posts", FetchParams(per_page=per_page, embed=True)
        )
        return [normalize_post(raw) for raw in records]

    async def get_all_posts_slugs(self) -> List[str]:
        records = await self.fetcher.fetch(
            self.registry.site, "posts", FetchParams(per_page=SLUGS_PER_PAGE)
        )
        # Unique, in backend order
        slugs = [raw.get("slug") for raw in records]
        slugs = list(dict.fromkeys(s for s in slugs if isinstance(s, str) and s))
        if not slugs:
            raise EmptyResultError("No post slugs found", self.registry.site)
        return slugs

    # -------------------------------------------------------------------------
    # Failover
    # -------------------------------------------------------------------------
    async def get_articles_by_category(
        self, category_id: int, per_page: int = DEFAULT_PER_PAGE
    ) -> List[Post]:
        params = FetchParams(categories=category_id, per_page=per_page, embed=True)

        async def fetch_from(base_url: str) -> List[Post]:
            records = await self.fetcher.fetch(base_url, "posts", params)
            return [normalize_post(raw, source_endpoint=base_url) for raw in records]

        return await with_failover(fetch_from, self.registry.failover, "category articles")

    async def get_category_by_slug(self, slug: str) -> Category:
        params = FetchParams(slug=slug)

        async def fetch_from(base_url: str) -> Category:
            records = await self.fetcher.fetch(base_url, "categories", params, single=True)
            return normalize_category(records[0], source_endpoint=base_url)

        return await with_failover(fetch_from, self.registry.failover, "category information")

    async def get_post_info(self, slug: str) -> PostDetail:
        params = FetchParams(slug=slug, embed=True)

        async def fetch_from(base_url: str) -> PostDetail:
            records = await self.fetcher.fetch(base_url, "posts", params, single=True)
            return normalize_post_detail(records[0], source_endpoint=base_url)

        return await with_failover(fetch_from, self.registry.failover, "post information")

    async def get_author_by_id(self, author_id: Union[int, str]) -> Author:
        user_id = parse_author_id(author_id)

        async def fetch_from(base_url: str) -> Author:
            records = await self.fetcher.fetch(base_url, "users", resource_id=user_id, single=True)
            return normalize_author(records[0], source_endpoint=base_url)

        return await with_failover(fetch_from, self.registry.failover, "author information")


_content_service: Optional[ContentService] = None


def get_content_service() -> ContentService:
    """Shared service built from settings on first use."""
    global _content_service
    if _content_service is None:
        _content_service = ContentService()
        log.debug(f"Content service ready: {_content_service.registry}")
    return _content_service


async def get_page_info(slug: str) -> Page:
    return await get_content_service().get_page_info(slug)


async def get_latest_articles(
    per_page: int = DEFAULT_PER_PAGE, endpoint_override: Optional[str] = None
) -> List[Post]:
    return await get_content_service().get_latest_articles(per_page, endpoint_override)


async def get_articles_by_category(category_id: int, per_page: int = DEFAULT_PER_PAGE) -> List[Post]:
    return await get_content_service().get_articles_by_category(category_id, per_page)


async def get_category_by_slug(slug: str) -> Category:
    return await get_content_service().get_category_by_slug(slug)


async def get_post_info(slug: str) -> PostDetail:
    return await get_content_service().get_post_info(slug)


async def get_author_by_id(author_id: Union[int, str]) -> Author:
    return await get_content_service().get_author_by_id(author_id)


async def get_all_posts_slugs() -> List[str]:
    return await get_content_service().get_all_posts_slugs()
