# Services package
from wpcontent.services.content_service import (
    ContentService,
    get_all_posts_slugs,
    get_articles_by_category,
    get_author_by_id,
    get_category_by_slug,
    get_content_service,
    get_latest_articles,
    get_page_info,
    get_post_info,
)

__all__ = [
    "ContentService",
    "get_content_service",
    "get_page_info",
    "get_latest_articles",
    "get_articles_by_category",
    "get_category_by_slug",
    "get_post_info",
    "get_author_by_id",
    "get_all_posts_slugs",
]
