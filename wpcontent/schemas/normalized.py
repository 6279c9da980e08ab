"""Canonical content records handed to the site generator"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, computed_field
from pydantic.alias_generators import to_camel


class CanonicalRecord(BaseModel):
    """Immutable record serialized with camelCase keys"""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class Post(CanonicalRecord):
    title: str
    excerpt: str
    content: str
    date: str
    slug: str
    featured_media: str
    category: str
    link: Optional[str] = None
    # Set only by failover operations
    source_endpoint: Optional[str] = None


class PostDetail(Post):
    """Single post with author id, category slug and SEO head metadata"""

    author: Optional[int] = None
    category_slug: str
    seo: Any = None


class Page(CanonicalRecord):
    title: str
    content: str
    seo: Any = None


class Category(CanonicalRecord):
    id: int
    name: str
    description: str
    seo: Any = None
    source_endpoint: Optional[str] = None

    @computed_field
    @property
    def title(self) -> str:
        return self.name


class Author(CanonicalRecord):
    id: int
    name: str
    source_endpoint: Optional[str] = None
