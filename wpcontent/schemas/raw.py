"""Raw source schemas"""

from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, Field

# Unprocessed JSON object as returned by the REST API. Never leaves the normalizer.
RawApiRecord = Dict[str, Any]

ResourceKind = Literal["pages", "posts", "categories", "users"]


class FetchParams(BaseModel):
    """Query parameters for a collection request"""

    slug: Optional[str] = None
    categories: Optional[int] = None
    per_page: Optional[int] = Field(default=None, gt=0)
    embed: bool = False

    @property
    def has_filter(self) -> bool:
        return self.slug is not None or self.categories is not None

    def to_query(self) -> Dict[str, Any]:
        query: Dict[str, Any] = {}
        if self.slug is not None:
            query["slug"] = self.slug
        if self.categories is not None:
            query["categories"] = self.categories
        if self.per_page is not None:
            query["per_page"] = self.per_page
        if self.embed:
            # WordPress only checks for the key's presence
            query["_embed"] = ""
        return query
