"""Shared fixtures: environment, stubbed content sources, log capture"""

import os

os.environ.setdefault("WP_DOMAIN", "https://site.example.com")
os.environ.setdefault("WP_SECONDARY_DOMAIN", "https://mirror.example.com")

from typing import Any, Callable, Dict, List  # noqa: E402

import httpx  # noqa: E402
import pytest  # noqa: E402
from loguru import logger  # noqa: E402

from wpcontent.core.endpoints import EndpointRegistry  # noqa: E402
from wpcontent.ingestion.fetcher import ContentFetcher  # noqa: E402
from wpcontent.services.content_service import ContentService  # noqa: E402

SITE = "https://site.example.com/wp-json/wp/v2"
PRIMARY = "https://primary.example.com/wp-json/wp/v2"
SECONDARY = "https://secondary.example.com/wp-json/wp/v2"

Handler = Callable[[httpx.Request], httpx.Response]


class StubSources:
    """Routes requests by API base URL and records every request seen"""

    def __init__(self):
        self.handlers: Dict[str, Handler] = {}
        self.requests: List[httpx.Request] = []

    def route(self, base_url: str, handler: Handler) -> None:
        self.handlers[base_url] = handler

    def json(self, base_url: str, payload: Any, status_code: int = 200) -> None:
        self.route(base_url, lambda request: httpx.Response(status_code, json=payload))

    def status(self, base_url: str, status_code: int) -> None:
        self.route(base_url, lambda request: httpx.Response(status_code, json={"code": "error"}))

    def down(self, base_url: str) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("Connection refused", request=request)

        self.route(base_url, handler)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        url = str(request.url)
        for base_url, handler in self.handlers.items():
            if url.startswith(base_url + "/"):
                return handler(request)
        return httpx.Response(404, json={"code": "rest_no_route"})

    def hosts(self) -> List[str]:
        return [request.url.host for request in self.requests]


@pytest.fixture
def sources():
    """Stubbed content sources (unrouted URLs answer 404)"""
    return StubSources()


@pytest.fixture
def fetcher(sources):
    """Fetcher whose HTTP traffic goes to the stubbed sources"""
    return ContentFetcher(timeout=1.0, transport=httpx.MockTransport(sources))


@pytest.fixture
def registry():
    return EndpointRegistry(site=SITE, primary=PRIMARY, secondary=SECONDARY)


@pytest.fixture
def service(registry, fetcher):
    return ContentService(registry=registry, fetcher=fetcher)


@pytest.fixture
def log_records():
    """Capture loguru records emitted during the test"""
    records: List[dict] = []
    sink_id = logger.add(lambda message: records.append(message.record), level="DEBUG")
    yield records
    logger.remove(sink_id)


def make_post(slug: str = "hello-world", **overrides: Any) -> Dict[str, Any]:
    """Raw post as returned by /posts?_embed"""
    post = {
        "id": 1,
        "date": "2024-05-01T10:00:00",
        "slug": slug,
        "link": f"https://site.example.com/{slug}/",
        "author": 42,
        "title": {"rendered": slug.replace("-", " ").title()},
        "excerpt": {"rendered": "<p>Excerpt</p>"},
        "content": {"rendered": "<p>Body</p>"},
        "yoast_head_json": {"title": "SEO title"},
        "_embedded": {
            "wp:featuredmedia": [{"source_url": "https://cdn.example.com/cover.jpg"}],
            "wp:term": [[{"name": "News", "slug": "news"}], [{"name": "Tag", "slug": "tag"}]],
        },
    }
    post.update(overrides)
    return post
