"""Single-source fetcher for the WordPress REST API."""

from __future__ import annotations

from typing import Any, List, Optional

import httpx

from wpcontent.core.config import settings
from wpcontent.core.exceptions import (
    EmptyResultError,
    HttpStatusError,
    InvalidPayloadError,
    NetworkError,
    NotFoundError,
)
from wpcontent.core.logging import get_logger
from wpcontent.schemas.raw import FetchParams, RawApiRecord, ResourceKind

log = get_logger("ingestion.fetcher")

class ContentFetcher:
    """Issues one GET per call against one content source. No retries here."""

    def __init__(
        self,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.timeout = settings.HTTP_TIMEOUT_SECONDS if timeout is None else timeout
        self.transport = transport

    async def fetch(
        self,
        base_url: str,
        resource: ResourceKind,
        params: Optional[FetchParams] = None,
        *,
        resource_id: Optional[int] = None,
        single: bool = False,
        require_results: bool = True,
    ) -> List[RawApiRecord]:
        """Fetch ``{base_url}/{resource}`` (or ``/{resource}/{resource_id}``).

        ``single`` marks a one-record lookup: it requires a slug, category or
        id filter, and an empty answer raises NotFoundError instead of
        EmptyResultError.
        """
        params = params or FetchParams()
        if single and resource_id is None and not params.has_filter:
            raise ValueError(f"Lookup on {resource} needs a slug, category or id filter")

        url = f"{base_url.rstrip('/')}/{resource}"
        if resource_id is not None:
            url = f"{url}/{resource_id}"
        query = params.to_query()

        log.debug(f"GET {url} params={query}")
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                resp = await client.get(url, params=query)
        except httpx.TransportError as exc:
            raise NetworkError(f"Could not reach {resource} endpoint: {exc}", base_url) from exc

        if resp.status_code == 404 and resource_id is not None:
            # Singleton routes answer 404 for an unknown id
            raise NotFoundError(f"No {resource} with id {resource_id}", base_url)
        if not resp.is_success:
            raise HttpStatusError(base_url, resp.status_code, resp.reason_phrase)

        records = self._parse(resp, base_url)
        if require_results and not records:
            error = NotFoundError if single else EmptyResultError
            raise error(f"No {resource} found", base_url)

        log.info(f"Fetched {len(records)} {resource} from {base_url}")
        return records

    @staticmethod
    def _parse(resp: httpx.Response, base_url: str) -> List[RawApiRecord]:
        try:
            data: Any = resp.json()
        except ValueError as exc:
            raise InvalidPayloadError(f"Response is not valid JSON: {exc}", base_url) from exc

        # Singleton routes such as /users/{id} answer with a bare object
        if isinstance(data, dict):
            return [data]
        if isinstance(data, list):
            return [item for item in data if isinstance(item, dict)]
        raise InvalidPayloadError(f"Unexpected JSON payload of type {type(data).__name__}", base_url)
