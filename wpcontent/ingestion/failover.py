"""Primary-then-secondary failover for content retrieval."""

from __future__ import annotations

from typing import Awaitable, Callable, Tuple, TypeVar

from wpcontent.core.exceptions import AllSourcesFailedError
from wpcontent.core.logging import get_logger

log = get_logger("ingestion.failover")

T = TypeVar("T")

# Receives the API base URL to query; tags its result with that URL.
SourceOperation = Callable[[str], Awaitable[T]]


async def with_failover(
    operation: SourceOperation[T],
    endpoints: Tuple[str, str],
    description: str = "content",
) -> T:
    """Run ``operation`` against the primary endpoint, then once against the secondary.

    Exactly two sequential attempts, no backoff. The primary failure is only
    logged; if the secondary fails too, AllSourcesFailedError carries its error.
    """
    primary, secondary = endpoints

    try:
        return await operation(primary)
    except Exception as exc:  # noqa: BLE001
        log.warning(f"Primary API ({primary}) failed: {exc}. Retrying with secondary API...")

    try:
        return await operation(secondary)
    except Exception as exc:  # noqa: BLE001
        log.error(f"Both APIs failed for {description}: {exc}")
        raise AllSourcesFailedError(f"Failed to fetch {description} from all sources.", exc) from exc
