"""Content entrypoint - fetch canonical records from the command line.

Usage:
    python -m wpcontent.entrypoint page about-us            # Page by slug
    python -m wpcontent.entrypoint latest [per_page]        # Latest posts
    python -m wpcontent.entrypoint category-posts 7 [n]     # Posts in category 7 (failover)
    python -m wpcontent.entrypoint category news            # Category by slug (failover)
    python -m wpcontent.entrypoint post hello-world         # Post by slug (failover)
    python -m wpcontent.entrypoint author 42                # Author by id (failover)
    python -m wpcontent.entrypoint slugs                    # All post slugs
"""

import asyncio
import json
import sys
from typing import Any, Awaitable, Callable, Dict, List

from pydantic import BaseModel

from wpcontent.core.exceptions import ContentSourceError
from wpcontent.core.logging import get_logger
from wpcontent.services.content_service import ContentService, get_content_service

logger = get_logger("entrypoint")

COMMANDS: Dict[str, Callable[[ContentService, List[str]], Awaitable[Any]]] = {
    "page": lambda svc, args: svc.get_page_info(args[0]),
    "latest": lambda svc, args: svc.get_latest_articles(*(int(a) for a in args[:1])),
    "category-posts": lambda svc, args: svc.get_articles_by_category(*(int(a) for a in args[:2])),
    "category": lambda svc, args: svc.get_category_by_slug(args[0]),
    "post": lambda svc, args: svc.get_post_info(args[0]),
    "author": lambda svc, args: svc.get_author_by_id(args[0]),
    "slugs": lambda svc, args: svc.get_all_posts_slugs(),
}


def to_jsonable(result: Any) -> Any:
    """Dump canonical records with the camelCase keys the site build expects."""
    if isinstance(result, BaseModel):
        return result.model_dump(mode="json", by_alias=True)
    if isinstance(result, list):
        return [to_jsonable(item) for item in result]
    return result


async def run_command(command: str, args: List[str], service: ContentService | None = None) -> Any:
    """Run one retrieval operation and return its JSON-ready result."""
    service = service or get_content_service()
    logger.info(f"Running {command} {' '.join(args)}".rstrip())
    result = await COMMANDS[command](service, args)
    return to_jsonable(result)


def main(argv: List[str] | None = None) -> int:
    """Main entry point for content retrieval."""
    argv = sys.argv[1:] if argv is None else argv

    if not argv or argv[0] not in COMMANDS:
        logger.error(f"Invalid command. Must be one of: {', '.join(COMMANDS)}")
        return 1

    command, args = argv[0], argv[1:]
    try:
        result = asyncio.run(run_command(command, args))
    except (IndexError, TypeError, ValueError) as exc:
        logger.error(f"Invalid arguments for {command}: {exc}")
        return 1
    except ContentSourceError as exc:
        logger.error(f"{command} failed: {exc}")
        return 1

    print(json.dumps(result, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
