"""
Cursor pagination helpers.
"""

import logging
from typing import Awaitable, Callable, List, Optional

from .models import MemberIdsPage

logger = logging.getLogger(__name__)

PageFetcher = Callable[[Optional[str]], Awaitable[MemberIdsPage]]


async def collectAll(pageFetcher: PageFetcher) -> List[str]:
    """Drive cursor-paginated member ID listing to completion.

    Pages are fetched one after another: each request needs the cursor from
    the previous response. Page order and in-page order are preserved, nothing
    is de-duplicated. Any failure propagates and no partial result is returned.

    Args:
        pageFetcher: Async callable taking the cursor (``None`` for the first page)

    Returns:
        All member IDs in the order received
    """
    memberIds: List[str] = []
    cursor: Optional[str] = None
    pages = 0

    while True:
        page = await pageFetcher(cursor)
        pages += 1
        memberIds.extend(page.memberIds)
        cursor = page.next
        if not cursor:
            break

    logger.debug(f"Collected {len(memberIds)} member ids from {pages} pages")
    return memberIds
