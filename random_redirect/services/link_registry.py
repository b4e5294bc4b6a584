"""
Link Registry

Maintains the plain shortlink that accompanies every saved redirect
list. The shortlink maps the list's keyword to its first URL and is
what the redirector falls back to when a list is disabled or removed.

Known behavior:
- Renaming a list creates a shortlink under the new keyword; the old
  keyword's shortlink is left in place
- Deleting a list keeps its shortlink
"""

import enum
import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from random_redirect.core.exceptions import ShortlinkError
from random_redirect.db.models import ShortLink, utcnow

logger = logging.getLogger(__name__)


class ShortlinkOutcome(str, enum.Enum):
    CREATED = "created"
    UPDATED = "updated"
    UNCHANGED = "unchanged"


@dataclass(frozen=True)
class ShortlinkResult:
    keyword: str
    url: str
    outcome: ShortlinkOutcome
    previous_url: Optional[str] = None


class LinkRegistry:
    """Creates and updates keyword -> URL shortlinks."""

    def __init__(self, session: AsyncSession, reserved_keywords: Iterable[str] = ()):
        self.session = session
        self.reserved_keywords = frozenset(keyword.lower() for keyword in reserved_keywords)

    def is_reserved(self, keyword: str) -> bool:
        """A keyword is reserved if it or its first path segment is."""
        lowered = keyword.lower()
        return lowered in self.reserved_keywords or lowered.split("/", 1)[0] in self.reserved_keywords

    async def get_url(self, keyword: str) -> Optional[str]:
        link = await self.session.get(ShortLink, keyword)
        return link.url if link else None

    async def ensure_shortlink(self, keyword: str, url: str) -> ShortlinkResult:
        """
        Make the shortlink for keyword point at url.

        Returns:
            ShortlinkResult describing whether the link was created,
            updated (with the previous URL) or already correct

        Raises:
            ShortlinkError: If keyword or url is empty, or the keyword is reserved
        """
        if not keyword or not url:
            raise ShortlinkError(keyword, "invalid keyword or URL")

        if self.is_reserved(keyword):
            raise ShortlinkError(keyword, "keyword is reserved and cannot be used")

        link = await self.session.get(ShortLink, keyword)

        if link is None:
            self.session.add(ShortLink(keyword=keyword, url=url))
            await self.session.flush()
            logger.info(f"Created shortlink '{keyword}' -> {url}")
            return ShortlinkResult(keyword, url, ShortlinkOutcome.CREATED)

        if link.url == url:
            return ShortlinkResult(keyword, url, ShortlinkOutcome.UNCHANGED, previous_url=url)

        previous_url = link.url
        link.url = url
        link.updated_at = utcnow()
        await self.session.flush()
        logger.info(f"Updated shortlink '{keyword}': {previous_url} -> {url}")
        return ShortlinkResult(keyword, url, ShortlinkOutcome.UPDATED, previous_url=previous_url)
