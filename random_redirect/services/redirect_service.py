"""
Redirect Service

Resolves a requested keyword to a destination URL.

Resolution order:
1. An enabled redirect list under the keyword: one of its URLs, chosen
   by weight
2. Otherwise the keyword's plain shortlink, if any
"""

import random
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from random_redirect.core.exceptions import InvalidKeywordError
from random_redirect.services.link_registry import LinkRegistry
from random_redirect.services.sanitizer import sanitize_keyword
from random_redirect.services.selector import select_url
from random_redirect.services.settings_store import SettingsStore


class RedirectService:
    """Read-only lookup-and-select path used by the redirect endpoint."""

    def __init__(self, session: AsyncSession, rng: Optional[random.Random] = None):
        """
        Args:
            session: Async database session
            rng: Random source for selection (defaults to SystemRandom)
        """
        self.session = session
        self.store = SettingsStore(session)
        self.registry = LinkRegistry(session)
        self.rng = rng

    async def get_redirect_url(self, keyword: str) -> Optional[str]:
        """
        Pick a destination for keyword.

        Returns:
            Selected URL, or None when the keyword is malformed, has no
            list, or its list is disabled
        """
        try:
            keyword = sanitize_keyword(keyword)
        except InvalidKeywordError:
            return None

        redirect_list = await self.store.get(keyword)
        if redirect_list is None or not redirect_list.enabled:
            return None

        return select_url(redirect_list.entries, rng=self.rng)

    async def get_shortlink_url(self, keyword: str) -> Optional[str]:
        """Return the keyword's plain shortlink target, or None."""
        try:
            keyword = sanitize_keyword(keyword)
        except InvalidKeywordError:
            return None
        return await self.registry.get_url(keyword)
