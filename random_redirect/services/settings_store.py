"""
Settings Store

Key-value persistence for redirect lists: keyword -> RedirectList.

Design Decisions:
- Last write wins per keyword; no cross-keyword atomicity is assumed
- The store never commits; the caller owns the transaction so a whole
  submission is written in one unit
- Records are converted to immutable RedirectList snapshots on read,
  so request handlers never hold ORM objects
"""

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from random_redirect.core.exceptions import DatabaseError
from random_redirect.core.types import RedirectEntry, RedirectList
from random_redirect.db.models import RedirectListRecord, utcnow

logger = logging.getLogger(__name__)


def _to_redirect_list(record: RedirectListRecord) -> RedirectList:
    return RedirectList(
        enabled=record.enabled,
        entries=tuple(
            RedirectEntry(item["url"], float(item.get("weight", 0.0)))
            for item in record.entries
        ),
    )


def _to_json_entries(redirect_list: RedirectList) -> list[dict]:
    return [{"url": entry.url, "weight": entry.weight} for entry in redirect_list.entries]


class SettingsStore:
    """Persistent map from keyword to RedirectList."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get(self, keyword: str) -> Optional[RedirectList]:
        """Return the list stored under keyword, or None."""
        record = await self.session.get(RedirectListRecord, keyword)
        if record is None:
            return None
        return _to_redirect_list(record)

    async def all(self) -> dict[str, RedirectList]:
        """Return every stored list, ordered by keyword."""
        statement = select(RedirectListRecord).order_by(RedirectListRecord.keyword)
        result = await self.session.execute(statement)
        return {
            record.keyword: _to_redirect_list(record)
            for record in result.scalars().all()
        }

    async def put(self, keyword: str, redirect_list: RedirectList) -> None:
        """
        Create or replace the list stored under keyword.

        Raises:
            DatabaseError: If the write fails
        """
        try:
            record = await self.session.get(RedirectListRecord, keyword)
            if record is None:
                record = RedirectListRecord(keyword=keyword)
                self.session.add(record)

            record.enabled = redirect_list.enabled
            record.entries = _to_json_entries(redirect_list)
            record.updated_at = utcnow()
            await self.session.flush()
        except SQLAlchemyError as e:
            raise DatabaseError(
                f"Failed to save redirect list '{keyword}': {str(e)}",
                original_error=e
            )

    async def delete(self, keyword: str) -> bool:
        """
        Delete the list stored under keyword.

        Returns:
            True if a list was deleted, False if none existed

        Raises:
            DatabaseError: If the delete fails
        """
        try:
            record = await self.session.get(RedirectListRecord, keyword)
            if record is None:
                return False

            await self.session.delete(record)
            await self.session.flush()
        except SQLAlchemyError as e:
            raise DatabaseError(
                f"Failed to delete redirect list '{keyword}': {str(e)}",
                original_error=e
            )
        return True
