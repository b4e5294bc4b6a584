"""
Settings Submission Service

Applies one admin form submission to the settings store.

Processing rules:
- Every list is sanitized independently; problems are collected as
  messages rather than aborting the submission
- The first list to claim a keyword wins; later lists with the same
  normalized keyword are rejected
- A rejected list writes nothing, so whatever was stored under its
  keyword stays as it was
- A valid list replaces the stored one wholesale; a renamed list also
  removes its old keyword
- Each saved list gets a shortlink to its first URL through the link
  registry; registry failures are reported but do not unsave the list
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from random_redirect.core.exceptions import (
    DuplicateKeywordError,
    EmptyListError,
    InvalidKeywordError,
    KeywordNotFoundError,
    ShortlinkError,
)
from random_redirect.core.setting import settings
from random_redirect.core.types import RedirectList, SubmittedList
from random_redirect.services.link_registry import LinkRegistry, ShortlinkOutcome
from random_redirect.services.sanitizer import build_list, sanitize_keyword
from random_redirect.services.settings_store import SettingsStore

logger = logging.getLogger(__name__)


@dataclass
class SubmissionResult:
    saved: list[str] = field(default_factory=list)
    renamed: dict[str, str] = field(default_factory=dict)
    created: int = 0
    updated: int = 0
    errors: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class _AcceptedList:
    redirect_list: RedirectList
    previous_keyword: Optional[str] = None


class SettingsSubmissionService:
    """Validates submitted lists and persists the valid ones."""

    def __init__(
        self,
        session: AsyncSession,
        registry: Optional[LinkRegistry] = None,
        max_url_length: int = settings.MAX_URL_LENGTH,
    ):
        """
        Args:
            session: Database session; committed by the caller
            registry: Link registry (defaults to one using RESERVED_KEYWORDS)
            max_url_length: Longest destination URL accepted
        """
        self.session = session
        self.store = SettingsStore(session)
        self.registry = registry or LinkRegistry(session, settings.RESERVED_KEYWORDS)
        self.max_url_length = max_url_length

    async def process(
        self,
        lists: Sequence[SubmittedList] = (),
        new_list: Optional[SubmittedList] = None,
    ) -> SubmissionResult:
        """
        Apply a submission.

        Args:
            lists: Edited existing lists, in form order
            new_list: Optional list to add; always saved enabled

        Returns:
            SubmissionResult with saved keywords, shortlink counters and
            one message per rejected list or failed shortlink
        """
        result = SubmissionResult()
        accepted: dict[str, _AcceptedList] = {}

        for submitted in lists:
            self._accept(submitted, accepted, result, is_new=False)
        if new_list is not None:
            self._accept(new_list, accepted, result, is_new=True)

        for keyword, item in accepted.items():
            await self.store.put(keyword, item.redirect_list)
            result.saved.append(keyword)

            previous = item.previous_keyword
            if previous and previous != keyword and previous not in accepted:
                await self.store.delete(previous)
                result.renamed[previous] = keyword
                logger.info(f"Redirect list '{previous}' renamed to '{keyword}'")

            await self._ensure_shortlink(keyword, item.redirect_list.target_url, result)

        logger.info(
            f"Submission processed: saved={len(result.saved)} "
            f"created={result.created} updated={result.updated} "
            f"errors={len(result.errors)}"
        )
        return result

    async def delete_list(self, keyword) -> str:
        """
        Delete the list stored under keyword. Its shortlink is kept.

        Returns:
            The normalized keyword that was deleted

        Raises:
            InvalidKeywordError: If keyword is malformed
            KeywordNotFoundError: If no list is stored under keyword
        """
        keyword = sanitize_keyword(keyword)
        if not await self.store.delete(keyword):
            raise KeywordNotFoundError(keyword)
        logger.info(f"Redirect list '{keyword}' deleted")
        return keyword

    def _accept(
        self,
        submitted: SubmittedList,
        accepted: dict[str, _AcceptedList],
        result: SubmissionResult,
        is_new: bool,
    ) -> None:
        try:
            keyword = sanitize_keyword(submitted.keyword)
            previous_keyword = None
            if not is_new and submitted.original_keyword is not None:
                previous_keyword = sanitize_keyword(submitted.original_keyword)

            if keyword in accepted:
                raise DuplicateKeywordError(keyword)

            redirect_list = build_list(
                submitted.urls,
                submitted.weights,
                enabled=True if is_new else submitted.enabled,
                keyword=keyword,
                max_length=self.max_url_length,
            )
        except (InvalidKeywordError, DuplicateKeywordError, EmptyListError) as e:
            label = "New list" if is_new else "List"
            message = f"{label} skipped: {e}"
            logger.warning(message)
            result.errors.append(message)
            return

        accepted[keyword] = _AcceptedList(redirect_list, previous_keyword)

    async def _ensure_shortlink(self, keyword: str, url: str, result: SubmissionResult) -> None:
        try:
            shortlink = await self.registry.ensure_shortlink(keyword, url)
        except ShortlinkError as e:
            logger.warning(str(e))
            result.errors.append(str(e))
            return

        if shortlink.outcome is ShortlinkOutcome.CREATED:
            result.created += 1
        elif shortlink.outcome is ShortlinkOutcome.UPDATED:
            result.updated += 1
