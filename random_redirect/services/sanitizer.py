"""
Settings Sanitizer

Normalizes raw, untrusted admin input (keyword strings, URL lists,
weight lists) into a validated RedirectList.

Design Decisions:
- Pure functions: no I/O, safe to call from any request
- Malformed individual values are coerced or dropped, never fatal
- Only two conditions reject a list outright: a bad keyword and a list
  with no surviving URLs
- Sanitized output is a fixed point: sanitizing it again changes nothing
"""

import re
from collections.abc import Iterable
from typing import Optional

from random_redirect.core.exceptions import EmptyListError, InvalidKeywordError
from random_redirect.core.types import RedirectEntry, RedirectList
from random_redirect.core.validators import (
    DEFAULT_MAX_URL_LENGTH,
    KEYWORD_PATTERN,
    is_valid_url,
    parse_weight,
)

_REPEATED_SLASHES = re.compile(r'/+')


def sanitize_keyword(raw) -> str:
    """
    Normalize a keyword.

    Trims whitespace, strips leading/trailing slashes and collapses
    repeated slashes, then checks the allowed character set.

    Example:
        sanitize_keyword("//foo//bar/") -> "foo/bar"

    Raises:
        InvalidKeywordError: If the input is not a string, is empty after
            trimming, or contains characters outside [A-Za-z0-9_/-]
    """
    if not isinstance(raw, str):
        raise InvalidKeywordError(raw)

    keyword = raw.strip().strip('/')
    keyword = _REPEATED_SLASHES.sub('/', keyword)

    if not keyword or not KEYWORD_PATTERN.match(keyword):
        raise InvalidKeywordError(raw)

    return keyword


def sanitize_urls(raw, max_length: int = DEFAULT_MAX_URL_LENGTH) -> list[str]:
    """
    Keep the well-formed absolute URLs from a raw list.

    Entries are trimmed; empty and invalid entries are dropped. Order is
    preserved and duplicates are kept.
    """
    if isinstance(raw, (str, bytes)) or not isinstance(raw, Iterable):
        return []

    urls = []
    for url in raw:
        if not isinstance(url, str):
            continue
        url = url.strip()
        if url and is_valid_url(url, max_length=max_length):
            urls.append(url)
    return urls


def sanitize_weights(raw, target_length: int) -> list[float]:
    """
    Parse raw weights and fit them to the number of URLs.

    Invalid or empty entries become 0.0, negatives are floored to 0.0.
    The result is truncated or zero-padded to exactly target_length.

    Example:
        sanitize_weights(["50", "", "abc"], target_length=3) -> [50.0, 0.0, 0.0]
    """
    if raw is None or isinstance(raw, (str, bytes)) or not isinstance(raw, Iterable):
        raw = []

    weights = [parse_weight(value) for value in raw][:target_length]
    weights.extend([0.0] * (target_length - len(weights)))
    return weights


def build_list(
    urls,
    weights,
    enabled: bool = True,
    keyword: str = "",
    max_length: int = DEFAULT_MAX_URL_LENGTH,
) -> RedirectList:
    """
    Combine raw URLs and weights into a RedirectList.

    Weights are matched to URLs by position after invalid URLs have been
    dropped, so a weight follows its URL only when every URL before it
    is valid.

    Args:
        urls: Raw URL strings
        weights: Raw weights (strings or numbers), may be shorter or longer
        enabled: Whether the keyword redirects
        keyword: Used only to label the error

    Raises:
        EmptyListError: If no URL survives sanitization
    """
    clean_urls = sanitize_urls(urls, max_length=max_length)
    if not clean_urls:
        raise EmptyListError(keyword)

    clean_weights = sanitize_weights(weights, len(clean_urls))
    return RedirectList(
        enabled=bool(enabled),
        entries=tuple(
            RedirectEntry(url, weight)
            for url, weight in zip(clean_urls, clean_weights)
        ),
    )


def sanitize_list(
    redirect_list: RedirectList,
    keyword: Optional[str] = None,
    max_length: int = DEFAULT_MAX_URL_LENGTH,
) -> RedirectList:
    """Re-run the sanitizer over an existing list, using the limit it was built with."""
    return build_list(
        redirect_list.urls,
        redirect_list.weights,
        enabled=redirect_list.enabled,
        keyword=keyword or "",
        max_length=max_length,
    )
