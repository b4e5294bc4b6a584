"""
Domain Types

RedirectList is the validated record the sanitizer produces and the
settings store persists. It is immutable: a list is always replaced
wholesale, never edited in place.
"""

from typing import Any, NamedTuple, Optional

from pydantic import BaseModel, ConfigDict, Field


class RedirectEntry(NamedTuple):
    """A destination URL and its relative selection weight."""
    url: str
    weight: float = 0.0


class RedirectList(BaseModel):
    """
    Destinations configured under one keyword.

    Entry order only matters as a tie-break: the first URL is the
    shortlink target and the last positive-weight URL is the selector's
    rounding fallback.
    """
    model_config = ConfigDict(frozen=True)

    enabled: bool = True
    entries: tuple[RedirectEntry, ...] = Field(..., min_length=1)

    @property
    def urls(self) -> list[str]:
        return [entry.url for entry in self.entries]

    @property
    def weights(self) -> list[float]:
        return [entry.weight for entry in self.entries]

    @property
    def target_url(self) -> str:
        """URL the keyword's shortlink points at."""
        return self.entries[0].url


class SubmittedList(BaseModel):
    """
    One list as submitted by the admin form, before sanitization.

    Fields are deliberately loose: the sanitizer decides what is valid.
    original_keyword is the keyword the list was stored under when the
    form was rendered; it differs from keyword when the list is renamed
    and is None for a brand new list.
    """
    keyword: Any = ""
    original_keyword: Optional[Any] = None
    urls: list[Any] = Field(default_factory=list)
    weights: list[Any] = Field(default_factory=list)
    enabled: bool = True
