"""
API Request and Response Schemas

Request models stay permissive (raw form values are sanitized by the
service layer, which reports problems per list instead of rejecting the
whole request). Response models describe what is actually stored.
"""

from typing import Optional

from pydantic import BaseModel, Field

from random_redirect.core.types import RedirectList, SubmittedList


class EntrySchema(BaseModel):
    url: str
    weight: float


class RedirectListResponse(BaseModel):
    """A stored redirect list."""
    keyword: str
    enabled: bool
    entries: list[EntrySchema]

    @classmethod
    def from_list(cls, keyword: str, redirect_list: RedirectList) -> "RedirectListResponse":
        return cls(
            keyword=keyword,
            enabled=redirect_list.enabled,
            entries=[EntrySchema(url=url, weight=weight) for url, weight in redirect_list.entries],
        )


class SettingsSubmissionRequest(BaseModel):
    """Request model for the settings form submission."""
    lists: list[SubmittedList] = Field(
        default_factory=list,
        description="Existing lists, each with its original_keyword and possibly a new keyword"
    )
    new_list: Optional[SubmittedList] = Field(
        default=None,
        description="Optional list to create (always enabled)"
    )


class SubmissionResponse(BaseModel):
    """Outcome of a settings submission."""
    saved: list[str] = Field(..., description="Keywords written in this submission")
    renamed: dict[str, str] = Field(default_factory=dict, description="Old keyword -> new keyword")
    created: int = Field(0, description="Shortlinks created")
    updated: int = Field(0, description="Shortlinks repointed to a new first URL")
    errors: list[str] = Field(default_factory=list, description="One message per rejected list or failed shortlink")


class DeleteResponse(BaseModel):
    keyword: str
    deleted: bool = True
