"""
Database Models for the Random Redirect Service

This module defines the SQLModel database schemas for:
- RedirectListRecord: Weighted destination list stored under a keyword
- ShortLink: Plain keyword -> URL mapping maintained by the link registry

Design Decisions:
- Keyword is the primary key of both tables (lookups are always by keyword)
- Entries are stored as one JSON document; a list is always replaced
  wholesale, so there is nothing to gain from a child table
- The two tables are independent: deleting a list never deletes its shortlink
"""

from datetime import datetime, timezone
from typing import Any

from sqlalchemy import JSON, Boolean, DateTime, String, Text
from sqlmodel import Column, Field, SQLModel


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class RedirectListRecord(SQLModel, table=True):
    """
    Stored redirect list.

    Fields:
    - keyword: Normalized keyword ([A-Za-z0-9_/-], no leading/trailing '/')
    - enabled: When false the keyword never redirects
    - entries: JSON array of {"url": str, "weight": float}
    - updated_at: Time of the last submission that replaced this list
    """
    __tablename__ = "redirect_lists"

    keyword: str = Field(sa_column=Column(String(255), primary_key=True))
    enabled: bool = Field(
        default=True,
        sa_column=Column(Boolean, nullable=False, default=True)
    )
    entries: list[dict[str, Any]] = Field(
        default_factory=list,
        sa_column=Column(JSON, nullable=False)
    )
    updated_at: datetime = Field(
        default_factory=utcnow,
        sa_column=Column(DateTime(timezone=True), nullable=False)
    )


class ShortLink(SQLModel, table=True):
    """
    Shortlink owned by the link registry.

    Each saved redirect list gets a shortlink under the same keyword
    pointing at its first URL. Renamed or deleted lists leave their old
    shortlink behind.
    """
    __tablename__ = "shortlinks"

    keyword: str = Field(sa_column=Column(String(255), primary_key=True))
    url: str = Field(sa_column=Column(Text, nullable=False))
    created_at: datetime = Field(
        default_factory=utcnow,
        sa_column=Column(DateTime(timezone=True), nullable=False, index=True)
    )
    updated_at: datetime = Field(
        default_factory=utcnow,
        sa_column=Column(DateTime(timezone=True), nullable=False)
    )
