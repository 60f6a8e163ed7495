"""
Pydantic DTOs for the comic endpoints.

The main API returns one JSON object per comic; the search API returns a list
of matching comic numbers. Unknown fields are ignored so upstream additions do
not break parsing.
"""
from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class Comic(BaseModel):
    """A single comic strip as served by the main API."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    num: int = Field(ge=1)
    title: str
    safe_title: str = ""
    img: str
    alt: str = ""
    year: str = ""
    month: str = ""
    day: str = ""
    transcript: str = ""
    link: str = ""
    news: str = ""


class SearchResults(BaseModel):
    """Comic numbers matching a search query, best match first."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    results: List[int] = Field(default_factory=list)


__all__ = ["Comic", "SearchResults"]
