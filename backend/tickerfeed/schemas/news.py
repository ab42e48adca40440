from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class NewsItem(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: int
    symbol: str
    headline: str = ""
    summary: str = ""
    source: str = ""
    url: str = ""
    image: Optional[str] = None
    datetime: int
    category: Optional[str] = None
    related: Optional[str] = None


class NewsResponse(BaseModel):
    news: list[NewsItem] = Field(default_factory=list)
