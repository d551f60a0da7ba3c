from __future__ import annotations

from pydantic import BaseModel, Field


class NewsItem(BaseModel):
    id: int = Field(..., description="결과 내 순번 (1부터)")
    title: str
    description: str
    date: str
    source: str
    link: str
