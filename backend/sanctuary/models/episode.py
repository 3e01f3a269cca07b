# /sanctuary/models/episode.py

from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field


class Episode(BaseModel):
    """An Animal Quest episode, reduced to what grouping needs."""
    episode: int = Field(..., ge=1, description="1-based episode number in broadcast order")
    edition: str = Field(..., description="Episode title, e.g. 'Snake Edition'")
    broadcast: datetime = Field(..., description="Broadcast date and time")
    featured: List[str] = Field(default_factory=list, description="Featured ambassador keys")
    classification: Optional[str] = Field(
        default=None,
        description="Class key of the first featured ambassador, e.g. 'mammalia'"
    )
