from __future__ import annotations

from datetime import date
from typing import List, Optional, Set

from pydantic import (
    BaseModel, ConfigDict, Field, field_serializer, field_validator
)

from filmorate_api.models.references import Genre, Mpa

# Earliest accepted release date: the first public film screening.
CINEMA_BIRTHDAY = date(1895, 12, 28)
DESCRIPTION_MAX_LENGTH = 200


class Film(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int = 0
    name: str
    description: Optional[str] = None
    release_date: date = Field(..., alias="releaseDate")
    duration: int = Field(..., gt=0, description="minutes")
    genres: List[Genre] = Field(default_factory=list)
    mpa: Optional[Mpa] = None
    likes: Set[int] = Field(default_factory=set)

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("name must not be blank")
        return value

    @field_validator("genres", "likes", mode="before")
    @classmethod
    def null_as_empty(cls, value):
        return [] if value is None else value

    @field_serializer("likes")
    def likes_sorted(self, likes: Set[int]) -> List[int]:
        return sorted(likes)
