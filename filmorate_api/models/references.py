from __future__ import annotations

from typing import Optional

from pydantic import BaseModel


class Genre(BaseModel):
    id: int
    name: Optional[str] = None


class Mpa(BaseModel):
    id: int
    name: Optional[str] = None


# Static lookup tables, seeded into every storage backend on startup.
GENRES: tuple[Genre, ...] = (
    Genre(id=1, name="Comedy"),
    Genre(id=2, name="Drama"),
    Genre(id=3, name="Animation"),
    Genre(id=4, name="Thriller"),
    Genre(id=5, name="Documentary"),
    Genre(id=6, name="Action"),
)

MPA_RATINGS: tuple[Mpa, ...] = (
    Mpa(id=1, name="G"),
    Mpa(id=2, name="PG"),
    Mpa(id=3, name="PG-13"),
    Mpa(id=4, name="R"),
    Mpa(id=5, name="NC-17"),
)
