from __future__ import annotations

from datetime import date
from typing import Dict, Optional

from pydantic import BaseModel, EmailStr, Field, field_validator


class User(BaseModel):
    id: int = 0
    login: str
    name: Optional[str] = None
    email: EmailStr
    birthday: date
    # friend_id -> True when the friend points back (acknowledged)
    friends: Dict[int, bool] = Field(default_factory=dict)

    @field_validator("login")
    @classmethod
    def login_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("login must not be blank")
        return value

    @field_validator("birthday")
    @classmethod
    def birthday_not_in_future(cls, value: date) -> date:
        if value > date.today():
            raise ValueError("birthday must not be in the future")
        return value

    @field_validator("friends", mode="before")
    @classmethod
    def null_as_empty(cls, value):
        return {} if value is None else value


class FriendItem(User):
    acknowledged: bool = False
