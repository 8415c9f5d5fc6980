from typing import Dict, Optional
from httpx import AsyncClient


def user_payload(n: int, **overrides) -> Dict:
    body = {
        "login": f"user{n}",
        "name": f"User {n}",
        "email": f"user{n}@example.com",
        "birthday": "1990-01-01",
    }
    body.update(overrides)
    return body


def film_payload(n: int, **overrides) -> Dict:
    body = {
        "name": f"Film {n}",
        "description": f"Description of film {n}",
        "releaseDate": "2000-01-01",
        "duration": 90 + n,
        "mpa": {"id": 1},
    }
    body.update(overrides)
    return body


async def create_user(client: AsyncClient, n: int, **overrides) -> Dict:
    r = await client.post("/users", json=user_payload(n, **overrides))
    assert r.status_code == 200, r.text
    return r.json()


async def create_film(client: AsyncClient, n: int, **overrides) -> Dict:
    r = await client.post("/films", json=film_payload(n, **overrides))
    assert r.status_code == 200, r.text
    return r.json()


async def befriend(client: AsyncClient, user_id: int, friend_id: int,
                   expected: Optional[int] = 200) -> Dict:
    r = await client.put(f"/users/{user_id}/friends/{friend_id}")
    if expected is not None:
        assert r.status_code == expected, r.text
    return r.json()


def ids(items) -> list:
    return [i["id"] for i in items]
