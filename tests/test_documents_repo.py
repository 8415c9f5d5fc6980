from unittest.mock import AsyncMock, MagicMock

from pymongo.errors import DuplicateKeyError

from filmorate_api.models.films import Film
from filmorate_api.services.repositories.documents_repo import DocumentsRepo


def _fake_db(films_col, counters_col):
    cols = {"films": films_col, "counters": counters_col}
    db = MagicMock()
    db.__getitem__.side_effect = cols.__getitem__
    return db


async def test_create_returns_none_when_insert_hits_unique_index():
    films = MagicMock()
    films.count_documents = AsyncMock(return_value=0)
    films.insert_one = AsyncMock(side_effect=DuplicateKeyError("films_id"))
    counters = MagicMock()
    counters.find_one_and_update = AsyncMock(return_value={"seq": 1})

    repo = DocumentsRepo(_fake_db(films, counters), "films", Film,
                         frozenset({"likes"}))
    film = Film(id=1, name="Film", releaseDate="2000-01-01", duration=90)
    assert await repo.create(film) is None


async def test_create_stores_document_without_edge_fields():
    films = MagicMock()
    films.count_documents = AsyncMock(return_value=0)
    films.insert_one = AsyncMock()
    counters = MagicMock()
    counters.find_one_and_update = AsyncMock(return_value={"seq": 7})

    repo = DocumentsRepo(_fake_db(films, counters), "films", Film,
                         frozenset({"likes"}))
    created = await repo.create(Film(name="Film", releaseDate="2000-01-01",
                                     duration=90, likes={3}))
    assert created.id == 7
    doc = films.insert_one.await_args.args[0]
    assert "likes" not in doc
    assert doc["release_date"] == "2000-01-01"
