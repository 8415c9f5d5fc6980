from pymongo import MongoClient, ASCENDING
from filmorate_api.core.config import settings
from filmorate_api.models.references import GENRES, MPA_RATINGS


def main():
    db = MongoClient(settings.mongo_dsn)[settings.mongo_db]

    print("Using DSN:", settings.mongo_dsn, "DB:", settings.mongo_db)
    # entities: generated integer ids
    for name in ("films", "users"):
        db[name].create_index([("id", ASCENDING)],
                              unique=True, name=f"{name}_id")

    # friends: directed edges, lookups from both ends
    db["friends"].create_index(
        [("user_id", ASCENDING), ("friend_id", ASCENDING)],
        unique=True, name="friends_user_friend"
    )
    db["friends"].create_index([("friend_id", ASCENDING)],
                               name="friends_friend_id")

    # likes: one per (film, user), cascades by user
    db["likes"].create_index(
        [("film_id", ASCENDING), ("user_id", ASCENDING)],
        unique=True, name="likes_film_user"
    )
    db["likes"].create_index([("user_id", ASCENDING)], name="likes_user_id")

    # lookup tables
    for name, rows in (("genres", GENRES), ("mpa", MPA_RATINGS)):
        db[name].create_index([("id", ASCENDING)],
                              unique=True, name=f"{name}_id")
        for row in rows:
            db[name].update_one({"id": row.id},
                                {"$set": row.model_dump()}, upsert=True)

    print("Indexes ensured, lookup tables seeded.")


if __name__ == "__main__":
    main()
