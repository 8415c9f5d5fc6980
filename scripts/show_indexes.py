from pymongo import MongoClient
from filmorate_api.core.config import settings

COLLECTIONS = ("films", "users", "friends", "likes", "genres", "mpa",
               "counters")


def dump(db, col_name: str):
    idx = list(db[col_name].list_indexes())
    docs = db[col_name].estimated_document_count()
    print(f"\nIndexes in '{col_name}' ({docs} docs):")
    for i in idx:
        print(" -", i)


if __name__ == "__main__":
    database = MongoClient(settings.mongo_dsn)[settings.mongo_db]
    for name in COLLECTIONS:
        dump(database, name)
