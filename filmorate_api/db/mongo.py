from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo.errors import PyMongoError
from filmorate_api.core.config import Settings, settings
import logging

_client: AsyncIOMotorClient | None = None


async def get_client(cfg: Settings = settings) -> AsyncIOMotorClient:
    """
    Singleton Motor client with explicit timeouts and pool limits.
    """
    global _client
    if _client is None:
        _client = AsyncIOMotorClient(
            cfg.mongo_dsn,
            appname="filmorate-api",
            tz_aware=True,
            maxPoolSize=50,
            minPoolSize=0,
            serverSelectionTimeoutMS=3000,
            connectTimeoutMS=3000,
            socketTimeoutMS=5000,
            retryWrites=True,
        )
        # quick connectivity probe, startup is not blocked past the timeout
        try:
            await _client.admin.command("ping")
        except PyMongoError as e:
            logging.getLogger(__name__).warning(
                "mongo_ping_failed", extra={"err": str(e)})
    return _client


async def get_mongo_db(cfg: Settings = settings) -> AsyncIOMotorDatabase:
    client = await get_client(cfg)
    return client[cfg.mongo_db]


async def close_client() -> None:
    global _client
    if _client is not None:
        _client.close()
        _client = None
