from http import HTTPStatus
from fastapi import APIRouter, FastAPI
from filmorate_api.core.config import Settings

router = APIRouter(tags=["debug"])


@router.get("/__sentry-test", status_code=HTTPStatus.NO_CONTENT)
async def sentry_test():
    import sentry_sdk
    sentry_sdk.capture_message("Sentry test ping from filmorate")
    return None


def include_debug_routes(app: FastAPI, cfg: Settings) -> bool:
    # only mounted when explicitly enabled
    if cfg.sentry_test_enabled:
        app.include_router(router)
        return True
    return False
