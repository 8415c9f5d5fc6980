from fastapi import Depends, Request
from filmorate_api.services.context import ServiceContext
from filmorate_api.services.films_service import FilmsService
from filmorate_api.services.references_service import ReferencesService
from filmorate_api.services.users_service import UsersService


async def get_context(request: Request) -> ServiceContext:
    # built once per app in the lifespan, see main.create_app
    return request.app.state.ctx


async def get_films_service(
        ctx: ServiceContext = Depends(get_context),
) -> FilmsService:
    return FilmsService(ctx)


async def get_users_service(
        ctx: ServiceContext = Depends(get_context),
) -> UsersService:
    return UsersService(ctx)


async def get_references_service(
        ctx: ServiceContext = Depends(get_context),
) -> ReferencesService:
    return ReferencesService(ctx)
