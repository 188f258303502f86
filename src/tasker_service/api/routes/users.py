"""Registration and login routes."""
from __future__ import annotations

from aiohttp import web

from tasker_service.api.utils import get_auth_service, read_model, require_current_user
from tasker_service.domain.dto import AuthResponse, UserLoginRequest, UserRegisterRequest

routes = web.RouteTableDef()


@routes.post("/api/users/register")
async def register(request: web.Request) -> web.Response:
    """Register a new user."""
    req = await read_model(request, UserRegisterRequest)
    user, token = await get_auth_service(request).register(
        name=req.name,
        email=req.email,
        password=req.password,
    )
    body = AuthResponse(id=str(user.id), name=user.name, email=user.email, token=token)
    return web.json_response(body.model_dump(), status=201)


@routes.post("/api/users/login")
async def login(request: web.Request) -> web.Response:
    """Authenticate and return a token."""
    req = await read_model(request, UserLoginRequest)
    user, token = await get_auth_service(request).login(email=req.email, password=req.password)
    body = AuthResponse(id=str(user.id), name=user.name, email=user.email, token=token)
    return web.json_response(body.model_dump())


@routes.get("/api/users/me")
async def me(request: web.Request) -> web.Response:
    user = await require_current_user(request)
    return web.json_response(user.to_public())
