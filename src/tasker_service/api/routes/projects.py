"""Project routes."""
from __future__ import annotations

from aiohttp import web

from tasker_service.api.utils import (
    get_project_service,
    parse_uuid,
    read_model,
    require_current_user,
)
from tasker_service.domain.dto import (
    CollaboratorResponse,
    InviteRequest,
    ProjectCreateRequest,
    ProjectUpdateRequest,
)

routes = web.RouteTableDef()


@routes.get("/api/projects")
async def list_projects(request: web.Request) -> web.Response:
    """Projects owned by the current user."""
    user = await require_current_user(request)
    projects = await get_project_service(request).list_owned_projects(user.id)
    return web.json_response([p.to_dict() for p in projects])


@routes.post("/api/projects")
async def create_project(request: web.Request) -> web.Response:
    user = await require_current_user(request)
    req = await read_model(request, ProjectCreateRequest)
    project = await get_project_service(request).create_project(
        user.id, req.title, req.description
    )
    return web.json_response(project.to_dict(), status=201)


@routes.get("/api/projects/{project_id}")
async def get_project(request: web.Request) -> web.Response:
    user = await require_current_user(request)
    project_id = parse_uuid(request.match_info["project_id"], "project_id")
    project = await get_project_service(request).get_project(project_id, user.id)
    return web.json_response(project.to_dict())


@routes.patch("/api/projects/{project_id}")
async def update_project(request: web.Request) -> web.Response:
    user = await require_current_user(request)
    project_id = parse_uuid(request.match_info["project_id"], "project_id")
    req = await read_model(request, ProjectUpdateRequest)
    project = await get_project_service(request).update_project(
        project_id, user.id, title=req.title, description=req.description
    )
    return web.json_response(project.to_dict())


@routes.delete("/api/projects/{project_id}")
async def delete_project(request: web.Request) -> web.Response:
    """Delete a project together with its tasks."""
    user = await require_current_user(request)
    project_id = parse_uuid(request.match_info["project_id"], "project_id")
    await get_project_service(request).delete_project(project_id, user.id)
    return web.json_response({"message": "Project deleted"})


@routes.post("/api/projects/{project_id}/invite")
async def invite(request: web.Request) -> web.Response:
    user = await require_current_user(request)
    project_id = parse_uuid(request.match_info["project_id"], "project_id")
    req = await read_model(request, InviteRequest)
    project, collaborator = await get_project_service(request).invite(
        project_id, user.id, req.email.strip()
    )
    return web.json_response(
        {
            "message": "Collaborator invited successfully",
            "collaborator": {"id": str(collaborator.id), "email": collaborator.email},
            "project": project.to_dict(),
        }
    )


@routes.get("/api/projects/{project_id}/collaborators")
async def list_collaborators(request: web.Request) -> web.Response:
    user = await require_current_user(request)
    project_id = parse_uuid(request.match_info["project_id"], "project_id")
    users = await get_project_service(request).list_collaborators(project_id, user.id)
    return web.json_response(
        [
            CollaboratorResponse(id=str(u.id), name=u.name, email=u.email).model_dump()
            for u in users
        ]
    )
