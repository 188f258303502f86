"""Task routes."""
from __future__ import annotations

from aiohttp import web

from tasker_service.api.utils import (
    get_task_service,
    parse_uuid,
    read_model,
    require_current_user,
)
from tasker_service.domain.dto import TaskCreateRequest, TaskUpdateRequest

routes = web.RouteTableDef()


@routes.get("/api/projects/{project_id}/tasks")
async def list_tasks(request: web.Request) -> web.Response:
    user = await require_current_user(request)
    project_id = parse_uuid(request.match_info["project_id"], "project_id")
    tasks = await get_task_service(request).list_tasks(project_id, user.id)
    return web.json_response([t.to_dict() for t in tasks])


@routes.post("/api/projects/{project_id}/tasks")
async def create_task(request: web.Request) -> web.Response:
    user = await require_current_user(request)
    project_id = parse_uuid(request.match_info["project_id"], "project_id")
    req = await read_model(request, TaskCreateRequest)
    task = await get_task_service(request).create_task(
        project_id,
        user.id,
        req.title,
        req.description,
        req.status,
    )
    return web.json_response(task.to_dict(), status=201)


@routes.get("/api/tasks/{task_id}")
async def get_task(request: web.Request) -> web.Response:
    user = await require_current_user(request)
    task_id = parse_uuid(request.match_info["task_id"], "task_id")
    task = await get_task_service(request).get_task(task_id, user.id)
    return web.json_response(task.to_dict())


@routes.patch("/api/tasks/{task_id}")
async def update_task(request: web.Request) -> web.Response:
    """Partial update of title, description and status."""
    user = await require_current_user(request)
    task_id = parse_uuid(request.match_info["task_id"], "task_id")
    req = await read_model(request, TaskUpdateRequest)
    task = await get_task_service(request).update_task(
        task_id,
        user.id,
        title=req.title,
        description=req.description,
        status=req.status,
    )
    return web.json_response(task.to_dict())


@routes.delete("/api/tasks/{task_id}")
async def delete_task(request: web.Request) -> web.Response:
    user = await require_current_user(request)
    task_id = parse_uuid(request.match_info["task_id"], "task_id")
    await get_task_service(request).delete_task(task_id, user.id)
    return web.json_response({"message": "Task removed"})
