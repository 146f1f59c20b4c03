"""任务 CRUD 路由

GET    /api/tasks:           任务列表（插入顺序），/api/tasks/ 同样可用
GET    /api/tasks/{task_id}: 任务详情，不存在 404
POST   /api/tasks:           创建任务，title 不合法 400，/api/tasks/ 同样可用
PUT    /api/tasks/{task_id}: 部分更新，不存在 404
DELETE /api/tasks/{task_id}: 删除任务，成功 204，不存在 404
"""

from typing import Any

from fastapi import APIRouter, Body, Depends
from starlette.responses import JSONResponse, Response
from taskapi.core.exceptions import TaskValidationError
from taskapi.core.models import Task

from ..deps import get_task_service
from ..services.task_service import TaskService

router = APIRouter()

TASK_NOT_FOUND_MESSAGE = "Task not found"


def _not_found() -> JSONResponse:
    return JSONResponse(status_code=404, content={"error": TASK_NOT_FOUND_MESSAGE})


def _bad_request(error: TaskValidationError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": error.message})


@router.get("/api/tasks", response_model=list[Task])
@router.get("/api/tasks/", response_model=list[Task], include_in_schema=False)
async def list_tasks(service: TaskService = Depends(get_task_service)):
    """查询全部任务"""
    return await service.list_tasks()


@router.get("/api/tasks/{task_id}", response_model=Task)
async def get_task(task_id: str, service: TaskService = Depends(get_task_service)):
    """查询单个任务"""
    task = await service.get_task(task_id)
    if task is None:
        return _not_found()
    return task


@router.post("/api/tasks", response_model=Task, status_code=201)
@router.post("/api/tasks/", response_model=Task, status_code=201, include_in_schema=False)
async def create_task(
    payload: Any = Body(default=None),
    service: TaskService = Depends(get_task_service),
):
    """创建任务

    - 成功返回 201 + Task
    - title 缺失或非字符串返回 400，不写入 Store
    """
    try:
        return await service.create_task(payload)
    except TaskValidationError as e:
        return _bad_request(e)


@router.put("/api/tasks/{task_id}", response_model=Task)
async def update_task(
    task_id: str,
    payload: Any = Body(default=None),
    service: TaskService = Depends(get_task_service),
):
    """部分更新任务，只覆盖请求体中提供的字段"""
    try:
        task = await service.update_task(task_id, payload)
    except TaskValidationError as e:
        return _bad_request(e)

    if task is None:
        return _not_found()
    return task


@router.delete("/api/tasks/{task_id}", status_code=204)
async def delete_task(task_id: str, service: TaskService = Depends(get_task_service)):
    """删除任务，成功返回 204 空响应"""
    deleted = await service.delete_task(task_id)
    if not deleted:
        return _not_found()
    return Response(status_code=204)
