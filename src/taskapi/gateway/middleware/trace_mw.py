"""TraceMiddleware

为单任务操作绑定 task_id，贯穿该请求的全部日志。
task_id 从 /api/tasks/{task_id} 路径中提取。
"""

import structlog
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

TASKS_PATH_PREFIX = "/api/tasks/"


def extract_task_id(path: str) -> str | None:
    """从请求路径提取 task_id，非单任务路径返回 None"""
    if not path.startswith(TASKS_PATH_PREFIX):
        return None
    task_id = path[len(TASKS_PATH_PREFIX):]
    if not task_id or "/" in task_id:
        return None
    return task_id


class TraceMiddleware(BaseHTTPMiddleware):
    """任务级追踪中间件 -- 为任务操作绑定 task_id"""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        task_id = extract_task_id(request.url.path)
        if task_id:
            structlog.contextvars.bind_contextvars(task_id=task_id)

        return await call_next(request)
