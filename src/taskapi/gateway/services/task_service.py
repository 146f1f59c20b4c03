"""TaskService -- 请求校验 + 任务增删改查

把路由收到的原始 JSON 转换为 TaskCreate / TaskUpdate，
校验失败抛出 TaskValidationError，再委托 TaskStore 执行。
"""

from typing import Any

import structlog
from pydantic import ValidationError

from taskapi.core.exceptions import TaskValidationError
from taskapi.core.models import Task, TaskCreate, TaskUpdate
from taskapi.core.store import TaskStore

log = structlog.get_logger()

TITLE_REQUIRED_MESSAGE = "Title is required and must be a string"
DESCRIPTION_TYPE_MESSAGE = "Description must be a string"
BODY_NOT_OBJECT_MESSAGE = "Request body must be a JSON object"


class TaskService:
    """任务业务服务"""

    def __init__(self, store: TaskStore) -> None:
        self._store = store

    async def list_tasks(self) -> list[Task]:
        """查询任务列表（插入顺序）"""
        return await self._store.list_tasks()

    async def get_task(self, task_id: str) -> Task | None:
        """查询任务详情"""
        return await self._store.get_task(task_id)

    async def create_task(self, payload: Any) -> Task:
        """创建任务

        Args:
            payload: 请求体（任意 JSON 值，缺省视为空对象）

        Raises:
            TaskValidationError: title 缺失/非字符串/为空，或 description 非字符串
        """
        data = self.parse_create(payload)
        task = await self._store.create_task(data)
        log.info("task_created", task_id=task.id)
        return task

    async def update_task(self, task_id: str, payload: Any) -> Task | None:
        """部分更新任务

        先确认任务存在：不存在时无论请求体内容都返回 None（404），
        只有已存在的任务才校验字段类型。

        Returns:
            更新后的 Task，任务不存在返回 None

        Raises:
            TaskValidationError: 任务存在，但请求体不是对象或字段类型不合法
        """
        if await self._store.get_task(task_id) is None:
            return None

        changes = self.parse_update(payload)
        task = await self._store.update_task(task_id, changes)
        if task is not None:
            log.info(
                "task_updated",
                task_id=task_id,
                fields=sorted(changes.changes()),
            )
        return task

    async def delete_task(self, task_id: str) -> bool:
        """删除任务，返回是否确实删除"""
        deleted = await self._store.delete_task(task_id)
        if deleted:
            log.info("task_deleted", task_id=task_id)
        return deleted

    @staticmethod
    def parse_create(payload: Any) -> TaskCreate:
        """校验创建请求体"""
        body = payload if isinstance(payload, dict) else {}

        title = body.get("title")
        if not isinstance(title, str) or not title:
            raise TaskValidationError(TITLE_REQUIRED_MESSAGE, field="title")

        try:
            return TaskCreate.model_validate(body)
        except ValidationError as e:
            raise TaskValidationError(DESCRIPTION_TYPE_MESSAGE, field="description") from e

    @staticmethod
    def parse_update(payload: Any) -> TaskUpdate:
        """校验更新请求体

        字段缺失或为 null 视为未提供，不做 title 非空校验。
        """
        if payload is None:
            payload = {}
        if not isinstance(payload, dict):
            raise TaskValidationError(BODY_NOT_OBJECT_MESSAGE)

        try:
            return TaskUpdate.model_validate(payload)
        except ValidationError as e:
            field = str(e.errors()[0]["loc"][0])
            raise TaskValidationError(
                f"Invalid value for field '{field}'", field=field
            ) from e
