"""Store Protocol 接口定义

使用 Python Protocol 实现结构化子类型（duck typing），
gateway 层只依赖此接口，不依赖具体实现。
"""

from typing import Protocol

from ..models.task import Task, TaskCreate, TaskUpdate


class TaskStore(Protocol):
    """Task 存储接口

    查不到任务不是异常：get/update 返回 None，delete 返回 False。
    """

    async def list_tasks(self) -> list[Task]:
        """按插入顺序返回全部任务"""
        ...

    async def get_task(self, task_id: str) -> Task | None:
        """根据 task_id 查询任务"""
        ...

    async def create_task(self, data: TaskCreate) -> Task:
        """创建任务，分配 id 和时间戳"""
        ...

    async def update_task(self, task_id: str, data: TaskUpdate) -> Task | None:
        """部分更新任务，只覆盖显式提供的字段"""
        ...

    async def delete_task(self, task_id: str) -> bool:
        """删除任务，返回是否确实删除"""
        ...

    async def count(self) -> int:
        """当前任务数量"""
        ...

    async def clear(self) -> None:
        """清空全部任务（测试隔离用）"""
        ...
