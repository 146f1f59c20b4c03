"""TaskStore 内存实现

进程内易失存储，重启即丢失。
所有操作在同一把锁内完成，FastAPI 线程池与事件循环并发访问时
每个操作仍是原子的。
"""

import threading
from collections.abc import Callable
from datetime import UTC, datetime

from ..ids import IdGenerator, UlidIdGenerator
from ..models.task import Task, TaskCreate, TaskUpdate


def _utcnow() -> datetime:
    return datetime.now(UTC)


class InMemoryTaskStore:
    """TaskStore 的内存实现"""

    def __init__(
        self,
        id_generator: IdGenerator | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        # dict 保持插入顺序，即 List 的返回顺序
        self._tasks: dict[str, Task] = {}
        self._id_generator = id_generator or UlidIdGenerator()
        self._clock = clock or _utcnow
        self._lock = threading.Lock()

    async def list_tasks(self) -> list[Task]:
        """按插入顺序返回全部任务"""
        with self._lock:
            return list(self._tasks.values())

    async def get_task(self, task_id: str) -> Task | None:
        """根据 task_id 查询任务"""
        with self._lock:
            return self._tasks.get(task_id)

    async def create_task(self, data: TaskCreate) -> Task:
        """创建任务

        completed 固定为 False，created_at == updated_at。
        """
        with self._lock:
            task_id = self._id_generator.new_id()
            while task_id in self._tasks:
                task_id = self._id_generator.new_id()

            now = self._clock()
            task = Task(
                id=task_id,
                title=data.title,
                description=data.description,
                completed=False,
                created_at=now,
                updated_at=now,
            )
            self._tasks[task_id] = task
            return task

    async def update_task(self, task_id: str, data: TaskUpdate) -> Task | None:
        """部分更新任务，不存在时返回 None"""
        with self._lock:
            existing = self._tasks.get(task_id)
            if existing is None:
                return None

            # 时钟回拨时仍保证 updated_at 不减小
            updated_at = max(self._clock(), existing.updated_at)
            updated = existing.model_copy(
                update={**data.changes(), "updated_at": updated_at}
            )
            self._tasks[task_id] = updated
            return updated

    async def delete_task(self, task_id: str) -> bool:
        """删除任务，返回是否确实删除"""
        with self._lock:
            return self._tasks.pop(task_id, None) is not None

    async def count(self) -> int:
        with self._lock:
            return len(self._tasks)

    async def clear(self) -> None:
        """清空全部任务"""
        with self._lock:
            self._tasks.clear()
