"""TaskAPI Core Store -- 内存存储实现

提供工厂函数按配置创建 Store 实例。
"""

from ..config import AppConfig
from ..ids import build_id_generator
from .memory_task_store import InMemoryTaskStore
from .protocols import TaskStore


def create_task_store(config: AppConfig) -> InMemoryTaskStore:
    """创建 TaskStore 实例

    Args:
        config: 应用配置（决定 ID 生成方式）

    Returns:
        InMemoryTaskStore 实例（初始为空）
    """
    return InMemoryTaskStore(id_generator=build_id_generator(config.id_scheme))


__all__ = [
    "TaskStore",
    "InMemoryTaskStore",
    "create_task_store",
]
