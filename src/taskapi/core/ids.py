"""任务 ID 生成

默认使用 ULID（26 字符，时间有序）；测试可注入 SequentialIdGenerator
获得确定性 ID。
"""

import itertools
import threading
from typing import Protocol

from ulid import ULID

from .exceptions import ConfigError


class IdGenerator(Protocol):
    """ID 生成接口"""

    def new_id(self) -> str:
        """生成一个新的任务 ID"""
        ...


class UlidIdGenerator:
    """ULID 生成器"""

    def new_id(self) -> str:
        return str(ULID())


class SequentialIdGenerator:
    """单调递增计数器：task-1, task-2, ..."""

    def __init__(self, prefix: str = "task-", start: int = 1) -> None:
        self._prefix = prefix
        self._counter = itertools.count(start)
        self._lock = threading.Lock()

    def new_id(self) -> str:
        with self._lock:
            return f"{self._prefix}{next(self._counter)}"


ID_SCHEMES = {
    "ulid": UlidIdGenerator,
    "sequential": SequentialIdGenerator,
}


def build_id_generator(scheme: str) -> IdGenerator:
    """按名称构建 IdGenerator

    Raises:
        ConfigError: 未知的 scheme
    """
    factory = ID_SCHEMES.get(scheme)
    if factory is None:
        raise ConfigError(
            f"Unknown id scheme: {scheme!r} (expected one of {sorted(ID_SCHEMES)})"
        )
    return factory()
