"""依赖注入模块 -- 通过 FastAPI Depends 注入 Store / Service 实例

Store 实例通过 app.state 管理，在 create_app 或 lifespan 中初始化。
"""

from fastapi import Depends, Request
from taskapi.core.config import AppConfig
from taskapi.core.store import TaskStore

from .services.task_service import TaskService


def get_task_store(request: Request) -> TaskStore:
    """从 app.state 获取 TaskStore 实例"""
    return request.app.state.task_store


def get_app_config(request: Request) -> AppConfig:
    """从 app.state 获取 AppConfig 实例"""
    return request.app.state.config


def get_task_service(store: TaskStore = Depends(get_task_store)) -> TaskService:
    """为当前请求构建 TaskService"""
    return TaskService(store)
