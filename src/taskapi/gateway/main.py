"""FastAPI 应用主文件

app 创建 + lifespan 管理：Store 初始化/清理 + 中间件 + 路由 + 错误处理注册。
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from taskapi.core.config import AppConfig, load_app_config
from taskapi.core.store import TaskStore, create_task_store

from .errors import register_error_handlers
from .middleware.logging_config import setup_logfire, setup_logging
from .middleware.logging_mw import LoggingMiddleware
from .middleware.trace_mw import TraceMiddleware
from .routes import health, tasks

log = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """应用生命周期管理：启动时记录配置，关闭时清空内存 Store"""
    config: AppConfig = app.state.config
    log.info(
        "app_started",
        app_name=config.app_name,
        version=config.version,
        id_scheme=config.id_scheme,
    )

    yield

    # 关闭：内存数据随进程结束丢弃
    store = getattr(app.state, "task_store", None)
    if store is not None:
        await store.clear()
    log.info("app_stopped")


def create_app(
    config: AppConfig | None = None,
    store: TaskStore | None = None,
) -> FastAPI:
    """创建 FastAPI 应用实例

    Args:
        config: 应用配置，缺省从环境变量加载
        store: 预先构建的 TaskStore（测试注入），缺省按配置新建
    """
    config = config or load_app_config()

    app = FastAPI(
        title=config.app_name,
        version=config.version,
        lifespan=lifespan,
    )

    # Store 在创建时即挂到 app.state，不依赖 lifespan 是否被执行
    app.state.config = config
    app.state.task_store = store if store is not None else create_task_store(config)

    # 注册中间件（顺序：先 Trace 后 Logging，Logging 在最外层）
    app.add_middleware(TraceMiddleware)
    app.add_middleware(LoggingMiddleware)

    # 初始化日志
    setup_logging()
    setup_logfire(app)

    register_error_handlers(app)

    # 注册路由
    app.include_router(health.router, tags=["health"])
    app.include_router(tasks.router, tags=["tasks"])

    return app


# 默认 app 实例（uvicorn 入口）
app = create_app()
