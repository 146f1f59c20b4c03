"""全局 pytest 配置 -- 内存 Store + httpx AsyncClient fixture"""

import os
from collections.abc import AsyncGenerator

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from taskapi.core.config import AppConfig
from taskapi.core.ids import SequentialIdGenerator
from taskapi.core.store import InMemoryTaskStore


@pytest_asyncio.fixture
async def task_store() -> AsyncGenerator[InMemoryTaskStore, None]:
    """提供确定性 ID 的内存 Store，测试结束后清空"""
    store = InMemoryTaskStore(id_generator=SequentialIdGenerator())
    yield store
    await store.clear()


@pytest_asyncio.fixture
async def app(task_store: InMemoryTaskStore):
    """创建测试用 FastAPI app 实例（注入内存 Store）"""
    os.environ["LOGFIRE_SEND_TO_LOGFIRE"] = "false"

    from taskapi.gateway.main import create_app

    application = create_app(config=AppConfig(), store=task_store)
    yield application

    os.environ.pop("LOGFIRE_SEND_TO_LOGFIRE", None)


@pytest_asyncio.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    """提供 httpx AsyncClient 用于测试"""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
