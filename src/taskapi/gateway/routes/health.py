"""健康检查与服务信息路由

GET /health: Liveness 检查，永远返回 200。
GET /:       服务名称、版本与可用端点列表。
"""

from datetime import UTC, datetime

from fastapi import APIRouter, Depends
from taskapi.core.config import AppConfig

from ..deps import get_app_config

router = APIRouter()

ENDPOINTS = {
    "health": "GET /health",
    "tasks": "GET /api/tasks",
    "task": "GET /api/tasks/:id",
    "create": "POST /api/tasks",
    "update": "PUT /api/tasks/:id",
    "delete": "DELETE /api/tasks/:id",
}


@router.get("/health")
async def health():
    """Liveness 检查 -- 永远返回 200"""
    return {
        "status": "healthy",
        "timestamp": datetime.now(UTC).isoformat(),
    }


@router.get("/")
async def root(config: AppConfig = Depends(get_app_config)):
    """服务信息"""
    return {
        "message": config.app_name,
        "version": config.version,
        "endpoints": ENDPOINTS,
    }
