"""AppConfig -- 应用配置加载

从环境变量加载配置，所有字段都有默认值，未设置环境变量也能启动。
"""

import os

import structlog
from pydantic import BaseModel, Field

log = structlog.get_logger()

DEFAULT_PORT = 3000
PORT_MIN = 1
PORT_MAX = 65535


class AppConfig(BaseModel):
    """应用配置 -- 从环境变量加载

    环境变量:
        TASKAPI_APP_NAME: 根路径返回的服务名称
        TASKAPI_VERSION: 服务版本号
        TASKAPI_HOST: 监听地址（默认 0.0.0.0）
        TASKAPI_PORT: 监听端口（默认 3000）
        TASKAPI_ID_SCHEME: 任务 ID 生成方式（ulid/sequential）
    """

    app_name: str = Field(default="Task Management API", description="服务名称")
    version: str = Field(default="1.0.0", description="服务版本号")
    host: str = Field(default="0.0.0.0", description="监听地址")
    port: int = Field(default=DEFAULT_PORT, ge=PORT_MIN, le=PORT_MAX, description="监听端口")
    # 取值在 create_task_store 时校验，未知方式抛 ConfigError
    id_scheme: str = Field(
        default="ulid",
        description="任务 ID 生成方式：ulid / sequential",
    )


def load_app_config() -> AppConfig:
    """从环境变量加载应用配置

    Returns:
        AppConfig 实例
    """
    kwargs: dict = {}

    if val := os.environ.get("TASKAPI_APP_NAME"):
        kwargs["app_name"] = val

    if val := os.environ.get("TASKAPI_VERSION"):
        kwargs["version"] = val

    if val := os.environ.get("TASKAPI_HOST"):
        kwargs["host"] = val

    if val := os.environ.get("TASKAPI_PORT"):
        try:
            port = int(val)
        except ValueError:
            _warn_invalid_port(val, reason="not_an_integer")
        else:
            if PORT_MIN <= port <= PORT_MAX:
                kwargs["port"] = port
            else:
                _warn_invalid_port(val, reason="out_of_range")

    if val := os.environ.get("TASKAPI_ID_SCHEME"):
        kwargs["id_scheme"] = val

    return AppConfig(**kwargs)


def _warn_invalid_port(value: str, reason: str) -> None:
    # 使用默认值，不阻塞启动
    log.warning(
        "invalid_port_config",
        env_var="TASKAPI_PORT",
        value=value,
        reason=reason,
        fallback=DEFAULT_PORT,
    )
