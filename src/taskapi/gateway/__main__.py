"""服务入口 -- python -m taskapi.gateway

监听地址与端口来自 TASKAPI_HOST / TASKAPI_PORT。
"""

import uvicorn
from taskapi.core.config import load_app_config


def main() -> None:
    """启动 uvicorn"""
    config = load_app_config()
    uvicorn.run(
        "taskapi.gateway.main:app",
        host=config.host,
        port=config.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
