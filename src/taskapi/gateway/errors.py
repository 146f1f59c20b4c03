"""HTTP 错误映射

所有错误响应统一为 {"error": "<message>"}：
- 未匹配的路由（含已知路径上不支持的方法）返回 404 Not found
- 请求体不是合法 JSON 返回 400
"""

import structlog
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.requests import Request
from starlette.responses import JSONResponse

log = structlog.get_logger()

NOT_FOUND_MESSAGE = "Not found"
INVALID_JSON_MESSAGE = "Invalid JSON body"


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    if exc.status_code in (404, 405):
        return JSONResponse(status_code=404, content={"error": NOT_FOUND_MESSAGE})
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    log.info("request_body_rejected", error_count=len(exc.errors()))
    return JSONResponse(status_code=400, content={"error": INVALID_JSON_MESSAGE})


def register_error_handlers(app: FastAPI) -> None:
    """注册统一错误处理"""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
