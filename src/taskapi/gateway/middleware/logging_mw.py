"""LoggingMiddleware

每个 HTTP 请求一个 request_id（优先沿用客户端传入的 X-Request-ID），
与 method/path 一起绑定到 structlog contextvars，请求结束记录状态码与耗时。
"""

import time

import structlog
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from ulid import ULID

REQUEST_ID_HEADER = "X-Request-ID"
# 客户端传入的 request_id 超过此长度时忽略，避免污染日志
MAX_INBOUND_REQUEST_ID_LENGTH = 128


def resolve_request_id(request: Request) -> str:
    """取客户端 X-Request-ID，缺失或不合法时生成 ULID"""
    inbound = request.headers.get(REQUEST_ID_HEADER, "").strip()
    if inbound and len(inbound) <= MAX_INBOUND_REQUEST_ID_LENGTH and inbound.isprintable():
        return inbound
    return str(ULID())


class LoggingMiddleware(BaseHTTPMiddleware):
    """请求级日志中间件"""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        request_id = resolve_request_id(request)

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            method=request.method,
            path=request.url.path,
        )

        log = structlog.get_logger()
        started = time.perf_counter()
        await log.ainfo("request_started")

        response = await call_next(request)

        await log.ainfo(
            "request_completed",
            status_code=response.status_code,
            duration_ms=round((time.perf_counter() - started) * 1000, 2),
        )

        response.headers[REQUEST_ID_HEADER] = request_id
        return response
