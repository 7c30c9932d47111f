"""
开发环境使用的控制台日志中间件
仅在配置启用时记录请求与响应，便于本地调试
"""
import json
import logging
from datetime import datetime
from typing import Any, Dict, AsyncIterator, cast

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from app.core.core_config import settings
from app.utils.util_request import get_request_id


LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

logger = logging.getLogger("tote_sonar.dev_logging")
logger.setLevel(logging.INFO)

COLOR_RESET = "\033[0m"
COLOR_REQUEST = "\033[96m"  # Cyan
COLOR_RESPONSE = "\033[92m"  # Green
COLOR_ERROR = "\033[91m"  # Red

if not logger.handlers:
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    logger.addHandler(handler)

logger.propagate = False


# 應用日誌初始化（啟動時呼叫一次）
def configure_logging() -> None:
    root = logging.getLogger()
    root.setLevel(settings.LOG_LEVEL.upper())
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
        root.addHandler(handler)


class DevLoggingMiddleware(BaseHTTPMiddleware):
    """在開發環境中輸出簡易請求/響應日誌"""

    async def dispatch(self, request: Request, call_next):
        # 統一處理並暫存 request_id（獲取順序：state > header > self gen）
        request_id = get_request_id(request)

        if not (settings.LOG_REQUEST_CONSOLE or settings.LOG_RESPONSE_CONSOLE):
            # 未啟用時直接透傳
            return await call_next(request)

        if settings.LOG_REQUEST_CONSOLE:
            request_info = await self._build_request_info(request, request_id)
            logger.info(
                "%s==== REQUEST START ====%s\n%s\n%s==== REQUEST END ====%s",
                COLOR_REQUEST,
                COLOR_RESET,
                self._format_block(request_info),
                COLOR_REQUEST,
                COLOR_RESET,
            )

        try:
            response = await call_next(request)
        except Exception as exc:
            if settings.LOG_RESPONSE_CONSOLE:
                logger.error(
                    "%s==== RESPONSE ERROR START ====%s\nrequest_id: %s\nurl: %s\nmethod: %s\nerror: %s\n%s==== RESPONSE ERROR END ====%s",
                    COLOR_ERROR,
                    COLOR_RESET,
                    request_id,
                    request.url,
                    request.method,
                    exc,
                    COLOR_ERROR,
                    COLOR_RESET,
                )
            raise

        if not settings.LOG_RESPONSE_CONSOLE:
            return response

        # 圖片、ZIP 等二進位響應只記錄狀態，不讀取 body
        content_type = response.headers.get("content-type", "")
        if "application/json" not in content_type:
            logger.info(
                "%s==== RESPONSE ====%s request_id: %s status: %s content-type: %s",
                COLOR_RESPONSE,
                COLOR_RESET,
                request_id,
                response.status_code,
                content_type or "N/A",
            )
            return response

        body_iterator = getattr(response, "body_iterator", None)
        if body_iterator is None:
            return response

        body_bytes = b""
        async for chunk in cast(AsyncIterator[bytes], body_iterator):
            body_bytes += chunk

        payload = self._safe_decode(body_bytes)
        response_body_formatted = self._format_payload(payload)
        if response.status_code >= 400:
            logger.error(
                "%s==== RESPONSE ERROR START ====%s\nrequest_id: %s\nstatus: %s\npayload:\n%s\n%s==== RESPONSE ERROR END ====%s",
                COLOR_ERROR,
                COLOR_RESET,
                request_id,
                response.status_code,
                response_body_formatted,
                COLOR_ERROR,
                COLOR_RESET,
            )
        else:
            logger.info(
                "%s==== RESPONSE START ====%s\nrequest_id: %s\nstatus: %s\npayload:\n%s\n%s==== RESPONSE END ====%s",
                COLOR_RESPONSE,
                COLOR_RESET,
                request_id,
                response.status_code,
                response_body_formatted,
                COLOR_RESPONSE,
                COLOR_RESET,
            )

        return Response(
            content=body_bytes,
            status_code=response.status_code,
            headers=dict(response.headers),
            media_type=response.media_type,
        )

    async def _build_request_info(self, request: Request, request_id: str) -> Dict[str, Any]:
        headers = {
            k: ("***" if k.lower() in {"authorization", "cookie", "x-api-key"} else v)
            for k, v in request.headers.items()
        }
        return {
            "request_id": request_id,
            "method": request.method,
            "url": str(request.url),
            "headers": headers,
            "body": await self._get_request_body(request),
            "timestamp": datetime.now().strftime(LOG_DATE_FORMAT),
        }

    async def _get_request_body(self, request: Request) -> Any:
        content_type = request.headers.get("content-type", "")
        if content_type.startswith("multipart/"):
            # 上傳照片 / 匯入 ZIP 不輸出內容
            return f"<{content_type.split(';')[0]} {request.headers.get('content-length', '?')} bytes>"

        try:
            body_bytes = await request.body()
        except Exception as exc:
            return {"error": f"Failed to read body: {str(exc)}"}
        if not body_bytes:
            return {}

        # 重新注入 body，避免後續 handler 無法再次讀取
        body_consumed = False

        async def receive():
            nonlocal body_consumed
            if not body_consumed:
                body_consumed = True
                return {"type": "http.request", "body": body_bytes, "more_body": False}
            return {"type": "http.request", "body": b"", "more_body": False}

        request._receive = receive
        return self._safe_decode(body_bytes)

    def _safe_decode(self, body_bytes: bytes) -> Any:
        if not body_bytes:
            return ""
        try:
            return json.loads(body_bytes.decode("utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError):
            return body_bytes.decode("utf-8", errors="ignore")[:500]

    @staticmethod
    def _format_block(payload: Dict[str, Any]) -> str:
        lines = []
        for key, value in payload.items():
            if isinstance(value, (dict, list)):
                formatted = json.dumps(value, ensure_ascii=False, indent=2)
                lines.append(f"{key}: {formatted}")
            else:
                lines.append(f"{key}: {value}")
        return "\n".join(lines)

    @staticmethod
    def _format_payload(payload: Any) -> str:
        if isinstance(payload, (dict, list)):
            return json.dumps(payload, ensure_ascii=False, indent=2)
        return str(payload)
