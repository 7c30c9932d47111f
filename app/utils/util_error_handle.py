from typing import Optional, Callable
from functools import wraps
from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession
from app.utils.util_response import error_response
from app.utils.util_error_map import ServerErrorMessage
from app.utils.util_request import get_request_id
import logging

logger = logging.getLogger(__name__)


class ServiceError(Exception):
    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(message)


# 客戶端可修正的錯誤（欄位缺失、格式錯誤、業務規則衝突）
class ValidationError(ServiceError):
    status_code = status.HTTP_400_BAD_REQUEST


# 引用的資源不存在
class NotFoundError(ServiceError):
    status_code = status.HTTP_404_NOT_FOUND


# 統一異常處理裝飾器
def router_exception_handler(internal_message: str = ServerErrorMessage.INTERNAL_SERVER_ERROR) -> Callable:
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        async def wrapper(*args, **kwargs):
            db: Optional[AsyncSession] = kwargs.get("db")
            request: Optional[Request] = kwargs.get("request")

            try:
                return await func(*args, **kwargs)
            except ServiceError as e:
                if db:
                    await _rollback_if_needed(db)
                return error_response(e.status_code, e.message)
            except Exception as e:
                if db:
                    await _rollback_if_needed(db)
                logger.error(
                    f"{internal_message} (request_id={get_request_id(request)}): {e}",
                    exc_info=True,
                )
                return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, internal_message)

        return wrapper

    return decorator


async def _rollback_if_needed(db: AsyncSession) -> None:
    if db.in_transaction():
        await db.rollback()


# HTTP 异常处理器
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        message = ServerErrorMessage.REQUEST_PATH_INVALID
    elif isinstance(exc.detail, str) and exc.detail:
        message = exc.detail
    else:
        message = ServerErrorMessage.INTERNAL_SERVER_ERROR
    return error_response(exc.status_code, message)


# 请求验证异常处理器（FastAPI 預設 422，這裡統一轉成 400）
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return error_response(status.HTTP_400_BAD_REQUEST, describe_validation_error(exc))


# 全局异常处理器
async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled exception (request_id={get_request_id(request)}): {exc}", exc_info=True)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, ServerErrorMessage.INTERNAL_SERVER_ERROR)


def describe_validation_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return ServerErrorMessage.REQUEST_PARAMETERS_INVALID

    first = errors[0]
    loc = tuple(first.get("loc", ()))
    error_type = first.get("type", "")

    if error_type == "json_invalid" or (loc == ("body",) and error_type == "missing"):
        return ServerErrorMessage.REQUEST_BODY_INVALID
    if loc == ("body",):
        return ServerErrorMessage.REQUEST_BODY_NOT_OBJECT

    field = ".".join(str(part) for part in loc[1:]) or ".".join(str(part) for part in loc)
    return f"Invalid value for '{field}': {first.get('msg', 'invalid')}"
