"""
日志工具函数
"""
from typing import Any, Optional
from fastapi import Request
from app.utils.util_request import get_request_id
import logging

logger = logging.getLogger(__name__)


# 寫入操作完成後由 BackgroundTasks 呼叫
def log_info(
    request_data: Optional[dict[str, Any]],
    response_data: Optional[dict[str, Any]],
    request: Optional[Request] = None
) -> None:
    try:
        method = request.method if request is not None else "-"
        path = request.url.path if request is not None else "-"
        logger.info(
            f"{method} {path} (request_id={get_request_id(request)}) "
            f"request={request_data} response={response_data}"
        )
    except Exception as e:
        logger.error(f"Error writing operation log: {e}", exc_info=True)
