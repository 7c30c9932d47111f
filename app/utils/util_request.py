from typing import Optional
from uuid import uuid4
from fastapi import Request

REQUEST_ID_HEADER: str = "X-Request-ID"
_REQUEST_ID_KEY: str = "request_id"


# 獲取順序：state > header > 自行生成
def get_request_id(request: Optional[Request] = None) -> Optional[str]:
    if request is None:
        return None

    request_id: Optional[str] = getattr(request.state, _REQUEST_ID_KEY, None)
    if request_id is None:
        request_id = _handle_id(request)
        setattr(request.state, _REQUEST_ID_KEY, request_id)

    return request_id


def _handle_id(request: Request) -> str:
    header_value = request.headers.get(REQUEST_ID_HEADER)
    if header_value and header_value.strip():
        return header_value.strip()[:64]
    return uuid4().hex
