from typing import Optional, Any
from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import BaseModel


# 成功響應（{"data": ..., "message"?: ...}，其餘頂層欄位透過 extra 傳入）
def success_response(
    data: Optional[Any] = None,
    message: Optional[str] = None,
    status_code: int = status.HTTP_200_OK,
    **extra: Any
) -> JSONResponse:
    content: dict[str, Any] = {}
    if data is not None:
        content["data"] = _to_json(data)
    if message is not None:
        content["message"] = message
    for key, value in extra.items():
        content[key] = _to_json(value)
    return JSONResponse(content=content, status_code=status_code)


# 原樣輸出（不包 data 層）
def raw_response(content: Any, status_code: int = status.HTTP_200_OK) -> JSONResponse:
    return JSONResponse(content=_to_json(content), status_code=status_code)


# 錯誤響應
def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(content={"error": message}, status_code=status_code)


def _to_json(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True)
    if isinstance(value, list):
        return [_to_json(v) for v in value]
    return jsonable_encoder(value)
