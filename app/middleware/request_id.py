from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from app.utils.util_request import get_request_id, REQUEST_ID_HEADER


# 每個請求都帶上 request_id，並回寫到響應頭
class RequestIdMiddleware(BaseHTTPMiddleware):

    async def dispatch(self, request: Request, call_next):
        request_id = get_request_id(request)
        response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = request_id
        return response
