from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, Depends
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from sqlalchemy.ext.asyncio import AsyncSession
from app.routers import api_router, health
from app.core.core_config import settings
from app.db.session import get_db, init_engine, init_db, dispose_engine
from app.utils.util_error_handle import (
    http_exception_handler,
    validation_exception_handler,
    global_exception_handler
)
from app.utils.util_file import ensure_data_dirs
from app.middleware.log_setup import DevLoggingMiddleware, configure_logging
from app.middleware.request_id import RequestIdMiddleware
import logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    init_engine()
    await init_db()
    ensure_data_dirs()
    logger.info(f"{settings.APP_NAME} started, data dir: {settings.data_dir}")
    yield
    await dispose_engine()


app = FastAPI(
    title=settings.APP_NAME,
    description="Self-hosted inventory tracker for storage totes",
    version="1.0.0",
    lifespan=lifespan,
)

# 開發用 Console 日誌中間件（僅在配置為 true 時生效）
app.add_middleware(DevLoggingMiddleware)
app.add_middleware(RequestIdMiddleware)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# 注册异常处理器 - 统一响应格式
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(Exception, global_exception_handler)  # 捕获所有未处理的异常

# Include routers
app.include_router(api_router, prefix="/api")

@app.get("/")
async def root(request: Request, db: AsyncSession = Depends(get_db)):
    return await health.health_check(request, db)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host=settings.API_HOST, port=settings.API_PORT)
