from fastapi import APIRouter
from . import health
from . import dashboard
from . import schema_check
from .tote import router as tote_router
from .item import router as item_router
from .photo import router as photo_router
from .metadata import router as metadata_router
from .search import router as search_router
from .setting import router as setting_router
from .transfer import router as transfer_router

api_router = APIRouter()

# 注册各个子路由
api_router.include_router(tote_router)
api_router.include_router(item_router, tags=["item"])
api_router.include_router(photo_router, tags=["photo"])
api_router.include_router(metadata_router, tags=["metadata"])
api_router.include_router(search_router, tags=["search"])
api_router.include_router(setting_router, tags=["setting"])
api_router.include_router(transfer_router, tags=["transfer"])
api_router.include_router(dashboard.router, tags=["dashboard"])
api_router.include_router(schema_check.router, tags=["health"])
api_router.include_router(health.router, tags=["health"])
