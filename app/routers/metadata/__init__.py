from fastapi import APIRouter
from .metadata_create import router as metadata_create_router
from .metadata_read import router as metadata_read_router
from .metadata_update import router as metadata_update_router
from .metadata_delete import router as metadata_delete_router

# 创建主路由
router = APIRouter()

# 注册各个子路由
router.include_router(metadata_create_router)
router.include_router(metadata_read_router)
router.include_router(metadata_update_router)
router.include_router(metadata_delete_router)
