from fastapi import APIRouter
from .photo_create import router as photo_create_router
from .photo_read import router as photo_read_router
from .photo_delete import router as photo_delete_router

# 创建主路由
router = APIRouter()

# 注册各个子路由
router.include_router(photo_create_router)
router.include_router(photo_read_router)
router.include_router(photo_delete_router)
