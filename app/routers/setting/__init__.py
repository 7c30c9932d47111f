from fastapi import APIRouter
from .setting_read import router as setting_read_router
from .setting_update import router as setting_update_router

# 创建主路由
router = APIRouter()

# 注册各个子路由
router.include_router(setting_read_router)
router.include_router(setting_update_router)
