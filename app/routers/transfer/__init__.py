from fastapi import APIRouter
from .transfer_export import router as transfer_export_router
from .transfer_import import router as transfer_import_router

# 创建主路由
router = APIRouter()

# 注册各个子路由
router.include_router(transfer_export_router)
router.include_router(transfer_import_router)
