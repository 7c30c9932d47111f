from fastapi import APIRouter
from .tote_create import router as tote_create_router
from .tote_read import router as tote_read_router
from .tote_update import router as tote_update_router
from .tote_delete import router as tote_delete_router
from .tote_qr import router as tote_qr_router

# 创建主路由
router = APIRouter()

# 注册各个子路由（/totes/qr/bulk 需在 /totes/{tote_id} 之前）
router.include_router(tote_qr_router, tags=["qr"])
router.include_router(tote_create_router, tags=["tote"])
router.include_router(tote_read_router, tags=["tote"])
router.include_router(tote_update_router, tags=["tote"])
router.include_router(tote_delete_router, tags=["tote"])
