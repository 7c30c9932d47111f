from fastapi import APIRouter
from .item_create import router as item_create_router
from .item_read import router as item_read_router
from .item_update import router as item_update_router
from .item_delete import router as item_delete_router
from .item_move import router as item_move_router
from .item_duplicate import router as item_duplicate_router

# 创建主路由
router = APIRouter()

# 注册各个子路由
router.include_router(item_create_router)
router.include_router(item_read_router)
router.include_router(item_update_router)
router.include_router(item_delete_router)
router.include_router(item_move_router, tags=["item-move"])
router.include_router(item_duplicate_router, tags=["item-move"])
