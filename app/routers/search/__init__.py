from fastapi import APIRouter
from .search_read import router as search_read_router

# 创建主路由
router = APIRouter()

router.include_router(search_read_router)
