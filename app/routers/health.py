from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession
from app.db.session import get_db
from app.services.schema_service import check_database
from app.utils.util_datetime import now_iso
from app.utils.util_response import raw_response
import logging

logger = logging.getLogger(__name__)

router = APIRouter()

# 路由入口
@router.get("/health")
async def health_check(
    request: Request,
    db: AsyncSession = Depends(get_db)
):
    try:
        # 檢查資料庫連接
        await check_database(db)
    except Exception as e:
        logger.error(f"Health check failed: {e}", exc_info=True)
        return raw_response(
            {
                "status": "error",
                "database": "disconnected",
                "error": str(e),
                "timestamp": now_iso(),
            },
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        )

    return raw_response({"status": "ok", "database": "connected", "timestamp": now_iso()})
