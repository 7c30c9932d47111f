from typing import Optional
from fastapi import APIRouter, Depends, Request, BackgroundTasks, UploadFile, File
from sqlalchemy.ext.asyncio import AsyncEngine
from fastapi.responses import JSONResponse
from app.db.session import get_engine
from app.services.transfer.import_service import import_archive
from app.utils.util_response import success_response
from app.utils.util_error_map import ServerErrorMessage
from app.utils.util_log import log_info
from app.utils.util_error_handle import router_exception_handler

router = APIRouter()

# 匯入會整批取代資料，使用獨立連線而不是請求的 session
@router.post("/import", response_class=JSONResponse)
@router_exception_handler(ServerErrorMessage.IMPORT_FAILED)
async def import_data(
    request: Request,
    bg_tasks: BackgroundTasks,
    file: Optional[UploadFile] = File(None, description="Tote Sonar 匯出的 ZIP 檔"),
    engine: AsyncEngine = Depends(get_engine)
):
    summary = await import_archive(file, engine)
    bg_tasks.add_task(
        log_info,
        {"filename": file.filename if file else None},
        summary.model_dump(),
        request
    )
    return success_response(
        message="Import completed successfully",
        success=True,
        summary=summary,
    )
