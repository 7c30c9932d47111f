from fastapi import APIRouter, Depends, Request, BackgroundTasks
from sqlalchemy.ext.asyncio import AsyncSession
from fastapi.responses import JSONResponse
from app.db.session import get_db
from app.services.tote.tote_delete_service import delete_tote
from app.utils.util_response import success_response
from app.utils.util_error_map import ServerErrorMessage
from app.utils.util_log import log_info
from app.utils.util_error_handle import router_exception_handler
from app.utils.util_tote_id import check_tote_id

router = APIRouter()

@router.delete("/totes/{tote_id}", response_class=JSONResponse)
@router_exception_handler(ServerErrorMessage.TOTE_DELETE_FAILED)
async def delete(
    request: Request,
    tote_id: str,
    bg_tasks: BackgroundTasks,
    db: AsyncSession = Depends(get_db)
):
    check_tote_id(tote_id)
    tote_name, items_deleted = await delete_tote(tote_id, db)
    response = success_response(
        message=f"Tote '{tote_name}' deleted successfully",
        items_deleted=items_deleted,
    )
    bg_tasks.add_task(
        log_info,
        {"tote_id": tote_id},
        {"items_deleted": items_deleted},
        request
    )
    return response
