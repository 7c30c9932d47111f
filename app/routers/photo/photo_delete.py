from fastapi import APIRouter, Depends, Request, BackgroundTasks
from sqlalchemy.ext.asyncio import AsyncSession
from fastapi.responses import JSONResponse
from app.db.session import get_db
from app.services.photo.photo_delete_service import delete_photo
from app.utils.util_response import success_response
from app.utils.util_error_map import ServerErrorMessage
from app.utils.util_log import log_info
from app.utils.util_error_handle import router_exception_handler

router = APIRouter()

@router.delete("/photos/{photo_id}", response_class=JSONResponse)
@router_exception_handler(ServerErrorMessage.PHOTO_DELETE_FAILED)
async def delete(
    request: Request,
    photo_id: int,
    bg_tasks: BackgroundTasks,
    db: AsyncSession = Depends(get_db)
):
    await delete_photo(photo_id, db)
    bg_tasks.add_task(log_info, {"photo_id": photo_id}, {}, request)
    return success_response(message="Photo deleted successfully")
