from fastapi import APIRouter, Depends, Request, BackgroundTasks
from sqlalchemy.ext.asyncio import AsyncSession
from fastapi.responses import JSONResponse
from app.db.session import get_db
from app.services.metadata_service import delete_metadata
from app.utils.util_response import success_response
from app.utils.util_error_map import ServerErrorMessage
from app.utils.util_log import log_info
from app.utils.util_error_handle import router_exception_handler

router = APIRouter()

@router.delete("/items/{item_id}/metadata/{metadata_id}", response_class=JSONResponse)
@router_exception_handler(ServerErrorMessage.METADATA_DELETE_FAILED)
async def delete(
    request: Request,
    item_id: int,
    metadata_id: int,
    bg_tasks: BackgroundTasks,
    db: AsyncSession = Depends(get_db)
):
    await delete_metadata(item_id, metadata_id, db)
    bg_tasks.add_task(log_info, {"item_id": item_id, "metadata_id": metadata_id}, {}, request)
    return success_response(message="Metadata deleted successfully")
