from fastapi import APIRouter, Depends, Request, BackgroundTasks
from sqlalchemy.ext.asyncio import AsyncSession
from fastapi.responses import JSONResponse
from app.db.session import get_db
from app.services.item.item_delete_service import delete_item
from app.utils.util_response import success_response
from app.utils.util_error_map import ServerErrorMessage
from app.utils.util_log import log_info
from app.utils.util_error_handle import router_exception_handler

router = APIRouter()

@router.delete("/items/{item_id}", response_class=JSONResponse)
@router_exception_handler(ServerErrorMessage.ITEM_DELETE_FAILED)
async def delete(
    request: Request,
    item_id: int,
    bg_tasks: BackgroundTasks,
    db: AsyncSession = Depends(get_db)
):
    item_name = await delete_item(item_id, db)
    message = f"Item '{item_name}' deleted successfully"
    bg_tasks.add_task(log_info, {"item_id": item_id}, {"message": message}, request)
    return success_response(message=message)
