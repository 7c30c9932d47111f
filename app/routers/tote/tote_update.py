from fastapi import APIRouter, Depends, Request, BackgroundTasks
from sqlalchemy.ext.asyncio import AsyncSession
from fastapi.responses import JSONResponse
from app.db.session import get_db
from app.services.tote.tote_update_service import update_tote
from app.schemas.tote_request import UpdateToteRequestModel
from app.utils.util_response import success_response
from app.utils.util_error_map import ServerErrorMessage
from app.utils.util_log import log_info
from app.utils.util_error_handle import router_exception_handler
from app.utils.util_tote_id import check_tote_id

router = APIRouter()

@router.put("/totes/{tote_id}", response_class=JSONResponse)
@router_exception_handler(ServerErrorMessage.TOTE_UPDATE_FAILED)
async def update(
    request: Request,
    tote_id: str,
    request_model: UpdateToteRequestModel,
    bg_tasks: BackgroundTasks,
    db: AsyncSession = Depends(get_db)
):
    check_tote_id(tote_id)
    response_model = await update_tote(tote_id, request_model, db)
    response = success_response(data=response_model)
    bg_tasks.add_task(
        log_info,
        request_model.model_dump(exclude_unset=True),
        response_model.model_dump(),
        request
    )
    return response
