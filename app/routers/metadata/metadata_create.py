from fastapi import APIRouter, Depends, Request, BackgroundTasks, status
from sqlalchemy.ext.asyncio import AsyncSession
from fastapi.responses import JSONResponse
from app.db.session import get_db
from app.services.metadata_service import create_metadata
from app.schemas.metadata_request import CreateMetadataRequestModel
from app.utils.util_response import success_response
from app.utils.util_error_map import ServerErrorMessage
from app.utils.util_log import log_info
from app.utils.util_error_handle import router_exception_handler

router = APIRouter()

@router.post("/items/{item_id}/metadata", response_class=JSONResponse)
@router_exception_handler(ServerErrorMessage.METADATA_CREATE_FAILED)
async def create(
    request: Request,
    item_id: int,
    request_model: CreateMetadataRequestModel,
    bg_tasks: BackgroundTasks,
    db: AsyncSession = Depends(get_db)
):
    response_model = await create_metadata(item_id, request_model, db)
    response = success_response(
        data=response_model,
        message="Metadata added successfully",
        status_code=status.HTTP_201_CREATED,
    )
    bg_tasks.add_task(
        log_info,
        request_model.model_dump(),
        response_model.model_dump(),
        request
    )
    return response
