import io
from typing import Optional
from fastapi import APIRouter, Depends, Request, Query
from sqlalchemy.ext.asyncio import AsyncSession
from fastapi.responses import JSONResponse, StreamingResponse
from app.db.session import get_db
from app.services.qr_service import read_tote_qr_png, read_tote_qr_data_url, read_bulk_qr
from app.schemas.qr_request import BulkQrRequestModel
from app.utils.util_response import success_response
from app.utils.util_error_map import ServerErrorMessage
from app.utils.util_error_handle import ValidationError, router_exception_handler
from app.utils.util_tote_id import check_tote_id

router = APIRouter()

@router.post("/totes/qr/bulk", response_class=JSONResponse)
@router_exception_handler(ServerErrorMessage.QR_BULK_FAILED)
async def read_bulk(
    request: Request,
    request_model: BulkQrRequestModel,
    db: AsyncSession = Depends(get_db)
):
    if request_model.tote_ids is None:
        raise ValidationError(ServerErrorMessage.QR_TOTE_IDS_REQUIRED)
    response_models = await read_bulk_qr(request_model.tote_ids, db)
    return success_response(data=response_models, count=len(response_models))


@router.get("/totes/{tote_id}/qr")
@router_exception_handler(ServerErrorMessage.QR_FAILED)
async def read(
    request: Request,
    tote_id: str,
    format_: Optional[str] = Query(None, alias="format", description="png (預設) / dataurl"),
    db: AsyncSession = Depends(get_db)
):
    check_tote_id(tote_id)

    if format_ == "dataurl":
        response_model = await read_tote_qr_data_url(tote_id, db)
        return success_response(data=response_model)

    png = await read_tote_qr_png(tote_id, db)
    return StreamingResponse(
        io.BytesIO(png),
        media_type="image/png",
        headers={"Content-Length": str(len(png)), "Cache-Control": "no-store"},
    )
