import io
from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession
from fastapi.responses import StreamingResponse
from app.db.session import get_db
from app.services.transfer.export_service import export_archive
from app.utils.util_error_map import ServerErrorMessage
from app.utils.util_error_handle import router_exception_handler

router = APIRouter()

@router.get("/export")
@router_exception_handler(ServerErrorMessage.EXPORT_FAILED)
async def export(
    request: Request,
    db: AsyncSession = Depends(get_db)
):
    content, filename = await export_archive(db)
    return StreamingResponse(
        io.BytesIO(content),
        media_type="application/zip",
        headers={
            "Content-Disposition": f'attachment; filename="{filename}"',
            "Content-Length": str(len(content)),
        },
    )
