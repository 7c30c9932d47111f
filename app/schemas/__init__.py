from app.schemas.tote_request import (
    CreateToteRequestModel,
    UpdateToteRequestModel,
)
from app.schemas.tote_response import (
    ToteResponseModel,
    ToteListResponseModel,
    ToteDetailResponseModel,
)
from app.schemas.item_request import (
    CreateItemRequestModel,
    UpdateItemRequestModel,
    MoveItemRequestModel,
    DuplicateItemRequestModel,
)
from app.schemas.item_response import (
    ItemResponseModel,
    ItemWithToteResponseModel,
    ItemDetailResponseModel,
    MovementHistoryResponseModel,
)
from app.schemas.photo_response import (
    PhotoResponseModel,
)
from app.schemas.metadata_request import (
    CreateMetadataRequestModel,
    UpdateMetadataRequestModel,
)
from app.schemas.metadata_response import (
    MetadataResponseModel,
    MetadataKeyResponseModel,
)
from app.schemas.setting_request import (
    UpdateSettingsRequestModel,
)
from app.schemas.qr_request import (
    BulkQrRequestModel,
)
from app.schemas.qr_response import (
    QrCodeResponseModel,
    BulkQrCodeResponseModel,
)
from app.schemas.search_response import (
    SearchResponseModel,
    SearchFiltersResponseModel,
)
from app.schemas.dashboard_response import (
    DashboardResponseModel,
)
from app.schemas.transfer_response import (
    ImportSummaryResponseModel,
)

__all__ = [
    "CreateToteRequestModel",
    "UpdateToteRequestModel",
    "ToteResponseModel",
    "ToteListResponseModel",
    "ToteDetailResponseModel",
    "CreateItemRequestModel",
    "UpdateItemRequestModel",
    "MoveItemRequestModel",
    "DuplicateItemRequestModel",
    "ItemResponseModel",
    "ItemWithToteResponseModel",
    "ItemDetailResponseModel",
    "MovementHistoryResponseModel",
    "PhotoResponseModel",
    "CreateMetadataRequestModel",
    "UpdateMetadataRequestModel",
    "MetadataResponseModel",
    "MetadataKeyResponseModel",
    "UpdateSettingsRequestModel",
    "BulkQrRequestModel",
    "QrCodeResponseModel",
    "BulkQrCodeResponseModel",
    "SearchResponseModel",
    "SearchFiltersResponseModel",
    "DashboardResponseModel",
    "ImportSummaryResponseModel",
]
