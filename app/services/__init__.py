# Services layer for business logic
from app.services.tote.tote_create_service import create_tote
from app.services.tote.tote_read_service import read_totes, read_tote, read_tote_items
from app.services.tote.tote_update_service import update_tote
from app.services.tote.tote_delete_service import delete_tote
from app.services.item.item_create_service import create_item
from app.services.item.item_read_service import read_item
from app.services.item.item_update_service import update_item
from app.services.item.item_delete_service import delete_item
from app.services.item.item_move_service import move_item
from app.services.item.item_duplicate_service import duplicate_item
from app.services.photo.photo_create_service import create_photo
from app.services.photo.photo_read_service import read_item_photos, read_photo_file
from app.services.photo.photo_delete_service import delete_photo
from app.services.metadata_service import (
    create_metadata,
    read_metadata,
    read_metadata_keys,
    update_metadata,
    delete_metadata,
)
from app.services.setting_service import read_settings, update_settings
from app.services.search_service import search_items, read_search_filters
from app.services.qr_service import read_tote_qr_png, read_tote_qr_data_url, read_bulk_qr
from app.services.dashboard_service import read_dashboard
from app.services.schema_service import check_database, read_schema
from app.services.transfer.export_service import export_archive
from app.services.transfer.import_service import import_archive
