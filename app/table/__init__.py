from app.table.tote import Tote
from app.table.item import Item
from app.table.item_photo import ItemPhoto
from app.table.item_metadata import ItemMetadata
from app.table.metadata_key import MetadataKey
from app.table.item_movement_history import ItemMovementHistory
from app.table.setting import Setting

__all__ = [
    "Tote",
    "Item",
    "ItemPhoto",
    "ItemMetadata",
    "MetadataKey",
    "ItemMovementHistory",
    "Setting",
]
