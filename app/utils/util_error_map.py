"""
Tote Sonar 错误消息定义

所有錯誤響應只回傳 {"error": "<message>"}，不對外暴露錯誤碼
"""


class ServerErrorMessage:
    # 通用
    INTERNAL_SERVER_ERROR = "Internal server error"
    REQUEST_PARAMETERS_INVALID = "Request parameters invalid"
    REQUEST_PATH_INVALID = "Request path invalid"
    REQUEST_BODY_INVALID = "Invalid or empty request body. A JSON object is required."
    REQUEST_BODY_NOT_OBJECT = "Request body must be a JSON object."

    # Tote
    TOTE_NOT_FOUND = "Tote not found"
    TOTE_ID_INVALID = "Invalid tote ID format"
    TOTE_NAME_INVALID = "Name is required and must be a string"
    TOTE_NAME_REQUIRED = "Name is required"
    TOTE_LOCATION_INVALID = "Location is required and must be a string"
    TOTE_LOCATION_REQUIRED = "Location is required"
    TOTE_NO_FIELDS = "No fields to update"
    TOTE_FETCH_LIST_FAILED = "Failed to fetch totes"
    TOTE_FETCH_FAILED = "Failed to fetch tote"
    TOTE_CREATE_FAILED = "Failed to create tote"
    TOTE_UPDATE_FAILED = "Failed to update tote"
    TOTE_DELETE_FAILED = "Failed to delete tote"

    # Item
    ITEM_NOT_FOUND = "Item not found"
    ITEM_NAME_INVALID = "Name is required and must be a string"
    ITEM_NAME_REQUIRED = "Name is required"
    ITEM_QUANTITY_INVALID = "Quantity must be a positive whole number"
    ITEM_NO_FIELDS = "No fields to update"
    ITEM_TARGET_REQUIRED = "target_tote_id is required"
    ITEM_TARGET_NOT_FOUND = "Target tote not found"
    ITEM_ALREADY_IN_TOTE = "Item is already in this tote"
    ITEM_FETCH_LIST_FAILED = "Failed to fetch items"
    ITEM_FETCH_FAILED = "Failed to fetch item"
    ITEM_CREATE_FAILED = "Failed to create item"
    ITEM_UPDATE_FAILED = "Failed to update item"
    ITEM_DELETE_FAILED = "Failed to delete item"
    ITEM_MOVE_FAILED = "Failed to move item"
    ITEM_DUPLICATE_FAILED = "Failed to duplicate item"

    # Photo
    PHOTO_NOT_FOUND = "Photo not found"
    PHOTO_FILE_NOT_FOUND = "Photo file not found"
    PHOTO_THUMBNAIL_NOT_FOUND = "Thumbnail not found"
    PHOTO_LIMIT_REACHED = "Maximum {limit} photos per item reached"
    PHOTO_FILE_REQUIRED = "No photo file provided"
    PHOTO_FILE_EMPTY = "Photo file is empty"
    PHOTO_IMAGE_INVALID = "Uploaded file is not a valid image"
    PHOTO_FETCH_FAILED = "Failed to fetch photos"
    PHOTO_UPLOAD_FAILED = "Failed to upload photo"
    PHOTO_SERVE_FAILED = "Failed to serve photo"
    PHOTO_THUMBNAIL_SERVE_FAILED = "Failed to serve thumbnail"
    PHOTO_DELETE_FAILED = "Failed to delete photo"

    # Metadata
    METADATA_NOT_FOUND = "Metadata entry not found"
    METADATA_KEY_REQUIRED = "Metadata key is required"
    METADATA_VALUE_REQUIRED = "Metadata value is required"
    METADATA_NO_FIELDS = "No valid fields to update"
    METADATA_FETCH_FAILED = "Failed to fetch metadata"
    METADATA_CREATE_FAILED = "Failed to add metadata"
    METADATA_UPDATE_FAILED = "Failed to update metadata"
    METADATA_DELETE_FAILED = "Failed to delete metadata"
    METADATA_KEYS_FETCH_FAILED = "Failed to fetch metadata keys"

    # Search
    SEARCH_FAILED = "Failed to search items"
    SEARCH_FILTERS_FAILED = "Failed to fetch search filters"

    # Settings
    SETTINGS_REQUIRED = "Settings object is required"
    SETTINGS_FETCH_FAILED = "Failed to fetch settings"
    SETTINGS_UPDATE_FAILED = "Failed to update settings"

    # QR code
    QR_TOTE_IDS_REQUIRED = "tote_ids must be a non-empty array"
    QR_BULK_LIMIT = "Maximum 50 totes can be printed at once"
    QR_NO_TOTES_FOUND = "No totes found for the given IDs"
    QR_FAILED = "Failed to generate QR code"
    QR_BULK_FAILED = "Failed to generate bulk QR codes"

    # Export / Import
    EXPORT_FAILED = "Failed to export data"
    IMPORT_FILE_REQUIRED = "No file uploaded. Please select a ZIP file."
    IMPORT_FILE_TYPE_INVALID = "Invalid file type. Please upload a .zip file exported from Tote Sonar."
    IMPORT_ZIP_INVALID = "Invalid ZIP file. The file could not be read as a ZIP archive."
    IMPORT_MANIFEST_MISSING = "Invalid export file. Missing tote-sonar-data.json in the ZIP archive."
    IMPORT_JSON_INVALID = "Invalid JSON in export file. The tote-sonar-data.json could not be parsed."
    IMPORT_STRUCTURE_INVALID = "Invalid export data structure. The JSON file is missing required fields or tables."
    IMPORT_FAILED = "Failed to import data. An unexpected error occurred."

    # Operational
    DASHBOARD_FAILED = "Failed to fetch dashboard data"
    SCHEMA_CHECK_FAILED = "Failed to check schema"
