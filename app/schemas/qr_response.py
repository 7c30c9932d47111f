from pydantic import BaseModel

class QrCodeResponseModel(BaseModel):
    qr_data_url: str
    encoded_url: str
    tote_id: str

class BulkQrCodeResponseModel(BaseModel):
    tote_id: str
    tote_name: str
    tote_location: str
    qr_data_url: str
    encoded_url: str
