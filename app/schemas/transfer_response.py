from pydantic import BaseModel

class ImportSummaryResponseModel(BaseModel):
    totes: int = 0
    items: int = 0
    photos: int = 0
    metadata: int = 0
    settings: int = 0
