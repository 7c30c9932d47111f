from typing import Any, Optional
from pydantic import BaseModel, field_validator

class BulkQrRequestModel(BaseModel):
    tote_ids: Optional[list[Any]] = None

    @field_validator('tote_ids', mode='before')
    @classmethod
    def validate_tote_ids(cls, v):
        if not isinstance(v, list):
            return None
        return v
