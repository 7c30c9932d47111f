from typing import Optional
from pydantic import BaseModel, field_validator

def _string_or_none(v):
    if not isinstance(v, str):
        return None
    return v

class CreateMetadataRequestModel(BaseModel):
    key: Optional[str] = None
    value: Optional[str] = None

    @field_validator('key', 'value', mode='before')
    @classmethod
    def validate_text(cls, v):
        return _string_or_none(v)

# 非字串或空白的欄位視為未提供
class UpdateMetadataRequestModel(BaseModel):
    key: Optional[str] = None
    value: Optional[str] = None

    @field_validator('key', 'value', mode='before')
    @classmethod
    def validate_text(cls, v):
        return _string_or_none(v)
