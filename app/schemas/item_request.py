from typing import Any, Optional
from pydantic import BaseModel, field_validator

class CreateItemRequestModel(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
    # 原樣接收（含布林與數字字串），正整數校驗在 service 中處理
    quantity: Optional[Any] = None

class UpdateItemRequestModel(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
    quantity: Optional[Any] = None

class MoveItemRequestModel(BaseModel):
    target_tote_id: Optional[str] = None

    @field_validator('target_tote_id', mode='before')
    @classmethod
    def validate_target_tote_id(cls, v):
        if not isinstance(v, str):
            return None
        return v

class DuplicateItemRequestModel(BaseModel):
    target_tote_id: Optional[str] = None

    @field_validator('target_tote_id', mode='before')
    @classmethod
    def validate_target_tote_id(cls, v):
        if not isinstance(v, str) or not v.strip():
            return None
        return v
