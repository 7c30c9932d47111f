from typing import Optional
from pydantic import BaseModel

class CreateToteRequestModel(BaseModel):
    name: Optional[str] = None
    location: Optional[str] = None
    size: Optional[str] = None
    color: Optional[str] = None
    owner: Optional[str] = None

# 只更新請求中出現的欄位（model_dump(exclude_unset=True)）
class UpdateToteRequestModel(BaseModel):
    name: Optional[str] = None
    location: Optional[str] = None
    size: Optional[str] = None
    color: Optional[str] = None
    owner: Optional[str] = None
