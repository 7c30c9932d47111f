from typing import Any, Optional
from pydantic import BaseModel, field_validator

class UpdateSettingsRequestModel(BaseModel):
    settings: Optional[dict[str, Any]] = None

    @field_validator('settings', mode='before')
    @classmethod
    def validate_settings(cls, v):
        if not isinstance(v, dict):
            return None
        return v
