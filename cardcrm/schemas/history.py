from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from cardcrm.schemas.common import HistoryActionType


class ContactHistoryCreate(BaseModel):
    action_type: HistoryActionType = Field(..., description="이력 유형 (memo_add / memo_edit / info_update)")
    title: str = Field(..., min_length=1, max_length=200)
    content: str = Field(..., min_length=1, max_length=2000)
    old_value: str | None = Field(None, description="변경 전 값")
    new_value: str | None = Field(None, description="변경 후 값")


class ContactHistoryResponse(BaseModel):
    id: int
    contact_id: int
    action_type: HistoryActionType
    title: str
    content: str
    old_value: str | None = None
    new_value: str | None = None
    created_by: str
    created_at: datetime

    model_config = {"from_attributes": True}
