from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field, field_validator


def _strip_name(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    if not value:
        raise ValueError("name must not be blank")
    return value


class ContactCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100, description="이름")
    title: str | None = Field(None, max_length=100, description="직함")
    department: str | None = Field(None, max_length=100, description="부서")
    company: str | None = Field(None, max_length=200, description="회사명")
    email: str | None = Field(None, max_length=200, description="이메일")
    phone: str | None = Field(None, max_length=50, description="전화번호")
    importance: int = Field(3, ge=1, le=5, description="중요도 (1~5)")
    inquiry_types: list[str] = Field(default_factory=list, description="문의 유형 (복수 선택)")
    memo: str | None = Field(None, max_length=1000, description="메모")

    @field_validator("name")
    @classmethod
    def check_name(cls, value: str | None) -> str | None:
        return _strip_name(value)


class ContactUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=100)
    title: str | None = Field(None, max_length=100)
    department: str | None = Field(None, max_length=100)
    company: str | None = Field(None, max_length=200)
    email: str | None = Field(None, max_length=200)
    phone: str | None = Field(None, max_length=50)
    importance: int | None = Field(None, ge=1, le=5)
    inquiry_types: list[str] | None = None
    memo: str | None = Field(None, max_length=1000)

    @field_validator("name")
    @classmethod
    def check_name(cls, value: str | None) -> str | None:
        return _strip_name(value)


class ContactResponse(BaseModel):
    id: int
    name: str
    title: str | None = None
    department: str | None = None
    company: str | None = None
    email: str | None = None
    phone: str | None = None
    importance: int = 3
    inquiry_types: list[str] = Field(default_factory=list)
    memo: str | None = None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
