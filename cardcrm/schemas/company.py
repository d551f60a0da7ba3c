from __future__ import annotations

from pydantic import BaseModel, Field


class CompanySummary(BaseModel):
    name: str = Field(..., description="회사명 (연락처에 저장된 표기 그대로)")
    contacts: int = Field(..., description="해당 회사 연락처 수")
    website: str = Field("", description="이메일 도메인으로 추정한 홈페이지 (없으면 빈 문자열)")


class CompanySearchResult(CompanySummary):
    score: int = Field(0, description="검색 정확도 점수 (0~100)")
    match_type: str = Field("none", description="점수를 결정한 매칭 등급")
