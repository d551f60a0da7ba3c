from __future__ import annotations

from datetime import date

from pydantic import BaseModel, Field

from cardcrm.schemas.common import ReportPeriod


class ReportKpi(BaseModel):
    total_cards: int = Field(..., description="전체 명함 수")
    period_cards: int = Field(..., description="조회 기간 내 등록된 명함 수")
    total_companies: int = Field(..., description="고유 회사 수")
    avg_importance: float = Field(..., description="평균 중요도 (소수점 1자리)")
    trend: str = Field(..., description="지난달 대비 이번 달 등록 증감률 (예: '+25%')")


class IndustryShare(BaseModel):
    name: str
    count: int
    percentage: int = Field(..., description="전체 명함 대비 비율 (%)")


class TopCompany(BaseModel):
    name: str
    contacts: int
    importance: int = Field(..., description="소속 연락처 중 최고 중요도")
    last_contact: date = Field(..., description="가장 최근 명함 등록일")


class WeeklyActivity(BaseModel):
    week: str
    cards: int


class ReportResponse(BaseModel):
    period: ReportPeriod
    kpi: ReportKpi
    industry_data: list[IndustryShare]
    top_companies: list[TopCompany]
    activity_data: list[WeeklyActivity]
