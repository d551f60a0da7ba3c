"""명함 현황 리포트: 연락처 테이블 집계.

KPI(전체/기간 내 명함 수, 회사 수, 평균 중요도, 전월 대비 증감),
회사명 키워드 기반 산업군 분포, 주요 고객사, 최근 4주 주간 등록 수를 계산한다.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone

from sqlalchemy.ext.asyncio import AsyncSession

from cardcrm.schemas.common import ReportPeriod
from cardcrm.schemas.report import (
    IndustryShare,
    ReportKpi,
    ReportResponse,
    TopCompany,
    WeeklyActivity,
)
from cardcrm.services.contact_service import ContactService

logger = logging.getLogger(__name__)

_TOP_COMPANY_COUNT = 5
_ACTIVITY_WEEKS = 4
_OTHER_INDUSTRY = "기타"

# 위에서부터 먼저 걸리는 키워드의 산업군으로 분류
_INDUSTRY_KEYWORDS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("소프트웨어 개발", ("소프트웨어", "software", "개발", "tech", "it", "정보")),
    ("제조업", ("제조", "manufacturing", "산업")),
    ("금융", ("금융", "finance", "은행", "bank", "증권", "보험")),
    ("유통/물류", ("유통", "물류", "retail", "logistics", "쇼핑", "마트")),
)


def _as_utc(value: datetime) -> datetime:
    # SQLite는 timezone 정보를 보존하지 않는다
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _month_start(now: datetime, months_back: int = 0) -> datetime:
    index = now.year * 12 + (now.month - 1) - months_back
    return now.replace(
        year=index // 12, month=index % 12 + 1, day=1,
        hour=0, minute=0, second=0, microsecond=0,
    )


def period_start(period: ReportPeriod, now: datetime) -> datetime:
    if period is ReportPeriod.WEEK:
        return now - timedelta(days=7)
    if period is ReportPeriod.QUARTER:
        return _month_start(now, 3)
    if period is ReportPeriod.YEAR:
        return _month_start(now, now.month - 1)
    return _month_start(now)


def classify_industry(company: str) -> str:
    """회사명 키워드로 산업군을 추정한다.

    >>> classify_industry("한빛소프트웨어")
    '소프트웨어 개발'
    >>> classify_industry("삼성전자")
    '기타'
    """
    name = company.lower()
    for industry, keywords in _INDUSTRY_KEYWORDS:
        if any(keyword in name for keyword in keywords):
            return industry
    return _OTHER_INDUSTRY


def format_trend(this_month: int, last_month: int) -> str:
    if not this_month or not last_month:
        return "0%"
    rate = round((this_month - last_month) / last_month * 100)
    return f"+{rate}%" if rate > 0 else f"{rate}%"


class ReportService:

    def __init__(self, session: AsyncSession):
        self.session = session

    async def build(
        self, period: ReportPeriod = ReportPeriod.MONTH, now: datetime | None = None
    ) -> ReportResponse:
        now = _as_utc(now or datetime.now(timezone.utc))
        contacts = await ContactService(self.session).list_all()
        created = [(_as_utc(c.created_at), c) for c in contacts]

        start = period_start(period, now)
        this_month_start = _month_start(now)
        last_month_start = _month_start(now, 1)

        period_cards = sum(1 for ts, _ in created if ts >= start)
        this_month = sum(1 for ts, _ in created if ts >= this_month_start)
        last_month = sum(1 for ts, _ in created if last_month_start <= ts < this_month_start)

        with_company = [(ts, c, c.company.strip()) for ts, c in created if c.company and c.company.strip()]
        avg_importance = (
            round(sum(c.importance for c in contacts) / len(contacts), 1) if contacts else 0.0
        )

        kpi = ReportKpi(
            total_cards=len(contacts),
            period_cards=period_cards,
            total_companies=len({name for _, _, name in with_company}),
            avg_importance=avg_importance,
            trend=format_trend(this_month, last_month),
        )
        report = ReportResponse(
            period=period,
            kpi=kpi,
            industry_data=self._industry_data(with_company, len(contacts)),
            top_companies=self._top_companies(with_company),
            activity_data=self._activity_data(created, now),
        )
        logger.debug("리포트 생성: period=%s total=%d", period.value, kpi.total_cards)
        return report

    @staticmethod
    def _industry_data(with_company, total_cards: int) -> list[IndustryShare]:
        counts: dict[str, int] = {}
        for _, _, name in with_company:
            industry = classify_industry(name)
            counts[industry] = counts.get(industry, 0) + 1
        shares = [
            IndustryShare(
                name=industry,
                count=count,
                percentage=round(count / total_cards * 100) if total_cards else 0,
            )
            for industry, count in counts.items()
        ]
        shares.sort(key=lambda s: s.count, reverse=True)
        return shares

    @staticmethod
    def _top_companies(with_company) -> list[TopCompany]:
        """명함 수 내림차순. 동점이면 최근에 등록된 회사가 앞선다."""
        stats: dict[str, dict] = {}
        for ts, contact, name in with_company:
            entry = stats.get(name)
            if entry is None:
                stats[name] = {"contacts": 1, "importance": contact.importance, "last": ts}
            else:
                entry["contacts"] += 1
                entry["importance"] = max(entry["importance"], contact.importance)
                entry["last"] = max(entry["last"], ts)

        companies = [
            TopCompany(
                name=name,
                contacts=entry["contacts"],
                importance=entry["importance"],
                last_contact=entry["last"].date(),
            )
            for name, entry in stats.items()
        ]
        companies.sort(key=lambda c: c.contacts, reverse=True)
        return companies[:_TOP_COMPANY_COUNT]

    @staticmethod
    def _activity_data(created, now: datetime) -> list[WeeklyActivity]:
        activity: list[WeeklyActivity] = []
        for i in range(_ACTIVITY_WEEKS - 1, -1, -1):
            week_start = now - timedelta(weeks=i + 1)
            week_end = now - timedelta(weeks=i)
            cards = sum(1 for ts, _ in created if week_start <= ts < week_end)
            activity.append(WeeklyActivity(week=f"{_ACTIVITY_WEEKS - i}주차", cards=cards))
        return activity
