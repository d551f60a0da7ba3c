"""회사 목록 및 회사 선택 검색 서비스.

저장된 연락처의 회사명을 중복 제거해 회사 목록을 만들고,
초성 검색을 포함한 퍼지 매칭으로 자동완성 후보를 정렬한다.
"""

from __future__ import annotations

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from cardcrm.schemas.company import CompanySearchResult, CompanySummary
from cardcrm.search.company_matcher import rank
from cardcrm.services.contact_service import ContactService
from cardcrm.services.news_service import estimate_website_from_email

logger = logging.getLogger(__name__)


class CompanyService:

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_companies(self) -> list[CompanySummary]:
        """회사별 연락처 수와 추정 홈페이지. 최근 연락처 기준으로 먼저 나온 회사가 앞선다."""
        contacts = await ContactService(self.session).list_all()

        counts: dict[str, int] = {}
        websites: dict[str, str] = {}
        for contact in contacts:
            name = (contact.company or "").strip()
            if not name:
                continue
            counts[name] = counts.get(name, 0) + 1
            if not websites.get(name):
                websites[name] = estimate_website_from_email(contact.email)

        return [
            CompanySummary(name=name, contacts=count, website=websites[name])
            for name, count in counts.items()
        ]

    async def search(self, query: str | None, limit: int | None = None) -> list[CompanySearchResult]:
        """회사명을 검색한다. 정확도 점수 내림차순, 동점은 목록 순서 유지."""
        companies = await self.list_companies()
        ranked = rank(companies, query, key=lambda c: c.name, limit=limit)
        logger.debug("회사 검색: query=%r 후보 %d건 → %d건", query, len(companies), len(ranked))
        return [
            CompanySearchResult(
                **r.item.model_dump(),
                score=r.score,
                match_type=r.tier.label,
            )
            for r in ranked
        ]
