from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from cardcrm.config import settings
from cardcrm.database import get_session
from cardcrm.schemas.company import CompanySearchResult, CompanySummary
from cardcrm.schemas.contact import ContactResponse
from cardcrm.schemas.news import NewsItem
from cardcrm.services.company_service import CompanyService
from cardcrm.services.contact_service import ContactService
from cardcrm.services.news_service import NewsService

router = APIRouter(prefix="/companies", tags=["companies"])


def get_news_service() -> NewsService:
    return NewsService()


@router.get(
    "",
    response_model=list[CompanySummary],
    summary="회사 목록",
    description="저장된 연락처의 회사명을 중복 제거한 목록입니다. "
                "회사별 연락처 수와 이메일 도메인으로 추정한 홈페이지를 함께 반환합니다.",
)
async def list_companies(session: AsyncSession = Depends(get_session)):
    svc = CompanyService(session)
    return await svc.list_companies()


@router.get(
    "/search",
    response_model=list[CompanySearchResult],
    summary="회사 검색 (자동완성)",
    description="정규화 매칭, 초성 검색(예: 'ㅅㅅ' → 삼성전자), 부분/단어 매칭으로 회사를 찾아 "
                "정확도 점수 내림차순으로 반환합니다. 빈 검색어는 전체 목록을 점수 0으로 반환합니다.",
)
async def search_companies(
    q: str = "",
    limit: int | None = Query(default=None, ge=1, le=100),
    session: AsyncSession = Depends(get_session),
):
    svc = CompanyService(session)
    return await svc.search(q, limit or settings.suggestion_limit)


@router.get(
    "/{name}/contacts",
    response_model=list[ContactResponse],
    summary="회사별 연락처",
)
async def list_company_contacts(
    name: str,
    session: AsyncSession = Depends(get_session),
):
    svc = ContactService(session)
    return await svc.list_by_company(name)


@router.get(
    "/{name}/news",
    response_model=list[NewsItem],
    summary="회사 관련 뉴스",
    description="SerpAPI 뉴스 검색 결과 중 회사명이 제목이나 요약에 포함된 기사를 최신순으로 반환합니다. "
                "SERP_API_KEY가 설정되지 않았거나 검색에 실패하면 빈 목록을 반환합니다.",
)
async def company_news(
    name: str,
    news: NewsService = Depends(get_news_service),
):
    return await news.search_company_news(name)
