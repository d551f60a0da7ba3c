"""회사 뉴스 검색 및 웹 정보 보조 함수.

SerpAPI 뉴스 검색 결과 중 회사명이 제목이나 본문에 등장하는 기사만
골라 최신순으로 돌려준다. API 키가 없거나 호출이 실패하면 빈 목록이다.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from datetime import datetime, timedelta, timezone
from typing import Any

import httpx

from cardcrm.config import settings
from cardcrm.schemas.news import NewsItem

logger = logging.getLogger(__name__)

# 회사 도메인으로 볼 수 없는 무료 메일 도메인
PUBLIC_EMAIL_DOMAINS = (
    "gmail.com", "naver.com", "daum.net", "hanmail.net", "yahoo.com", "hotmail.com",
    "outlook.com", "live.com", "msn.com", "icloud.com", "me.com", "mac.com",
)

_SEARCH_PATH = "/search"
_FETCH_COUNT = 15

_ABSOLUTE_DATE_FORMATS = (
    "%m/%d/%Y, %I:%M %p, %z",  # SerpAPI: "01/15/2024, 08:00 AM, +0000 UTC"
    "%b %d, %Y",
    "%Y-%m-%d",
    "%Y.%m.%d.",
    "%Y.%m.%d",
)

_RELATIVE_EN_RE = re.compile(r"^(\d+)\s*(minute|min|hour|day|week)s?\s+ago$", re.IGNORECASE)
_RELATIVE_KO_RE = re.compile(r"^(\d+)\s*(분|시간|일|주)\s*전$")

_UNIT_DELTAS = {
    "minute": timedelta(minutes=1),
    "min": timedelta(minutes=1),
    "hour": timedelta(hours=1),
    "day": timedelta(days=1),
    "week": timedelta(weeks=1),
    "분": timedelta(minutes=1),
    "시간": timedelta(hours=1),
    "일": timedelta(days=1),
    "주": timedelta(weeks=1),
}


def is_public_domain(domain: str) -> bool:
    domain = domain.lower()
    return any(public in domain for public in PUBLIC_EMAIL_DOMAINS)


def estimate_website_from_email(email: str | None) -> str:
    """회사 이메일 도메인으로 홈페이지 주소를 추정한다.

    >>> estimate_website_from_email("kim@techcorp.co.kr")
    'https://techcorp.co.kr'
    >>> estimate_website_from_email("kim@gmail.com")
    ''
    """
    if not email or "@" not in email:
        return ""
    domain = email.split("@")[1].strip().lower()
    if not domain or is_public_domain(domain):
        return ""
    return f"https://{domain}"


def parse_news_date(value: str | None, now: datetime | None = None) -> datetime | None:
    """SerpAPI 뉴스 날짜 문자열을 UTC datetime으로 변환한다. 해석 불가면 None."""
    if not value:
        return None
    text = value.strip()
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    for pattern in (_RELATIVE_EN_RE, _RELATIVE_KO_RE):
        m = pattern.match(text)
        if m:
            return now - int(m.group(1)) * _UNIT_DELTAS[m.group(2).lower()]

    if text.endswith(" UTC"):
        text = text[: -len(" UTC")]
    for fmt in _ABSOLUTE_DATE_FORMATS:
        try:
            parsed = datetime.strptime(text, fmt)
        except ValueError:
            continue
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        return parsed
    return None


def _source_name(source: Any) -> str:
    # 최신 SerpAPI 응답은 source가 {"name": ...} 객체
    if isinstance(source, dict):
        return source.get("name") or ""
    return source or ""


def filter_relevant_news(
    items: Iterable[dict[str, Any]],
    company: str,
    limit: int = 3,
    now: datetime | None = None,
) -> list[NewsItem]:
    """회사명이 제목/요약에 포함된 기사만 최신순으로 최대 limit건 반환한다.

    날짜를 해석할 수 없는 기사는 날짜가 있는 기사 뒤에 원래 순서대로 둔다.
    """
    company_lower = company.lower()
    relevant = [
        item for item in items
        if company_lower in (item.get("title") or "").lower()
        or company_lower in (item.get("snippet") or "").lower()
    ]

    dated: list[tuple[datetime, dict[str, Any]]] = []
    undated: list[dict[str, Any]] = []
    for item in relevant:
        published = parse_news_date(item.get("date"), now)
        if published is None:
            undated.append(item)
        else:
            dated.append((published, item))
    dated.sort(key=lambda pair: pair[0], reverse=True)
    ordered = [item for _, item in dated] + undated

    return [
        NewsItem(
            id=idx,
            title=item.get("title") or "제목 없음",
            description=item.get("snippet") or "내용 없음",
            date=item.get("date") or "날짜 정보 없음",
            source=_source_name(item.get("source")) or "출처 없음",
            link=item.get("link") or "정보 없음",
        )
        for idx, item in enumerate(ordered[:limit], start=1)
    ]


class NewsService:
    """SerpAPI 뉴스 검색 클라이언트."""

    def __init__(self, client: httpx.AsyncClient | None = None, api_key: str | None = None):
        self._client = client
        self._api_key = settings.serp_api_key if api_key is None else api_key

    async def search_company_news(self, company: str, limit: int | None = None) -> list[NewsItem]:
        company = company.strip()
        if not company:
            return []
        if not self._api_key:
            logger.info("SERP_API_KEY가 설정되지 않아 뉴스 검색을 건너뜁니다.")
            return []

        params = {
            "api_key": self._api_key,
            "q": f'"{company}" 회사 뉴스',
            "tbm": "nws",
            "num": str(_FETCH_COUNT),
            "gl": "kr",
            "hl": "ko",
            "sort": "date",
        }
        try:
            data = await self._get(_SEARCH_PATH, params)
        except (httpx.HTTPError, ValueError):
            logger.warning("뉴스 검색 실패: company=%s", company, exc_info=True)
            return []

        if not isinstance(data, dict):
            logger.warning("뉴스 응답 형식 오류: company=%s type=%s", company, type(data).__name__)
            return []
        results = data.get("news_results") or []
        if not isinstance(results, list):
            logger.warning("news_results 형식 오류: company=%s", company)
            return []
        results = [item for item in results if isinstance(item, dict)]
        news = filter_relevant_news(results, company, limit=limit or settings.news_limit)
        logger.info("뉴스 검색: company=%s 결과 %d건 중 %d건 선택", company, len(results), len(news))
        return news

    async def _get(self, path: str, params: dict[str, str]) -> Any:
        if self._client is not None:
            resp = await self._client.get(path, params=params)
        else:
            async with httpx.AsyncClient(
                base_url=settings.serp_base_url,
                timeout=settings.serp_timeout,
            ) as client:
                resp = await client.get(path, params=params)
        if not resp.is_success:
            logger.error("SerpAPI 오류 [%s]: %s", resp.status_code, resp.text[:200])
        resp.raise_for_status()
        return resp.json()
