from __future__ import annotations

from fastapi import APIRouter

from cardcrm import __version__
from cardcrm.config import settings

router = APIRouter(tags=["system"])


@router.get(
    "/health",
    summary="헬스 체크",
    description="서버 구동 상태와 뉴스 검색(SerpAPI) 활성화 여부를 반환합니다.",
)
async def health():
    return {
        "status": "ok",
        "news_enabled": settings.news_enabled,
        "version": __version__,
    }
