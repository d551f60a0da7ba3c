from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from cardcrm.database import get_session
from cardcrm.schemas.common import ReportPeriod
from cardcrm.schemas.report import ReportResponse
from cardcrm.services.report_service import ReportService

router = APIRouter(prefix="/reports", tags=["reports"])


@router.get("", response_model=ReportResponse, summary="명함 현황 리포트")
async def get_report(
    period: ReportPeriod = ReportPeriod.MONTH,
    session: AsyncSession = Depends(get_session),
):
    svc = ReportService(session)
    return await svc.build(period)
