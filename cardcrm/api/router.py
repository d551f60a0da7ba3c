from __future__ import annotations

from fastapi import APIRouter

from cardcrm.api.companies import router as companies_router
from cardcrm.api.contacts import router as contacts_router
from cardcrm.api.reports import router as reports_router
from cardcrm.api.system import router as system_router

api_router = APIRouter()
api_router.include_router(system_router)
api_router.include_router(contacts_router)
api_router.include_router(companies_router)
api_router.include_router(reports_router)
