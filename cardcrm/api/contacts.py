from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from cardcrm.database import get_session
from cardcrm.schemas.contact import ContactCreate, ContactResponse, ContactUpdate
from cardcrm.schemas.history import ContactHistoryCreate, ContactHistoryResponse
from cardcrm.services.contact_service import ContactService
from cardcrm.services.history_service import HistoryService

router = APIRouter(prefix="/contacts", tags=["contacts"])


@router.get("", response_model=list[ContactResponse], summary="연락처 목록 (최신순)")
async def list_contacts(session: AsyncSession = Depends(get_session)):
    svc = ContactService(session)
    return await svc.list_all()


@router.post("", response_model=ContactResponse, status_code=201, summary="연락처 저장")
async def create_contact(
    req: ContactCreate,
    session: AsyncSession = Depends(get_session),
):
    svc = ContactService(session)
    return await svc.create(req)


@router.get("/{contact_id}", response_model=ContactResponse, summary="연락처 조회")
async def get_contact(
    contact_id: int,
    session: AsyncSession = Depends(get_session),
):
    svc = ContactService(session)
    contact = await svc.get(contact_id)
    if not contact:
        raise HTTPException(status_code=404, detail="Contact not found")
    return contact


@router.patch("/{contact_id}", response_model=ContactResponse, summary="연락처 수정")
async def update_contact(
    contact_id: int,
    req: ContactUpdate,
    session: AsyncSession = Depends(get_session),
):
    svc = ContactService(session)
    try:
        return await svc.update(contact_id, req)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.delete("/{contact_id}", summary="연락처 삭제")
async def delete_contact(
    contact_id: int,
    session: AsyncSession = Depends(get_session),
):
    svc = ContactService(session)
    try:
        await svc.delete(contact_id)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return {"status": "deleted"}


@router.get(
    "/{contact_id}/history",
    response_model=list[ContactHistoryResponse],
    summary="연락처 이력 (최신순)",
)
async def list_history(
    contact_id: int,
    session: AsyncSession = Depends(get_session),
):
    svc = HistoryService(session)
    try:
        return await svc.list_for_contact(contact_id)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post(
    "/{contact_id}/history",
    response_model=ContactHistoryResponse,
    status_code=201,
    summary="연락처 이력 추가",
)
async def add_history(
    contact_id: int,
    req: ContactHistoryCreate,
    session: AsyncSession = Depends(get_session),
):
    svc = HistoryService(session)
    try:
        return await svc.add(contact_id, req)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))
