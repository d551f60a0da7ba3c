"""명함 연락처 CRUD 서비스.

정보 수정 시 변경된 항목은 contact_history에 info_update 이력으로,
메모 변경은 memo_add / memo_edit 이력으로 함께 기록한다.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from cardcrm.models.contact import Contact
from cardcrm.models.contact_history import ContactHistory
from cardcrm.schemas.common import HistoryActionType
from cardcrm.schemas.contact import ContactCreate, ContactUpdate

logger = logging.getLogger(__name__)


def _clean(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


def _clean_list(values: list[str] | None) -> list[str]:
    """공백 제거, 빈 값 제외, 순서를 유지한 중복 제거."""
    result: list[str] = []
    for value in values or []:
        value = value.strip()
        if value and value not in result:
            result.append(value)
    return result


def _dumps(values: dict[str, Any]) -> str:
    return json.dumps(values, ensure_ascii=False)


class ContactService:

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, req: ContactCreate) -> Contact:
        contact = Contact(
            name=req.name.strip(),
            title=_clean(req.title),
            department=_clean(req.department),
            company=_clean(req.company),
            email=_clean(req.email),
            phone=_clean(req.phone),
            importance=req.importance,
            inquiry_types=_clean_list(req.inquiry_types),
            memo=_clean(req.memo),
        )
        self.session.add(contact)
        await self.session.commit()
        logger.info("연락처 저장: id=%d company=%s", contact.id, contact.company)
        return contact

    async def get(self, contact_id: int) -> Contact | None:
        result = await self.session.execute(
            select(Contact).where(Contact.id == contact_id)
        )
        return result.scalar_one_or_none()

    async def list_all(self) -> list[Contact]:
        result = await self.session.execute(
            select(Contact).order_by(Contact.created_at.desc(), Contact.id.desc())
        )
        return list(result.scalars().all())

    async def list_by_company(self, company: str) -> list[Contact]:
        result = await self.session.execute(
            select(Contact)
            .where(Contact.company == company.strip())
            .order_by(Contact.created_at.desc(), Contact.id.desc())
        )
        return list(result.scalars().all())

    async def update(self, contact_id: int, req: ContactUpdate) -> Contact:
        contact = await self.get(contact_id)
        if not contact:
            raise ValueError(f"Contact {contact_id} not found")

        old_memo = contact.memo
        old_info: dict[str, Any] = {}
        new_info: dict[str, Any] = {}

        for field, value in req.model_dump(exclude_unset=True).items():
            if field in ("name", "importance"):
                if value is None:
                    continue
            elif field == "inquiry_types":
                value = _clean_list(value)
            else:
                value = _clean(value)

            current = getattr(contact, field)
            if current == value:
                continue
            if field != "memo":
                old_info[field] = current
                new_info[field] = value
            setattr(contact, field, value)

        if new_info:
            self.session.add(ContactHistory(
                contact_id=contact.id,
                action_type=HistoryActionType.INFO_UPDATE.value,
                title="연락처 정보 수정",
                content=f"{', '.join(new_info)} 변경",
                old_value=_dumps(old_info),
                new_value=_dumps(new_info),
            ))
        if contact.memo != old_memo:
            action = HistoryActionType.MEMO_ADD if old_memo is None else HistoryActionType.MEMO_EDIT
            self.session.add(ContactHistory(
                contact_id=contact.id,
                action_type=action.value,
                title="메모 추가" if action is HistoryActionType.MEMO_ADD else "메모 수정",
                content=contact.memo or "메모 삭제",
                old_value=old_memo,
                new_value=contact.memo,
            ))

        await self.session.commit()
        return contact

    async def delete(self, contact_id: int) -> None:
        contact = await self.get(contact_id)
        if not contact:
            raise ValueError(f"Contact {contact_id} not found")
        await self.session.execute(
            delete(ContactHistory).where(ContactHistory.contact_id == contact_id)
        )
        await self.session.delete(contact)
        await self.session.commit()
        logger.info("연락처 삭제: id=%d", contact_id)
