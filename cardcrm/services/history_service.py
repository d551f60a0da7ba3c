"""연락처 이력(contact_history) 서비스."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from cardcrm.models.contact_history import ContactHistory
from cardcrm.schemas.history import ContactHistoryCreate
from cardcrm.services.contact_service import ContactService


class HistoryService:

    def __init__(self, session: AsyncSession):
        self.session = session

    async def _ensure_contact(self, contact_id: int) -> None:
        if await ContactService(self.session).get(contact_id) is None:
            raise ValueError(f"Contact {contact_id} not found")

    async def add(self, contact_id: int, req: ContactHistoryCreate) -> ContactHistory:
        await self._ensure_contact(contact_id)
        entry = ContactHistory(
            contact_id=contact_id,
            action_type=req.action_type.value,
            title=req.title.strip(),
            content=req.content.strip(),
            old_value=req.old_value,
            new_value=req.new_value,
        )
        self.session.add(entry)
        await self.session.commit()
        return entry

    async def list_for_contact(self, contact_id: int) -> list[ContactHistory]:
        """최신 이력부터 반환한다."""
        await self._ensure_contact(contact_id)
        result = await self.session.execute(
            select(ContactHistory)
            .where(ContactHistory.contact_id == contact_id)
            .order_by(ContactHistory.created_at.desc(), ContactHistory.id.desc())
        )
        return list(result.scalars().all())
