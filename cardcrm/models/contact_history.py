from __future__ import annotations

from sqlalchemy import ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from cardcrm.models.base import Base, TimestampMixin


class ContactHistory(TimestampMixin, Base):
    """연락처 변경/메모 이력"""

    __tablename__ = "contact_history"

    id: Mapped[int] = mapped_column(primary_key=True)
    contact_id: Mapped[int] = mapped_column(
        ForeignKey("contacts.id", ondelete="CASCADE"), index=True
    )
    action_type: Mapped[str] = mapped_column(String(30))  # memo_add / memo_edit / info_update
    title: Mapped[str] = mapped_column(String(200))
    content: Mapped[str] = mapped_column(Text)
    old_value: Mapped[str | None] = mapped_column(Text, default=None)
    new_value: Mapped[str | None] = mapped_column(Text, default=None)
    created_by: Mapped[str] = mapped_column(String(50), default="system")

    def __repr__(self) -> str:
        return f"<ContactHistory id={self.id} contact_id={self.contact_id} action={self.action_type}>"
