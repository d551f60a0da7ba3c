from __future__ import annotations

from sqlalchemy import JSON, String
from sqlalchemy.orm import Mapped, mapped_column

from cardcrm.models.base import Base, TimestampMixin


class Contact(TimestampMixin, Base):
    """명함 연락처 모델"""

    __tablename__ = "contacts"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(100))
    title: Mapped[str | None] = mapped_column(String(100), default=None)
    department: Mapped[str | None] = mapped_column(String(100), default=None)
    company: Mapped[str | None] = mapped_column(String(200), default=None, index=True)
    email: Mapped[str | None] = mapped_column(String(200), default=None)
    phone: Mapped[str | None] = mapped_column(String(50), default=None)
    importance: Mapped[int] = mapped_column(default=3)  # 1 ~ 5
    inquiry_types: Mapped[list[str]] = mapped_column(JSON, default=list)
    memo: Mapped[str | None] = mapped_column(String(1000), default=None)

    def __repr__(self) -> str:
        return f"<Contact id={self.id} name={self.name!r} company={self.company!r}>"
