"""테스트 공통 설정: 인메모리 SQLite 세션, 연락처 생성 헬퍼, API 클라이언트."""

from __future__ import annotations

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from cardcrm.models import Base
from cardcrm.schemas.contact import ContactCreate
from cardcrm.services.contact_service import ContactService


@pytest.fixture
async def session():
    """각 테스트마다 독립적인 인메모리 DB 세션 제공."""
    engine = create_async_engine("sqlite+aiosqlite://", echo=False)

    @event.listens_for(engine.sync_engine, "connect")
    def _set_pragmas(dbapi_conn, _):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as sess:
        yield sess

    await engine.dispose()


@pytest.fixture
def make_contact(session: AsyncSession):
    """연락처를 생성하는 헬퍼. 생성 순서가 곧 created_at 순서다."""

    async def _make(name: str = "홍길동", **fields):
        return await ContactService(session).create(ContactCreate(name=name, **fields))

    return _make


@pytest.fixture
async def client(session: AsyncSession):
    """테스트 세션을 주입한 API 클라이언트."""
    from cardcrm.database import get_session
    from cardcrm.main import app

    async def _override_session():
        yield session

    app.dependency_overrides[get_session] = _override_session
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
