"""HistoryService 테스트: 수동 이력 추가, 최신순 조회, 없는 연락처."""

from __future__ import annotations

import pytest

from cardcrm.schemas.common import HistoryActionType
from cardcrm.schemas.history import ContactHistoryCreate
from cardcrm.services.history_service import HistoryService


@pytest.mark.asyncio
async def test_add_and_list_newest_first(session, make_contact):
    contact = await make_contact(name="A")
    svc = HistoryService(session)

    first = await svc.add(contact.id, ContactHistoryCreate(
        action_type=HistoryActionType.MEMO_ADD, title="메모 추가", content=" 첫 미팅 ",
    ))
    second = await svc.add(contact.id, ContactHistoryCreate(
        action_type="memo_edit", title="메모 수정", content="후속 미팅",
        old_value="첫 미팅", new_value="후속 미팅",
    ))

    assert first.content == "첫 미팅"
    assert first.created_by == "system"
    history = await svc.list_for_contact(contact.id)
    assert [h.id for h in history] == [second.id, first.id]
    assert history[0].old_value == "첫 미팅"


@pytest.mark.asyncio
async def test_history_is_scoped_to_contact(session, make_contact):
    a = await make_contact(name="A")
    b = await make_contact(name="B")
    svc = HistoryService(session)
    await svc.add(a.id, ContactHistoryCreate(action_type="memo_add", title="t", content="c"))

    assert await svc.list_for_contact(b.id) == []


@pytest.mark.asyncio
async def test_missing_contact_raises(session):
    svc = HistoryService(session)
    with pytest.raises(ValueError, match="not found"):
        await svc.list_for_contact(999)
    with pytest.raises(ValueError, match="not found"):
        await svc.add(999, ContactHistoryCreate(action_type="memo_add", title="t", content="c"))
