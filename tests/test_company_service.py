"""CompanyService 테스트: 회사 목록 중복 제거, 홈페이지 추정, 검색 정렬."""

from __future__ import annotations

import pytest

from cardcrm.services.company_service import CompanyService


@pytest.fixture
async def contacts(make_contact):
    await make_contact(name="김", company="삼성전자", email="kim@gmail.com")
    await make_contact(name="이", company="삼성전자", email="lee@samsung.com")
    await make_contact(name="박", company="삼성SDS")
    await make_contact(name="최", company="네이버", email="choi@navercorp.com")
    await make_contact(name="정")  # 회사명 없음


@pytest.mark.asyncio
async def test_list_companies_dedupes_in_recent_order(session, contacts):
    companies = await CompanyService(session).list_companies()

    assert [(c.name, c.contacts) for c in companies] == [
        ("네이버", 1),
        ("삼성SDS", 1),
        ("삼성전자", 2),
    ]


@pytest.mark.asyncio
async def test_list_companies_estimates_website(session, contacts):
    companies = {c.name: c for c in await CompanyService(session).list_companies()}

    assert companies["삼성전자"].website == "https://samsung.com"
    assert companies["네이버"].website == "https://navercorp.com"
    assert companies["삼성SDS"].website == ""


@pytest.mark.asyncio
async def test_search_prefix_ties_keep_directory_order(session, contacts):
    results = await CompanyService(session).search("삼성")

    assert [(r.name, r.score, r.match_type) for r in results] == [
        ("삼성SDS", 90, "prefix"),
        ("삼성전자", 90, "prefix"),
    ]


@pytest.mark.asyncio
async def test_search_chosung(session, contacts):
    results = await CompanyService(session).search("ㅅㅅㅈ")

    assert len(results) == 1
    assert results[0].name == "삼성전자"
    assert results[0].contacts == 2
    assert results[0].match_type == "chosung"
    assert results[0].score == 60


@pytest.mark.asyncio
async def test_search_empty_query_returns_directory(session, contacts):
    results = await CompanyService(session).search("")

    assert [r.name for r in results] == ["네이버", "삼성SDS", "삼성전자"]
    assert {r.score for r in results} == {0}
    assert {r.match_type for r in results} == {"none"}


@pytest.mark.asyncio
async def test_search_limit(session, contacts):
    results = await CompanyService(session).search("", limit=2)
    assert len(results) == 2


@pytest.mark.asyncio
async def test_search_without_contacts(session):
    assert await CompanyService(session).search("삼성") == []
