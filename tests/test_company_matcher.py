"""회사명 매칭 테스트: 정규화, 판정, 점수 등급, 정렬."""

from __future__ import annotations

import itertools

import pytest

from cardcrm.search.company_matcher import (
    MatchTier,
    match_tier,
    matches,
    normalize_company_name,
    rank,
    score,
)

SAMPLES = [
    "삼성전자",
    "삼성SDS",
    "네이버",
    "(주)테크코퍼레이션",
    "테크 코퍼레이션",
    "주식회사 카카오",
    "Tech Corp.",
    "Tech Corp Korea",
    "사랑회계법인",
    "ㅅㅅ",
    "corp",
    " 주식 회사 ",
]


# ── 정규화 ────────────────────────────────────────────────────


@pytest.mark.parametrize(
    "name, expected",
    [
        ("주식회사 테크코퍼레이션", "테크코퍼레이션"),
        ("(주)테크코퍼레이션", "테크코퍼레이션"),
        ("㈜테크", "테크"),
        ("테크（주）", "테크"),
        ("테크코퍼레이션 주식회사", "테크코퍼레이션"),
        ("주식 회사 테크", "테크"),
        ("(테크)", "테크"),
        ("Tech Corp.", "techcorp"),
        ("A, B. C", "abc"),
        ("", ""),
        (None, ""),
    ],
)
def test_normalize_company_name(name, expected):
    assert normalize_company_name(name) == expected


def test_normalize_keeps_marker_syllables_inside_words():
    """법인 표기는 토큰 단위로만 지운다. '사', '회' 같은 글자는 남는다."""
    assert normalize_company_name("사랑회계법인") == "사랑회계법인"
    assert normalize_company_name("주원식품") == "주원식품"


@pytest.mark.parametrize("name", SAMPLES + ["주식주식회사회사", "(주 )테크", "㈜(주)주식회사"])
def test_normalize_is_idempotent(name):
    once = normalize_company_name(name)
    assert normalize_company_name(once) == once


# ── 판정 ─────────────────────────────────────────────────────


def test_empty_query_matches_everything():
    for name in SAMPLES:
        assert matches(name, "")
        assert matches(name, None)


def test_chosung_query_matches():
    assert matches("삼성전자", "ㅅㅅ")
    assert matches("삼성전자", "ㅈㅈ")
    assert not matches("네이버", "ㅅㅅ")


def test_chosung_match_is_bidirectional():
    """질의의 초성이 더 길어도 회사명 초성을 포함하면 걸린다."""
    assert matches("삼성", "ㅅㅅㅈㅈ")
    assert matches("삼성", "삼성전자")
    assert not matches("네이버", "ㅅㅅㅈㅈ")
    # 정렬 점수는 질의가 후보에 포함되는 방향만 본다
    assert score("삼성", "ㅅㅅㅈㅈ") == 0
    assert [r.item for r in rank(["삼성", "네이버"], "ㅅㅅㅈㅈ")] == ["삼성"]


def test_case_insensitive_substring():
    assert matches("Tech Corp", "corp")
    assert matches("Tech Corp", "TECH")


def test_normalized_match_ignores_markers_and_spacing():
    assert matches("(주)테크코퍼레이션", "테크 코퍼레이션")
    assert matches("주식회사 카카오", "카카오")


def test_query_longer_than_candidate_matches():
    """정규화 비교는 양방향이다."""
    assert matches("삼성", "삼성전자 주식회사")


def test_word_overlap_matches():
    assert matches("Tech Corp Korea", "korea tech")


def test_unrelated_names_do_not_match():
    assert not matches("네이버", "삼성")
    assert not matches("Tech Corp", "kakao")


# ── 점수 ─────────────────────────────────────────────────────


@pytest.mark.parametrize(
    "candidate, query, expected",
    [
        ("삼성전자", "삼성전자", 100),
        ("Samsung", "SAMSUNG ", 100),
        ("(주)테크코퍼레이션", "테크코퍼레이션", 95),
        ("테크코퍼레이션", "테크", 90),
        ("(주)테크코퍼레이션", "테크", 85),
        ("Tech Corp", "corp", 80),
        ("테크 코퍼레이션", "크코퍼", 75),
        ("삼성전자", "ㅅㅈ", 60),
        ("Tech Corp Korea", "korea tech", 50),
        ("네이버", "삼성", 0),
    ],
)
def test_score_tiers(candidate, query, expected):
    assert score(candidate, query) == expected


def test_empty_query_scores_zero():
    for name in SAMPLES:
        assert score(name, "") == 0
        assert match_tier(name, None) is MatchTier.NONE


def test_match_tier_labels():
    assert match_tier("테크코퍼레이션", "테크").label == "prefix"
    assert match_tier("삼성전자", "ㅅㅈ").label == "chosung"
    assert match_tier("네이버", "삼성").label == "none"


@pytest.mark.parametrize("name", [s for s in SAMPLES if s.strip()])
def test_reflexive(name):
    assert matches(name, name)
    assert score(name, name) == 100
    assert score(name.upper(), name.lower()) == 100


def test_positive_score_implies_match():
    for candidate, query in itertools.product(SAMPLES, SAMPLES + ["ㅈㅈ", "korea tech", "크코퍼"]):
        if score(candidate, query) > 0:
            assert matches(candidate, query), (candidate, query)


# ── 정렬 ─────────────────────────────────────────────────────


def test_rank_filters_then_sorts():
    ranked = rank(["삼성전자", "삼성SDS", "네이버"], "삼성")
    assert [r.item for r in ranked] == ["삼성전자", "삼성SDS"]
    assert [r.score for r in ranked] == [90, 90]


def test_rank_orders_by_score():
    ranked = rank(["한국카카오", "카카오뱅크", "카카오"], "카카오")
    assert [(r.item, r.score) for r in ranked] == [
        ("카카오", 100),
        ("카카오뱅크", 90),
        ("한국카카오", 80),
    ]


def test_rank_empty_query_keeps_input_order():
    names = ["네이버", "삼성전자", "카카오"]
    ranked = rank(names, "")
    assert [r.item for r in ranked] == names
    assert all(r.tier is MatchTier.NONE for r in ranked)


def test_rank_limit_and_key():
    rows = [{"name": "삼성전자"}, {"name": "삼성SDS"}, {"name": "삼성물산"}]
    ranked = rank(rows, "ㅅㅅ", key=lambda row: row["name"], limit=2)
    assert [r.item["name"] for r in ranked] == ["삼성전자", "삼성SDS"]
