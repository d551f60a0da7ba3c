"""회사명 퍼지 매칭: 정규화, 포함 여부 판정, 정렬 점수.

명함에서 추출한 회사명은 표기가 제각각이다 ("(주)테크코퍼레이션",
"테크코퍼레이션 주식회사", "Tech Corp."). 검색창에 입력한 질의와 회사명을
비교할 때 다음 단계를 사용한다.

- ``normalize_company_name``: 괄호, 법인 표기, 구두점, 공백을 제거한 비교용 문자열
- ``matches``: 목록 필터링용 판정 (정규화/초성/부분 문자열/단어 단위)
- ``score``: 정렬용 점수. 첫 번째로 일치한 등급의 점수만 반환한다
- ``rank``: 필터링 후 점수 내림차순 정렬 (동점은 입력 순서 유지)

빈 질의는 ``matches`` 에서는 전부 통과하지만 ``score`` 는 0 이다.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import IntEnum
from typing import Generic, TypeVar

from cardcrm.search.hangul_util import decompose_initials

T = TypeVar("T")

# 괄호를 지우기 전에 통째로 제거해야 하는 법인 표기
_ENTITY_MARKERS = ("(주)", "（주）", "㈜")
_CORPORATION = "주식회사"

_PARENS_RE = re.compile(r"[()（）]")
_NOISE_RE = re.compile(r"[.,\s]+")


class MatchTier(IntEnum):
    """점수 등급. 값이 곧 정렬 점수다."""

    EXACT = 100
    NORMALIZED = 95
    PREFIX = 90
    NORMALIZED_PREFIX = 85
    CONTAINS = 80
    NORMALIZED_CONTAINS = 75
    CHOSUNG = 60
    WORD = 50
    NONE = 0

    @property
    def label(self) -> str:
        return self.name.lower()


def normalize_company_name(name: str | None) -> str:
    """비교용 회사명을 만든다.

    법인 표기는 문자 단위가 아니라 토큰 단위로 제거하므로
    "사랑", "회계법인" 같은 이름의 글자는 남는다.

    >>> normalize_company_name("주식회사 테크코퍼레이션")
    '테크코퍼레이션'
    >>> normalize_company_name("(주) Tech Corp.")
    'techcorp'
    """
    if not name:
        return ""
    text = name.lower()
    for marker in _ENTITY_MARKERS:
        text = text.replace(marker, "")
    text = _PARENS_RE.sub("", text)
    text = _NOISE_RE.sub("", text)
    # "주식 회사"처럼 공백 제거 후에야 드러나는 표기도 지운다
    while _CORPORATION in text:
        text = text.replace(_CORPORATION, "")
    return text


@dataclass(frozen=True)
class _Forms:
    folded: str
    normalized: str
    initials: str
    words: tuple[str, ...]


def _forms(text: str | None) -> _Forms:
    raw = text or ""
    folded = raw.lower().strip()
    return _Forms(
        folded=folded,
        normalized=normalize_company_name(raw),
        initials=decompose_initials(folded),
        words=tuple(folded.split()),
    )


def _either_contains(a: str, b: str) -> bool:
    return a in b or b in a


def matches(candidate: str | None, query: str | None) -> bool:
    """회사명이 질의에 걸리는지 판정한다.

    >>> matches("삼성전자", "ㅅㅅ")
    True
    >>> matches("Tech Corp", "corp")
    True
    >>> matches("네이버", "삼성")
    False
    """
    if not query:
        return True

    c = _forms(candidate)
    q = _forms(query)

    if _either_contains(c.normalized, q.normalized):
        return True
    if _either_contains(c.initials, q.initials):
        return True
    if q.folded in c.folded:
        return True
    return any(
        _either_contains(c_word, q_word)
        for q_word in q.words
        for c_word in c.words
    )


# 위에서부터 순서대로 검사해 처음 맞는 등급을 쓴다
_TIERS: tuple[tuple[MatchTier, Callable[[_Forms, _Forms], bool]], ...] = (
    (MatchTier.EXACT, lambda c, q: c.folded == q.folded),
    (MatchTier.NORMALIZED, lambda c, q: c.normalized == q.normalized),
    (MatchTier.PREFIX, lambda c, q: c.folded.startswith(q.folded)),
    (MatchTier.NORMALIZED_PREFIX, lambda c, q: c.normalized.startswith(q.normalized)),
    (MatchTier.CONTAINS, lambda c, q: q.folded in c.folded),
    (MatchTier.NORMALIZED_CONTAINS, lambda c, q: q.normalized in c.normalized),
    (MatchTier.CHOSUNG, lambda c, q: q.initials in c.initials),
    (
        MatchTier.WORD,
        lambda c, q: any(q_word in c_word for q_word in q.words for c_word in c.words),
    ),
)


def match_tier(candidate: str | None, query: str | None) -> MatchTier:
    """``score`` 가 어느 등급에서 결정됐는지 반환한다."""
    if not query:
        return MatchTier.NONE

    c = _forms(candidate)
    q = _forms(query)
    for tier, check in _TIERS:
        if check(c, q):
            return tier
    return MatchTier.NONE


def score(candidate: str | None, query: str | None) -> int:
    """정렬용 점수 (0, 50, 60, 75, 80, 85, 90, 95, 100).

    >>> score("테크코퍼레이션", "테크")
    90
    >>> score("Tech Corp", "corp")
    80
    """
    return int(match_tier(candidate, query))


@dataclass(frozen=True)
class Ranked(Generic[T]):
    item: T
    tier: MatchTier

    @property
    def score(self) -> int:
        return int(self.tier)


def rank(
    items: Iterable[T],
    query: str | None,
    *,
    key: Callable[[T], str] = str,
    limit: int | None = None,
) -> list[Ranked[T]]:
    """``matches`` 로 거른 뒤 ``score`` 내림차순으로 정렬한다.

    정렬은 안정 정렬이라 동점(빈 질의 포함)은 입력 순서를 유지한다.

    >>> [r.item for r in rank(["삼성전자", "삼성SDS", "네이버"], "삼성")]
    ['삼성전자', '삼성SDS']
    """
    ranked = [
        Ranked(item=item, tier=match_tier(key(item), query))
        for item in items
        if matches(key(item), query)
    ]
    ranked.sort(key=lambda r: r.tier, reverse=True)
    if limit is not None:
        ranked = ranked[:limit]
    return ranked
