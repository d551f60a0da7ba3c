"""한글 초성 분해 유틸리티 (순수 유니코드 연산)"""

from __future__ import annotations

# 현대 한글 음절 범위: U+AC00 '가' 부터 11,172자
_HANGUL_BASE = 0xAC00
_HANGUL_COUNT = 11172

# 초성 19자 (유니코드 순서)
_CHOSUNG_LIST = (
    "ㄱ", "ㄲ", "ㄴ", "ㄷ", "ㄸ", "ㄹ", "ㅁ", "ㅂ", "ㅃ",
    "ㅅ", "ㅆ", "ㅇ", "ㅈ", "ㅉ", "ㅊ", "ㅋ", "ㅌ", "ㅍ", "ㅎ",
)

# 중성 21 * 종성 28 = 초성 하나당 588 음절
_JUNGSUNG_COUNT = 21
_JONGSUNG_COUNT = 28
_BLOCK_SIZE = _JUNGSUNG_COUNT * _JONGSUNG_COUNT


def decompose_initials(text: str | None) -> str:
    """한글 음절은 초성으로 바꾸고 나머지 문자는 그대로 둔다.

    결과 문자열의 길이는 입력과 같다.

    >>> decompose_initials("삼성")
    'ㅅㅅ'
    >>> decompose_initials("SK하이닉스")
    'SKㅎㅇㄴㅅ'
    >>> decompose_initials("")
    ''
    """
    if not text:
        return ""
    result: list[str] = []
    for ch in text:
        code = ord(ch) - _HANGUL_BASE
        if 0 <= code < _HANGUL_COUNT:
            result.append(_CHOSUNG_LIST[code // _BLOCK_SIZE])
        else:
            result.append(ch)
    return "".join(result)
