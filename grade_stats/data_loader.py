"""
데이터 로더 모듈

자유 형식으로 입력된 성적 텍스트를 파싱하고, 통계 계산 전 입력을 검증하는 기능을 제공합니다.
"""

import logging
import math
import re
from typing import List, Optional

from grade_stats.scale import Grade, VALID_GRADES, scale_description

logger = logging.getLogger(__name__)

# 앞자리 0 표기 정규화 ('00', '0' -> 0, '02' -> 2)
TOKEN_ALIASES = {
    '00': Grade.ZERO,
    '0': Grade.ZERO,
    '02': Grade.TWO,
}

# 토큰 앞부분의 ASCII 숫자만 읽음 ('7abc' -> 7, '１２' -> nan)
_NUMBER_PREFIX = re.compile(r'^[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?')

_VALID_VALUES = frozenset(int(g) for g in VALID_GRADES)


class GradeInputError(ValueError):
    """입력 성적을 분석할 수 없을 때 발생하는 오류의 기본 클래스"""


class EmptyInputError(GradeInputError):
    def __init__(self):
        super().__init__("Indtast venligst nogle karakterer!")


class NoValidGradesError(GradeInputError):
    def __init__(self):
        super().__init__(
            "Ingen gyldige karakterer fundet. "
            f"Brug venligst danske karakterer: {scale_description()}"
        )


class InsufficientDataError(GradeInputError):
    def __init__(self, min_count: int):
        self.min_count = min_count
        super().__init__(
            f"Indtast venligst mindst {min_count} karakterer for meningsfuld statistik."
        )


def parse_number(token: str) -> float:
    """
    토큰 앞부분의 숫자를 실수로 읽습니다.

    Args:
        token (str): 공백이 제거된 토큰

    Returns:
        float: 읽은 값, 숫자로 시작하지 않으면 nan

    Examples:
        >>> parse_number('10')
        10.0
        >>> parse_number('7abc')
        7.0
        >>> parse_number('abc')
        nan
    """
    match = _NUMBER_PREFIX.match(token)
    if not match:
        return math.nan
    return float(match.group(0))


def parse_grade_token(token: str) -> Optional[Grade]:
    """
    토큰 하나를 성적으로 변환합니다.

    Args:
        token (str): 쉼표로 나뉜 입력 조각

    Returns:
        Optional[Grade]: 척도에 속하는 성적, 아니면 None

    Examples:
        >>> parse_grade_token(' 02 ')
        <Grade.TWO: 2>
        >>> parse_grade_token('99') is None
        True
    """
    trimmed = token.strip()
    if trimmed in TOKEN_ALIASES:
        return TOKEN_ALIASES[trimmed]

    value = parse_number(trimmed)
    if math.isnan(value) or value not in _VALID_VALUES:
        return None
    return Grade(int(value))


def parse_grades(raw_text: str) -> List[Grade]:
    """
    쉼표로 구분된 입력 텍스트를 성적 리스트로 변환합니다.

    척도에 없는 값이나 숫자가 아닌 토큰은 오류 없이 제외됩니다.
    유효한 토큰의 입력 순서와 중복은 그대로 유지됩니다.

    Args:
        raw_text (str): 사용자가 입력한 텍스트 (예: "4, 7, 02, 12")

    Returns:
        List[Grade]: 유효한 성적 리스트 (비어 있을 수 있음)

    Examples:
        >>> parse_grades("00, 02, 2, 0")
        [<Grade.ZERO: 0>, <Grade.TWO: 2>, <Grade.TWO: 2>, <Grade.ZERO: 0>]
        >>> parse_grades("4, abc, 99, 7")
        [<Grade.FOUR: 4>, <Grade.SEVEN: 7>]
    """
    if not raw_text:
        return []

    tokens = raw_text.split(',')
    grades = [g for g in (parse_grade_token(t) for t in tokens) if g is not None]

    dropped = len(tokens) - len(grades)
    if dropped:
        logger.debug("Dropped %d of %d tokens", dropped, len(tokens))

    return grades


def load_grades(raw_text: str, min_count: int = 2) -> List[Grade]:
    """
    입력 텍스트를 검증하고 통계 계산이 가능한 성적 리스트를 반환합니다.

    Args:
        raw_text (str): 사용자가 입력한 텍스트
        min_count (int): 통계 계산에 필요한 최소 성적 수 (기본값: 2)

    Returns:
        List[Grade]: 최소 min_count개의 유효한 성적

    Raises:
        EmptyInputError: 입력이 비어 있거나 공백뿐일 때
        NoValidGradesError: 유효한 성적이 하나도 없을 때
        InsufficientDataError: 유효한 성적이 min_count개 미만일 때
    """
    text = (raw_text or '').strip()
    if not text:
        raise EmptyInputError()

    grades = parse_grades(text)

    if not grades:
        raise NoValidGradesError()

    if len(grades) < min_count:
        raise InsufficientDataError(min_count)

    logger.info("Loaded %d grades", len(grades))
    return grades
