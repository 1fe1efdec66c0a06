"""
성적 척도 모듈

덴마크 7단계 성적 척도(-3, 00, 02, 4, 7, 10, 12)와 합격/불합격 구분을 정의합니다.
"""

from enum import IntEnum
from typing import Tuple


class Grade(IntEnum):
    """7단계 척도의 성적 값 (오름차순)"""

    MINUS_THREE = -3
    ZERO = 0
    TWO = 2
    FOUR = 4
    SEVEN = 7
    TEN = 10
    TWELVE = 12

    @property
    def label(self) -> str:
        return grade_label(self)

    @property
    def is_passing(self) -> bool:
        return self not in FAILING_GRADES


# 척도 순서 (차트, 빈도표 모두 이 순서를 따름)
VALID_GRADES: Tuple[Grade, ...] = tuple(Grade)

# 불합격 성적
FAILING_GRADES = frozenset({Grade.MINUS_THREE, Grade.ZERO})

# 합격/불합격 표시명
STATUS_NAMES = {
    'fail': 'Dumpet',
    'pass': 'Bestået',
}

# 앞자리 0을 붙여 쓰는 성적
_GRADE_LABELS = {
    Grade.ZERO: '00',
    Grade.TWO: '02',
}


def grade_label(grade: int) -> str:
    """
    성적을 표기 관례에 맞는 문자열로 변환합니다.

    Args:
        grade (int): 성적 값

    Returns:
        str: 표시용 문자열 ('00', '02', '7' 등)

    Examples:
        >>> grade_label(Grade.ZERO)
        '00'
        >>> grade_label(12)
        '12'
    """
    return _GRADE_LABELS.get(grade, str(int(grade)))


def scale_description() -> str:
    """척도 전체를 '-3, 00, 02, 4, 7, 10, 12' 형태로 반환합니다."""
    return ', '.join(grade_label(g) for g in VALID_GRADES)
