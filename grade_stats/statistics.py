"""
통계 계산 모듈

성적 분포 분석에 필요한 통계량(평균, 중앙값, 최빈값, 분산, 합격률 등)을 계산하는 기능을 제공합니다.
"""

from dataclasses import dataclass
from typing import Dict, Optional, Sequence, Tuple

import numpy as np
import pandas as pd

from grade_stats.scale import Grade, VALID_GRADES, FAILING_GRADES


@dataclass(frozen=True)
class GradeStatistics:
    """성적 리스트 하나에 대한 통계 요약"""

    count: int
    mean: float
    median: Grade
    mode: Optional[Tuple[Grade, ...]]  # None = 최빈값 없음
    variance: float
    std_dev: float
    pass_rate: float
    passed_count: int
    failed_count: int


def _as_array(grades: Sequence[int]) -> np.ndarray:
    return np.asarray([int(g) for g in grades], dtype=float)


def calculate_mean(grades: Sequence[Grade]) -> float:
    """
    산술 평균을 계산합니다.

    Args:
        grades (Sequence[Grade]): 성적 리스트 (비어 있지 않아야 함)

    Returns:
        float: 평균

    Examples:
        >>> calculate_mean([Grade.FOUR, Grade.SEVEN, Grade.TEN])
        7.0
    """
    return float(_as_array(grades).mean())


def calculate_median(grades: Sequence[Grade]) -> Grade:
    """
    중앙값을 계산합니다.

    짝수 개일 때는 가운데 두 값의 평균이 아니라 아래쪽 값을 반환합니다.
    결과는 항상 척도에 속하는 성적입니다.

    Args:
        grades (Sequence[Grade]): 성적 리스트 (비어 있지 않아야 함)

    Returns:
        Grade: 중앙값

    Examples:
        >>> calculate_median([Grade.TEN, Grade.ZERO, Grade.FOUR, Grade.TWO])
        <Grade.TWO: 2>
    """
    ordered = sorted(grades)
    mid = len(ordered) // 2

    if len(ordered) % 2 == 0:
        return Grade(ordered[mid - 1])
    return Grade(ordered[mid])


def calculate_mode(grades: Sequence[Grade]) -> Optional[Tuple[Grade, ...]]:
    """
    최빈값을 계산합니다.

    Args:
        grades (Sequence[Grade]): 성적 리스트 (비어 있지 않아야 함)

    Returns:
        Optional[Tuple[Grade, ...]]: 최빈값 (오름차순). 최빈값의 개수가 전체 성적 수와
        같으면(모든 값이 한 번씩만 등장) None

    Examples:
        >>> calculate_mode([Grade.FOUR, Grade.FOUR, Grade.SEVEN])
        (<Grade.FOUR: 4>,)
        >>> calculate_mode([Grade.MINUS_THREE, Grade.ZERO, Grade.TWO]) is None
        True
    """
    counts = pd.Series([int(g) for g in grades], dtype=int).value_counts()
    max_freq = counts.max()
    modes = sorted(int(value) for value, freq in counts.items() if freq == max_freq)

    if len(modes) == len(grades):
        return None

    return tuple(Grade(value) for value in modes)


def calculate_variance(grades: Sequence[Grade], mean: Optional[float] = None) -> float:
    """
    모분산(편차 제곱의 평균, n으로 나눔)을 계산합니다.

    Args:
        grades (Sequence[Grade]): 성적 리스트 (비어 있지 않아야 함)
        mean (Optional[float]): 이미 계산한 평균 (없으면 새로 계산)

    Returns:
        float: 모분산 (0 이상)
    """
    values = _as_array(grades)
    if mean is None:
        mean = float(values.mean())
    return float(np.mean((values - mean) ** 2))


def calculate_std_dev(variance: float) -> float:
    """분산의 제곱근(표준편차)을 반환합니다."""
    return float(np.sqrt(variance))


def calculate_pass_rate(grades: Sequence[Grade]) -> Tuple[float, int]:
    """
    합격률과 불합격 인원을 계산합니다.

    Args:
        grades (Sequence[Grade]): 성적 리스트 (비어 있지 않아야 함)

    Returns:
        Tuple[float, int]: (합격률(%), 불합격 인원)

    Examples:
        >>> calculate_pass_rate([Grade.MINUS_THREE, Grade.SEVEN, Grade.TEN, Grade.TWELVE])
        (75.0, 1)
    """
    passed = sum(1 for g in grades if g not in FAILING_GRADES)
    failed = len(grades) - passed
    return passed / len(grades) * 100, failed


def calculate_frequency(grades: Sequence[Grade]) -> Dict[Grade, int]:
    """
    척도의 모든 성적에 대해 빈도를 계산합니다.

    Args:
        grades (Sequence[Grade]): 성적 리스트

    Returns:
        Dict[Grade, int]: {성적: 인원} 딕셔너리 (척도 순서, 0명인 성적 포함)

    Examples:
        >>> freq = calculate_frequency([Grade.FOUR, Grade.FOUR, Grade.TWELVE])
        >>> freq[Grade.FOUR], freq[Grade.MINUS_THREE]
        (2, 0)
    """
    counts = pd.Series([int(g) for g in grades], dtype=int).value_counts()
    return {grade: int(counts.get(int(grade), 0)) for grade in VALID_GRADES}


def summarize(grades: Sequence[Grade]) -> Tuple[GradeStatistics, Dict[Grade, int]]:
    """
    성적 리스트의 통계 요약과 빈도표를 계산합니다.

    최소 인원(2명) 검증은 호출하는 쪽의 책임입니다.

    Args:
        grades (Sequence[Grade]): 성적 리스트

    Returns:
        Tuple[GradeStatistics, Dict[Grade, int]]: (통계 요약, 빈도표)

    Examples:
        >>> stats, freq = summarize([Grade(v) for v in (4, 4, 7, 7, 10, 12)])
        >>> round(stats.mean, 2), stats.median, stats.mode
        (7.33, <Grade.SEVEN: 7>, (<Grade.FOUR: 4>, <Grade.SEVEN: 7>))
    """
    mean = calculate_mean(grades)
    variance = calculate_variance(grades, mean)
    pass_rate, failed = calculate_pass_rate(grades)

    stats = GradeStatistics(
        count=len(grades),
        mean=mean,
        median=calculate_median(grades),
        mode=calculate_mode(grades),
        variance=variance,
        std_dev=calculate_std_dev(variance),
        pass_rate=pass_rate,
        passed_count=len(grades) - failed,
        failed_count=failed,
    )
    return stats, calculate_frequency(grades)
