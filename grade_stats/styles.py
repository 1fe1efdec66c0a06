"""
스타일링 모듈

통계 결과의 표시 형식, HTML/CSS 스타일 및 테이블 렌더링 기능을 제공합니다.
"""

import html
from typing import Dict, List, Optional

import pandas as pd

from grade_stats.scale import Grade, VALID_GRADES, STATUS_NAMES, grade_label
from grade_stats.statistics import GradeStatistics


NO_MODE_TEXT = "Ingen"


def get_custom_css() -> str:
    """
    Streamlit 앱에 적용할 커스텀 CSS를 반환합니다.

    Returns:
        str: CSS 스타일 문자열
    """
    return """
    <style>
    /* 전체 배경 */
    .stApp {
        background-color: #FFFFFF;
        color: #2C3E50;
    }

    /* 타이틀 스타일 */
    h1 {
        color: #2C3E50;
        font-weight: 800;
        font-size: 2.2rem !important;
        margin-bottom: 0.5rem;
    }

    /* 메트릭 스타일 */
    [data-testid="stMetricValue"] {
        font-size: 1.8rem;
        font-weight: 700;
        color: #3498DB;
    }
    [data-testid="stMetricLabel"] {
        font-size: 1rem;
        color: #7F8C8D;
        font-weight: 600;
    }
    div[data-testid="metric-container"] {
        background-color: #F8F9FA;
        padding: 15px;
        border-radius: 12px;
        box-shadow: 0 2px 4px rgba(0,0,0,0.05);
        border: 1px solid #E2E8F0;
    }
    </style>
    """


def get_table_style() -> str:
    """
    HTML 테이블 스타일 CSS를 반환합니다.

    Returns:
        str: 테이블 CSS 스타일 문자열
    """
    return """
    <style>
    .styled-table {
        width: 100%;
        border-collapse: collapse;
        font-size: 0.9rem;
    }
    .styled-table th {
        background-color: #f0f2f6;
        font-weight: 700;
        text-align: center;
        padding: 10px 8px;
        border: 1px solid #e0e0e0;
    }
    .styled-table td {
        text-align: center;
        padding: 8px 6px;
        border: 1px solid #e0e0e0;
    }
    .styled-table tr:nth-child(even) {
        background-color: #fafafa;
    }
    .styled-table td.left-align {
        text-align: left !important;
    }
    .styled-table td.status-fail {
        color: #E74C3C;
        font-weight: 600;
    }
    </style>
    """


def make_html_table(df: pd.DataFrame, left_align_cols: Optional[List[str]] = None) -> str:
    """
    DataFrame을 HTML 테이블로 변환합니다.

    Args:
        df (pd.DataFrame): 변환할 DataFrame
        left_align_cols (Optional[List[str]]): 왼쪽 정렬할 컬럼 리스트

    Returns:
        str: HTML 테이블 문자열

    Examples:
        >>> df = pd.DataFrame({'Karakter': ['12'], 'Antal': [3]})
        >>> html = make_html_table(df, left_align_cols=['Karakter'])
    """
    left_align_cols = left_align_cols or []
    out = '<table class="styled-table">'

    # Header
    out += '<thead><tr>'
    for col in df.columns:
        out += f'<th>{html.escape(str(col))}</th>'
    out += '</tr></thead>'

    # Body
    out += '<tbody>'
    for _, row in df.iterrows():
        out += '<tr>'
        for col in df.columns:
            val = html.escape(str(row[col]))
            if col in left_align_cols:
                out += f'<td class="left-align">{val}</td>'
            elif val == STATUS_NAMES['fail']:
                out += f'<td class="status-fail">{val}</td>'
            else:
                out += f'<td>{val}</td>'
        out += '</tr>'
    out += '</tbody></table>'

    return out


def format_mode(mode) -> str:
    """
    최빈값을 표시용 문자열로 변환합니다.

    Examples:
        >>> format_mode((Grade.FOUR, Grade.SEVEN))
        '4, 7'
        >>> format_mode(None)
        'Ingen'
    """
    if mode is None:
        return NO_MODE_TEXT
    return ', '.join(grade_label(g) for g in sorted(mode))


def format_statistics(
    stats: GradeStatistics,
    mean_decimals: int = 2,
    spread_decimals: int = 2,
    rate_decimals: int = 1
) -> Dict[str, str]:
    """
    통계 요약을 화면 표시용 문자열로 변환합니다.

    Args:
        stats (GradeStatistics): 통계 요약
        mean_decimals (int): 평균 소수 자릿수 (기본값: 2)
        spread_decimals (int): 분산/표준편차 소수 자릿수 (기본값: 2)
        rate_decimals (int): 합격률 소수 자릿수 (기본값: 1)

    Returns:
        Dict[str, str]: {항목명: 표시 문자열} 딕셔너리 (화면 표시 순서)

    Examples:
        >>> format_statistics(stats)['Beståelsesprocent']
        '100.0%'
    """
    return {
        'Antal karakterer': str(stats.count),
        'Gennemsnit': f"{stats.mean:.{mean_decimals}f}",
        'Median': grade_label(stats.median),
        'Typetal': format_mode(stats.mode),
        'Beståelsesprocent': f"{stats.pass_rate:.{rate_decimals}f}%",
        'Dumpet': f"{stats.failed_count} dumpet",
        'Varians': f"{stats.variance:.{spread_decimals}f}",
        'Standardafvigelse': f"{stats.std_dev:.{spread_decimals}f}",
    }


def make_frequency_table(frequency: Dict[Grade, int], rate_decimals: int = 1) -> pd.DataFrame:
    """
    빈도표를 성적별 인원/비율/합격 여부 DataFrame으로 변환합니다.

    Args:
        frequency (Dict[Grade, int]): 성적별 빈도표
        rate_decimals (int): 비율 소수 자릿수

    Returns:
        pd.DataFrame: 척도 순서의 표 (Karakter, Antal, Andel(%), Status)
    """
    total = sum(frequency.values())
    rows = []
    for grade in VALID_GRADES:
        count = frequency.get(grade, 0)
        rows.append({
            'Karakter': grade_label(grade),
            'Antal': count,
            'Andel(%)': round(count / total * 100, rate_decimals) if total else 0.0,
            'Status': STATUS_NAMES['pass'] if grade.is_passing else STATUS_NAMES['fail'],
        })
    return pd.DataFrame(rows)
