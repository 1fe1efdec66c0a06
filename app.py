import logging

import streamlit as st

from grade_stats.data_loader import GradeInputError, EmptyInputError, load_grades
from grade_stats.scale import scale_description
from grade_stats.statistics import summarize
from grade_stats.styles import (
    format_statistics,
    get_custom_css,
    get_table_style,
    make_frequency_table,
    make_html_table,
)
from grade_stats.visualizations import create_grade_distribution_chart

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)

# ═══════════════════════════════════════════════════════════════════
# Session State 초기화
# ═══════════════════════════════════════════════════════════════════

if 'app_config' not in st.session_state:
    st.session_state.app_config = {
        # ============= 입력 설정 =============
        'input': {
            'min_grades': 2
        },

        # ============= 표시 형식 =============
        'display': {
            'mean_decimals': 2,
            'spread_decimals': 2,
            'rate_decimals': 1
        },

        # ============= 차트 =============
        'chart': {
            'show_labels': True
        }
    }

if 'grades_input' not in st.session_state:
    st.session_state.grades_input = ""
if 'analysis' not in st.session_state:
    st.session_state.analysis = None


# ═══════════════════════════════════════════════════════════════════
# 헬퍼 함수들
# ═══════════════════════════════════════════════════════════════════

def get_config(path: str, default=None):
    """
    세션 설정에서 값을 안전하게 가져옵니다.

    사용 예시:
        get_config('input.min_grades')         → 2
        get_config('display.rate_decimals')    → 1
    """
    keys = path.split('.')
    value = st.session_state.app_config

    for key in keys:
        if isinstance(value, dict) and key in value:
            value = value[key]
        else:
            return default

    return value


def set_config(path: str, value):
    """
    세션 설정을 안전하게 변경합니다.

    사용 예시:
        set_config('chart.show_labels', False)
    """
    keys = path.split('.')
    config = st.session_state.app_config

    for key in keys[:-1]:
        if key not in config:
            config[key] = {}
        config = config[key]

    config[keys[-1]] = value


def analyze_grades():
    """입력 텍스트를 분석하여 결과를 세션에 저장합니다."""
    # 이전 결과(차트 포함)는 항상 먼저 폐기
    st.session_state.analysis = None

    try:
        grades = load_grades(
            st.session_state.grades_input,
            min_count=get_config('input.min_grades', 2)
        )
    except EmptyInputError as e:
        st.warning(str(e))
        return
    except GradeInputError as e:
        logger.info("Rejected input: %s", e)
        st.error(str(e))
        return

    stats, frequency = summarize(grades)
    st.session_state.analysis = {
        'stats': stats,
        'frequency': frequency,
    }


def clear_all():
    st.session_state.grades_input = ""
    st.session_state.analysis = None


# ═══════════════════════════════════════════════════════════════════
# 페이지 구성
# ═══════════════════════════════════════════════════════════════════

st.set_page_config(
    page_title="Karakterstatistik",
    page_icon="📊",
    layout="centered",
)

st.markdown(get_custom_css(), unsafe_allow_html=True)
st.markdown(get_table_style(), unsafe_allow_html=True)

st.title("📊 Karakterstatistik")
st.caption(f"Danske karakterer: {scale_description()}")

with st.sidebar:
    st.header("⚙️ Indstillinger")
    set_config('display.mean_decimals', st.number_input(
        "Decimaler (gennemsnit)", min_value=0, max_value=4,
        value=get_config('display.mean_decimals', 2)
    ))
    set_config('display.spread_decimals', st.number_input(
        "Decimaler (varians/standardafvigelse)", min_value=0, max_value=4,
        value=get_config('display.spread_decimals', 2)
    ))
    set_config('display.rate_decimals', st.number_input(
        "Decimaler (procent)", min_value=0, max_value=3,
        value=get_config('display.rate_decimals', 1)
    ))
    set_config('chart.show_labels', st.checkbox(
        "Vis antal over søjler",
        value=get_config('chart.show_labels', True)
    ))

# Ctrl+Enter 으로 form 제출
with st.form("grades_form"):
    st.text_area(
        "Indtast karakterer (adskilt med komma)",
        key="grades_input",
        placeholder="fx 12, 10, 7, 7, 4, 02, 00, -3",
        height=120,
    )
    col1, col2 = st.columns(2)
    with col1:
        st.form_submit_button("Analysér", on_click=analyze_grades, type="primary", use_container_width=True)
    with col2:
        st.form_submit_button("Ryd", on_click=clear_all, use_container_width=True)

analysis = st.session_state.analysis

if analysis is not None:
    display = format_statistics(
        analysis['stats'],
        mean_decimals=get_config('display.mean_decimals', 2),
        spread_decimals=get_config('display.spread_decimals', 2),
        rate_decimals=get_config('display.rate_decimals', 1)
    )

    st.subheader("Resultater")
    items = list(display.items())
    for row_start in range(0, len(items), 4):
        cols = st.columns(4)
        for col, (label, value) in zip(cols, items[row_start:row_start + 4]):
            with col:
                st.metric(label, value)

    fig = create_grade_distribution_chart(
        analysis['frequency'],
        show_labels=get_config('chart.show_labels', True)
    )
    st.plotly_chart(fig, use_container_width=True)

    with st.expander("Fordelingstabel"):
        freq_df = make_frequency_table(
            analysis['frequency'],
            rate_decimals=get_config('display.rate_decimals', 1)
        )
        st.markdown(make_html_table(freq_df), unsafe_allow_html=True)
