"""
시각화 모듈

Plotly 기반의 성적 분포 차트 생성 기능을 제공합니다.
"""

from typing import Dict

import plotly.graph_objects as go

from grade_stats.scale import Grade, VALID_GRADES, STATUS_NAMES, grade_label


# 합격/불합격 색상 정의 (막대, 테두리)
GRADE_STATUS_COLORS = {
    'fail': ('rgba(231, 76, 60, 0.7)', 'rgba(231, 76, 60, 1)'),  # 빨강색
    'pass': ('rgba(52, 152, 219, 0.7)', 'rgba(52, 152, 219, 1)'),  # 파랑색
}


def create_grade_distribution_chart(
    frequency: Dict[Grade, int],
    show_labels: bool = True
) -> go.Figure:
    """
    성적별 인원 막대 그래프를 생성합니다.

    막대는 항상 척도 순서(-3 ~ 12)로 배치되며, 불합격 성적은 빨강, 합격 성적은 파랑으로 표시됩니다.

    Args:
        frequency (Dict[Grade, int]): 성적별 빈도표 (calculate_frequency 결과)
        show_labels (bool): 0명이 아닌 막대 위에 인원 표시 여부

    Returns:
        go.Figure: Plotly Figure 객체
    """
    total = sum(frequency.values())
    labels = [grade_label(g) for g in VALID_GRADES]

    fig = go.Figure()

    # 상태별로 trace를 나누되 겹쳐 그려서 막대 폭을 동일하게 유지
    for status in ('fail', 'pass'):
        grades = [g for g in VALID_GRADES if (status == 'pass') == g.is_passing]
        counts = [frequency.get(g, 0) for g in grades]
        hover_texts = [
            f"Studerende: {count} ({(count / total * 100) if total else 0:.1f}%)"
            for count in counts
        ]
        fill_color, line_color = GRADE_STATUS_COLORS[status]

        fig.add_trace(go.Bar(
            x=[grade_label(g) for g in grades],
            y=counts,
            name=STATUS_NAMES[status],
            text=[str(c) if show_labels and c > 0 else '' for c in counts],
            textposition='outside',
            textfont=dict(size=12, color='#666'),
            hovertext=hover_texts,
            hoverinfo="text",
            marker=dict(
                color=fill_color,
                line=dict(color=line_color, width=2)
            )
        ))

    max_count = max(frequency.values(), default=0)

    fig.update_layout(
        title="<b>Karakterfordeling</b>",
        paper_bgcolor="rgba(0,0,0,0)",
        plot_bgcolor="rgba(0,0,0,0)",
        height=400,
        barmode='overlay',
        showlegend=True,
        xaxis_title="Karakter",
        margin=dict(l=60, r=40, t=80, b=60),
        legend=dict(
            orientation="h",
            yanchor="bottom",
            y=1.02,
            xanchor="center",
            x=0.5,
            itemclick=False,
            itemdoubleclick=False
        ),
        xaxis=dict(
            type='category',
            categoryorder='array',
            categoryarray=labels,
            showgrid=False
        ),
        # 막대 위 숫자가 잘리지 않도록 10% 여유
        yaxis=dict(
            range=[0, max(1, max_count) * 1.1],
            dtick=1 if max_count <= 20 else None,
            showgrid=False
        )
    )

    return fig
