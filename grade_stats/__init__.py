"""
덴마크 7단계 성적 통계 모듈 패키지

이 패키지는 성적 통계 프로그램의 핵심 기능을 모듈화하여 제공합니다.

Modules:
    - scale: 7단계 성적 척도 (합격/불합격 구분)
    - data_loader: 입력 텍스트 파싱 및 입력 검증
    - statistics: 통계 계산 (평균, 중앙값, 최빈값, 분산 등)
    - visualizations: Plotly 기반 시각화
    - styles: 표시 형식 및 HTML/CSS 스타일 처리
"""

__version__ = "1.0.0"
