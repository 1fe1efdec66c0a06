"""
성적 척도 모듈 테스트
"""

import pytest
from grade_stats.scale import (
    Grade,
    VALID_GRADES,
    FAILING_GRADES,
    STATUS_NAMES,
    grade_label,
    scale_description
)


class TestScale:
    """7단계 척도 테스트"""

    def test_valid_grades_ascending(self):
        assert [int(g) for g in VALID_GRADES] == [-3, 0, 2, 4, 7, 10, 12]

    def test_failing_grades(self):
        assert FAILING_GRADES == {Grade.MINUS_THREE, Grade.ZERO}
        assert not Grade.ZERO.is_passing
        assert Grade.TWO.is_passing

    def test_status_names(self):
        assert STATUS_NAMES == {'fail': 'Dumpet', 'pass': 'Bestået'}

    def test_grade_label(self):
        assert grade_label(Grade.ZERO) == '00'
        assert grade_label(Grade.TWO) == '02'
        assert grade_label(Grade.MINUS_THREE) == '-3'
        assert Grade.TWELVE.label == '12'

    def test_scale_description(self):
        assert scale_description() == '-3, 00, 02, 4, 7, 10, 12'


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
