"""
데이터 로더 모듈 테스트
"""

import logging

import pytest
from grade_stats.data_loader import (
    parse_number,
    parse_grade_token,
    parse_grades,
    load_grades,
    GradeInputError,
    EmptyInputError,
    NoValidGradesError,
    InsufficientDataError
)
from grade_stats.scale import Grade


class TestParseGrades:
    """입력 텍스트 파싱 테스트"""

    def test_leading_zero_normalization(self):
        """'00', '0' -> 0, '02' -> 2"""
        assert parse_grades("00, 02, 2, 0") == [Grade.ZERO, Grade.TWO, Grade.TWO, Grade.ZERO]

    def test_invalid_tokens_dropped(self):
        """숫자가 아니거나 척도 밖의 값은 제외"""
        assert parse_grades("4, abc, 99, 7") == [Grade.FOUR, Grade.SEVEN]

    def test_order_and_duplicates_preserved(self):
        assert parse_grades("12,-3,12,4") == [Grade.TWELVE, Grade.MINUS_THREE, Grade.TWELVE, Grade.FOUR]

    def test_whitespace_trimmed(self):
        assert parse_grades("  10 ,\t7\n, -3 ") == [Grade.TEN, Grade.SEVEN, Grade.MINUS_THREE]

    def test_non_integer_values_dropped(self):
        """척도 사이의 값(7.5 등)은 제외"""
        assert parse_grades("7.5, 3, 1, 7.0") == [Grade.SEVEN]

    def test_empty_input(self):
        """빈 입력은 빈 리스트 (오류 없음)"""
        assert parse_grades("") == []
        assert parse_grades("   ") == []
        assert parse_grades(",,,") == []

    def test_no_valid_tokens(self):
        assert parse_grades("a, b, 13") == []

    def test_idempotent_on_rendered_values(self):
        """파싱 결과를 다시 쉼표로 이어 파싱해도 같은 결과"""
        first = parse_grades("12, 00, 02, -3, 7, 7")
        rendered = ",".join(str(int(g)) for g in first)
        assert parse_grades(rendered) == first

    def test_result_items_are_grades(self):
        assert all(isinstance(g, Grade) for g in parse_grades("0, 2, 12"))

    def test_dropped_tokens_logged(self, caplog):
        """제외된 토큰 수는 DEBUG 로그로 기록"""
        with caplog.at_level(logging.DEBUG, logger="grade_stats.data_loader"):
            parse_grades("4, x, 7")
        assert "Dropped 1 of 3 tokens" in caplog.text


class TestParseToken:
    """토큰 단위 변환 테스트"""

    def test_parse_number_prefix(self):
        """앞부분 숫자만 읽음"""
        assert parse_number("10") == 10.0
        assert parse_number("-3") == -3.0
        assert parse_number("7abc") == 7.0
        assert parse_number("1e1") == 10.0

    def test_parse_number_not_a_number(self):
        assert parse_number("abc") != parse_number("abc")  # nan
        assert parse_number("") != parse_number("")

    def test_parse_number_ascii_digits_only(self):
        """ASCII 이외의 숫자(아랍-인도, 전각)는 숫자로 읽지 않음"""
        assert parse_number("٧") != parse_number("٧")  # nan
        assert parse_number("１２") != parse_number("１２")
        assert parse_grade_token("٧") is None
        assert parse_grade_token("１２") is None

    def test_non_ascii_digit_tokens_dropped(self):
        assert parse_grades("4, ٧, １２, 7") == [Grade.FOUR, Grade.SEVEN]

    def test_parse_grade_token_aliases(self):
        assert parse_grade_token("00") == Grade.ZERO
        assert parse_grade_token(" 0 ") == Grade.ZERO
        assert parse_grade_token("02") == Grade.TWO

    def test_parse_grade_token_rejects(self):
        assert parse_grade_token("99") is None
        assert parse_grade_token("x") is None
        assert parse_grade_token("") is None


class TestLoadGrades:
    """입력 검증 (최소 인원) 테스트"""

    def test_valid_input(self):
        assert load_grades("4, 7") == [Grade.FOUR, Grade.SEVEN]

    def test_empty_input(self):
        with pytest.raises(EmptyInputError):
            load_grades("   ")
        with pytest.raises(EmptyInputError):
            load_grades(None)

    def test_no_valid_grades_names_scale(self):
        with pytest.raises(NoValidGradesError) as exc_info:
            load_grades("abc, 99")
        assert "-3, 00, 02, 4, 7, 10, 12" in str(exc_info.value)

    def test_single_grade_rejected(self):
        with pytest.raises(InsufficientDataError):
            load_grades("7, abc")

    def test_custom_min_count(self):
        with pytest.raises(InsufficientDataError) as exc_info:
            load_grades("4, 7", min_count=3)
        assert exc_info.value.min_count == 3

    def test_errors_are_value_errors(self):
        """모든 입력 오류는 GradeInputError(ValueError)"""
        for cls in (EmptyInputError, NoValidGradesError, InsufficientDataError):
            assert issubclass(cls, GradeInputError)
            assert issubclass(cls, ValueError)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
