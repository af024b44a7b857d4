"""Unit tests for the calculator state machine and result formatting."""

import math

import pytest

from shopcalc.domain.model.calculator import (
    ERROR,
    HISTORY_SIZE,
    AngleMode,
    Calculator,
    Entry,
    Operator,
    PendingOperation,
    format_result,
)


def _press(*tokens: str, calc: Calculator | None = None) -> Calculator:
    calc = calc or Calculator()
    calc.press_all(tokens)
    return calc


# ── Formatting ───────────────────────────────────────────────────────────────


class TestFormatResult:

    def test_whole_number(self):
        assert format_result(3.0) == "3"
        assert format_result(-42.0) == "-42"

    def test_tiny_value_uses_scientific(self):
        assert format_result(0.00001234) == "1.23e-05"

    def test_eight_fraction_digits(self):
        assert format_result(1 / 3) == "0.33333333"

    def test_trailing_zeros_stripped(self):
        assert format_result(2.5) == "2.5"

    def test_long_result_falls_back_to_scientific(self):
        assert format_result(123456789.123) == "1.23e+08"

    def test_large_whole_number_beyond_integer_range(self):
        assert format_result(1e15) == "1.00e+15"

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
    def test_non_finite_is_error(self, value):
        assert format_result(value) == ERROR


# ── Entry ────────────────────────────────────────────────────────────────────


class TestEntry:

    def test_starts_at_zero(self):
        assert Calculator().display == "0"

    def test_digit_replaces_zero(self):
        assert _press("7").display == "7"

    def test_digits_append(self):
        assert _press("1", "2", "3").display == "123"

    def test_thirteenth_digit_dropped(self):
        calc = _press(*"1234567890123")
        assert calc.display == "123456789012"
        assert len(calc.display) == 12

    def test_decimal_point_once(self):
        assert _press("1", ".", "5", ".", "2").display == "1.52"

    def test_decimal_point_on_zero_starts_with_leading_zero(self):
        """A leading '.' becomes '0.' rather than a bare '.', so the display
        always parses as a number."""
        assert _press(".").display == "0."
        assert _press(".", "5").display == "0.5"
        assert _press("5", "÷", "0", "=", ".").display == "0."

    def test_digit_replaces_error(self):
        assert _press("5", "÷", "0", "=", "8").display == "8"

    def test_unknown_token_ignored(self):
        calc = _press("4", "banana")
        assert calc.display == "4"
        assert calc.state == Entry("4")


# ── Binary operations ────────────────────────────────────────────────────────


class TestBinaryOperations:

    def test_addition_and_history(self):
        calc = _press("2", "+", "3", "=")
        assert calc.display == "5"
        assert calc.history == ["2 + 3 = 5"]

    def test_operator_sets_pending_state(self):
        calc = _press("9", "×")
        assert calc.state == PendingOperation("9", 9.0, Operator.MULTIPLY, fresh=True)
        assert calc.pending_operand == 9.0
        assert calc.pending_operator is Operator.MULTIPLY

    def test_next_digit_after_operator_starts_fresh(self):
        assert _press("9", "-", "4").display == "4"

    def test_subtract_multiply_power(self):
        assert _press("9", "-", "4", "=").display == "5"
        assert _press("6", "×", "7", "=").display == "42"
        assert _press("2", "^", "1", "0", "=").display == "1024"

    def test_ascii_aliases(self):
        assert _press("6", "*", "7", "=").display == "42"
        assert _press("8", "/", "2", "=").display == "4"

    def test_divide_by_zero(self):
        calc = _press("5", "÷", "0", "=")
        assert calc.display == ERROR
        assert calc.history == []
        assert calc.pending_operand is None
        assert calc.pending_operator is None

    def test_overflowing_power_is_error(self):
        calc = _press("9", "9", "^", "9", "9", "9", "=")
        assert calc.display == ERROR
        assert calc.pending_operator is None

    def test_equals_without_operation_is_noop(self):
        assert _press("4", "=").display == "4"

    def test_second_operator_replaces_first(self):
        calc = _press("2", "+", "3", "×", "4", "=")
        assert calc.display == "12"
        assert calc.history == ["3 × 4 = 12"]

    def test_operator_on_unparsable_display_leaves_nothing_pending(self):
        calc = _press("5", "÷", "0", "=", "+")
        assert calc.state == Entry(ERROR, fresh=True)
        assert _press("2", calc=calc).display == "2"
        assert calc.press("=") == "2"

    def test_history_newest_first_and_bounded(self):
        calc = Calculator()
        for i in range(HISTORY_SIZE + 5):
            calc.press_all(["C", str(i % 10), "+", "1", "="])
        history = calc.history
        assert len(history) == HISTORY_SIZE
        assert history[0] == "4 + 1 = 5"


# ── Editing ──────────────────────────────────────────────────────────────────


class TestEditing:

    def test_clear(self):
        calc = _press("7", "+", "C")
        assert calc.state == Entry()

    def test_backspace(self):
        assert _press("1", "2", "3", "⌫").display == "12"

    def test_backspace_to_empty_shows_zero(self):
        assert _press("5", "⌫").display == "0"

    def test_backspace_on_error_shows_zero(self):
        assert _press("1", "÷", "0", "=", "⌫").display == "0"

    def test_sign_toggle(self):
        assert _press("8", "±").display == "-8"
        assert _press("8", "±", "±").display == "8"

    def test_percent(self):
        assert _press("5", "0", "%").display == "0.5"

    def test_sign_toggle_on_error_is_noop(self):
        assert _press("1", "÷", "0", "=", "±").display == ERROR


# ── Scientific ───────────────────────────────────────────────────────────────


class TestScientific:

    def test_sin_degrees(self):
        assert _press("9", "0", "sin").display == "1"

    def test_sin_radians(self):
        calc = Calculator(angle_mode=AngleMode.RAD)
        assert _press("π", "÷", "2", "=", "sin", calc=calc).display == "1"

    def test_angle_mode_tokens(self):
        calc = _press("RAD")
        assert calc.angle_mode is AngleMode.RAD
        calc.press("DEG")
        assert calc.angle_mode is AngleMode.DEG

    def test_cos_zero(self):
        assert _press("0", "cos").display == "1"

    def test_sqrt(self):
        assert _press("1", "6", "√").display == "4"

    def test_sqrt_of_negative_is_error(self):
        assert _press("4", "±", "√").display == ERROR

    def test_ln_of_zero_is_error(self):
        assert _press("0", "ln").display == ERROR

    def test_log10(self):
        assert _press("1", "0", "0", "0", "log").display == "3"

    def test_square_and_reciprocal(self):
        assert _press("1", "2", "x²").display == "144"
        assert _press("4", "1/x").display == "0.25"

    def test_reciprocal_of_zero_is_error(self):
        assert _press("0", "1/x").display == ERROR

    def test_constants(self):
        assert _press("π").display == repr(math.pi)
        assert _press("e").display == repr(math.e)

    def test_function_keeps_pending_operation(self):
        calc = _press("2", "+", "9", "x²", "=")
        assert calc.display == "83"
