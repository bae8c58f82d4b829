from __future__ import annotations

import math

import pytest

from contracts import (
    BuildError,
    ErrorCode,
    ExpressionError,
    LexicalError,
    StructuralError,
)
from expression_evaluator import evaluate, evaluate_detailed, format_value, parse_expression


@pytest.mark.parametrize("expression,expected", [
    ("3 + 4 * 5", 23.0),
    ("-(3 + --5) * 2", -16.0),
    ("3*(2+(5*4))", 66.0),
    ("  42  ", 42.0),
    ("2 + 3", 5.0),
    ("10 - 6 / 3", 8.0),
    ("2 + 3 * 5 + 2", 19.0),
    ("20 / 4 / 1", 5.0),
    ("3/2/2", 0.75),
    ("3-2-1", 0.0),
    ("3-(2-(1))", 2.0),
    ("(3+2)/(1+1)", 2.5),
    ("(3*(2+5))/((4-2)*(1+1))", 5.25),
    ("3*(2+5)*4", 84.0),
    ("((((((3))))))", 3.0),
    ("(1+(2*(3+(4*(5)))))", 47.0),
    ("(((((3+2))))*(((4))))", 20.0),
    ("1 + 2 * 3 + 4 / 2 + 3 - 1 * 2", 10.0),
    ("2 * 2 * 2 * 2 * 2 * 2 * 2 * 2 * 2 * 2", 1024.0),
])
def test_evaluate_respects_precedence_and_parentheses(expression, expected):
    assert evaluate(expression) == pytest.approx(expected)


@pytest.mark.parametrize("expression,expected", [
    ("--5", 5.0),
    ("+-+-5", 5.0),
    ("+-5", -5.0),
    ("3---5", -2.0),
    ("-+-+--+-5", -5.0),
    ("-----5", -5.0),
    ("+++++5", 5.0),
    ("3++++5", 8.0),
    ("3+-+--+5", -2.0),
    ("3-+-+-5", -2.0),
    ("-(---5)", 5.0),
    ("-(-(-(-5)))", 5.0),
    ("+-(3+2)", -5.0),
    ("--(3+2)", 5.0),
    ("-(--(3+2))", -5.0),
    ("3*-5", -15.0),
    ("3/-5", -0.6),
    ("3*-(2+1)", -9.0),
    ("3--(2*5)", 13.0),
    ("3++(+5)", 8.0),
    ("1 + 2 + -3 + 4 + --6", 10.0),
])
def test_evaluate_collapses_unary_chains(expression, expected):
    assert evaluate(expression) == pytest.approx(expected)


def test_evaluate_normalizes_separators_and_dashes():
    assert evaluate("3,5 − 1") == 2.5
    assert evaluate("1 +\t.5") == 1.5
    assert evaluate("7 – 2 — 1") == 4.0


def test_evaluate_long_flat_chain():
    assert evaluate("1" + " + 1" * 20) == 21.0


def test_evaluate_division_by_zero_returns_ieee_values():
    assert evaluate("3/0") == math.inf
    assert evaluate("-3/0") == -math.inf
    assert math.isnan(evaluate("0/0"))
    assert evaluate("1 + 1/(1/0)") == 1.0


@pytest.mark.parametrize("expression,error,code", [
    ("3+", StructuralError, ErrorCode.INVALID_TRAILING_TOKEN),
    ("1 +", StructuralError, ErrorCode.INVALID_TRAILING_TOKEN),
    ("+", StructuralError, ErrorCode.INVALID_TRAILING_TOKEN),
    ("3 4", StructuralError, ErrorCode.ADJACENT_NUMBERS),
    ("1 + 3 4", StructuralError, ErrorCode.ADJACENT_NUMBERS),
    ("3*/4", StructuralError, ErrorCode.ILLEGAL_OPERATOR_SEQUENCE),
    ("3**4", StructuralError, ErrorCode.ILLEGAL_OPERATOR_SEQUENCE),
    ("3 + * 4", StructuralError, ErrorCode.ILLEGAL_OPERATOR_SEQUENCE),
    (")(3+2)", StructuralError, ErrorCode.INVALID_LEADING_TOKEN),
    ("(3+2", StructuralError, ErrorCode.UNBALANCED_PARENTHESES),
    ("(3", StructuralError, ErrorCode.UNBALANCED_PARENTHESES),
    ("3 + 2)", StructuralError, ErrorCode.UNBALANCED_PARENTHESES),
    ("3+)4", StructuralError, ErrorCode.UNBALANCED_PARENTHESES),
    ("()", StructuralError, ErrorCode.EMPTY_GROUP),
    ("2(3)", StructuralError, ErrorCode.ILLEGAL_SEQUENCE_BEFORE_OPEN_PAREN),
    ("(2)3", StructuralError, ErrorCode.ILLEGAL_SEQUENCE_AFTER_CLOSE_PAREN),
    ("", StructuralError, ErrorCode.EMPTY_EXPRESSION),
    ("   \t ", StructuralError, ErrorCode.EMPTY_EXPRESSION),
    ("3..5", LexicalError, ErrorCode.DUPLICATE_DECIMAL_POINT),
    ("3.1.2", LexicalError, ErrorCode.DUPLICATE_DECIMAL_POINT),
    ("3 +$ 5", LexicalError, ErrorCode.INVALID_CHARACTER),
    ("3 + .", LexicalError, ErrorCode.INVALID_NUMBER),
])
def test_evaluate_rejects_malformed_expression(expression, error, code):
    with pytest.raises(error) as exc_info:
        evaluate(expression)
    assert exc_info.value.code == code


def test_rejections_are_value_errors():
    with pytest.raises(ValueError):
        evaluate("3 +")
    assert issubclass(BuildError, ExpressionError)


def test_evaluate_detailed_returns_steps():
    result = evaluate_detailed("-(3 + --5) * 2")
    assert result.value == -16.0
    assert result.steps == ["3 + 5 = 8", "-(8) = -8", "-8 * 2 = -16"]


def test_parse_expression_returns_fresh_tree_each_call():
    first = parse_expression("1 + 2")
    second = parse_expression("1 + 2")
    assert first == second
    assert first is not second


@pytest.mark.parametrize("value,display", [
    (23.0, "23.0"),
    (-0.75, "-0.75"),
    (math.inf, "Infinity"),
    (-math.inf, "-Infinity"),
    (math.nan, "NaN"),
])
def test_format_value(value, display):
    assert format_value(value) == display
