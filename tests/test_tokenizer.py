import pytest

from adapters.expression_parser.tokenizer import tokenize, tokenize_expression
from contracts import ErrorCode, LexicalError


def test_tokenize_splits_numbers_operators_and_parentheses():
    assert tokenize("12+(3 * 4.25)") == ["12", "+", "(", "3", "*", "4.25", ")"]


def test_tokenize_drops_spaces_and_pads_bare_decimal_points():
    assert tokenize(".5 + 5. - 3") == ["0.5", "+", "5.0", "-", "3"]


def test_tokenize_keeps_sign_chains_as_separate_tokens():
    assert tokenize("--+-5") == ["-", "-", "+", "-", "5"]


def test_tokenize_does_not_check_placement():
    assert tokenize("3 4 )(") == ["3", "4", ")", "("]
    assert tokenize("") == []


def test_tokenize_rejects_invalid_character():
    with pytest.raises(LexicalError) as exc_info:
        tokenize("3 + $4")
    assert exc_info.value.code == ErrorCode.INVALID_CHARACTER
    assert exc_info.value.token == "$"
    assert exc_info.value.position == 4


@pytest.mark.parametrize("text", ["3 + a", "2^3", "3 % 2", "٣ + 1", "3\t+ 1"])
def test_tokenize_rejects_characters_outside_alphabet(text):
    with pytest.raises(LexicalError) as exc_info:
        tokenize(text)
    assert exc_info.value.code == ErrorCode.INVALID_CHARACTER


def test_tokenize_checks_alphabet_before_scanning_numbers():
    with pytest.raises(LexicalError) as exc_info:
        tokenize("3..5 + x")
    assert exc_info.value.code == ErrorCode.INVALID_CHARACTER


@pytest.mark.parametrize("text,position", [("3..5", 2), ("3.14.15", 4), ("2.3.4.5", 3), (".5.", 2)])
def test_tokenize_rejects_duplicate_decimal_point(text, position):
    with pytest.raises(LexicalError) as exc_info:
        tokenize(text)
    assert exc_info.value.code == ErrorCode.DUPLICATE_DECIMAL_POINT
    assert exc_info.value.position == position


def test_tokenize_allows_decimal_points_in_separate_numbers():
    assert tokenize("1.5+2.5 3.5") == ["1.5", "+", "2.5", "3.5"]


@pytest.mark.parametrize("text", [".", "3 + .", "(.)"])
def test_tokenize_rejects_lone_dot(text):
    with pytest.raises(LexicalError) as exc_info:
        tokenize(text)
    assert exc_info.value.code == ErrorCode.INVALID_NUMBER


def test_tokenize_expression_normalizes_first():
    assert tokenize_expression("  3,5\t− 1 ") == ["3.5", "-", "1"]
