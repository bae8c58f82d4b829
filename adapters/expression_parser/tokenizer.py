"""
Tokenizer — normalized expression text → list of string tokens.

Numerals accumulate digit by digit; operators and parentheses become
one-character tokens; spaces only end the pending numeral. Placement,
adjacency and balance are not checked here.

  ".5"  → "0.5"
  "5."  → "5.0"
  "."   → LexicalError(INVALID_NUMBER)
  "3..5", "3.1.4" → LexicalError(DUPLICATE_DECIMAL_POINT)
"""
from __future__ import annotations

from adapters.text_normalizer import normalize_expression
from contracts import ErrorCode, LexicalError

_DIGITS = frozenset("0123456789")
_DECIMAL_POINT = "."
_SYMBOLS = frozenset("+-*/()")
_ALLOWED = _DIGITS | _SYMBOLS | {_DECIMAL_POINT, " "}


def tokenize(text: str) -> list[str]:
    """Splits an already normalized expression into tokens."""
    _check_alphabet(text)

    tokens: list[str] = []
    numeral: list[str] = []
    start = 0
    for pos, ch in enumerate(text):
        if ch in _DIGITS:
            if not numeral:
                start = pos
            numeral.append(ch)
        elif ch == _DECIMAL_POINT:
            if _DECIMAL_POINT in numeral:
                raise LexicalError(
                    ErrorCode.DUPLICATE_DECIMAL_POINT,
                    f"Second decimal point in number {''.join(numeral) + ch!r}.",
                    token=ch,
                    position=pos,
                )
            if not numeral:
                start = pos
            numeral.append(ch)
        else:
            _flush(numeral, start, tokens)
            if ch in _SYMBOLS:
                tokens.append(ch)
    _flush(numeral, start, tokens)
    return tokens


def tokenize_expression(raw: str) -> list[str]:
    """normalize_expression() followed by tokenize()."""
    return tokenize(normalize_expression(raw))


def _check_alphabet(text: str) -> None:
    for pos, ch in enumerate(text):
        if ch not in _ALLOWED:
            raise LexicalError(
                ErrorCode.INVALID_CHARACTER,
                f"Invalid character {ch!r} at position {pos}.",
                token=ch,
                position=pos,
            )


def _flush(numeral: list[str], start: int, tokens: list[str]) -> None:
    if not numeral:
        return
    value = "".join(numeral)
    numeral.clear()
    if value == _DECIMAL_POINT:
        raise LexicalError(
            ErrorCode.INVALID_NUMBER,
            "Lone decimal point is not a number.",
            token=value,
            position=start,
        )
    if value.startswith(_DECIMAL_POINT):
        value = "0" + value
    elif value.endswith(_DECIMAL_POINT):
        value += "0"
    tokens.append(value)
