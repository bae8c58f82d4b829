"""
Adapter: OrderedTokenValidator
Implements the TokenValidator port — syntax rules over a unary-reduced
token sequence.

Checks run in a fixed order, so the same malformed input always reports
the same violation:
  1. EMPTY_EXPRESSION                      — no tokens at all
  2. INVALID_LEADING_TOKEN                 — starts with ")", "*" or "/"
  3. INVALID_TRAILING_TOKEN                — ends with "(", "+", "-", "*" or "/"
  4. UNBALANCED_PARENTHESES                — counts differ or ")" closes nothing
  5. EMPTY_GROUP                           — "()"
  6. ADJACENT_NUMBERS                      — "3 4"
  7. pairwise adjacency, pair by pair:
       ILLEGAL_SEQUENCE_AFTER_OPEN_PAREN   — "(*", "()"
       ILLEGAL_SEQUENCE_BEFORE_OPEN_PAREN  — "3(", ")(" (no implicit multiplication)
       ILLEGAL_SEQUENCE_AFTER_CLOSE_PAREN  — ")3"
       ILLEGAL_SEQUENCE_BEFORE_CLOSE_PAREN — "+)"
  8. ILLEGAL_OPERATOR_SEQUENCE             — "*" or "/" right after any operator

Every check is a separate function returning the first violation it finds
(or None); they never try to recover.
"""
from __future__ import annotations

import logging
from typing import Callable, Optional

from adapters.expression_parser.tokens import (
    CLOSE_PAREN,
    OPEN_PAREN,
    is_multiplicative_operator,
    is_number,
    is_operator,
    is_unary_operator,
)
from contracts import ErrorCode, ExpressionIssue, StructuralError

logger = logging.getLogger("expr_calc.validator")

_INVALID_FIRST = frozenset({CLOSE_PAREN, "*", "/"})
_INVALID_LAST = frozenset({OPEN_PAREN, "+", "-", "*", "/"})

Check = Callable[[list[str]], Optional[ExpressionIssue]]


def _issue(code: ErrorCode, message: str, token: str | None, position: int | None) -> ExpressionIssue:
    return ExpressionIssue(code=code, message=message, token=token, position=position)


# ─────────────────────────── Checks ──────────────────────────────────────

def check_not_empty(tokens: list[str]) -> ExpressionIssue | None:
    if not tokens:
        return _issue(ErrorCode.EMPTY_EXPRESSION, "Expression is empty or blank.", None, None)
    return None


def check_leading_token(tokens: list[str]) -> ExpressionIssue | None:
    first = tokens[0]
    if first in _INVALID_FIRST:
        return _issue(
            ErrorCode.INVALID_LEADING_TOKEN,
            f"Expression cannot start with {first!r}.",
            first, 0,
        )
    return None


def check_trailing_token(tokens: list[str]) -> ExpressionIssue | None:
    last = tokens[-1]
    if last in _INVALID_LAST:
        return _issue(
            ErrorCode.INVALID_TRAILING_TOKEN,
            f"Expression cannot end with {last!r}.",
            last, len(tokens) - 1,
        )
    return None


def check_parentheses_balance(tokens: list[str]) -> ExpressionIssue | None:
    depth = 0
    for i, token in enumerate(tokens):
        if token == OPEN_PAREN:
            depth += 1
        elif token == CLOSE_PAREN:
            depth -= 1
            if depth < 0:
                return _issue(
                    ErrorCode.UNBALANCED_PARENTHESES,
                    f"Closing parenthesis at token {i} has no matching '('.",
                    token, i,
                )
    if depth != 0:
        return _issue(
            ErrorCode.UNBALANCED_PARENTHESES,
            "Mismatched number of opening and closing parentheses.",
            None, None,
        )
    return None


def check_empty_group(tokens: list[str]) -> ExpressionIssue | None:
    for i in range(len(tokens) - 1):
        if tokens[i] == OPEN_PAREN and tokens[i + 1] == CLOSE_PAREN:
            return _issue(
                ErrorCode.EMPTY_GROUP,
                "Empty parentheses '()' are not allowed.",
                "()", i,
            )
    return None


def check_adjacent_numbers(tokens: list[str]) -> ExpressionIssue | None:
    for i in range(1, len(tokens)):
        if is_number(tokens[i - 1]) and is_number(tokens[i]):
            return _issue(
                ErrorCode.ADJACENT_NUMBERS,
                f"Two consecutive numbers: {tokens[i - 1]!r} followed by {tokens[i]!r}.",
                tokens[i], i,
            )
    return None


def _can_follow_open_paren(token: str) -> bool:
    return is_number(token) or is_unary_operator(token) or token == OPEN_PAREN


def check_token_adjacency(tokens: list[str]) -> ExpressionIssue | None:
    for i in range(1, len(tokens)):
        prev, nxt = tokens[i - 1], tokens[i]
        if prev == OPEN_PAREN and not _can_follow_open_paren(nxt):
            return _issue(
                ErrorCode.ILLEGAL_SEQUENCE_AFTER_OPEN_PAREN,
                f"Invalid token sequence: '(' followed by {nxt!r}.",
                nxt, i,
            )
        if (prev == CLOSE_PAREN or is_number(prev)) and nxt == OPEN_PAREN:
            return _issue(
                ErrorCode.ILLEGAL_SEQUENCE_BEFORE_OPEN_PAREN,
                f"Invalid token sequence: {prev!r} followed by '('.",
                nxt, i,
            )
        if prev == CLOSE_PAREN and is_number(nxt):
            return _issue(
                ErrorCode.ILLEGAL_SEQUENCE_AFTER_CLOSE_PAREN,
                f"Invalid token sequence: ')' followed by {nxt!r}.",
                nxt, i,
            )
        if is_operator(prev) and nxt == CLOSE_PAREN:
            return _issue(
                ErrorCode.ILLEGAL_SEQUENCE_BEFORE_CLOSE_PAREN,
                f"Invalid token sequence: {prev!r} followed by ')'.",
                nxt, i,
            )
    return None


def check_operator_sequence(tokens: list[str]) -> ExpressionIssue | None:
    # "-" after "*" is a collapsed unary sign; "*" or "/" never is.
    for i in range(1, len(tokens)):
        if is_multiplicative_operator(tokens[i]) and is_operator(tokens[i - 1]):
            return _issue(
                ErrorCode.ILLEGAL_OPERATOR_SEQUENCE,
                f"Illegal operator combination: {tokens[i - 1]!r} followed by {tokens[i]!r}.",
                tokens[i], i,
            )
    return None


# Order matters: it decides which violation is reported first.
CHECKS: tuple[Check, ...] = (
    check_leading_token,
    check_trailing_token,
    check_parentheses_balance,
    check_empty_group,
    check_adjacent_numbers,
    check_token_adjacency,
    check_operator_sequence,
)


class OrderedTokenValidator:
    """Fixed-order syntax checks; the first violation is terminal."""

    # -- TokenValidator protocol --------------------------------------

    def validate(self, tokens: list[str]) -> list[str]:
        issue = next(self._run(tokens, stop_at_first=True), None)
        if issue is not None:
            logger.debug("Rejected %r: %s", tokens, issue.code.value)
            raise StructuralError(issue.code, issue.message, issue.token, issue.position)
        return tokens

    def find_issues(self, tokens: list[str]) -> list[ExpressionIssue]:
        return list(self._run(tokens, stop_at_first=False))

    # -- Private ------------------------------------------------------

    @staticmethod
    def _run(tokens: list[str], stop_at_first: bool):
        empty = check_not_empty(tokens)
        if empty is not None:
            yield empty
            return
        for check in CHECKS:
            issue = check(tokens)
            if issue is not None:
                yield issue
                if stop_at_first:
                    return
