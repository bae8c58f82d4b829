"""
Token shape predicates.

Tokens are plain strings; their kind is read from their shape, never stored.
"""
from __future__ import annotations

import re

_NUMBER_RE = re.compile(r"[0-9]+(?:\.[0-9]+)?")
_UNARY_CHAIN_RE = re.compile(r"[+\-]+")

OPERATORS = frozenset("+-*/")
UNARY_OPERATORS = frozenset("+-")
MULTIPLICATIVE_OPERATORS = frozenset("*/")
PARENTHESES = frozenset("()")

OPEN_PAREN = "("
CLOSE_PAREN = ")"


def is_number(token: str) -> bool:
    return _NUMBER_RE.fullmatch(token) is not None


def is_operator(token: str) -> bool:
    return token in OPERATORS


def is_unary_operator(token: str) -> bool:
    return token in UNARY_OPERATORS


def is_multiplicative_operator(token: str) -> bool:
    return token in MULTIPLICATIVE_OPERATORS


def is_parenthesis(token: str) -> bool:
    return token in PARENTHESES


def is_unary_chain(chain: str) -> bool:
    return _UNARY_CHAIN_RE.fullmatch(chain) is not None


def is_operand_end(token: str) -> bool:
    """True if the token can terminate an operand: a numeral or ")"."""
    return token == CLOSE_PAREN or is_number(token)
