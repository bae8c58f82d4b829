"""
contracts.py — Single source of truth for every data type in ExprCalc.
All modules import types ONLY from here. Do not change without versioning.
"""
from __future__ import annotations

from enum import Enum
from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

CONTRACTS_VERSION = "1.0.0"


# ─────────────────────────── Errors ──────────────────────────────────────

class ErrorCode(str, Enum):
    # lexical
    INVALID_CHARACTER = "INVALID_CHARACTER"
    INVALID_NUMBER = "INVALID_NUMBER"                    # lone "."
    DUPLICATE_DECIMAL_POINT = "DUPLICATE_DECIMAL_POINT"  # "3.1.4", "3..5"
    # structural
    EMPTY_EXPRESSION = "EMPTY_EXPRESSION"
    INVALID_LEADING_TOKEN = "INVALID_LEADING_TOKEN"
    INVALID_TRAILING_TOKEN = "INVALID_TRAILING_TOKEN"
    UNBALANCED_PARENTHESES = "UNBALANCED_PARENTHESES"
    EMPTY_GROUP = "EMPTY_GROUP"
    ADJACENT_NUMBERS = "ADJACENT_NUMBERS"
    ILLEGAL_SEQUENCE_AFTER_OPEN_PAREN = "ILLEGAL_SEQUENCE_AFTER_OPEN_PAREN"
    ILLEGAL_SEQUENCE_BEFORE_OPEN_PAREN = "ILLEGAL_SEQUENCE_BEFORE_OPEN_PAREN"
    ILLEGAL_SEQUENCE_AFTER_CLOSE_PAREN = "ILLEGAL_SEQUENCE_AFTER_CLOSE_PAREN"
    ILLEGAL_SEQUENCE_BEFORE_CLOSE_PAREN = "ILLEGAL_SEQUENCE_BEFORE_CLOSE_PAREN"
    ILLEGAL_OPERATOR_SEQUENCE = "ILLEGAL_OPERATOR_SEQUENCE"
    # tree building (should be unreachable after validation)
    MALFORMED_OPERAND = "MALFORMED_OPERAND"
    MISSING_OPERATOR = "MISSING_OPERATOR"
    # invariant violations
    INTERNAL_ERROR = "INTERNAL_ERROR"


class ExpressionIssue(BaseModel):
    code: ErrorCode
    message: str
    token: Optional[str] = None
    # token index for structural issues, char index (normalized text) for lexical
    position: Optional[int] = None


class ExpressionError(ValueError):
    """Base class for every rejection of user input."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        token: str | None = None,
        position: int | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.token = token
        self.position = position

    def to_issue(self) -> ExpressionIssue:
        return ExpressionIssue(
            code=self.code,
            message=self.message,
            token=self.token,
            position=self.position,
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.code.value}: {self.message!r})"


class LexicalError(ExpressionError):
    """Invalid character, lone dot or duplicate decimal point."""


class StructuralError(ExpressionError):
    """Token sequence breaks one of the syntax rules."""


class BuildError(ExpressionError):
    """Tree builder could not split a span. Indicates a gap in validation."""


class InternalError(RuntimeError):
    """Invariant violation inside the pipeline — a bug, not bad input."""

    code = ErrorCode.INTERNAL_ERROR


# ─────────────────────────── AST ─────────────────────────────────────────

class NumberNode(BaseModel):
    model_config = ConfigDict(frozen=True)

    node_type: Literal["number"] = "number"
    value: float


class UnaryNode(BaseModel):
    model_config = ConfigDict(frozen=True)

    node_type: Literal["unary"] = "unary"
    op: Literal["+", "-"]
    operand: "ExprAST"


class BinaryNode(BaseModel):
    model_config = ConfigDict(frozen=True)

    node_type: Literal["binary"] = "binary"
    op: Literal["+", "-", "*", "/"]
    left: "ExprAST"
    right: "ExprAST"


ExprAST = Union[NumberNode, UnaryNode, BinaryNode]
UnaryNode.model_rebuild()
BinaryNode.model_rebuild()


# ─────────────────────────── Evaluator ───────────────────────────────────

class EvalResult(BaseModel):
    value: float                                    # inf / nan allowed
    steps: list[str] = Field(default_factory=list)  # readable computation steps
