"""
expression_evaluator.py — library entry point of ExprCalc.

    >>> evaluate("3 + 4 * 5")
    23.0
    >>> evaluate("-(3 + --5) * 2")
    -16.0
    >>> evaluate("3 / 0")
    inf

Rejected input raises an ExpressionError subclass (LexicalError,
StructuralError, BuildError) carrying an ErrorCode and a message naming the
offending token or rule. Division by zero is never an error.
"""
from __future__ import annotations

import logging
import math

from adapters.evaluator.ast_evaluator import ASTEvaluator
from adapters.expression_parser.span_split_parser import SpanSplitParser
from contracts import EvalResult, ExpressionError, ExprAST

logger = logging.getLogger("expr_calc")

# Stateless — safe to share between calls and threads.
_PARSER = SpanSplitParser()
_EVALUATOR = ASTEvaluator()


def parse_expression(expression: str) -> ExprAST:
    try:
        return _PARSER.parse(expression)
    except ExpressionError as exc:
        logger.debug("Rejected %r: %s %s", expression, exc.code.value, exc.message)
        raise


def evaluate(expression: str) -> float:
    """Evaluates an arithmetic expression to a float (may be inf or nan)."""
    return _EVALUATOR.evaluate(parse_expression(expression))


def evaluate_detailed(expression: str) -> EvalResult:
    """Like evaluate(), but also returns the computation steps."""
    return _EVALUATOR.eval_expr(parse_expression(expression))


def format_value(value: float) -> str:
    """Display form used by the CLI and API: Infinity, -Infinity, NaN or repr."""
    if math.isnan(value):
        return "NaN"
    if value == math.inf:
        return "Infinity"
    if value == -math.inf:
        return "-Infinity"
    return repr(value)
