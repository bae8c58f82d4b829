"""
Adapter: ASTEvaluator
Implements the Evaluator port — recursive walk of ExprAST in IEEE-754 doubles.

Division never raises: x/0 gives an infinity signed by x and by the zero,
0/0 gives nan. Those values then propagate through the rest of the tree.

evaluate()  — bare float
eval_expr() — float plus readable computation steps
"""
from __future__ import annotations

import logging
import math
from types import MappingProxyType

from contracts import (
    BinaryNode,
    EvalResult,
    ExprAST,
    InternalError,
    NumberNode,
    UnaryNode,
)

logger = logging.getLogger("expr_calc.evaluator")


def _ieee_div(a: float, b: float) -> float:
    if b == 0.0:
        if a == 0.0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


# Symbol → operation
_BINARY_OPS = MappingProxyType({
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
    "/": _ieee_div,
})

_UNARY_OPS = MappingProxyType({
    "+": lambda a: a,
    "-": lambda a: -a,
})


class ASTEvaluator:
    """Double-precision evaluator of arithmetic ASTs."""

    # -- Evaluator protocol ------------------------------------------------

    def evaluate(self, ast: ExprAST) -> float:
        value, _ = self._eval(ast, record=False)
        return value

    def eval_expr(self, ast: ExprAST) -> EvalResult:
        """
        Recursively computes the value of the AST.
        Returns EvalResult with the value and one step per operator.
        """
        value, steps = self._eval(ast, record=True)
        logger.debug("Evaluated AST in %d steps: %s", len(steps), value)
        return EvalResult(value=value, steps=steps)

    # -- Private -----------------------------------------------------------

    def _eval(self, node: ExprAST, record: bool) -> tuple[float, list[str]]:
        """Returns (value, steps)."""

        if isinstance(node, NumberNode):
            return node.value, []

        if isinstance(node, UnaryNode):
            fn = _UNARY_OPS.get(node.op)
            if fn is None:
                raise InternalError(f"Unknown unary operator: {node.op!r}")
            val, steps = self._eval(node.operand, record)
            result = fn(val)
            if record:
                steps.append(f"{node.op}({_fmt(val)}) = {_fmt(result)}")
            return result, steps

        if isinstance(node, BinaryNode):
            fn = _BINARY_OPS.get(node.op)
            if fn is None:
                raise InternalError(f"Unknown binary operator: {node.op!r}")
            left_val, left_steps = self._eval(node.left, record)
            right_val, right_steps = self._eval(node.right, record)
            result = fn(left_val, right_val)
            steps = left_steps + right_steps
            if record:
                steps.append(f"{_fmt(left_val)} {node.op} {_fmt(right_val)} = {_fmt(result)}")
            return result, steps

        raise InternalError(f"Unknown AST node type: {type(node).__name__}")


def _fmt(v: float) -> str:
    """Readable float: integral values without the trailing ".0"."""
    if math.isfinite(v) and v.is_integer():
        return str(int(v))
    return repr(v)
