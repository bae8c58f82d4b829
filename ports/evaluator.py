"""
Port: Evaluator
Responsibility: deterministic evaluation of an ExprAST to an IEEE-754 double.
"""
from typing import Protocol, runtime_checkable

from contracts import EvalResult, ExprAST


@runtime_checkable
class Evaluator(Protocol):
    def evaluate(self, ast: ExprAST) -> float:
        """
        Evaluates an arithmetic AST to a float.
        Division by zero follows IEEE-754: x/0 -> +-inf, 0/0 -> nan.
        Never raises for arithmetic reasons.
        Raises InternalError for a node type outside the closed AST set.
        """
        ...

    def eval_expr(self, ast: ExprAST) -> EvalResult:
        """
        Same value as evaluate(), plus human-readable computation steps
        (one per operator application, in evaluation order).
        """
        ...
