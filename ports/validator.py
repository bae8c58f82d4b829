"""
Port: TokenValidator
Responsibility: syntax rules over a unary-reduced token sequence.
"""
from typing import Protocol, runtime_checkable

from contracts import ExpressionIssue


@runtime_checkable
class TokenValidator(Protocol):
    def validate(self, tokens: list[str]) -> list[str]:
        """
        Runs the syntax checks in their fixed order.
        Returns the tokens unchanged if they are valid.
        Raises StructuralError for the first violated rule.
        """
        ...

    def find_issues(self, tokens: list[str]) -> list[ExpressionIssue]:
        """
        Runs every check and reports the first violation of each one,
        in the same fixed order as validate().
        Returns list of ExpressionIssue; empty = tokens are valid.
        """
        ...
