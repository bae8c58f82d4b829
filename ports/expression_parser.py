"""
Port: ExpressionParser
Responsibility: turning raw expression text into a validated ExprAST.
"""
from typing import Protocol, runtime_checkable

from contracts import ExprAST


@runtime_checkable
class ExpressionParser(Protocol):
    def tokens(self, text: str) -> list[str]:
        """
        Normalizes, tokenizes and collapses unary sign chains.
        No syntax validation is done here.
        Raises LexicalError for illegal characters or malformed numerals.
        """
        ...

    def parse(self, text: str) -> ExprAST:
        """
        Full front end: normalize -> tokenize -> reduce unary chains ->
        validate -> build tree.
        Raises LexicalError, StructuralError or BuildError on bad input.
        """
        ...
