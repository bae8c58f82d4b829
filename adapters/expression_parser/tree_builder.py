"""
Tree builder — validated token list → ExprAST by recursive span splitting.

For a span [lo, hi):
  1. strip parentheses while they wrap the whole span: "((3+2))" → "3+2"
  2. length <= 3: [NUMBER] | [+/- NUMBER] | [NUMBER OP NUMBER]
  3. "+/-" followed by one wrapped group: "-(3+2)" → Unary(-, 3+2)
  4. otherwise split on the main operator, found right to left at depth 0:
       the first "+"/"-" whose left neighbour ends an operand, else
       the rightmost "*"/"/"

Splitting on the rightmost additive operator makes it the root, so it is
applied last (precedence), and leaves the rest of a flat chain in the left
subtree (left associativity): "3-2-1" → (3-2)-1, "3/2/2" → (3/2)/2.
"""
from __future__ import annotations

from adapters.expression_parser.tokens import (
    CLOSE_PAREN,
    OPEN_PAREN,
    is_multiplicative_operator,
    is_number,
    is_operand_end,
    is_operator,
    is_unary_operator,
)
from contracts import BinaryNode, BuildError, ErrorCode, ExprAST, NumberNode, UnaryNode


def build_tree(tokens: list[str]) -> ExprAST:
    """Builds the AST of a validated, unary-reduced token list."""
    return _TreeBuilder(tokens).build(0, len(tokens))


class _TreeBuilder:
    def __init__(self, tokens: list[str]) -> None:
        self._tokens = tokens

    def build(self, lo: int, hi: int) -> ExprAST:
        while self._is_wrapped(lo, hi):
            lo, hi = lo + 1, hi - 1

        if hi - lo <= 3:
            return self._build_simple(lo, hi)

        if is_unary_operator(self._tokens[lo]) and self._is_wrapped(lo + 1, hi):
            return UnaryNode(op=self._tokens[lo], operand=self.build(lo + 1, hi))

        split = self._find_main_operator(lo, hi)
        return BinaryNode(
            op=self._tokens[split],
            left=self.build(lo, split),
            right=self.build(split + 1, hi),
        )

    # -- Private ------------------------------------------------------

    def _build_simple(self, lo: int, hi: int) -> ExprAST:
        span = self._tokens[lo:hi]
        if len(span) == 1 and is_number(span[0]):
            return NumberNode(value=float(span[0]))
        if len(span) == 2 and is_unary_operator(span[0]) and is_number(span[1]):
            return UnaryNode(op=span[0], operand=NumberNode(value=float(span[1])))
        if (len(span) == 3 and is_number(span[0]) and is_operator(span[1])
                and is_number(span[2])):
            return BinaryNode(
                op=span[1],
                left=NumberNode(value=float(span[0])),
                right=NumberNode(value=float(span[2])),
            )
        raise BuildError(
            ErrorCode.MALFORMED_OPERAND,
            f"Invalid simple expression structure: {span}",
            token=" ".join(span) or None,
            position=lo,
        )

    def _find_main_operator(self, lo: int, hi: int) -> int:
        tokens = self._tokens
        split = -1
        depth = 0
        for i in range(hi - 1, lo - 1, -1):
            token = tokens[i]
            if token == CLOSE_PAREN:
                depth += 1
            elif token == OPEN_PAREN:
                depth -= 1
            if depth != 0:
                continue
            if is_unary_operator(token) and i > lo and is_operand_end(tokens[i - 1]):
                return i
            if split < 0 and is_multiplicative_operator(token):
                split = i
        if split < 0:
            raise BuildError(
                ErrorCode.MISSING_OPERATOR,
                f"Operator is missing in {tokens[lo:hi]}",
                position=lo,
            )
        return split

    def _is_wrapped(self, lo: int, hi: int) -> bool:
        """True if [lo, hi) is one "( ... )" group with nothing outside it."""
        tokens = self._tokens
        if hi - lo < 2 or tokens[lo] != OPEN_PAREN or tokens[hi - 1] != CLOSE_PAREN:
            return False
        depth = 0
        for i in range(lo, hi - 1):
            if tokens[i] == OPEN_PAREN:
                depth += 1
            elif tokens[i] == CLOSE_PAREN:
                depth -= 1
            if depth == 0:
                return False
        return True
