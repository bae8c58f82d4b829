"""
Unary-chain reducer.

Every maximal run of consecutive "+"/"-" tokens collapses to one sign:
"-" if the run holds an odd number of "-", otherwise "+". The rule does not
depend on where the run sits (start, after "(", after a binary operator).

  ["-", "-", "5"]           → ["+", "5"]
  ["3", "+", "-", "2"]      → ["3", "-", "2"]
  ["3", "-", "-"]           → ["3", "+"]   (left for the validator to reject)
"""
from __future__ import annotations

from adapters.expression_parser.tokens import is_unary_chain, is_unary_operator
from contracts import InternalError


def reduce_unary_chains(tokens: list[str]) -> list[str]:
    output: list[str] = []
    chain: list[str] = []
    for token in tokens:
        if is_unary_operator(token):
            chain.append(token)
            continue
        if chain:
            output.append(reduce_chain("".join(chain)))
            chain.clear()
        output.append(token)
    if chain:
        output.append(reduce_chain("".join(chain)))
    return output


def reduce_chain(chain: str) -> str:
    """
    "+" → "+", "--" → "+", "---" → "-", "+-+-" → "+".
    Raises InternalError if chain holds anything but "+" and "-".
    """
    if not is_unary_chain(chain):
        raise InternalError(f"Unary chain may only contain '+' or '-': {chain!r}")
    return "-" if chain.count("-") % 2 else "+"
