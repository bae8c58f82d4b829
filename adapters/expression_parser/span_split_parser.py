"""
Adapter: SpanSplitParser
Implements the ExpressionParser port.

Front end of the pipeline:
  normalize → tokenize → reduce unary chains → validate → build tree

Every stage is a pure function of its input, so a single instance can be
shared between threads.
"""
from __future__ import annotations

import logging

from adapters.expression_parser.tokenizer import tokenize
from adapters.expression_parser.tree_builder import build_tree
from adapters.expression_parser.unary_chain import reduce_unary_chains
from adapters.text_normalizer import normalize_expression
from adapters.validator.token_validator import OrderedTokenValidator
from contracts import ExprAST
from ports.validator import TokenValidator

logger = logging.getLogger("expr_calc.parser")


class SpanSplitParser:
    """Parses expression text into an ExprAST, rejecting malformed input."""

    def __init__(self, validator: TokenValidator | None = None) -> None:
        self._validator = validator or OrderedTokenValidator()

    # -- ExpressionParser protocol ------------------------------------------

    def tokens(self, text: str) -> list[str]:
        normalized = normalize_expression(text)
        logger.debug("Normalized %r -> %r", text, normalized)
        reduced = reduce_unary_chains(tokenize(normalized))
        logger.debug("Tokens: %r", reduced)
        return reduced

    def parse(self, text: str) -> ExprAST:
        tokens = self._validator.validate(self.tokens(text))
        return build_tree(tokens)

    @property
    def validator(self) -> TokenValidator:
        return self._validator
