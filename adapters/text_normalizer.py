"""
text_normalizer.py - clean raw expression text before tokenization.

Steps:
1) Trim surrounding whitespace
2) Collapse every whitespace run (tabs, newlines, NBSP, ...) to one ASCII space
3) Map dash look-alikes (en dash, em dash, minus sign) to "-"
4) Map "," to "." so both decimal separators work
Character legality is left to the tokenizer.
"""
from __future__ import annotations

import re

_WHITESPACE_RE = re.compile(r"\s+")

_CHAR_MAP = str.maketrans({
    "–": "-",  # en dash
    "—": "-",  # em dash
    "−": "-",  # minus sign
    ",": ".",
})


def normalize_expression(text: str) -> str:
    """Return expression text with unified whitespace, dashes and decimal separators."""
    text = _WHITESPACE_RE.sub(" ", text.strip())
    return text.translate(_CHAR_MAP)
