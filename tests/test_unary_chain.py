import pytest
from hypothesis import given, strategies as st

from adapters.expression_parser.unary_chain import reduce_chain, reduce_unary_chains
from contracts import InternalError


@pytest.mark.parametrize("chain,expected", [
    ("+", "+"),
    ("-", "-"),
    ("--", "+"),
    ("---", "-"),
    ("+-+-", "+"),
    ("-+-+--+-", "-"),
])
def test_reduce_chain_counts_minus_signs(chain, expected):
    assert reduce_chain(chain) == expected


def test_reduce_chain_rejects_non_sign_characters():
    with pytest.raises(InternalError):
        reduce_chain("+*")


def test_reduce_unary_chains_collapses_every_run():
    tokens = ["-", "-", "5", "+", "-", "(", "+", "+", "3", ")"]
    assert reduce_unary_chains(tokens) == ["+", "5", "-", "(", "+", "3", ")"]


def test_reduce_unary_chains_leaves_multiplicative_operators_alone():
    assert reduce_unary_chains(["3", "*", "-", "-", "5"]) == ["3", "*", "+", "5"]
    assert reduce_unary_chains(["3", "*", "/", "4"]) == ["3", "*", "/", "4"]


def test_reduce_unary_chains_flushes_trailing_chain():
    assert reduce_unary_chains(["3", "-", "-"]) == ["3", "+"]


@given(st.lists(st.sampled_from("+-"), min_size=1, max_size=20))
def test_reduce_unary_chains_sign_follows_minus_parity(signs):
    expected = "-" if signs.count("-") % 2 else "+"
    assert reduce_unary_chains(signs + ["7"]) == [expected, "7"]
