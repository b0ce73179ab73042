import pytest

from bufficast.application.messages import extract_messages


def test_extracts_fragments_in_order():
    text = 'use Chainlink to create me a speech "eth denver is awesome", "bufficast project is the best"'
    assert extract_messages(text) == ["eth denver is awesome", "bufficast project is the best"]


def test_three_fragments():
    text = 'Create me a podcast using Chainlink "ethereum is great", "avalanche is great", "solana sucks"'
    assert extract_messages(text) == ["ethereum is great", "avalanche is great", "solana sucks"]


@pytest.mark.parametrize("text", [
    "make me a podcast please",
    "",
    None,
    'only "" empty quotes',
    'an unterminated "quote',
])
def test_no_fragments_returns_none(text):
    assert extract_messages(text) is None


def test_typographic_quotes():
    assert extract_messages("podcast about “gm” and “wagmi”") == ["gm", "wagmi"]


def test_single_quotes_are_not_delimiters():
    assert extract_messages("it's 'not' quoted \"but this is\"") == ["but this is"]


def test_empty_pair_does_not_shift_later_fragments():
    assert extract_messages('"gm", "", "wagmi"') == ["gm", "wagmi"]


def test_fragment_after_empty_pair_is_found():
    assert extract_messages('speech "" "eth denver"') == ["eth denver"]


def test_blank_pair_is_dropped():
    assert extract_messages('"  " then "gm"') == ["gm"]
