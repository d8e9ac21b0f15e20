import pytest

from linecli.split import split


@pytest.mark.parametrize("text", ["", " ", "  ", "\t", "  \t \t     ", '""', "''"])
def test_blank_input_gives_no_words(text):
    assert split(text) == []


@pytest.mark.parametrize(
    "text, expected",
    [
        ("1234567890", ["1234567890"]),
        ("  foo ", ["foo"]),
        ("  foo \t \t bar \t", ["foo", "bar"]),
    ],
)
def test_plain_words(text, expected):
    assert split(text) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ('"foo bar"', ["foo bar"]),
        ('    \t\t "foo \tbar"     \t', ["foo \tbar"]),
        (' first   \t\t "foo \tbar"     \t last', ["first", "foo \tbar", "last"]),
        ('first"foo \tbar"', ["first", "foo \tbar"]),
        ("first \"'second' 'thirdh'\"", ["first", "'second' 'thirdh'"]),
    ],
)
def test_double_quoted_sentences(text, expected):
    assert split(text) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("'foo bar'", ["foo bar"]),
        ("    \t\t 'foo \tbar'     \t", ["foo \tbar"]),
        (" first   \t\t 'foo \tbar'     \t last", ["first", "foo \tbar", "last"]),
        ("first'foo \tbar'", ["first", "foo \tbar"]),
        ("first '\"second\" \"thirdh\"'", ["first", '"second" "thirdh"']),
    ],
)
def test_single_quoted_sentences(text, expected):
    assert split(text) == expected


def test_escaped_double_quote_inside_sentence():
    assert split(r'"foo\"bar"') == ['foo"bar']


def test_escaped_single_quote_inside_sentence():
    assert split(r"'foo\'bar'") == ["foo'bar"]


def test_backslash_before_ordinary_char_is_kept():
    assert split(r'"foo\bar"') == ["foo\\bar"]


def test_escape_at_word_start_stays_a_word():
    assert split(r"\"foo bar") == ['"foo', "bar"]


def test_joined_words_round_trip():
    words = ["alpha", "beta", "gamma"]
    assert split(" ".join(words)) == words