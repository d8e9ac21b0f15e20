import pytest

from linecli.colorprofile import (
    after_input,
    after_prompt,
    before_input,
    before_prompt,
    is_color_enabled,
    set_color,
    set_no_color,
)


@pytest.fixture(autouse=True)
def _colors_off():
    set_no_color()
    yield
    set_no_color()


def test_starts_disabled():
    assert is_color_enabled() is False


def test_switch_on_and_off():
    set_color()
    assert is_color_enabled() is True
    set_no_color()
    assert is_color_enabled() is False


def test_no_sequences_without_color():
    assert [before_prompt(), after_prompt(), before_input(), after_input()] == ["", "", "", ""]


def test_prompt_sequence_with_color():
    set_color()
    assert before_prompt() == "\x1b[32m\x1b[1m"


def test_input_sequence_with_color():
    set_color()
    assert before_input() == "\x1b[97m"


def test_reset_sequences_with_color():
    set_color()
    assert after_prompt() == "\x1b[0m"
    assert after_input() == after_prompt()


def test_sequences_are_escape_codes():
    set_color()
    for seq in (before_prompt(), after_prompt(), before_input(), after_input()):
        assert seq.startswith("\x1b[")
        assert seq.endswith("m")


def test_disable_after_enable_clears_sequences():
    set_color()
    set_no_color()
    assert before_prompt() == ""
    assert after_input() == ""