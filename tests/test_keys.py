"""Tests for raw key translation."""

import typing

import pytest
import readchar

from navmenu.keys import BACK, DOWN, ENTER, EXIT, OTHER, UP, KeyEvent, KeyKind, translate_key


@pytest.mark.parametrize(
    "raw,expected",
    [
        (readchar.key.UP, UP),
        (readchar.key.DOWN, DOWN),
        ("\r", ENTER),
        ("\n", ENTER),
        ("\x7f", BACK),
        ("\x08", BACK),
        (readchar.key.ESC, EXIT),
        ("\x1b\x1b", EXIT),
        ("\x1bq", EXIT),
    ],
)
def test_special_keys(raw, expected):
    assert translate_key(raw) == expected


def test_printable_character():
    assert translate_key("a") == KeyEvent(KeyKind.CHAR, "a")


def test_digit_is_character():
    assert translate_key("3") == KeyEvent.of("3")


@pytest.mark.parametrize("raw", [readchar.key.LEFT, readchar.key.F1, "\x01", "\t"])
def test_unrecognized_keys(raw):
    assert translate_key(raw) == OTHER


def test_vi_keys_disabled_by_default():
    assert translate_key("k") == KeyEvent.of("k")
    assert translate_key("j") == KeyEvent.of("j")


def test_vi_keys_enabled():
    assert translate_key("k", vi_keys=True) == UP
    assert translate_key("j", vi_keys=True) == DOWN
    assert translate_key("x", vi_keys=True) == KeyEvent.of("x")


@pytest.mark.parametrize("raw", [readchar.key.RIGHT, readchar.key.PAGE_UP, readchar.key.F5])
def test_escape_sequences_are_not_exit(raw):
    assert translate_key(raw) == OTHER


def test_of_return_annotation_resolves():
    assert typing.get_type_hints(KeyEvent.of.__func__)["return"] is KeyEvent
