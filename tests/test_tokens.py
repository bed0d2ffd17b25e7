"""Test token kinds, the Token value, and byte classification."""

import dataclasses

import pytest

from flowscan.tokens import Token, TokenKind, is_lower_alpha, is_space


class TestDisplayStrings:
    @pytest.mark.parametrize(
        ("kind", "display"),
        [
            (TokenKind.KEYWORD, "keyword"),
            (TokenKind.FOR, "for"),
            (TokenKind.IF, "if"),
            (TokenKind.ELSE, "else"),
            (TokenKind.INTERFACE, "interface{}"),
            (TokenKind.LEFT_BRACE, "{"),
            (TokenKind.RIGHT_BRACE, "}"),
            (TokenKind.IGNORE, ""),
            (TokenKind.NOTES, "notes"),
            (TokenKind.RETURN, "return"),
        ],
    )
    def test_display(self, kind, display):
        assert kind.display == display
        assert str(kind) == display

    def test_mapping_is_total(self):
        assert len(TokenKind) == 10
        for kind in TokenKind:
            assert isinstance(kind.display, str)

    def test_display_strings_are_unique(self):
        displays = [k.display for k in TokenKind]
        assert len(set(displays)) == len(displays)


class TestToken:
    def test_text_defaults_to_none(self):
        assert Token(TokenKind.IF).text is None

    def test_notes_carries_text(self):
        tok = Token(TokenKind.NOTES, "hello")
        assert tok.kind is TokenKind.NOTES
        assert tok.text == "hello"

    def test_frozen(self):
        tok = Token(TokenKind.FOR)
        with pytest.raises(dataclasses.FrozenInstanceError):
            tok.kind = TokenKind.IF  # type: ignore[misc]

    def test_equality(self):
        assert Token(TokenKind.LEFT_BRACE) == Token(TokenKind.LEFT_BRACE)
        assert Token(TokenKind.NOTES, "a") != Token(TokenKind.NOTES, "b")


class TestClassification:
    @pytest.mark.parametrize("ch", [" ", "\t", "\n", "\r", "\f"])
    def test_space(self, ch):
        assert is_space(ord(ch))

    @pytest.mark.parametrize("ch", ["a", "{", "/", "\v", "0"])
    def test_not_space(self, ch):
        assert not is_space(ord(ch))

    def test_lower_alpha_bounds(self):
        assert is_lower_alpha(ord("a"))
        assert is_lower_alpha(ord("z"))
        assert not is_lower_alpha(ord("`"))
        assert not is_lower_alpha(ord("{"))
        assert not is_lower_alpha(ord("A"))
        assert not is_lower_alpha(ord("_"))

    def test_non_ascii_byte_is_not_alpha(self):
        assert not is_lower_alpha(0xE9)
