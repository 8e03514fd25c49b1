# tests/core/test_escaping.py
import pytest

from genere.core.domain.escaping import decode, encode, seal, sentinel
from genere.core.domain.gender_forms import MEDIAN_FORM, SLASH_FORM
from genere.core.engine import FRESH_REFERENCE, GENDER_MARKER, REFERENCE


class TestEncode:
    def test_plain_text_is_untouched(self):
        assert encode("foobarbaz") == "foobarbaz"

    def test_escape_before_ordinary_character_is_dropped(self):
        assert encode("~foobarbaz") == "foobarbaz"

    def test_escaped_tilde(self):
        assert encode("~~foobarbaz") == "~<tilde>foobarbaz"

    def test_escaped_spaces(self):
        assert encode("foo~ bar~ baz") == "foo~<space>bar~<space>baz"

    def test_escaped_brackets(self):
        assert encode("~[foobarbaz~]") == "~<leftsquare>foobarbaz~<rightsquare>"
        assert encode("~{foobarbaz~}") == "~<leftcurly>foobarbaz~<rightcurly>"

    def test_unescaped_syntax_is_untouched(self):
        assert encode("foo/bar/baz") == "foo/bar/baz"

    def test_escaped_slash_and_median(self):
        assert encode("foo~/bar~/baz") == "foo~<slash>bar~<slash>baz"
        assert encode("foo~·bar~·baz") == "foo~<median>bar~<median>baz"

    def test_trailing_escape_is_kept(self):
        assert encode("foo~") == "foo~"


class TestDecode:
    @pytest.mark.parametrize(
        "text",
        [
            "",
            "No characters to replace here",
            "{hero} [m] a/b un·e",
            "unicode: épée, sorcière",
        ],
    )
    def test_round_trip_without_escapes(self, text):
        """Text without escape markers survives encode then decode unchanged."""
        assert decode(encode(text)) == text

    def test_round_trip_consumes_escapes(self):
        text = "~[Characters~] ~{to~} replace~ here~/and there~~"
        assert decode(encode(text)) == "[Characters] {to} replace here/and there~"

    def test_every_reserved_character(self):
        assert decode(encode("~{~}~[~]~/~·~~~ ")) == "{}[]/·~ "

    def test_decode_is_idempotent_on_plain_text(self):
        text = "a/b {c} [d] ~ <e>"
        assert decode(text) == text
        assert decode(decode(text)) == text

    def test_unknown_sentinel_names_are_left_alone(self):
        assert decode("~<unknown>") == "~<unknown>"

    def test_literal_sentinel_lookalike_is_not_decoded(self):
        """An author writing `~<space>` gets the text `<space>`, not a space."""
        assert decode(encode("~<space>")) == "<space>"


class TestSentinels:
    def test_escaped_syntax_never_matches_grammar_patterns(self):
        encoded = encode("~{a~} ~{~{b~}~} ~[m~] ~[F~] x~/y a~·b c~·d~·e ~[dep~]")
        for pattern in (REFERENCE, FRESH_REFERENCE, GENDER_MARKER, SLASH_FORM, MEDIAN_FORM):
            assert pattern.search(encoded) is None, pattern.pattern

    def test_sentinel_shape(self):
        assert sentinel("/") == "~<slash>"
        assert sentinel("·") == "~<median>"


class TestSeal:
    def test_seal_replaces_raw_syntax(self):
        sealed = seal("a/b·c{d}[e]")
        assert sealed == (
            "a~<slash>b~<median>c~<leftcurly>d~<rightcurly>~<leftsquare>e~<rightsquare>"
        )
        assert decode(sealed) == "a/b·c{d}[e]"

    def test_seal_keeps_existing_sentinels(self):
        assert seal("a~<space>b") == "a~<space>b"
