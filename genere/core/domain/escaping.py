# genere/core/domain/escaping.py
"""
Escaping codec.

Authors write `~` in front of a reserved character to use it literally:
`~{foo~}` displays `{foo}`, `du/de~ la` keeps the space inside a gender form,
`~~` displays a tilde. `encode` swaps every escaped character for a sentinel
token (`~<name>`) that none of the grammar passes react to; `decode` turns the
sentinels back into plain characters once the text is fully resolved.
"""

import re

ESCAPE = "~"

SENTINEL_NAMES = {
    " ": "space",
    "~": "tilde",
    "[": "leftsquare",
    "]": "rightsquare",
    "{": "leftcurly",
    "}": "rightcurly",
    "/": "slash",
    "·": "median",
}

_CHARS_BY_NAME = {name: char for char, name in SENTINEL_NAMES.items()}

_ESCAPED = re.compile(r"~(.)", re.DOTALL)
_SENTINEL = re.compile(r"~<(" + "|".join(SENTINEL_NAMES.values()) + r")>")
# Characters that still carry grammar meaning in a resolved text.
_SYNTAX = re.compile(r"[{}\[\]/·]")


def sentinel(char: str) -> str:
    """Return the sentinel token standing for a reserved character."""
    return f"{ESCAPE}<{SENTINEL_NAMES[char]}>"


def _encode_one(match: "re.Match[str]") -> str:
    char = match.group(1)
    if char in SENTINEL_NAMES:
        return sentinel(char)
    # An escape in front of an ordinary character is simply dropped.
    return char


def encode(text: str) -> str:
    """Replace escaped reserved characters with sentinel tokens."""
    if ESCAPE not in text:
        return text
    return _ESCAPED.sub(_encode_one, text)


def decode(text: str) -> str:
    """Replace sentinel tokens with the characters they stand for."""
    if ESCAPE not in text:
        return text
    return _SENTINEL.sub(lambda m: _CHARS_BY_NAME[m.group(1)], text)


def seal(text: str) -> str:
    """
    Turn every raw syntax character left in `text` into its sentinel.

    Used on a symbol's final content so that splicing it into another
    fragment can never form a reference or gender form there.
    """
    return _SYNTAX.sub(lambda m: sentinel(m.group(0)), text)
