from __future__ import annotations

import re
import unicodedata


TAG_PATTERN = re.compile(r"<!--.*?-->|<\?.*?\?>|</?[A-Za-z!][^>]*>", flags=re.DOTALL)

# Unicode major classes that never belong to a token: punctuation, separator, other.
BOUNDARY_CATEGORIES = frozenset({"P", "Z", "C"})


def strip_tags(text: str) -> str:
    return TAG_PATTERN.sub("", text)


def is_boundary(character: str) -> bool:
    return unicodedata.category(character)[0] in BOUNDARY_CATEGORIES


def tokenize(text: str) -> list[str]:
    """Split ``text`` into maximal runs of non-boundary code points.

    Punctuation, separators and control/format characters delimit tokens and
    are dropped. Case and diacritics are left untouched, so ``"Käyttäjän"``
    stays ``"Käyttäjän"``.
    """
    tokens: list[str] = []
    current: list[str] = []
    for character in text:
        if is_boundary(character):
            if current:
                tokens.append("".join(current))
                current = []
            continue
        current.append(character)
    if current:
        tokens.append("".join(current))
    return tokens


def tokenize_markup(text: str) -> list[str]:
    return tokenize(strip_tags(text))
