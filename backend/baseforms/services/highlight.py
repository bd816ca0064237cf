from __future__ import annotations

from collections.abc import Iterable
import re


def build_highlight_pattern(default_pattern: str, term: str, lemmas: Iterable[str]) -> str:
    """Match ``term`` or any of its base forms plus one adjacent boundary character.

    The returned pattern carries its own ``(?i)`` flag, so it matches
    case-insensitively however the caller compiles it. Without base forms the
    host's own pattern is returned as is.
    """
    variants = [lemma for lemma in lemmas if lemma]
    if not variants:
        return default_pattern

    alternatives = dict.fromkeys([term, *variants])
    terms_pattern = "(?:" + "|".join(re.escape(value) for value in alternatives if value) + ")"
    return rf"(?i)(\w*{terms_pattern}\W|\W{terms_pattern}\w*)"
