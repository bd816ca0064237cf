from __future__ import annotations

import re

from baseforms.services.highlight import build_highlight_pattern


DEFAULT = r"/(kissa)/iu"


def test_pattern_passes_default_through_without_lemmas() -> None:
    assert build_highlight_pattern(DEFAULT, "kissa", []) == DEFAULT
    assert build_highlight_pattern(DEFAULT, "kissa", ["", ""]) == DEFAULT


def test_pattern_contains_alternation_of_term_and_lemmas() -> None:
    pattern = build_highlight_pattern(DEFAULT, "kissa", ["kissaeläin"])

    assert "(?:kissa|kissaeläin)" in pattern
    assert pattern == r"(?i)(\w*(?:kissa|kissaeläin)\W|\W(?:kissa|kissaeläin)\w*)"


def test_pattern_matches_word_with_adjacent_boundary_case_insensitively() -> None:
    pattern = build_highlight_pattern(DEFAULT, "talossa", ["talo"])

    assert re.search(pattern, "Iso TALO on mäellä.").group(0) == " TALO"
    assert re.search(pattern, "Asumme omakotitalossa, joka").group(0) == "omakotitalossa,"
    assert re.search(pattern, "ei osumia tässä") is None


def test_pattern_is_case_insensitive_without_compile_flags() -> None:
    pattern = build_highlight_pattern(DEFAULT, "kissa", ["kissaeläin"])

    assert re.search(pattern, "Iso KISSAELÄIN istuu.").group(0) == " KISSAELÄIN"
    assert re.compile(pattern).flags & re.IGNORECASE


def test_pattern_escapes_regex_metacharacters() -> None:
    pattern = build_highlight_pattern(DEFAULT, "c++", ["c+"])

    assert re.escape("c++") in pattern
    assert re.search(pattern, "kieli C++ on") is not None


def test_pattern_lists_term_once_when_it_is_also_a_lemma() -> None:
    pattern = build_highlight_pattern(DEFAULT, "talo", ["talo", "koti"])
    assert "(?:talo|koti)" in pattern
