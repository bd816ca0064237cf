from __future__ import annotations

import re


# Numeric strings in the loose sense search hosts use: " -12", "3.5", ".5e3 ".
NUMERIC_PATTERN = re.compile(
    r"\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?\s*",
    flags=re.ASCII,
)


def is_numeric_text(value: str) -> bool:
    return NUMERIC_PATTERN.fullmatch(value) is not None


def is_textual(value: object) -> bool:
    if not isinstance(value, str) or not value:
        return False
    return not is_numeric_text(value)
