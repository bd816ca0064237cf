from __future__ import annotations

from collections.abc import Hashable, Mapping
from dataclasses import dataclass, field
from typing import Protocol


class LanguageDetector(Protocol):
    def document_language(self, document_id: Hashable) -> str | None:
        ...

    def current_language(self) -> str | None:
        ...


@dataclass(frozen=True)
class FixedLanguageDetector:
    """Reports the same language for every document and for the current request."""

    language: str | None

    def document_language(self, document_id: Hashable) -> str | None:
        return self.language

    def current_language(self) -> str | None:
        return self.language


@dataclass(frozen=True)
class MappingLanguageDetector:
    documents: Mapping[Hashable, str] = field(default_factory=dict)
    current: str | None = None

    def document_language(self, document_id: Hashable) -> str | None:
        return self.documents.get(document_id)

    def current_language(self) -> str | None:
        return self.current


def language_matches(reported: str | None, target: str) -> bool:
    if not reported:
        return False
    return reported.strip().lower() == target.strip().lower()
