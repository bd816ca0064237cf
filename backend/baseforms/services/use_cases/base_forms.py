from __future__ import annotations

from collections.abc import Hashable, Mapping
from dataclasses import dataclass, field
import logging
from typing import Any

from baseforms.nlp.language import LanguageDetector, language_matches
from baseforms.services.augmentation import (
    EMPTY_LEMMA_SET,
    LemmaSet,
    run_augmentation,
)
from baseforms.services.highlight import build_highlight_pattern
from baseforms.services.lemmatizer_client import BaseFormLookup


logger = logging.getLogger(__name__)

QUERY_FIELD = "q"


@dataclass
class SearchRequestContext:
    """Per-request state linking query augmentation to highlighting."""

    lemmas: LemmaSet = field(default=EMPTY_LEMMA_SET)


class BaseFormsHooks:
    def __init__(
        self,
        lookup: BaseFormLookup | None,
        language_detector: LanguageDetector,
        *,
        language: str = "fi",
        deadline_seconds: float | None = None,
    ):
        self._lookup = lookup
        self._language_detector = language_detector
        self._language = language
        self._deadline_seconds = deadline_seconds

    @property
    def enabled(self) -> bool:
        return self._lookup is not None

    @property
    def language(self) -> str:
        return self._language

    def with_language_detector(self, language_detector: LanguageDetector) -> BaseFormsHooks:
        return BaseFormsHooks(
            self._lookup,
            language_detector,
            language=self._language,
            deadline_seconds=self._deadline_seconds,
        )

    def augment_content(self, content: str, document_id: Hashable) -> str:
        if not self._document_in_language(document_id):
            return content
        return self._augment(content)

    def augment_title(self, title: str, document_id: Hashable) -> str:
        return self.augment_content(title, document_id)

    def augment_custom_field(
        self, values: list[str], field_name: str, document_id: Hashable
    ) -> list[str]:
        if not values or not self._document_in_language(document_id):
            return values
        return [self._augment(values[0])]

    def augment_query(
        self, parameters: Mapping[str, Any], context: SearchRequestContext
    ) -> Mapping[str, Any]:
        query = parameters.get(QUERY_FIELD)
        if self._lookup is None or not isinstance(query, str):
            return parameters
        if not language_matches(self._language_detector.current_language(), self._language):
            return parameters

        result = run_augmentation(query, self._lookup, deadline_seconds=self._deadline_seconds)
        context.lemmas = result.lemmas
        return {**parameters, QUERY_FIELD: result.text}

    def highlight_pattern(
        self, default_pattern: str, term: str, context: SearchRequestContext
    ) -> str:
        return build_highlight_pattern(default_pattern, term, context.lemmas)

    def _document_in_language(self, document_id: Hashable) -> bool:
        if self._lookup is None:
            return False
        return language_matches(
            self._language_detector.document_language(document_id), self._language
        )

    def _augment(self, text: str) -> str:
        result = run_augmentation(text, self._lookup, deadline_seconds=self._deadline_seconds)
        if result.augmented:
            logger.debug(
                "base_forms_appended",
                extra={"tokens": len(result.tokens), "lemmas": len(result.lemmas)},
            )
        return result.text
