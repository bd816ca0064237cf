from baseforms.nlp.language import (
    FixedLanguageDetector,
    LanguageDetector,
    MappingLanguageDetector,
    language_matches,
)
from baseforms.nlp.text_guard import is_numeric_text, is_textual
from baseforms.nlp.tokenizer import strip_tags, tokenize, tokenize_markup

__all__ = [
    "FixedLanguageDetector",
    "LanguageDetector",
    "MappingLanguageDetector",
    "language_matches",
    "is_numeric_text",
    "is_textual",
    "strip_tags",
    "tokenize",
    "tokenize_markup",
]
