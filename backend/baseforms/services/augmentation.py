from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Sequence
from dataclasses import dataclass

from baseforms.nlp.text_guard import is_textual
from baseforms.nlp.tokenizer import strip_tags, tokenize
from baseforms.services.lemmatizer_client import BaseFormLookup


@dataclass(frozen=True)
class LemmaSet:
    lemmas: tuple[str, ...] = ()

    def __bool__(self) -> bool:
        return bool(self.lemmas)

    def __iter__(self) -> Iterator[str]:
        return iter(self.lemmas)

    def __len__(self) -> int:
        return len(self.lemmas)

    def __contains__(self, item: object) -> bool:
        return item in self.lemmas


EMPTY_LEMMA_SET = LemmaSet()


@dataclass(frozen=True)
class AugmentationResult:
    text: str
    tokens: tuple[str, ...]
    lemmas: LemmaSet

    @property
    def augmented(self) -> bool:
        return bool(self.lemmas)


def filter_lemmas(tokens: Iterable[str], lemmas: Iterable[str]) -> LemmaSet:
    present = set(tokens)
    kept: dict[str, None] = {}
    for lemma in lemmas:
        if not lemma or lemma in present:
            continue
        kept.setdefault(lemma, None)
    return LemmaSet(tuple(kept))


def augment(original: str, tokens: Sequence[str], lemmas: Iterable[str]) -> str:
    if not is_textual(original):
        return original
    remaining = filter_lemmas(tokens, lemmas)
    stripped = original.strip()
    if not remaining:
        return stripped
    return f"{stripped} {' '.join(remaining)}"


def run_augmentation(
    original: str,
    lookup: BaseFormLookup,
    *,
    tokenizer: Callable[[str], list[str]] = tokenize,
    deadline_seconds: float | None = None,
) -> AugmentationResult:
    """Tokenize ``original``, fetch base forms and append the new ones.

    Empty and numeric input is handed back untouched without tokenizing or
    touching the network.
    """
    if not is_textual(original):
        return AugmentationResult(text=original, tokens=(), lemmas=EMPTY_LEMMA_SET)

    tokens = tokenizer(strip_tags(original))
    if not tokens:
        return AugmentationResult(text=original.strip(), tokens=(), lemmas=EMPTY_LEMMA_SET)

    found = lookup.lookup_base_forms(tokens, deadline_seconds=deadline_seconds)
    lemmas = filter_lemmas(tokens, found)
    return AugmentationResult(
        text=augment(original, tokens, lemmas),
        tokens=tuple(tokens),
        lemmas=lemmas,
    )


def augment_text(
    original: str,
    lookup: BaseFormLookup,
    *,
    tokenizer: Callable[[str], list[str]] = tokenize,
    deadline_seconds: float | None = None,
) -> str:
    return run_augmentation(
        original,
        lookup,
        tokenizer=tokenizer,
        deadline_seconds=deadline_seconds,
    ).text
