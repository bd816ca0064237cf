from __future__ import annotations

from fastapi import APIRouter, Request

from baseforms.api.schemas.v1.augment import (
    AugmentContentRequest,
    AugmentContentResponse,
    AugmentQueryRequest,
    AugmentQueryResponse,
    TokenizeRequest,
    TokenizeResponse,
)
from baseforms.nlp.language import FixedLanguageDetector
from baseforms.nlp.tokenizer import tokenize_markup
from baseforms.services.use_cases.base_forms import BaseFormsHooks, SearchRequestContext

router = APIRouter()


def _hooks_for(request: Request, language: str | None) -> BaseFormsHooks:
    hooks: BaseFormsHooks = request.app.state.hooks
    # The caller speaks for the language detector; an omitted language means
    # it already filtered the text to the configured one.
    reported = language if language is not None else hooks.language
    return hooks.with_language_detector(FixedLanguageDetector(reported))


@router.post("/tokenize", response_model=TokenizeResponse)
def post_tokenize(payload: TokenizeRequest) -> TokenizeResponse:
    return TokenizeResponse(tokens=tokenize_markup(payload.text))


@router.post("/augment/content", response_model=AugmentContentResponse)
def post_augment_content(payload: AugmentContentRequest, request: Request) -> AugmentContentResponse:
    hooks = _hooks_for(request, payload.language)
    content = hooks.augment_content(payload.content, payload.document_id)
    return AugmentContentResponse(content=content, augmented=content.strip() != payload.content.strip())


@router.post("/augment/query", response_model=AugmentQueryResponse)
def post_augment_query(payload: AugmentQueryRequest, request: Request) -> AugmentQueryResponse:
    hooks = _hooks_for(request, payload.language)
    context = SearchRequestContext()

    parameters = hooks.augment_query(payload.parameters, context)
    highlight_patterns = {
        term: hooks.highlight_pattern(payload.default_highlight_pattern, term, context)
        for term in payload.highlight_terms
    }
    return AugmentQueryResponse(
        parameters=dict(parameters),
        lemmas=list(context.lemmas),
        highlight_patterns=highlight_patterns,
    )
