from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class TokenizeRequest(BaseModel):
    text: str = Field(...)


class TokenizeResponse(BaseModel):
    tokens: list[str]


class AugmentContentRequest(BaseModel):
    content: str = Field(...)
    document_id: str | int | None = None
    language: str | None = None


class AugmentContentResponse(BaseModel):
    content: str
    augmented: bool


class AugmentQueryRequest(BaseModel):
    parameters: dict[str, Any] = Field(...)
    language: str | None = None
    highlight_terms: list[str] = Field(default_factory=list)
    default_highlight_pattern: str = ""


class AugmentQueryResponse(BaseModel):
    parameters: dict[str, Any]
    lemmas: list[str] = Field(default_factory=list)
    highlight_patterns: dict[str, str] = Field(default_factory=dict)
