from baseforms.api.schemas.v1 import (
    AugmentContentRequest,
    AugmentContentResponse,
    AugmentQueryRequest,
    AugmentQueryResponse,
    TokenizeRequest,
    TokenizeResponse,
)

__all__ = [
    "AugmentContentRequest",
    "AugmentContentResponse",
    "AugmentQueryRequest",
    "AugmentQueryResponse",
    "TokenizeRequest",
    "TokenizeResponse",
]
