from fastapi import APIRouter, Request

router = APIRouter()


@router.get("/")
def api_root() -> dict[str, str]:
    return {"status": "ok", "message": "finnish base forms service"}


@router.get("/health")
def health(request: Request) -> dict[str, object]:
    lemmatizer_ready = bool(getattr(request.app.state, "lemmatizer_ready", False))
    settings = request.app.state.settings
    payload: dict[str, object] = {
        "status": "ok" if lemmatizer_ready else "degraded",
        "service": "base-forms",
        "language": settings.language,
        "components": {
            "lemmatizer": "ok" if lemmatizer_ready else "degraded",
        },
    }

    lemmatizer_error = getattr(request.app.state, "lemmatizer_error", None)
    if lemmatizer_error:
        payload["lemmatizer_error"] = str(lemmatizer_error)

    return payload
