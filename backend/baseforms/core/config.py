from __future__ import annotations

from dataclasses import dataclass
import os


DEFAULT_CORS_ORIGINS = ("http://127.0.0.1:4173", "http://localhost:4173")
DEFAULT_LANGUAGE = "fi"
DEFAULT_MAX_CONCURRENCY = 10
DEFAULT_TIMEOUT_SECONDS = 5.0


@dataclass(frozen=True)
class Settings:
    environment: str
    app_name: str
    host: str
    port: int
    api_url: str | None = None
    api_key: str = ""
    language: str = DEFAULT_LANGUAGE
    max_concurrency: int = DEFAULT_MAX_CONCURRENCY
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    deadline_seconds: float | None = None
    cors_origins: tuple[str, ...] = DEFAULT_CORS_ORIGINS

    @property
    def lemmatizer_enabled(self) -> bool:
        return bool(self.api_url)


def _optional_float(name: str) -> float | None:
    raw = os.getenv(name, "").strip()
    return float(raw) if raw else None


def load_settings() -> Settings:
    raw_cors_origins = os.getenv("BASEFORMS_CORS_ORIGINS", "")
    parsed_cors_origins = tuple(
        origin.strip()
        for origin in raw_cors_origins.split(",")
        if origin.strip()
    )
    return Settings(
        environment=os.getenv("BASEFORMS_ENV", "development"),
        app_name=os.getenv("BASEFORMS_APP_NAME", "finnish-base-forms"),
        host=os.getenv("BASEFORMS_HOST", "127.0.0.1"),
        port=int(os.getenv("BASEFORMS_PORT", "8000")),
        api_url=os.getenv("BASEFORMS_API_URL", "").strip() or None,
        api_key=os.getenv("BASEFORMS_API_KEY", "").strip(),
        language=os.getenv("BASEFORMS_LANGUAGE", DEFAULT_LANGUAGE).strip().lower() or DEFAULT_LANGUAGE,
        max_concurrency=int(os.getenv("BASEFORMS_MAX_CONCURRENCY", str(DEFAULT_MAX_CONCURRENCY))),
        timeout_seconds=float(os.getenv("BASEFORMS_TIMEOUT_SECONDS", str(DEFAULT_TIMEOUT_SECONDS))),
        deadline_seconds=_optional_float("BASEFORMS_DEADLINE_SECONDS"),
        cors_origins=parsed_cors_origins or DEFAULT_CORS_ORIGINS,
    )
