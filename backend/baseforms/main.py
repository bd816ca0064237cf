from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Callable

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from baseforms.api.router import api_router
from baseforms.core.config import Settings, load_settings
from baseforms.core.logging import configure_logging
from baseforms.hooks import HookRegistry, register_hooks
from baseforms.nlp.language import FixedLanguageDetector
from baseforms.services.lemmatizer_client import BaseFormLookup, build_lemmatizer_client
from baseforms.services.use_cases.base_forms import BaseFormsHooks

configure_logging()
logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None,
    lemmatizer_factory: Callable[[Settings], BaseFormLookup | None] = build_lemmatizer_client,
) -> FastAPI:
    app_settings = settings or load_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        lemmatizer: BaseFormLookup | None = None
        if app_settings.lemmatizer_enabled:
            try:
                lemmatizer = lemmatizer_factory(app_settings)
                app.state.lemmatizer_error = None
            except Exception as exc:
                app.state.lemmatizer_error = str(exc)
                logger.exception(
                    "lemmatizer_startup_failed",
                    extra={"api_url": app_settings.api_url},
                )
        else:
            app.state.lemmatizer_error = "Lemmatizer API URL is not configured."
        app.state.lemmatizer = lemmatizer
        app.state.lemmatizer_ready = lemmatizer is not None

        hooks = BaseFormsHooks(
            lemmatizer,
            FixedLanguageDetector(app_settings.language),
            language=app_settings.language,
            deadline_seconds=app_settings.deadline_seconds,
        )
        app.state.hooks = hooks
        app.state.hook_registry = HookRegistry()
        hooks_registered = register_hooks(app.state.hook_registry, hooks)

        logger.info(
            "baseforms_startup",
            extra={
                "status": "ok" if app.state.lemmatizer_ready else "degraded",
                "environment": app_settings.environment,
                "host": app_settings.host,
                "port": app_settings.port,
                "language": app_settings.language,
                "max_concurrency": app_settings.max_concurrency,
                "hooks_registered": hooks_registered,
                "lemmatizer_error": app.state.lemmatizer_error,
            },
        )
        try:
            yield
        finally:
            close = getattr(lemmatizer, "close", None)
            if callable(close):
                close()

    app = FastAPI(title="Finnish Base Forms", version="0.1.0", lifespan=lifespan)
    app.state.settings = app_settings
    app.state.lemmatizer = None
    app.state.lemmatizer_ready = False
    app.state.lemmatizer_error = None
    app.state.hooks = BaseFormsHooks(None, FixedLanguageDetector(None), language=app_settings.language)
    app.state.hook_registry = HookRegistry()
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(app_settings.cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(api_router, prefix="/api")
    return app


app = create_app()
