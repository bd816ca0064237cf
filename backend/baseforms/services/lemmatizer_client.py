from __future__ import annotations

from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor, wait
from dataclasses import dataclass, field
import logging
import threading
from typing import Protocol
from urllib.parse import quote

import httpx

from baseforms.core.config import DEFAULT_MAX_CONCURRENCY, DEFAULT_TIMEOUT_SECONDS, Settings
from baseforms.core.errors import LemmatizerConfigError


logger = logging.getLogger(__name__)

SUBSCRIPTION_KEY_HEADER = "Ocp-Apim-Subscription-Key"


class BaseFormLookup(Protocol):
    def lookup_base_forms(
        self, tokens: Iterable[str], *, deadline_seconds: float | None = None
    ) -> list[str]: ...


@dataclass
class LemmatizerClient:
    """Looks up base forms for tokens against a remote lemmatization service.

    Every distinct token becomes one ``GET {api_url}/lemmatize/{token}``
    request. Requests run on a thread pool capped at ``max_concurrency``
    workers and share one ``httpx.Client``. A failing request only costs
    its own token; the batch always returns whatever succeeded.
    """

    api_url: str
    api_key: str = ""
    max_concurrency: int = DEFAULT_MAX_CONCURRENCY
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    deadline_seconds: float | None = None
    _client: httpx.Client | None = field(default=None, init=False, repr=False, compare=False)
    _client_lock: threading.Lock = field(
        default_factory=threading.Lock, init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        normalized_url = (self.api_url or "").strip()
        if not normalized_url:
            raise LemmatizerConfigError("Lemmatizer API URL is required.")
        try:
            parsed = httpx.URL(normalized_url)
        except httpx.InvalidURL as exc:
            raise LemmatizerConfigError(f"Lemmatizer API URL is invalid: {normalized_url}") from exc
        if parsed.scheme not in {"http", "https"} or not parsed.host:
            raise LemmatizerConfigError(f"Lemmatizer API URL must be an absolute http(s) URL: {normalized_url}")
        if self.max_concurrency < 1:
            raise LemmatizerConfigError("Lemmatizer concurrency limit must be at least 1.")

        self.api_url = normalized_url.rstrip("/") + "/"
        self.api_key = (self.api_key or "").strip()

    def _ensure_client(self) -> httpx.Client:
        with self._client_lock:
            if self._client is None:
                self._client = httpx.Client(timeout=self.timeout_seconds)
            return self._client

    def close(self) -> None:
        with self._client_lock:
            if self._client is not None:
                self._client.close()
                self._client = None

    def request_headers(self) -> dict[str, str]:
        if not self.api_key:
            return {}
        return {SUBSCRIPTION_KEY_HEADER: self.api_key}

    def lemma_url(self, token: str) -> str:
        return f"{self.api_url}lemmatize/{quote(token, safe='')}"

    def lookup(
        self, tokens: Iterable[str], *, deadline_seconds: float | None = None
    ) -> dict[str, str]:
        """Return a token -> base form mapping for the tokens the service knows.

        Tokens without a base form, and tokens whose request failed, are absent.
        The mapping follows the first-seen order of ``tokens``.
        """
        distinct = list(dict.fromkeys(token for token in tokens if token))
        if not distinct:
            return {}

        deadline = self.deadline_seconds if deadline_seconds is None else deadline_seconds
        client = self._ensure_client()
        headers = self.request_headers()
        collected: dict[str, str] = {}

        executor = ThreadPoolExecutor(
            max_workers=min(self.max_concurrency, len(distinct)),
            thread_name_prefix="lemmatizer",
        )
        timed_out = False
        try:
            futures = {
                executor.submit(self._lookup_one, client, token, headers): token
                for token in distinct
            }
            done, pending = wait(futures, timeout=deadline)
            for future in done:
                lemma = future.result()
                if lemma:
                    collected[futures[future]] = lemma
            if pending:
                timed_out = True
                for future in pending:
                    future.cancel()
                logger.warning(
                    "lemmatizer_deadline_exceeded",
                    extra={
                        "deadline_seconds": deadline,
                        "completed": len(done),
                        "abandoned": len(pending),
                    },
                )
        finally:
            executor.shutdown(wait=not timed_out, cancel_futures=True)

        logger.debug(
            "lemmatizer_batch_completed",
            extra={"requested": len(distinct), "resolved": len(collected)},
        )
        return {token: collected[token] for token in distinct if token in collected}

    def lookup_base_forms(
        self, tokens: Iterable[str], *, deadline_seconds: float | None = None
    ) -> list[str]:
        results = self.lookup(tokens, deadline_seconds=deadline_seconds)
        return list(dict.fromkeys(results.values()))

    def _lookup_one(self, client: httpx.Client, token: str, headers: dict[str, str]) -> str | None:
        try:
            response = client.get(self.lemma_url(token), headers=headers)
            response.raise_for_status()
            body = response.json()
        except httpx.HTTPStatusError as exc:
            logger.warning(
                "lemmatizer_lookup_failed",
                extra={"token": token, "status_code": exc.response.status_code},
            )
            return None
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            # InvalidURL (e.g. an over-long token) is not an HTTPError subclass.
            logger.warning(
                "lemmatizer_lookup_failed",
                extra={"token": token, "error": f"{exc.__class__.__name__}: {exc}"},
            )
            return None
        except ValueError:
            logger.warning("lemmatizer_lookup_invalid_body", extra={"token": token})
            return None

        if isinstance(body, str) and body:
            return body
        return None


def build_lemmatizer_client(settings: Settings) -> LemmatizerClient | None:
    if not settings.lemmatizer_enabled:
        return None
    return LemmatizerClient(
        api_url=settings.api_url or "",
        api_key=settings.api_key,
        max_concurrency=settings.max_concurrency,
        timeout_seconds=settings.timeout_seconds,
        deadline_seconds=settings.deadline_seconds,
    )
