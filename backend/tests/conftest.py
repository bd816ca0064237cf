from __future__ import annotations

from collections.abc import Iterable

import pytest

from baseforms.core.config import Settings


class FakeLookup:
    def __init__(self, mapping: dict[str, str] | None = None):
        self.mapping = mapping or {}
        self.calls: list[list[str]] = []
        self.closed = False

    def lookup_base_forms(
        self, tokens: Iterable[str], *, deadline_seconds: float | None = None
    ) -> list[str]:
        requested = list(tokens)
        self.calls.append(requested)
        return list(
            dict.fromkeys(self.mapping[token] for token in requested if token in self.mapping)
        )

    def close(self) -> None:
        self.closed = True


FINNISH_BASE_FORMS = {
    "talossa": "talo",
    "taloon": "talo",
    "kissat": "kissa",
    "koirien": "koira",
    "on": "olla",
    "talo": "talo",
    "koti": "koti",
    "kissan": "kissaeläin",
}


@pytest.fixture
def fake_lookup() -> FakeLookup:
    return FakeLookup(FINNISH_BASE_FORMS)


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        environment="test",
        app_name="finnish-base-forms-test",
        host="127.0.0.1",
        port=8001,
        api_url="https://lemmatizer.test/api",
        api_key="test-key",
    )
