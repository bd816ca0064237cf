from fastapi.testclient import TestClient

from baseforms.main import create_app


def test_application_imports_and_starts(test_settings, fake_lookup) -> None:
    app = create_app(test_settings, lemmatizer_factory=lambda _settings: fake_lookup)
    client = TestClient(app)

    response = client.get("/api/")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"
