import pytest
from fastapi.testclient import TestClient

from hinglish.api.dependencies import get_gateway
from hinglish.config import settings
from hinglish.core.translation import ProviderError
from hinglish.main import app

from tests.helpers import make_gateway


@pytest.fixture
def client():
    yield TestClient(app)
    app.dependency_overrides.clear()


def use_gateway(gateway):
    app.dependency_overrides[get_gateway] = lambda: gateway
    return gateway


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


class TestTranslateEndpoint:
    def test_returns_pipeline_result(self, client):
        use_gateway(make_gateway("Arre, API endpoint check karo?"))

        response = client.post(
            "/api/v1/translate", json={"text": "Hey, can you check the API endpoint?"}
        )

        assert response.status_code == 200
        body = response.json()
        assert body["original"] == "Hey, can you check the API endpoint?"
        assert body["translated_text"] == "Arre, API endpoint check karo? "
        assert body["confidence"] == 90
        assert body["metadata"] == {
            "domain": "general",
            "tone": "informal",
            "strategy": "technical",
        }

    def test_passes_options_into_prompt(self, client):
        gateway = use_gateway(make_gateway())

        client.post(
            "/api/v1/translate",
            json={"text": "Good morning", "style": "playful", "level": "beginner"},
        )

        prompt = gateway.translate.await_args.args[0].text
        assert "Style: playful" in prompt
        assert "Language Level: beginner" in prompt

    @pytest.mark.parametrize("text", ["", "42", "[1,2]"])
    def test_rejects_untranslatable_text(self, client, text):
        gateway = use_gateway(make_gateway())

        response = client.post("/api/v1/translate", json={"text": text})

        assert response.status_code == 422
        assert response.json()["detail"] == "This text does not need translation"
        gateway.translate.assert_not_awaited()

    def test_pipeline_failure_is_bad_gateway(self, client):
        use_gateway(make_gateway(error=ProviderError("down", status_code=500)))

        response = client.post("/api/v1/translate", json={"text": "Good morning"})

        assert response.status_code == 502
        assert response.json()["detail"] == "Translation failed: API error 500: down"


class TestQuickTranslateEndpoint:
    def test_returns_original_and_translation(self, client):
        use_gateway(make_gateway("suprabhat"))

        response = client.post("/api/v1/translate/quick", json={"text": "Good morning"})

        assert response.status_code == 200
        assert response.json() == {"original": "Good morning", "translated": "suprabhat"}

    def test_provider_failure_returns_fallback_message(self, client):
        use_gateway(make_gateway(error=ProviderError("down", status_code=500)))

        response = client.post("/api/v1/translate/quick", json={"text": "Good morning"})

        assert response.status_code == 200
        assert response.json()["translated"] == "Translation failed: API error 500: down"


def test_analyze_does_not_call_provider(client):
    gateway = use_gateway(make_gateway())

    response = client.post("/api/v1/analyze", json={"text": "Break a leg at the festival"})

    assert response.status_code == 200
    body = response.json()
    assert body["strategy"] == "idiomatic"
    assert body["confidence"] == 70
    assert body["context"]["has_idioms"] is True
    assert body["context"]["has_cultural_references"] is True
    gateway.translate.assert_not_awaited()


class TestAuthentication:
    @pytest.fixture(autouse=True)
    def require_token(self, monkeypatch):
        monkeypatch.setattr(settings, "api_auth_token", "letmein")

    def test_missing_token(self, client):
        use_gateway(make_gateway())
        response = client.post("/api/v1/translate/quick", json={"text": "Good morning"})
        assert response.status_code == 401

    def test_bearer_token(self, client):
        use_gateway(make_gateway())
        response = client.post(
            "/api/v1/translate/quick",
            json={"text": "Good morning"},
            headers={"Authorization": "Bearer letmein"},
        )
        assert response.status_code == 200

    def test_wrong_api_key(self, client):
        use_gateway(make_gateway())
        response = client.post(
            "/api/v1/translate/quick",
            json={"text": "Good morning"},
            headers={"X-API-Key": "nope"},
        )
        assert response.status_code == 401
