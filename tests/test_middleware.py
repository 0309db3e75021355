"""Tests for request verification on the skill route."""

import json

import pytest
from fastapi.testclient import TestClient

from clova_cek_sdk.app import create_app
from clova_cek_sdk.services.context import Context
from clova_cek_sdk.services.skill import Client
from clova_cek_sdk.services.speech_builder import SpeechBuilder

speech = SpeechBuilder()


def launch_handler(ctx: Context) -> None:
    ctx.set_simple_speech(speech.create_speech_text(f"ようこそ {ctx.get_user().user_id}"))


@pytest.fixture
def verified_client(signed_request: tuple[str, str, str]) -> TestClient:
    _, application_id, _ = signed_request
    configurator = Client.configure_skill().on_launch_request(launch_handler)
    return TestClient(create_app(configurator, application_id=application_id))


def test_verified_request_dispatched(verified_client: TestClient, signed_request: tuple[str, str, str]) -> None:
    """Test that a genuine request reaches the handler with the verified payload."""
    signature, _, body = signed_request

    response = verified_client.post(
        "/clova",
        content=body,
        headers={"SignatureCEK": signature, "Content-Type": "application/json"},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["version"] == json.loads(body)["version"]
    assert data["response"]["outputSpeech"]["values"]["value"] == "ようこそ Tda7Ron7Rn-2BZdXp10uvg"


def test_signature_header_is_case_insensitive(
    verified_client: TestClient, signed_request: tuple[str, str, str]
) -> None:
    """Test that the signature header name is matched case-insensitively."""
    signature, _, body = signed_request

    response = verified_client.post("/clova", content=body, headers={"signaturecek": signature})

    assert response.status_code == 200


def test_missing_signature_rejected(verified_client: TestClient, signed_request: tuple[str, str, str]) -> None:
    """Test that requests without a signature header get 400."""
    _, _, body = signed_request

    response = verified_client.post("/clova", content=body)

    assert response.status_code == 400
    assert response.json()["detail"] == "Missing signature."


def test_tampered_signature_rejected(verified_client: TestClient, signed_request: tuple[str, str, str]) -> None:
    """Test that a wrong signature gets 403."""
    _, _, body = signed_request

    response = verified_client.post("/clova", content=body, headers={"SignatureCEK": "some-invalid-signature"})

    assert response.status_code == 403
    assert response.json()["detail"] == 'Invalid signature: "some-invalid-signature".'


def test_other_application_rejected(signed_request: tuple[str, str, str]) -> None:
    """Test that requests for another extension get 403."""
    signature, _, body = signed_request
    configurator = Client.configure_skill().on_launch_request(launch_handler)
    client = TestClient(create_app(configurator, application_id="com.example.other"))

    response = client.post("/clova", content=body, headers={"SignatureCEK": signature})

    assert response.status_code == 403
    assert response.json()["detail"] == "Invalid application id: com.example.other."


def test_unverified_route_accepts_plain_json(launch_request: dict) -> None:
    """Test that without an application id the body is used as sent."""
    configurator = Client.configure_skill().on_launch_request(launch_handler)
    client = TestClient(create_app(configurator))

    response = client.post("/clova", json=launch_request)

    assert response.status_code == 200
    assert response.json()["response"]["outputSpeech"]["values"]["value"] == "ようこそ V0qe"
