"""Shared fixtures: sample CEK payloads and test clients."""

import copy
from typing import Any

import pytest
from fastapi.testclient import TestClient

from clova_cek_sdk.main import app

# Request captured from the platform, with its SignatureCEK header
SIGNED_REQUEST_BODY = (
    '{"version":"1.0","session":{"new":true,"sessionAttributes":{},"sessionId":"606548d7-c0d7-47a8-a696-fe9b8b77796e",'
    '"user":{"userId":"Tda7Ron7Rn-2BZdXp10uvg"}},"context":{"System":{"application":{"applicationId":"com.chens.morning"},'
    '"device":{"deviceId":"80c6ddd0ee45c77ab3ffc29381b4f328aa466b7b3e0b25b60a35b965fa9ab844","display":{"size":"none",'
    '"contentLayer":{"width":0,"height":0}}},"user":{"userId":"Tda7Ron7Rn-2BZdXp10uvg"}}},"request":{"type":"LaunchRequest",'
    '"requestId":"e6736120-9571-4372-b97c-2656566595fc","timestamp":"2018-07-03T04:20:01Z","locale":"ja-JP",'
    '"extensionId":"com.chens.morning","intent":{"intent":"","name":"","slots":null},"event":{"namespace":"","name":"",'
    '"payload":null}}}'
)
SIGNED_REQUEST_SIGNATURE = (
    "qzaLUJwe1g4CPK7P02hXRD9Gr5/+JC5bJl93134mA4QIYBm1zzfFkRgZZVzgyhGN6YW5vRjFIM6bNcfylWQgs3VYTYnUXrRbqh9dWzuMVyOE2z59"
    "TfVH9h+jsacvSI2agZ/zy7Wln3D5vAreEU0IbS6Hh/FXQZAGpHJB1Ve1ZMXc8qb9qYSVDxtqqFJ1WLOHBzJ5XZ+OXPiZlcN7H17Q07o28AweDGrT"
    "Lcbwk15kbFdmUnZPIxUyuPinT75tlsqCIiGbIlYuzPN/vjAYE9A1SGFU5R6GJjeZvDdf26VSmpgXy2GP4yZTnB+4AU4P6D0Hl/9Y4i6txkKHcBpn"
    "jLoKkg=="
)
SIGNED_APPLICATION_ID = "com.chens.morning"

_CONTEXT = {
    "System": {
        "application": {"applicationId": "com.example.pizza"},
        "device": {
            "deviceId": "096e6b27-1717-33e9-b0a7-510a48658a9b",
            "display": {"size": "l100", "orientation": "landscape", "dpi": 96},
        },
        "user": {"userId": "V0qe", "accessToken": "XHapQasdfsdfFsdfasdflQQ7"},
    }
}

_SESSION = {
    "new": False,
    "sessionAttributes": {"intent": "OrderPizza"},
    "sessionId": "a29cfead-c5ba-474d-8745-6c1a6625f0c5",
    "user": {"userId": "V0qe", "accessToken": "XHapQasdfsdfFsdfasdflQQ7"},
}

LAUNCH_REQUEST = {
    "version": "0.1.0",
    "session": {**_SESSION, "new": True, "sessionAttributes": {}},
    "context": _CONTEXT,
    "request": {
        "type": "LaunchRequest",
        "requestId": "e5464f7f-7e49-4a08-a4d1-2f5f3e0e8d0e",
        "timestamp": "2018-06-15T05:11:21Z",
    },
}

INTENT_REQUEST = {
    "version": "0.1.0",
    "session": _SESSION,
    "context": _CONTEXT,
    "request": {
        "type": "IntentRequest",
        "requestId": "f09874hiudf-sdf-4wku-flksdjfo4hjsdf",
        "timestamp": "2018-06-15T05:11:21Z",
        "intent": {
            "name": "OrderPizza",
            "slots": {
                "pizzaType": {"name": "pizzaType", "value": "pepperoni"},
                "pizzaNum": {"name": "pizzaNum", "value": 3},
            },
        },
    },
}

EVENT_REQUEST = {
    "version": "0.1.0",
    "context": _CONTEXT,
    "request": {
        "type": "EventRequest",
        "requestId": "a4a4b1a2-5c8f-4d0e-bb0a-7f6e8d0e1f2a",
        "timestamp": "2018-06-15T05:11:21Z",
        "extensionId": "com.example.pizza",
        "event": {
            "namespace": "AudioPlayer",
            "name": "PlayFinished",
            "payload": {"offsetInMilliseconds": 180000, "token": "track-1"},
        },
    },
}

SESSION_ENDED_REQUEST = {
    "version": "0.1.0",
    "session": _SESSION,
    "context": _CONTEXT,
    "request": {
        "type": "SessionEndedRequest",
        "requestId": "41fc2d5e-8a38-4bb5-9d6c-0b8e4d1f6a7c",
        "timestamp": "2018-06-15T05:11:21Z",
    },
}


@pytest.fixture
def launch_request() -> dict[str, Any]:
    return copy.deepcopy(LAUNCH_REQUEST)


@pytest.fixture
def intent_request() -> dict[str, Any]:
    return copy.deepcopy(INTENT_REQUEST)


@pytest.fixture
def event_request() -> dict[str, Any]:
    return copy.deepcopy(EVENT_REQUEST)


@pytest.fixture
def session_ended_request() -> dict[str, Any]:
    return copy.deepcopy(SESSION_ENDED_REQUEST)


@pytest.fixture
def signed_request() -> tuple[str, str, str]:
    """(signature, application id, body) as sent by the platform."""
    return SIGNED_REQUEST_SIGNATURE, SIGNED_APPLICATION_ID, SIGNED_REQUEST_BODY


@pytest.fixture
def client() -> TestClient:
    """Test client for the echo skill app (verification disabled)."""
    return TestClient(app)
