"""
CEK request verification.

Every request from the platform carries a `SignatureCEK` header: the
base64-encoded RSA SHA-256 signature of the raw body, made with the
platform's private key. We check it against the published public key,
then make sure the request is addressed to our extension.
"""

import base64
import json
import logging
from functools import lru_cache
from typing import Any

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import padding
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPublicKey

from ..errors import (
    InvalidApplicationIdError,
    InvalidSignatureError,
    MalformedPayloadError,
    MissingApplicationIdError,
    MissingRequestBodyError,
    MissingSignatureError,
)

logger = logging.getLogger(__name__)

CEK_PUBLIC_KEY = """-----BEGIN PUBLIC KEY-----
MIIBIjANBgkqhkiG9w0BAQEFAAOCAQ8AMIIBCgKCAQEAwiMvQNKD/WQcX9KiWNMb
nSR+dJYTWL6TmqqwWFia69TyiobVIfGfxFSefxYyMTcFznoGCpg8aOCAkMxUH58N
0/UtWWvfq0U5FQN9McE3zP+rVL3Qul9fbC2mxvazxpv5KT7HEp780Yew777cVPUv
3+I73z2t0EHnkwMesmpUA/2Rp8fW8vZE4jfiTRm5vSVmW9F37GC5TEhPwaiIkIin
KCrH0rXbfe3jNWR7qKOvVDytcWgRHJqRUuWhwJuAnuuqLvqTyAawqEslhKZ5t+1Z
0GN8b2zMENSuixa1M9K0ZKUw3unzHpvgBlYmXRGPTSuq/EaGYWyckYz8CBq5Lz2Q
UwIDAQAB
-----END PUBLIC KEY-----
"""


@lru_cache(maxsize=1)
def _get_public_key() -> RSAPublicKey:
    """Load the CEK public key (cached)."""
    return serialization.load_pem_public_key(CEK_PUBLIC_KEY.encode("ascii"))


def _check_signature(signature: str, body: bytes) -> None:
    try:
        signature_bytes = base64.b64decode(signature)
        _get_public_key().verify(signature_bytes, body, padding.PKCS1v15(), hashes.SHA256())
    except (ValueError, InvalidSignature) as e:
        raise InvalidSignatureError(signature) from e


def _parse_body(body: bytes) -> dict[str, Any]:
    try:
        payload = json.loads(body)
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise MalformedPayloadError(str(e)) from e

    if not isinstance(payload, dict):
        raise MalformedPayloadError(f"expected a JSON object, got {type(payload).__name__}")
    return payload


def _check_application_id(payload: dict[str, Any], application_id: str) -> None:
    try:
        actual = payload["context"]["System"]["application"]["applicationId"]
    except (KeyError, TypeError):
        actual = None

    if actual != application_id:
        raise InvalidApplicationIdError(application_id)


def verify(signature: str | None, application_id: str | None, request_body: str | bytes | None) -> dict[str, Any]:
    """
    Verify a CEK request and return its parsed payload.

    Checks run in a fixed order so the first failure is always the same:
    presence of signature, application id and body, then the signature
    itself, then the JSON body, then the application id in the payload.

    Args:
        signature: Value of the SignatureCEK header
        application_id: Extension ID the request must be addressed to
        request_body: Raw request body, exactly as received

    Returns:
        The request payload as a dict

    Raises:
        VerificationError: One of its subclasses, for the first failed check
    """
    if not signature:
        raise MissingSignatureError()

    if not application_id:
        raise MissingApplicationIdError()

    if not request_body:
        raise MissingRequestBodyError()

    body = request_body.encode("utf-8") if isinstance(request_body, str) else request_body

    _check_signature(signature, body)

    payload = _parse_body(body)
    _check_application_id(payload, application_id)

    logger.debug(f"Verified request for {application_id}")
    return payload
