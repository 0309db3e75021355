"""Clova Extension Kit (CEK) skill SDK."""

from . import models
from .errors import (
    ClovaError,
    HandlerNotFoundError,
    InvalidApplicationIdError,
    InvalidSignatureError,
    MalformedPayloadError,
    MissingApplicationIdError,
    MissingRequestBodyError,
    MissingSignatureError,
    VerificationError,
)
from .middleware import Middleware, middleware
from .services.context import Context
from .services.skill import Client, SkillConfigurator
from .services.speech_builder import SpeechBuilder
from .services.verifier import verify

verifier = verify

__all__ = [
    "models",
    "Client",
    "Context",
    "Middleware",
    "middleware",
    "SkillConfigurator",
    "SpeechBuilder",
    "verifier",
    "verify",
    "ClovaError",
    "VerificationError",
    "MissingSignatureError",
    "MissingApplicationIdError",
    "MissingRequestBodyError",
    "InvalidSignatureError",
    "MalformedPayloadError",
    "InvalidApplicationIdError",
    "HandlerNotFoundError",
]
