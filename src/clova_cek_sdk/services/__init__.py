"""Verification, context and dispatch."""

from .context import Context
from .skill import Client, SkillConfigurator
from .speech_builder import SpeechBuilder
from .verifier import verify

__all__ = [
    "Client",
    "Context",
    "SkillConfigurator",
    "SpeechBuilder",
    "verify",
]
