"""Pydantic models for the CEK request/response wire format."""

from .audio_player import AudioPlayerPlayDirective, Metadata, PlayBehavior, Source
from .request import (
    AudioPlayerEventName,
    ClovaSkillEventName,
    Event,
    EventNamespace,
    RequestBody,
    RequestType,
    Session,
    Slot,
    User,
)
from .response import Reprompt, Response, ResponseBody
from .speech import (
    OutputSpeech,
    OutputSpeechList,
    OutputSpeechSet,
    OutputSpeechSimple,
    OutputSpeechVerbose,
    SpeechInfo,
    SpeechInfoText,
    SpeechInfoUrl,
    SpeechLang,
)

__all__ = [
    "RequestBody",
    "RequestType",
    "Event",
    "EventNamespace",
    "AudioPlayerEventName",
    "ClovaSkillEventName",
    "Session",
    "Slot",
    "User",
    "ResponseBody",
    "Response",
    "Reprompt",
    "OutputSpeech",
    "OutputSpeechSimple",
    "OutputSpeechList",
    "OutputSpeechSet",
    "OutputSpeechVerbose",
    "SpeechInfo",
    "SpeechInfoText",
    "SpeechInfoUrl",
    "SpeechLang",
    "AudioPlayerPlayDirective",
    "Metadata",
    "PlayBehavior",
    "Source",
]
