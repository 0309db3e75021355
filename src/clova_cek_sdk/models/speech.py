"""Output speech models."""

from typing import Annotated, Literal

from pydantic import BaseModel, Field

SpeechLang = Literal["ja", "ko", "en"]


class SpeechInfoText(BaseModel):
    """Plain text to be synthesized."""

    lang: SpeechLang
    type: Literal["PlainText"] = "PlainText"
    value: str


class SpeechInfoUrl(BaseModel):
    """Audio file to be played as speech."""

    lang: Literal[""] = ""
    type: Literal["URL"] = "URL"
    value: str


SpeechInfo = Annotated[SpeechInfoText | SpeechInfoUrl, Field(discriminator="type")]


class OutputSpeechSimple(BaseModel):
    """A single sentence."""

    type: Literal["SimpleSpeech"] = "SimpleSpeech"
    values: SpeechInfo


class OutputSpeechList(BaseModel):
    """Several sentences played in order."""

    type: Literal["SpeechList"] = "SpeechList"
    values: list[SpeechInfo]


# The verbose part of a SpeechSet is a SimpleSpeech or SpeechList without brief/verbose
OutputSpeechVerbose = Annotated[OutputSpeechSimple | OutputSpeechList, Field(discriminator="type")]


class OutputSpeechSet(BaseModel):
    """Brief and verbose renditions of the same answer, for devices with and without a screen."""

    type: Literal["SpeechSet"] = "SpeechSet"
    brief: SpeechInfo
    verbose: OutputSpeechVerbose


OutputSpeech = Annotated[
    OutputSpeechSimple | OutputSpeechList | OutputSpeechSet,
    Field(discriminator="type"),
]
