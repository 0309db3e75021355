"""AudioPlayer directive models."""

from enum import Enum
from typing import Literal
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class PlayBehavior(str, Enum):
    """How a new stream relates to the device's playback queue."""

    REPLACE_ALL = "REPLACE_ALL"
    ENQUEUE = "ENQUEUE"


class _DirectiveModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Metadata(_DirectiveModel):
    """Titles shown on devices with a screen."""

    title_text: str
    title_sub_text1: str
    title_sub_text2: str | None = None


class Source(_DirectiveModel):
    """Provider of the audio content."""

    name: str
    logo_url: str | None = None


class ProgressReport(_DirectiveModel):
    progress_report_delay_in_milliseconds: int | None = None
    progress_report_interval_in_milliseconds: int | None = None
    progress_report_position_in_milliseconds: int | None = None


class AudioStreamInfo(_DirectiveModel):
    begin_at_in_milliseconds: int = 0
    custom_data: str | None = None
    duration_in_milliseconds: int | None = None
    progress_report: ProgressReport | None = None
    token: str
    url: str
    url_playable: bool = True


class AudioItem(_DirectiveModel):
    art_image_url: str | None = None
    audio_item_id: str = Field(default_factory=lambda: str(uuid4()))
    header_text: str | None = None
    stream: AudioStreamInfo
    title_sub_text1: str
    title_sub_text2: str | None = None
    title_text: str


class DirectiveHeader(_DirectiveModel):
    namespace: Literal["AudioPlayer"] = "AudioPlayer"
    name: Literal["Play"] = "Play"
    dialog_request_id: str | None = None
    message_id: str = Field(default_factory=lambda: str(uuid4()))


class PlayPayload(_DirectiveModel):
    audio_item: AudioItem
    source: Source
    play_behavior: PlayBehavior = PlayBehavior.REPLACE_ALL


class AudioPlayerPlayDirective(_DirectiveModel):
    """AudioPlayer.Play: start streaming audio on the device."""

    header: DirectiveHeader
    payload: PlayPayload
