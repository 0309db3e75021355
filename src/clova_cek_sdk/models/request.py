"""CEK request envelope models."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class RequestType(str, Enum):
    """Request types the platform sends."""

    LAUNCH_REQUEST = "LaunchRequest"
    INTENT_REQUEST = "IntentRequest"
    EVENT_REQUEST = "EventRequest"
    SESSION_ENDED_REQUEST = "SessionEndedRequest"


class EventNamespace(str, Enum):
    """Namespaces of events carried by an EventRequest."""

    AUDIO_PLAYER = "AudioPlayer"
    CLOVA_SKILL = "ClovaSkill"


class AudioPlayerEventName(str, Enum):
    """Playback lifecycle events reported by the device."""

    PLAY_FINISHED = "PlayFinished"
    PLAY_PAUSED = "PlayPaused"
    PLAY_RESUMED = "PlayResumed"
    PLAY_STARTED = "PlayStarted"
    PLAY_STOPPED = "PlayStopped"
    PROGRESS_REPORT_DELAY_PASSED = "ProgressReportDelayPassed"
    PROGRESS_REPORT_INTERVAL_PASSED = "ProgressReportIntervalPassed"
    PROGRESS_REPORT_POSITION_PASSED = "ProgressReportPositionPassed"
    STREAM_REQUESTED = "StreamRequested"


class ClovaSkillEventName(str, Enum):
    """Events sent when a user enables or disables the extension."""

    SKILL_ENABLED = "SkillEnabled"
    SKILL_DISABLED = "SkillDisabled"


class _RequestModel(BaseModel):
    # Fields the platform adds later must not break parsing
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")


class User(_RequestModel):
    """Account linked to the device."""

    user_id: str
    access_token: str | None = None


class Session(_RequestModel):
    """Session information."""

    is_new: bool = Field(True, alias="new")
    session_attributes: dict[str, Any] = Field(default_factory=dict)
    session_id: str
    user: User

    @field_validator("session_attributes", mode="before")
    @classmethod
    def _none_to_empty(cls, value: Any) -> Any:
        return {} if value is None else value


class Application(_RequestModel):
    application_id: str


class ContentLayer(_RequestModel):
    width: int
    height: int


class Display(_RequestModel):
    size: str
    orientation: str | None = None
    dpi: int | None = None
    content_layer: ContentLayer | None = None


class Device(_RequestModel):
    device_id: str
    display: Display | None = None


class System(_RequestModel):
    """Application, device and user the request was made from."""

    application: Application
    device: Device | None = None
    user: User | None = None


class AudioPlayerState(_RequestModel):
    """Playback state reported by a device with audio capability."""

    player_activity: str
    offset_in_milliseconds: int | None = None
    total_in_milliseconds: int | None = None
    stream: Any = None


class RequestContext(_RequestModel):
    """Device and application metadata."""

    system: System | None = Field(None, alias="System")
    audio_player: AudioPlayerState | None = Field(None, alias="AudioPlayer")


class Slot(_RequestModel):
    """Slot value extracted from the user's utterance."""

    name: str
    value: str | int | float | None = None
    value_type: str | None = None
    unit: str | None = None


class Intent(_RequestModel):
    name: str = ""
    slots: dict[str, Slot] | None = None


class Event(_RequestModel):
    """Player or skill lifecycle event carried by an EventRequest."""

    # Unknown namespaces and names stay plain strings
    namespace: EventNamespace | str = Field("", union_mode="left_to_right")
    name: AudioPlayerEventName | ClovaSkillEventName | str = Field("", union_mode="left_to_right")
    payload: Any = None


class RequestInfo(_RequestModel):
    """The `request` member, tagged by `type`."""

    type: str
    request_id: str | None = None
    timestamp: str | None = None
    locale: str | None = None
    extension_id: str | None = None
    intent: Intent | None = None
    event: Event | None = None


class RequestBody(_RequestModel):
    """Full CEK request envelope."""

    version: str = "1.0"
    session: Session | None = None
    context: RequestContext | None = None
    request: RequestInfo
