"""CEK response envelope models."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .audio_player import AudioPlayerPlayDirective
from .speech import OutputSpeechList, OutputSpeechSet, OutputSpeechSimple


class _ResponseModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Reprompt(_ResponseModel):
    """Speech played when the user does not answer."""

    output_speech: OutputSpeechSimple | OutputSpeechList | OutputSpeechSet | dict[str, Any] = Field(
        default_factory=dict
    )


class Response(_ResponseModel):
    """The `response` member. An empty `outputSpeech` ({}) means no speech."""

    card: dict[str, Any] = Field(default_factory=dict)
    directives: list[AudioPlayerPlayDirective] = Field(default_factory=list)
    output_speech: OutputSpeechSimple | OutputSpeechList | OutputSpeechSet | dict[str, Any] = Field(
        default_factory=dict
    )
    reprompt: Reprompt | None = None
    should_end_session: bool = False


class ResponseBody(_ResponseModel):
    """Full CEK response envelope."""

    version: str
    session_attributes: dict[str, Any] = Field(default_factory=dict)
    response: Response = Field(default_factory=Response)

    def to_wire(self) -> dict[str, Any]:
        """Serialize with camelCase keys, omitting unset optional members."""
        body = self.model_dump(mode="json", by_alias=True, exclude_none=True)
        # Attribute values belong to the skill; nulls in them are kept
        body["sessionAttributes"] = self.model_dump(mode="json", include={"session_attributes"})[
            "session_attributes"
        ]
        return body
