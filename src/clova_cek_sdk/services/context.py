"""Request/response context handed to skill handlers."""

import logging
from typing import Any

from pydantic import TypeAdapter

from ..models.audio_player import (
    AudioItem,
    AudioPlayerPlayDirective,
    AudioStreamInfo,
    DirectiveHeader,
    Metadata,
    PlayBehavior,
    PlayPayload,
    Source,
)
from ..models.request import RequestBody, RequestType, User
from ..models.response import Reprompt, Response, ResponseBody
from ..models.speech import (
    OutputSpeech,
    OutputSpeechList,
    OutputSpeechSet,
    OutputSpeechSimple,
    OutputSpeechVerbose,
    SpeechInfo,
)

logger = logging.getLogger(__name__)

SlotValue = str | int | float | None

_output_speech = TypeAdapter(OutputSpeech)

# Request types whose response closes the session unless the handler says otherwise
END_SESSION_BY_DEFAULT = frozenset({RequestType.EVENT_REQUEST.value})


class Context:
    """
    Wraps one request/response exchange.

    `request_object` is the validated inbound envelope and is never modified.
    `response_object` starts as a skeleton response and is mutated by the
    setters below:

    - version echoed from the request
    - sessionAttributes copied from the inbound session ({} without a session)
    - empty card, no directives, outputSpeech {}
    - shouldEndSession true only for EventRequest
    """

    def __init__(self, request: RequestBody | dict[str, Any]):
        if not isinstance(request, RequestBody):
            request = RequestBody.model_validate(request)

        self.request_object = request
        session = request.session
        self.response_object = ResponseBody(
            version=request.version,
            session_attributes=dict(session.session_attributes) if session else {},
            response=Response(should_end_session=self.request_type in END_SESSION_BY_DEFAULT),
        )

    @property
    def request_type(self) -> str:
        """Type tag of the inbound request, e.g. 'IntentRequest'."""
        return self.request_object.request.type

    def end_session(self) -> None:
        """Close the session and drop all session attributes."""
        self.response_object.response.should_end_session = True
        self.response_object.session_attributes = {}

    def get_session_id(self) -> str | None:
        """Session id, or None for requests without a session."""
        session = self.request_object.session
        return session.session_id if session else None

    def get_user(self) -> User | None:
        session = self.request_object.session
        return session.user if session else None

    def get_session_attributes(self) -> dict[str, Any]:
        """Attributes the platform sent back from the previous response."""
        session = self.request_object.session
        return session.session_attributes if session else {}

    def get_intent_name(self) -> str | None:
        """Intent name, or None when the request carries no intent."""
        request = self.request_object.request
        if request.type != RequestType.INTENT_REQUEST.value or request.intent is None:
            return None
        return request.intent.name

    def get_slots(self) -> dict[str, SlotValue]:
        """Map slot names to their values. Empty for requests without slots."""
        request = self.request_object.request
        if request.type != RequestType.INTENT_REQUEST.value:
            return {}
        if request.intent is None or not request.intent.slots:
            return {}

        return {slot.name: slot.value for slot in request.intent.slots.values()}

    def get_slot(self, slot_name: str) -> SlotValue:
        """Value of one slot, or None if the slot was not filled."""
        return self.get_slots().get(slot_name)

    def set_output_speech(self, output_speech: OutputSpeech | dict[str, Any], reprompt: bool = False) -> None:
        """
        Set the speech of the response.

        Args:
            output_speech: SimpleSpeech, SpeechList or SpeechSet (model or wire dict)
            reprompt: Write to reprompt.outputSpeech instead of outputSpeech
        """
        speech = _output_speech.validate_python(output_speech)

        if reprompt:
            self.response_object.response.reprompt = Reprompt(output_speech=speech)
        else:
            self.response_object.response.output_speech = speech

    def set_reprompt(self, output_speech: OutputSpeech | dict[str, Any]) -> None:
        self.set_output_speech(output_speech, reprompt=True)

    def set_simple_speech(self, speech_info: SpeechInfo, reprompt: bool = False) -> "Context":
        self.set_output_speech(OutputSpeechSimple(values=speech_info), reprompt)
        return self

    def set_speech_list(self, speech_info: list[SpeechInfo], reprompt: bool = False) -> "Context":
        self.set_output_speech(OutputSpeechList(values=speech_info), reprompt)
        return self

    def set_speech_set(
        self,
        speech_info_brief: SpeechInfo,
        speech_info_verbose: OutputSpeechVerbose,
        reprompt: bool = False,
    ) -> "Context":
        """Set brief and verbose speech; the device picks the one that fits."""
        self.set_output_speech(
            OutputSpeechSet(brief=speech_info_brief, verbose=speech_info_verbose),
            reprompt,
        )
        return self

    def set_session_attributes(self, session_attributes: dict[str, Any]) -> None:
        """Replace the session attributes sent back to the platform."""
        self.response_object.session_attributes = session_attributes

    def add_audio_player_play_directive(
        self,
        url: str,
        token: str,
        metadata: Metadata | dict[str, Any],
        source: Source | dict[str, Any],
        play_behavior: PlayBehavior = PlayBehavior.REPLACE_ALL,
        begin_at_in_milliseconds: int = 0,
        url_playable: bool = True,
    ) -> "Context":
        """
        Append an AudioPlayer.Play directive.

        Each directive gets a new messageId; dialogRequestId is the inbound
        requestId. Directives added earlier are kept.
        """
        if not isinstance(metadata, Metadata):
            metadata = Metadata.model_validate(metadata)

        directive = AudioPlayerPlayDirective(
            header=DirectiveHeader(dialog_request_id=self.request_object.request.request_id),
            payload=PlayPayload(
                audio_item=AudioItem(
                    title_text=metadata.title_text,
                    title_sub_text1=metadata.title_sub_text1,
                    title_sub_text2=metadata.title_sub_text2,
                    stream=AudioStreamInfo(
                        begin_at_in_milliseconds=begin_at_in_milliseconds,
                        token=token,
                        url=url,
                        url_playable=url_playable,
                    ),
                ),
                source=source,
                play_behavior=play_behavior,
            ),
        )
        self.response_object.response.directives.append(directive)

        logger.debug(f"AudioPlayer.Play directive added: {directive.header.message_id}")
        return self

    def response_body(self) -> dict[str, Any]:
        """Response payload as it goes on the wire."""
        return self.response_object.to_wire()
