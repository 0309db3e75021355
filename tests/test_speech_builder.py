"""Tests for SpeechInfo builders."""

import pytest
from pydantic import ValidationError

from clova_cek_sdk.services.speech_builder import DEFAULT_LANG, SpeechBuilder


def test_default_lang() -> None:
    """Test that builders speak Japanese unless configured otherwise."""
    assert DEFAULT_LANG == "ja"
    assert SpeechBuilder().default_lang == "ja"


def test_create_speech_text() -> None:
    """Test plain text speech in the default language."""
    info = SpeechBuilder().create_speech_text("おはよう")
    assert info.model_dump() == {"lang": "ja", "type": "PlainText", "value": "おはよう"}


def test_create_speech_text_custom_lang() -> None:
    """Test that an explicit language overrides the default."""
    info = SpeechBuilder().create_speech_text("Hello", lang="en")
    assert info.model_dump() == {"lang": "en", "type": "PlainText", "value": "Hello"}


def test_builders_do_not_share_language() -> None:
    """Test that each builder keeps its own default language."""
    korean = SpeechBuilder(default_lang="ko")
    japanese = SpeechBuilder()

    assert korean.create_speech_text("안녕").lang == "ko"
    assert japanese.create_speech_text("やあ").lang == "ja"


def test_create_speech_url() -> None:
    """Test URL speech, which carries an empty language."""
    info = SpeechBuilder(default_lang="en").create_speech_url("http://clova.line.me/sample.mp3")
    assert info.model_dump() == {"lang": "", "type": "URL", "value": "http://clova.line.me/sample.mp3"}


def test_unsupported_lang_rejected() -> None:
    """Test that languages the platform does not speak are rejected."""
    with pytest.raises(ValidationError):
        SpeechBuilder(default_lang="fr").create_speech_text("Bonjour")
