"""Builders for SpeechInfo objects."""

from ..models.speech import SpeechInfoText, SpeechInfoUrl, SpeechLang

DEFAULT_LANG: SpeechLang = "ja"


class SpeechBuilder:
    """Create SpeechInfo objects in a fixed default language.

    The language is per instance, so skills answering in different
    languages can each hold their own builder.
    """

    def __init__(self, default_lang: SpeechLang = DEFAULT_LANG):
        self.default_lang = default_lang

    def create_speech_text(self, value: str, lang: SpeechLang | None = None) -> SpeechInfoText:
        """Plain text in `lang`, or the builder's default language."""
        return SpeechInfoText(lang=lang or self.default_lang, value=value)

    def create_speech_url(self, value: str) -> SpeechInfoUrl:
        """Audio file URL. URL speech carries no language."""
        return SpeechInfoUrl(value=value)
