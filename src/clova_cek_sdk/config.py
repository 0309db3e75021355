"""Application configuration via environment variables."""

from pydantic_settings import BaseSettings

from .models.speech import SpeechLang


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    environment: str = "development"
    debug: bool = False
    service_name: str = "clova-cek-sdk"

    # Skill
    application_id: str = ""  # Extension ID registered in the Clova developer center
    default_lang: SpeechLang = "ja"
    skill_path: str = "/clova"

    # Request verification
    signature_header: str = "SignatureCEK"

    class Config:
        env_prefix = "CLOVA_"
        case_sensitive = False


settings = Settings()
