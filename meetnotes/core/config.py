from typing import Optional

from pydantic import BaseModel, Field, SecretStr
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

DEFAULT_PROMPT = (
    "Please summarize this meeting transcript, highlighting key decisions, "
    "action items, and important discussion points."
)

class AppConfig(BaseModel):
    """
    Configuration for general application settings.
    """
    log_file: str = "meetnotes.log"
    log_level: str = "INFO"

class ModelsConfig(BaseModel):
    """
    Configuration for the summarization LLM.
    """
    llm_base_url: str = "https://api.openai.com/v1"
    llm_api_key: Optional[SecretStr] = Field(default=SecretStr("dummy"))
    llm_summary: str = "gpt-4o-mini"
    temperature: float = 0.3

class WorkflowConfig(BaseModel):
    """
    Defaults for the summary form and the collaborators it talks to.
    """
    default_prompt: str = DEFAULT_PROMPT
    default_recipient: str = ""
    generator: str = "llm"     # llm | service
    delivery: str = "resend"   # resend | service

class ServiceConfig(BaseModel):
    """
    Remote summary web service (generate-summary / send-email routes).
    """
    base_url: str = "http://localhost:3000"
    request_timeout: Optional[float] = None # seconds, None waits indefinitely

class DeliveryConfig(BaseModel):
    """
    Configuration for email delivery through Resend.
    """
    resend_api_key: Optional[SecretStr] = Field(default=None)
    sender: str = "Meeting Notes <onboarding@resend.dev>"
    subject: str = "Meeting Summary"
    request_timeout: Optional[float] = None


class Settings(BaseSettings):
    """
    Global application settings, aggregating all module configurations.
    """
    app: AppConfig = Field(default_factory=AppConfig)
    models: ModelsConfig = Field(default_factory=ModelsConfig)
    workflow: WorkflowConfig = Field(default_factory=WorkflowConfig)
    service: ServiceConfig = Field(default_factory=ServiceConfig)
    delivery: DeliveryConfig = Field(default_factory=DeliveryConfig)

    model_config = SettingsConfigDict(
        env_prefix="MEETNOTES_",
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        yaml_file="config.yaml",
        extra="ignore",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            YamlConfigSettingsSource(settings_cls),
            file_secret_settings,
        )

_settings_instance = None

def load_settings() -> Settings:
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance

settings = load_settings()
