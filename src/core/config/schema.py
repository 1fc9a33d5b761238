from typing import List, Optional

from pydantic import BaseModel, Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

DEFAULT_SYSTEM_PROMPT = (
    "You are a browser operator. You control a remote headless browser "
    "(session {session_id}, viewport {width}x{height}) on behalf of the user. "
    "Describe what you are doing step by step and report findings concisely."
)


class AppConfig(BaseModel):
    name: str = "Browser Operator"
    system_prompt: str = DEFAULT_SYSTEM_PROMPT

    model_config = {"extra": "ignore"}


class ServerConfig(BaseModel):
    # Host binding - default to localhost
    host: str = "127.0.0.1"
    port: int = 8000

    cors_origins: List[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
        "http://127.0.0.1:3000",
    ]

    # When set, requests must carry a matching x-api-key header
    api_key: Optional[SecretStr] = None

    model_config = {"extra": "ignore"}


class ChatHistoryConfig(BaseModel):
    max_messages: int = Field(default=4, ge=1)
    max_total_tokens: int = Field(default=50000, ge=0)
    max_message_chars: int = Field(default=12000, ge=0)

    model_config = {"extra": "ignore"}


class ViewportConfig(BaseModel):
    width: int = 1440
    height: int = 900


class BrowserbaseConfig(BaseModel):
    api_key: Optional[SecretStr] = None
    project_id: Optional[str] = None
    base_url: str = "https://api.browserbase.com/v1"
    timeout: float = 30.0
    block_ads: bool = True
    viewport: ViewportConfig = Field(default_factory=ViewportConfig)

    model_config = {"extra": "ignore"}

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")


class LLMConfig(BaseModel):
    model: str = "gpt-4o"
    base_url: Optional[str] = None
    api_key: Optional[SecretStr] = None
    temperature: Optional[float] = 0.2
    max_tokens: Optional[int] = None

    model_config = {"extra": "ignore"}


class LoggingConfig(BaseModel):
    level: str = "INFO"
    log_to_file: bool = True
    redact_secrets: bool = True
    max_age_days: int = 7

    model_config = {"extra": "ignore"}


class OperatorSettings(BaseSettings):
    """
    Root configuration object using pydantic-settings.
    """

    app: AppConfig = Field(default_factory=AppConfig)

    server: ServerConfig = Field(default_factory=ServerConfig)

    chat_history: ChatHistoryConfig = Field(default_factory=ChatHistoryConfig)

    browserbase: BrowserbaseConfig = Field(default_factory=BrowserbaseConfig)

    llm: LLMConfig = Field(default_factory=LLMConfig)

    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = SettingsConfigDict(
        env_prefix="OPERATOR_",
        env_nested_delimiter="__",
        case_sensitive=False,
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
        """
        Customise the settings sources.
        Precedence: Init > Env > Dotenv > Defaults (YAML is injected by the loader)
        """
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            file_secret_settings,
        )
