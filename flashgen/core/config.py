from typing import Optional
from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GeminiSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )
    api_key: Optional[str] = Field(default=None, alias="GEMINI_API_KEY")
    model: str = Field(
        default="gemini-2.5-flash-preview-09-2025", alias="GEMINI_MODEL"
    )
    base_url: str = Field(
        default="https://generativelanguage.googleapis.com/v1beta",
        alias="GEMINI_BASE_URL",
    )
    timeout: float = Field(default=60.0, alias="GEMINI_TIMEOUT")

    @computed_field
    def endpoint(self) -> str:
        return f"{self.base_url.rstrip('/')}/models/{self.model}:generateContent"


class DeckSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )
    words_per_card: int = Field(default=60, alias="DECK_WORDS_PER_CARD")
    min_cards: int = Field(default=4, alias="DECK_MIN_CARDS")
    max_cards: int = Field(default=20, alias="DECK_MAX_CARDS")


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )
    name: str = Field(default="flashgen", alias="APP_NAME")
    version: str = Field(default="v1", alias="API_VERSION")
    port: int = Field(default=9000, alias="APP_PORT")
    mode: str = Field(default="prod", alias="MODE")

    @computed_field
    def is_production(self) -> bool:
        return self.mode != "dev"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )

    app: AppSettings = Field(default_factory=lambda: AppSettings())
    gemini: GeminiSettings = Field(default_factory=lambda: GeminiSettings())
    deck: DeckSettings = Field(default_factory=lambda: DeckSettings())


settings = Settings()
