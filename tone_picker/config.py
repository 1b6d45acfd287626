from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def normalize_base_url(url: str) -> str:
    """
    Make sure the model API base URL has a scheme and no trailing slash.
    The openai SDK joins paths onto it, so "https://host/v1/" and "https://host/v1" must behave the same.
    """
    url = url.strip()
    if url and not url.startswith("http"):
        url = "https://" + url
    return url.rstrip("/")


class Settings(BaseSettings):
    # Pydantic Settings v2 reads these from environment variables (case-insensitive)
    llm_api_key: str = Field("", validation_alias=AliasChoices("llm_api_key", "mistral_api_key"))
    llm_base_url: str = "https://api.mistral.ai/v1"
    llm_model: str = "mistral-small-latest"
    llm_timeout: float = 60.0
    llm_max_tokens: int = 1000
    llm_temperature: float = 0.7

    port: int = 5000
    environment: str = Field("development", validation_alias=AliasChoices("environment", "node_env"))
    production_origins: list[str] = ["https://yourdomain.com"]
    development_origins: list[str] = ["http://localhost:3000"]

    cache_ttl_seconds: float = 300.0
    cache_key_prefix_length: int = 100

    # Used by the client package
    api_url: str = "http://localhost:5000/api"

    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        if not self.llm_api_key:
            print("⚠ WARNING: LLM_API_KEY (or MISTRAL_API_KEY) not found in environment.")
            print("  /api/adjust-tone will answer 401 until a key is configured.")

    @field_validator("llm_base_url")
    @classmethod
    def _normalize_base_url(cls, v: str) -> str:
        return normalize_base_url(v)

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"

    @property
    def allowed_origins(self) -> list[str]:
        return self.production_origins if self.is_production else self.development_origins


settings = Settings()
