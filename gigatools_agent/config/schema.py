"""Configuration schema using Pydantic."""

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AgentDefaults(BaseModel):
    """Assistant and model-call configuration."""

    model: str = "gigachat/GigaChat-2-Max"
    max_retries: int = 3
    profanity_check: bool = False
    max_tool_iterations: int = 10
    max_tokens: int = 2048
    temperature: float = 0.2


class ProviderConfig(BaseModel):
    """LLM provider configuration."""

    api_key: str = ""
    api_base: str | None = None


class ProvidersConfig(BaseModel):
    """Configuration for LLM providers."""

    gigachat: ProviderConfig = Field(default_factory=ProviderConfig)


class LoggingConfig(BaseModel):
    """Log sink configuration."""

    level: str = "INFO"


class Config(BaseSettings):
    """Root configuration for gigatools-agent."""

    agent: AgentDefaults = Field(default_factory=AgentDefaults)
    providers: ProvidersConfig = Field(default_factory=ProvidersConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = SettingsConfigDict(
        env_prefix="GIGATOOLS_AGENT_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    def get_api_key(self) -> str | None:
        """Get the configured GigaChat authorization key, if any."""
        return self.providers.gigachat.api_key or None

    def get_api_base(self) -> str | None:
        """Get the API base URL override, if any."""
        return self.providers.gigachat.api_base
