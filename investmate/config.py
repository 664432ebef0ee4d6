from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Application
    app_env:   str = "development"
    log_level: str = "INFO"

    # MCP server
    mcp_host: str = "0.0.0.0"
    mcp_port: int = 8002

    # Redis (tool-result cache)
    redis_host:          str  = "redis"
    redis_port:          int  = 6379
    cache_enabled:       bool = True
    redis_ttl_tool_call: int  = 300
    redis_ttl_reference: int  = 3600

    # Numeric input parsing
    parse_cache_size: int = 1024

    @property
    def redis_url(self) -> str:
        return f"redis://{self.redis_host}:{self.redis_port}"

    @property
    def is_development(self) -> bool:
        return self.app_env == "development"


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
