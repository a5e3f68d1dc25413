import os
from dataclasses import dataclass
from functools import lru_cache

import redis
from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables."""

    # Redis
    redis_url: str = os.getenv("REDIS_URL", "redis://localhost:6379")
    redis_password: str | None = os.getenv("REDIS_PASSWORD")

    # Groq
    groq_api_url: str = os.getenv("GROQ_API_URL", "https://api.groq.com/openai/v1/chat/completions")
    groq_model: str = os.getenv("GROQ_MODEL", "llama-3.3-70b-versatile")
    groq_temperature: float = float(os.getenv("GROQ_TEMPERATURE", "0.7"))
    groq_timeout: float = float(os.getenv("GROQ_TIMEOUT", "60"))
    # Name of the secret holding the bearer token, resolved per call
    groq_api_key_name: str = "GROQ_API_KEY"

    # Cache
    fast_tier_ttl: int = int(os.getenv("FAST_TIER_TTL", "21600"))  # 6 hours
    slow_tier_ttl: int = int(os.getenv("SLOW_TIER_TTL", "86400"))  # 1 day
    slow_tier_max_bytes: int = int(os.getenv("SLOW_TIER_MAX_BYTES", "9000"))
    slow_tier_hash: str = os.getenv("SLOW_TIER_HASH", "groq_properties")

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()
    log_format: str = os.getenv("LOG_FORMAT", "json").lower()

    # API
    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "8000"))
    api_reload: bool = os.getenv("API_RELOAD", "true").lower() == "true"

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if not 0 <= self.groq_temperature <= 2:
            raise ValueError("GROQ_TEMPERATURE must be between 0 and 2")

        if self.groq_timeout <= 0:
            raise ValueError("GROQ_TIMEOUT must be positive")

        for name in ("fast_tier_ttl", "slow_tier_ttl", "slow_tier_max_bytes"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name.upper()} must be positive, got {getattr(self, name)}")

        if self.log_level not in ("DEBUG", "INFO", "WARNING", "ERROR"):
            raise ValueError(f"LOG_LEVEL must be one of DEBUG, INFO, WARNING, ERROR, got {self.log_level}")

        if self.log_format not in ("json", "text"):
            raise ValueError(f"LOG_FORMAT must be 'json' or 'text', got {self.log_format}")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()


def get_redis_client() -> redis.Redis:
    """Create a Redis client instance.

    Responses are decoded so both tiers exchange plain ``str`` payloads.
    """
    return redis.from_url(
        settings.redis_url,
        password=settings.redis_password,
        decode_responses=True,
    )


class EnvSecretProvider:
    """SecretProvider backed by the process environment.

    Looked up on every call so a rotated key is picked up without a restart.
    """

    def get_secret(self, name: str) -> str | None:
        value = os.environ.get(name)
        return value or None
