"""
Configuration management for relaykit
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings

from .logging import LOG_LEVELS


class Settings(BaseSettings):
    """Settings loaded from environment variables."""

    # Global ids
    # Changing the delimiter invalidates every global id already handed out.
    global_id_delimiter: str = ":"

    # GraphQL
    graphql_path: str = "/graphql"
    graphiql: bool = True

    # Environment
    debug: bool = False
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize the level name and reject unknown ones."""
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Log level must be one of: {', '.join(LOG_LEVELS)}")
        return level

    class Config:
        env_file = ".env"
        env_prefix = "RELAYKIT_"
        case_sensitive = False

        # Ignore unrelated variables sharing the .env file
        extra = "ignore"


# Global settings instance
settings = Settings()
