"""Configuration settings for content negotiation.

Settings are loaded from environment variables prefixed with
``NEGOTIATOR_`` and from an optional ``.env`` file. The parsing core does
not read them; they drive the registry builder, the HTTP adapter and
logging setup.
"""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..media import parse_header


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    :param default_accept: Accept header assumed when a request has none
    :type default_accept: str
    :param freeze_registry: Freeze registries built by ``build_registry``
    :type freeze_registry: bool
    :param log_level: Logging level for the application
    :type log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    """

    model_config = SettingsConfigDict(
        env_prefix="NEGOTIATOR_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    default_accept: str = Field(
        "*/*", description="Accept header assumed when a request carries none"
    )
    freeze_registry: bool = Field(
        True, description="Freeze registries once build_registry has filled them"
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        "INFO", description="Logging level"
    )

    @field_validator("default_accept")
    @classmethod
    def validate_default_accept(cls, v: str) -> str:
        """Reject a default Accept header that would never parse.

        :param v: The configured Accept header
        :type v: str
        :return: The header, unchanged
        :rtype: str
        """
        try:
            parse_header(v)
        except ValueError as e:
            raise ValueError(f"default_accept is not a valid Accept header: {e}") from e
        return v


settings = Settings()
"""Global settings instance.

Created once at import time and used by the HTTP adapter and registry
builder when no explicit settings are passed.
"""
