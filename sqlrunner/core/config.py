from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="SQLRUNNER_",
        env_ignore_empty=True,
        extra="ignore",
    )

    DATABASE_URL: str | None = Field(
        default=None,
        validation_alias=AliasChoices(
            "SQLRUNNER_DATABASE_URL", "DATABASE_URL", "ORACLE_CONNECTION_STRING"
        ),
    )
    CONNECT_TIMEOUT: int = 10
    # Applied once per session; None or 0 disables it.
    STATEMENT_TIMEOUT: float | None = None
    LOG_LEVEL: str = "WARNING"


settings = Settings()
