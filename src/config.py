"""Application configuration via environment variables."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_name: str = "account-risk-service"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    log_json: bool = True

    host: str = "0.0.0.0"
    port: int = 8000

    # Identity stamped on assessments when the caller does not supply one
    default_assessed_by: str = "system"

    model_config = {"env_prefix": "", "env_file": ".env", "extra": "ignore"}


settings = Settings()
