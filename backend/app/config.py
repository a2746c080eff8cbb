from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_name: str = "Aspecta API"
    app_version: str = "0.1.0"
    log_level: str = "INFO"
    log_json: bool = False

    validation_message: str = "Field validation error"
    validation_status_code: int = 400
    internal_error_message: str = "Internal server error"
    max_cause_depth: int = 32

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


settings = Settings()
