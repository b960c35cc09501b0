from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s [%(levelname)s] %(message)s"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

settings = Settings()
