from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    PROJECT_NAME: str = "URL Shortener"

    # Short URL shape, fixed at process start
    SHORT_URL_SCHEME: str = "https"
    SHORT_URL_HOSTNAME: str = "urlshortener.com"
    SHORT_CODE_LENGTH: int = Field(default=5, ge=1)

    # Listener
    HOST: str = "localhost"
    PORT: int = 8080

    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

settings = Settings()
