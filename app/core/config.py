from pydantic_settings import BaseSettings, SettingsConfigDict



class Settings(BaseSettings):
    APP_ENV: str = "dev"
    PORT: int = 8080
    DATABASE_URL: str = "sqlite+aiosqlite:///./choice_menu.db"
    DATABASE_ECHO: bool = False
    LOG_LEVEL: str = "INFO"
    SLOW_REQUEST_MS: int = 500
    AWS_ACCESS_KEY: str | None = None
    AWS_SECRET_KEY: str | None = None
    AWS_REGION: str | None = None
    BOOKING_EVENTS_QUEUE_URL: str | None = None
    DEFAULT_PAGE_SIZE: int = 10
    MAX_PAGE_SIZE: int = 100
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


Config = Settings()
