from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    APP_TITLE: str = "Expense Dashboard"
    API_PREFIX: str = "/api"
    HOST: str = "127.0.0.1"
    PORT: int = 3000
    CORS_ORIGINS: list[str] = ["*"]
    LOG_LEVEL: str = "INFO"
    SEED_SAMPLE_DATA: bool = True
    STATISTICS_CACHE_SECONDS: int = 30
    REPORT_PAGE_SIZE: int = 5

    # client side
    API_BASE_URL: str = "http://localhost:3000/api"
    API_TIMEOUT_SECONDS: float = 5.0
    PREFERENCES_PATH: str = ".expense_dashboard/preferences.json"

    @property
    def database_url(self) -> str:
        # a single shared connection keeps the in-memory database alive
        return "sqlite+aiosqlite://"

    class Config:
        env_file = ".env"


settings = Settings()
