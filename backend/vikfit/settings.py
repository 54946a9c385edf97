from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    ENV: str = "local"
    API_VERSION: str = "dev"
    ALLOW_ORIGINS: str = "*"

    # "sqlite" keeps everything in a local file, "postgresql" uses the DB_* values
    DB_DRIVER: str = "sqlite"
    DB_PATH: str = "vikfit.db"
    DB_HOST: str = "db"
    DB_PORT: int = 5432
    DB_USER: str = "postgres"
    DB_PASSWORD: str = "postgres"
    DB_NAME: str = "vikfit"

    # Progress bands (percent of assigned sessions completed)
    PROGRESS_ON_TRACK: float = 90.0
    PROGRESS_MODERATE: float = 70.0
    PROGRESS_BEHIND: float = 50.0

    # Daily macro targets used until the user saves their own
    DEFAULT_CALORIE_GOAL: float = 2500.0
    DEFAULT_PROTEIN_GOAL: float = 120.0
    DEFAULT_CARBS_GOAL: float = 300.0
    DEFAULT_FATS_GOAL: float = 80.0

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def DATABASE_URL(self) -> str:
        if self.DB_DRIVER == "sqlite":
            return f"sqlite:///{self.DB_PATH}"
        return (
            f"postgresql+psycopg://{self.DB_USER}:{self.DB_PASSWORD}"
            f"@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"
        )

@lru_cache
def get_settings() -> Settings:
    return Settings()
