from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    database_url: str = "sqlite:///./coaches.db"

    service_name: str = "Coach Management Service"
    service_version: str = "1.0.0"
    cors_origins: list[str] = ["http://localhost:3000"]

    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8081

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache
def get_settings() -> Settings:
    return Settings()
