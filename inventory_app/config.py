from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List


class Settings(BaseSettings):
    host: str = "0.0.0.0"
    port: int = 3000
    seed_data: bool = True
    cors_origins: List[str] = ["*"]
    log_level: str = "INFO"
    debug: bool = False
    
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


settings = Settings()
