from typing import Optional
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="FILE_SUMMARY_")

    chunk_size: int = 65536
    encoding: Optional[str] = None
    count_chars: bool = False
    verbose: bool = False
    log_level: str = "INFO"
    log_format: str = "%(asctime)s [%(levelname)s] %(message)s"

    @field_validator("chunk_size")
    @classmethod
    def _positive_chunk_size(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("chunk_size must be positive")
        return value

settings = Settings()
