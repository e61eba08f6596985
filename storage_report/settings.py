import logging
import os
from typing import List

from pydantic import BaseModel, field_validator

LOG_LEVELS = ["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]


class Settings(BaseModel):
    log_level: str = "INFO"
    max_records: int = 200_000
    max_path_depth: int = 256
    cors_origins: str = "*"

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log level must be one of {', '.join(LOG_LEVELS)}")
        return level

    @property
    def cors_origin_list(self) -> List[str]:
        """CORS_ORIGINS is a comma separated list, "*" allows every origin"""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    @property
    def logging_level(self) -> int:
        return logging.getLevelName(self.log_level)


settings = Settings(
    log_level=os.environ.get("LOG_LEVEL", "INFO"),
    max_records=os.environ.get("STORAGE_MAX_RECORDS", 200_000),
    max_path_depth=os.environ.get("STORAGE_MAX_PATH_DEPTH", 256),
    cors_origins=os.environ.get("CORS_ORIGINS", "*"),
)
