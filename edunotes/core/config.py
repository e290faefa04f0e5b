from typing import Annotated, List, Literal
from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

class Settings(BaseSettings):
    ENVIRONMENT: str = "development"
    DEBUG: bool = False

    # Storage
    STORAGE_BACKEND: Literal["memory", "file", "sql", "none"] = "file"
    LOCAL_STORAGE_ROOT: str = "./storage"
    DATABASE_URL: str = "sqlite:///./edunotes.db"

    # Admin gate
    ADMIN_CODE: str = "admin123"

    # Recent uploads window
    RECENT_DAYS: int = 7
    RECENT_LIMIT: int = 10

    # CORS
    CORS_ORIGINS: Annotated[List[str], NoDecode] = ["http://localhost:3000"]

    # File Upload Settings
    MAX_FILE_SIZE: int = 10 * 1024 * 1024  # 10MB
    ALLOWED_FILE_TYPES: Annotated[List[str], NoDecode] = ["pdf", "doc", "docx"]

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    LOG_JSON: bool = False

    model_config = SettingsConfigDict(
        env_prefix="EDUNOTES_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v):
        if isinstance(v, str):
            return [i.strip() for i in v.split(",")]
        return v

    @field_validator("ALLOWED_FILE_TYPES", mode="before")
    @classmethod
    def assemble_allowed_file_types(cls, v):
        if isinstance(v, str):
            return [i.strip().lower().lstrip(".") for i in v.split(",") if i.strip()]
        return v

    @field_validator("RECENT_DAYS", "RECENT_LIMIT", "MAX_FILE_SIZE")
    @classmethod
    def require_positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("must be a positive integer")
        return v


# Global settings instance
settings = Settings()
