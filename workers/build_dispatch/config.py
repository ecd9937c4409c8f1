"""
Dispatcher configuration
"""
from typing import List, Literal, Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Dispatcher settings, read from BUILD_DISPATCH_* variables or .env"""

    # Toolchain
    TOOLCHAIN_BINARY: str = "cargo"
    TOOLCHAIN_LABEL: str = "Cargo"
    BUILD_ARGS: List[str] = ["build", "--release"]

    # Output
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    RECEIPT_DIR: Optional[str] = None

    model_config = SettingsConfigDict(
        env_prefix="BUILD_DISPATCH_",
        env_file=".env",
        extra="ignore",
        case_sensitive=True,
    )

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def _upper_log_level(cls, v):
        return v.upper() if isinstance(v, str) else v
