from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings"""

    debug: bool = False

    # Logging Settings
    log_dir: Optional[str] = None  # No file logging when unset
    log_level: str = "INFO"
    log_rotation_interval: str = "midnight"  # daily rotation at midnight
    log_rotation_count: int = 30  # keep 30 days of logs
    log_max_bytes: int = 10 * 1024 * 1024  # 10MB for error log
    log_backup_count: int = 5  # keep 5 backup files for error log

    @property
    def file_logging(self) -> bool:
        """Whether rotating log files should be written"""
        return bool(self.log_dir)

    model_config = SettingsConfigDict(
        env_prefix="OVERLAY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


settings = Settings()
