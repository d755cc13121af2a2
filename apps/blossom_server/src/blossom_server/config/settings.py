from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_host: str = "127.0.0.1"
    app_port: int = 3000
    app_data_dir: str = "./data"

    chunk_size: int = Field(default=64 * 1024, gt=0)

    log_level: str = "INFO"
    log_format: str = "json"

    @property
    def data_dir(self) -> Path:
        return Path(self.app_data_dir).resolve()

    @property
    def blob_path(self) -> Path:
        return self.data_dir / "blobs"

    def ensure_dirs(self) -> None:
        self.blob_path.mkdir(parents=True, exist_ok=True)
