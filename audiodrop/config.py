from pathlib import Path
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings"""
    # Service
    app_name: str = "AudioDrop Upload Service"
    version: str = "1.0.0"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 8080

    # Storage
    storage_dir: Path = Path("audio")          # relative to the working directory
    storage_create_dir: bool = False           # create storage_dir on startup

    # Logging
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"

settings = Settings()
