from typing import List, Literal

from dotenv import load_dotenv
from pydantic_settings import BaseSettings

load_dotenv()


class Settings(BaseSettings):
    app_env: str = "dev"
    api_prefix: str = "/api"
    storage_backend: Literal["memory", "sqlite"] = "memory"
    database_url: str = "sqlite://"  # in-memory; nothing survives a restart
    seed_sample_workflow: bool = True
    execution_duration_seconds: float = 3.0
    execution_history_limit: int = 50
    cors_origins: List[str] = ["http://localhost:5173", "http://localhost:3000"]
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 8000

settings = Settings()  # reads from env
