from pydantic import BaseModel
from dotenv import load_dotenv
import os

load_dotenv()


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


class Settings(BaseModel):
    ALLOW_ORIGINS: list[str] = os.getenv("ALLOW_ORIGINS", "*").split(",")
    STATIC_DIR: str = os.getenv("STATIC_DIR", "")
    SEED_SAMPLE_DATA: bool = _env_flag("SEED_SAMPLE_DATA", "true")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    HOST: str = os.getenv("HOST", "127.0.0.1")
    PORT: int = int(os.getenv("PORT", "3000"))
    API_VERSION: str = "1.0.0"

settings = Settings()
