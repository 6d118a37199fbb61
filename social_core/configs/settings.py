import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from dotenv import load_dotenv


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    """
    Cấu hình đọc từ biến môi trường (hoặc file .env).
    """
    mongo_uri: str | None
    mongo_db_name: str
    log_level: str
    reject_duplicate_friend_requests: bool


@lru_cache
def get_settings() -> Settings:
    load_dotenv()
    return Settings(
        mongo_uri=os.getenv("MONGO_URI"),
        mongo_db_name=os.getenv("MONGO_DB_NAME", "relo-social-network"),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        reject_duplicate_friend_requests=_env_flag("REJECT_DUPLICATE_FRIEND_REQUESTS"),
    )


def configure_logging(level: str = "INFO"):
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
