"""Configuration loaded from environment variables (and an optional .env file)."""
import os
from dataclasses import dataclass

from dotenv import load_dotenv


@dataclass(frozen=True)
class Settings:
    github_api_url: str = "https://api.github.com"
    max_pages: int = 100
    request_timeout: int = 30
    todo_file: str = "todos.json"
    word_count_top: int = 10
    log_level: str = "WARNING"


def _get_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got '{raw}'") from None
    if value < 1:
        raise ValueError(f"{name} must be a positive integer, got {value}")
    return value


def load_settings() -> Settings:
    """Build settings from the environment.

    Values from a .env (or env) file in the working directory are loaded
    first; variables already set in the environment take precedence.
    """
    load_dotenv('.env') or load_dotenv('env')

    return Settings(
        github_api_url=os.getenv("GITHUB_API_URL", "https://api.github.com").rstrip("/"),
        max_pages=_get_int("GITHUB_STATS_MAX_PAGES", 100),
        request_timeout=_get_int("GITHUB_REQUEST_TIMEOUT", 30),
        todo_file=os.getenv("TODO_FILE", "todos.json"),
        word_count_top=_get_int("WORD_COUNT_TOP", 10),
        log_level=os.getenv("LOG_LEVEL", "WARNING").upper(),
    )
