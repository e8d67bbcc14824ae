from dataclasses import dataclass
import os

DEFAULT_ARXIV_BASE_URL = "http://export.arxiv.org/api/"


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None:
        return default
    return int(value)


def _env_float(name: str, default: float) -> float:
    value = os.getenv(name)
    if value is None:
        return default
    return float(value)


def _env_str(name: str, default: str) -> str:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip() or default


@dataclass(frozen=True)
class Settings:
    arxiv_base_url: str = _env_str("ARXIV_BASE_URL", DEFAULT_ARXIV_BASE_URL)
    arxiv_default_max_results: int = _env_int("ARXIV_DEFAULT_MAX_RESULTS", 100)
    arxiv_timeout_seconds: float = _env_float("ARXIV_TIMEOUT_SECONDS", 10.0)
    arxiv_follow_redirects: bool = _env_bool("ARXIV_FOLLOW_REDIRECTS", True)
    arxiv_user_agent: str = _env_str("ARXIV_USER_AGENT", "eprints/0.1")
    arxiv_mailto: str = _env_str("ARXIV_MAILTO", "")
    log_level: str = _env_str("LOG_LEVEL", "INFO")
    log_format: str = _env_str("LOG_FORMAT", "console")
    log_redact_fields: str = os.getenv("LOG_REDACT_FIELDS", "")


settings = Settings()
