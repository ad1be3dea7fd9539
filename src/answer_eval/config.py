from __future__ import annotations
import os
from dataclasses import dataclass, field
from dotenv import load_dotenv

load_dotenv()

DEFAULT_LLM_MODEL = "gemini-3-flash-preview"


@dataclass(frozen=True)
class Thresholds:
    accept: float = 0.90   # similarity that accepts without the judge
    judge: float = 0.70    # similarity that sends the answer to the judge
    judge_min_tokens: int = 3

    def __post_init__(self) -> None:
        if not 0.0 <= self.judge <= self.accept <= 1.0:
            raise ValueError("thresholds must satisfy 0 <= judge <= accept <= 1")
        if self.judge_min_tokens < 1:
            raise ValueError("judge_min_tokens must be >= 1")


@dataclass(frozen=True)
class Settings:
    gemini_api_key: str | None
    llm_model: str = DEFAULT_LLM_MODEL
    judge_timeout_sec: float = 15.0
    thresholds: Thresholds = field(default_factory=Thresholds)


def _env_float(name: str, default: float) -> float:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        raise RuntimeError(f"{name} must be a number, got {raw!r}") from None


def _env_int(name: str, default: int) -> int:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise RuntimeError(f"{name} must be an integer, got {raw!r}") from None


def load_settings() -> Settings:
    load_dotenv()
    gemini_api_key = os.getenv("GOOGLE_API_KEY") or os.getenv("GEMINI_API_KEY") or None
    llm_model = os.getenv("LLM_MODEL", DEFAULT_LLM_MODEL).strip() or DEFAULT_LLM_MODEL

    judge_timeout_sec = _env_float("JUDGE_TIMEOUT_SEC", 15.0)
    if judge_timeout_sec <= 0:
        raise RuntimeError("JUDGE_TIMEOUT_SEC must be positive")

    defaults = Thresholds()
    try:
        thresholds = Thresholds(
            accept=_env_float("ACCEPT_THRESHOLD", defaults.accept),
            judge=_env_float("JUDGE_THRESHOLD", defaults.judge),
            judge_min_tokens=_env_int("JUDGE_MIN_TOKENS", defaults.judge_min_tokens),
        )
    except ValueError as exc:
        raise RuntimeError(f"invalid thresholds: {exc}") from exc

    return Settings(
        gemini_api_key=gemini_api_key,
        llm_model=llm_model,
        judge_timeout_sec=judge_timeout_sec,
        thresholds=thresholds,
    )
