import pytest

from answer_eval.config import DEFAULT_LLM_MODEL, load_settings

ENV_KEYS = (
    "GOOGLE_API_KEY",
    "GEMINI_API_KEY",
    "LLM_MODEL",
    "JUDGE_TIMEOUT_SEC",
    "ACCEPT_THRESHOLD",
    "JUDGE_THRESHOLD",
    "JUDGE_MIN_TOKENS",
)


@pytest.fixture
def clean_env(monkeypatch):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setattr("answer_eval.config.load_dotenv", lambda *a, **k: False)
    return monkeypatch


def test_defaults(clean_env):
    settings = load_settings()
    assert settings.gemini_api_key is None
    assert settings.llm_model == DEFAULT_LLM_MODEL
    assert settings.judge_timeout_sec == 15.0
    assert settings.thresholds.accept == 0.90
    assert settings.thresholds.judge == 0.70
    assert settings.thresholds.judge_min_tokens == 3


def test_env_overrides(clean_env):
    clean_env.setenv("GEMINI_API_KEY", "secret")
    clean_env.setenv("LLM_MODEL", "gemini-other")
    clean_env.setenv("ACCEPT_THRESHOLD", "0.95")
    clean_env.setenv("JUDGE_THRESHOLD", "0.6")
    clean_env.setenv("JUDGE_MIN_TOKENS", "4")
    settings = load_settings()
    assert settings.gemini_api_key == "secret"
    assert settings.llm_model == "gemini-other"
    assert settings.thresholds.accept == 0.95
    assert settings.thresholds.judge == 0.6
    assert settings.thresholds.judge_min_tokens == 4


@pytest.mark.parametrize(
    "key, value",
    [
        ("ACCEPT_THRESHOLD", "high"),
        ("JUDGE_MIN_TOKENS", "2.5"),
        ("JUDGE_THRESHOLD", "0.95"),
        ("JUDGE_TIMEOUT_SEC", "0"),
    ],
)
def test_bad_values_raise(clean_env, key, value):
    clean_env.setenv(key, value)
    with pytest.raises(RuntimeError):
        load_settings()
