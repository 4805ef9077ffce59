import pytest

from lesson_engine.config import OPENROUTER_BASE_URL, ProviderConfig, load_config

ENV_VARS = [
    "LESSON_ENGINE_PROVIDER", "OPENAI_API_KEY", "OPENROUTER_API_KEY", "LESSON_ENGINE_MODEL",
    "LESSON_ENGINE_TEMPERATURE", "LESSON_ENGINE_MAX_TOKENS", "LESSON_ENGINE_TIMEOUT",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults_without_key() -> None:
    config = load_config(use_dotenv=False)
    assert config.provider == "openai"
    assert config.model == "gpt-4o-mini"
    assert config.api_key is None
    assert config.has_api_key is False
    assert config.base_url is None


def test_openrouter_settings(monkeypatch) -> None:
    monkeypatch.setenv("LESSON_ENGINE_PROVIDER", "OpenRouter")
    monkeypatch.setenv("OPENROUTER_API_KEY", "sk-or-abcdefghijklmnop")
    monkeypatch.setenv("LESSON_ENGINE_TEMPERATURE", "0.3")
    config = load_config(use_dotenv=False)
    assert config.provider == "openrouter"
    assert config.model == "anthropic/claude-3.5-sonnet"
    assert config.base_url == OPENROUTER_BASE_URL
    assert config.temperature == 0.3


def test_bad_numbers_use_defaults(monkeypatch) -> None:
    monkeypatch.setenv("LESSON_ENGINE_MAX_TOKENS", "lots")
    monkeypatch.setenv("LESSON_ENGINE_TIMEOUT", "soon")
    config = load_config(use_dotenv=False)
    assert config.max_tokens == 1000
    assert config.timeout == 30.0


def test_unknown_provider_falls_back_to_openai(monkeypatch) -> None:
    monkeypatch.setenv("LESSON_ENGINE_PROVIDER", "carrier-pigeon")
    monkeypatch.setenv("LESSON_ENGINE_MODEL", "gpt-4o")
    assert load_config(use_dotenv=False).provider == "openai"
    assert load_config(use_dotenv=False).model == "gpt-4o"


def test_masked_key() -> None:
    assert ProviderConfig(api_key="sk-abcdefgh12345678").masked_key == "sk-abcde...5678"
    assert ProviderConfig(api_key="short").masked_key == "***"
    assert ProviderConfig().masked_key == "<none>"
