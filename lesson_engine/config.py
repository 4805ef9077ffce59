"""
Environment configuration for the lesson engine.

Settings are read from the process environment, optionally seeded from a
.env file at the project root:

    LESSON_ENGINE_PROVIDER=openai        # or openrouter
    OPENAI_API_KEY=sk-...
    OPENROUTER_API_KEY=sk-or-...
    LESSON_ENGINE_MODEL=gpt-4o-mini
    LESSON_ENGINE_TEMPERATURE=0.7
    LESSON_ENGINE_MAX_TOKENS=1000
    LESSON_ENGINE_TIMEOUT=30

We use python-dotenv + os.getenv so secrets stay out of git.
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from .logger import logger

SUPPORTED_PROVIDERS = ("openai", "openrouter")

DEFAULT_PROVIDER = "openai"
DEFAULT_MODELS = {
    "openai": "gpt-4o-mini",
    "openrouter": "anthropic/claude-3.5-sonnet",
}
API_KEY_VARS = {
    "openai": "OPENAI_API_KEY",
    "openrouter": "OPENROUTER_API_KEY",
}
OPENROUTER_BASE_URL = "https://openrouter.ai/api/v1"

DEFAULT_TEMPERATURE = 0.7
DEFAULT_MAX_TOKENS = 1000
DEFAULT_TIMEOUT_SECONDS = 30.0


@dataclass(frozen=True)
class ProviderConfig:
    """Everything needed to build a content provider."""
    provider: str = DEFAULT_PROVIDER
    api_key: Optional[str] = None
    model: str = DEFAULT_MODELS[DEFAULT_PROVIDER]
    base_url: Optional[str] = None
    temperature: float = DEFAULT_TEMPERATURE
    max_tokens: int = DEFAULT_MAX_TOKENS
    timeout: float = DEFAULT_TIMEOUT_SECONDS

    @property
    def has_api_key(self) -> bool:
        return bool(self.api_key)

    @property
    def masked_key(self) -> str:
        """Show the first 8 and last 4 characters only."""
        if not self.api_key:
            return "<none>"
        if len(self.api_key) > 12:
            return f"{self.api_key[:8]}...{self.api_key[-4:]}"
        return "***"


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning(f"{name}={raw!r} is not a number, using {default}")
        return default


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"{name}={raw!r} is not an integer, using {default}")
        return default


def load_config(use_dotenv: bool = True) -> ProviderConfig:
    """Read provider settings from the environment (and .env, if present)."""
    if use_dotenv:
        logger.env("Loading environment variables from .env file...")
        if load_dotenv():
            logger.env_success("dotenv file loaded successfully")
        else:
            logger.warning("No .env file found or file is empty")

    provider = os.getenv("LESSON_ENGINE_PROVIDER", DEFAULT_PROVIDER).strip().lower()
    if provider not in SUPPORTED_PROVIDERS:
        logger.warning(f"Unknown provider {provider!r}, using {DEFAULT_PROVIDER}")
        provider = DEFAULT_PROVIDER

    config = ProviderConfig(
        provider=provider,
        api_key=os.getenv(API_KEY_VARS[provider]) or None,
        model=os.getenv("LESSON_ENGINE_MODEL") or DEFAULT_MODELS[provider],
        base_url=OPENROUTER_BASE_URL if provider == "openrouter" else None,
        temperature=_float_env("LESSON_ENGINE_TEMPERATURE", DEFAULT_TEMPERATURE),
        max_tokens=_int_env("LESSON_ENGINE_MAX_TOKENS", DEFAULT_MAX_TOKENS),
        timeout=_float_env("LESSON_ENGINE_TIMEOUT", DEFAULT_TIMEOUT_SECONDS),
    )

    if config.has_api_key:
        logger.env_success(f"{API_KEY_VARS[provider]} found: {config.masked_key}")
    else:
        logger.env_error(f"{API_KEY_VARS[provider]} not found in environment!")
        logger.warning("Sessions will use fallback content (no actual AI generation)")
    logger.env(f"Provider: {config.provider}, model: {config.model}")
    return config
