"""
Content provider capability and the OpenAI-backed adapter.

The engine only depends on the ContentProvider protocol: given a
GenerationRequest it returns a GenerationResponse or raises a
ProviderError. OpenAIContentProvider implements it over the OpenAI chat
completions API; OpenRouter is served by the same adapter pointed at the
OpenRouter base URL.
"""

from dataclasses import dataclass
from typing import Any, Dict, Literal, Optional, Protocol

import openai
from openai import AsyncOpenAI

from .config import ProviderConfig, load_config
from .logger import logger, Timer

RequestKind = Literal["scene", "sentence"]


@dataclass(frozen=True)
class GenerationRequest:
    kind: RequestKind
    topic: str
    instruction: str                 # free-form instruction document
    learner_age: Optional[int] = None


@dataclass(frozen=True)
class GenerationResponse:
    text: str


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

class ProviderError(Exception):
    """Base class for every failure a content provider may raise."""

    def __init__(self, message: str, provider: str = "unknown", status_code: Optional[int] = None):
        super().__init__(message)
        self.provider = provider
        self.status_code = status_code


class InvalidCredentialError(ProviderError):
    """The API key was missing, invalid or not allowed to use the model."""


class TransportError(ProviderError):
    """Rate limiting, connection failure, timeout or an HTTP error status."""


class MalformedResponseError(ProviderError):
    """The provider answered but the answer had no usable text."""


class ContentProvider(Protocol):
    async def generate(self, request: GenerationRequest) -> GenerationResponse:
        ...


# ---------------------------------------------------------------------------
# OpenAI / OpenRouter adapter
# ---------------------------------------------------------------------------

SYSTEM_PROMPTS: Dict[str, str] = {
    "sentence": (
        "You are a helpful assistant for a typing tutor designed for children with autism. "
        "Generate simple, clear sentences for typing practice. Use autism-friendly language: "
        "direct, literal, and predictable. Avoid idioms or figurative speech. "
        "Be encouraging and positive."
    ),
    "scene": (
        "You are a creative assistant for a typing tutor designed for children with autism. "
        "Plan clear, concrete lessons and scenes. Use concrete, sensory details. "
        "Avoid metaphors or abstract concepts."
    ),
}

OPENROUTER_HEADERS = {
    "HTTP-Referer": "https://autism-typing-tutor.app",
    "X-Title": "Autism Typing Tutor",
}


class OpenAIContentProvider:
    """ContentProvider over an OpenAI-compatible chat completions endpoint."""

    def __init__(self, config: ProviderConfig, client: Optional[Any] = None):
        self.config = config
        self.name = config.provider
        if client is None:
            if not config.has_api_key:
                raise InvalidCredentialError(f"No API key configured for {config.provider}", config.provider)
            client = AsyncOpenAI(
                api_key=config.api_key,
                base_url=config.base_url,
                timeout=config.timeout,
                # One attempt only; the session generator falls back instead of retrying.
                max_retries=0,
                default_headers=OPENROUTER_HEADERS if config.provider == "openrouter" else None,
            )
        self._client = client

    def _messages(self, request: GenerationRequest) -> list:
        age = request.learner_age or 8
        user_content = (
            f"Learner age: {age}\n"
            f"Topic: {request.topic}\n\n"
            f"{request.instruction.strip()}"
        )
        return [
            {"role": "system", "content": SYSTEM_PROMPTS[request.kind]},
            {"role": "user", "content": user_content},
        ]

    async def generate(self, request: GenerationRequest) -> GenerationResponse:
        logger.api_call(f"chat.completions.create [{request.kind}]", model=self.config.model)
        try:
            with Timer() as timer:
                completion = await self._client.chat.completions.create(
                    model=self.config.model,
                    messages=self._messages(request),
                    temperature=self.config.temperature,
                    max_tokens=self.config.max_tokens,
                )
        except (openai.AuthenticationError, openai.PermissionDeniedError) as e:
            logger.api_error(f"{self.name} rejected the API key: {e}")
            raise InvalidCredentialError(str(e), self.name, e.status_code) from e
        except openai.APIStatusError as e:
            logger.api_error(f"{self.name} returned HTTP {e.status_code}: {e}")
            raise TransportError(str(e), self.name, e.status_code) from e
        except openai.APIError as e:
            # Connection failures and timeouts carry no status code
            logger.api_error(f"{self.name} request failed: {e}", exc_info=True)
            raise TransportError(str(e), self.name) from e
        logger.api_response("chat.completions.create", duration_ms=timer.duration_ms)

        choices = getattr(completion, "choices", None) or []
        if not choices:
            raise MalformedResponseError("Response contained no choices", self.name)
        content = choices[0].message.content
        if not content or not content.strip():
            raise MalformedResponseError("No content in response", self.name)
        return GenerationResponse(text=content.strip())


def create_provider_from_env(config: Optional[ProviderConfig] = None) -> Optional[OpenAIContentProvider]:
    """
    Build the configured provider, or return None when no API key is set.

    With no provider the engine still works, every session using fallback
    content.
    """
    if config is None:
        config = load_config()
    if not config.has_api_key:
        return None
    logger.api(f"Initializing {config.provider} client...")
    provider = OpenAIContentProvider(config)
    logger.env_success(f"{config.provider} client initialized successfully")
    return provider
