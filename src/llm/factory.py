"""Provider construction for summary calls."""

import os
from typing import NamedTuple

from .base import LLMError, LLMProvider


class _ProviderSpec(NamedTuple):
    env_key: str
    key_prefix: str
    cheap_model: str


# Auto-detection tries providers in this order
_PROVIDERS = {
    "claude": _ProviderSpec("ANTHROPIC_API_KEY", "sk-ant-", "claude-haiku-4-5"),
    "openai": _ProviderSpec("OPENAI_API_KEY", "sk-", "gpt-4o-mini"),
    "gemini": _ProviderSpec("GOOGLE_API_KEY", "AI", "gemini-2.0-flash"),
}


def _provider_class(name: str) -> type[LLMProvider]:
    if name == "claude":
        from .providers.claude import ClaudeProvider

        return ClaudeProvider
    if name == "openai":
        from .providers.openai import OpenAIProvider

        return OpenAIProvider
    if name == "gemini":
        from .providers.gemini import GeminiProvider

        return GeminiProvider
    raise LLMError(f"Unknown provider: {name}. Use: {', '.join(_PROVIDERS)}")


def _auto_detect_provider(api_key: str | None = None) -> str:
    """Provider for an explicit key's prefix, else the first one with an env key."""
    if api_key:
        # "sk-ant-" must win over the shorter "sk-"
        for name, spec in _PROVIDERS.items():
            if api_key.startswith(spec.key_prefix):
                return name

    for name, spec in _PROVIDERS.items():
        if os.getenv(spec.env_key):
            return name
    raise LLMError(
        "No LLM API key found. Set one of: "
        + ", ".join(spec.env_key for spec in _PROVIDERS.values())
    )


def create_llm_provider(
    provider: str | None = None,
    api_key: str | None = None,
    model: str | None = None,
    client=None,
) -> LLMProvider:
    """Build a provider by name ("auto"/None detects one from keys).

    A pre-built ``client`` skips SDK construction, which tests rely on.

    Raises:
        LLMError: Unknown provider, nothing to auto-detect from, SDK missing
            or SDK client construction failing
    """
    name = provider or "auto"
    if name == "auto":
        name = _auto_detect_provider(api_key)

    cls = _provider_class(name)
    if not api_key and not client:
        api_key = os.getenv(_PROVIDERS[name].env_key)
    return cls(api_key=api_key, model=model, client=client)


def create_cheap_provider(
    provider: str | None = None,
    api_key: str | None = None,
    model: str | None = None,
    client=None,
) -> LLMProvider:
    """Like create_llm_provider, defaulting to the provider's small model."""
    name = provider or "auto"
    if name == "auto":
        name = _auto_detect_provider(api_key)
    spec = _PROVIDERS.get(name)
    cheap_model = model or (spec.cheap_model if spec else None)
    return create_llm_provider(provider=name, api_key=api_key, model=cheap_model, client=client)
