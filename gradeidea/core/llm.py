"""LLM client utilities for LangChain integration."""

from langchain_openai import ChatOpenAI

from gradeidea.core.config import get_settings


def get_llm(
    model: str | None = None,
    temperature: float = 0.1,
    max_tokens: int | None = None,
) -> ChatOpenAI:
    """
    Get configured LLM instance for LangChain chains.

    Args:
        model: Model name override (defaults to config setting)
        temperature: Temperature for generation (default 0.1)
        max_tokens: Optional completion cap

    Returns:
        ChatOpenAI instance configured with API key and model
    """
    settings = get_settings()

    return ChatOpenAI(
        api_key=settings.OPENAI_API_KEY,
        model=model or settings.OPENAI_MODEL,
        temperature=temperature,
        max_tokens=max_tokens,
    )
