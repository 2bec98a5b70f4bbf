from .openai_client import OpenAIClient
from .gemini_client import GeminiClient

__all__ = ["OpenAIClient", "GeminiClient"]
