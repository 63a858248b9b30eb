"""生成 Provider"""

from .base import GeneratedImage, GenerationProvider, ImageParts
from .gemini import GeminiProvider
from .openai import OpenAIProvider

__all__ = [
    "GeminiProvider",
    "GeneratedImage",
    "GenerationProvider",
    "ImageParts",
    "OpenAIProvider",
]
