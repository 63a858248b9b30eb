"""Nano Banana - Gemini / DALL-E 生成客户端"""

from .client import GenerationClient, HealthStatus, create_client
from .config import ClientConfig
from .errors import (
    ConfigurationError,
    EmptyResponseError,
    MissingProviderError,
    NanoBananaError,
    NoImageDataError,
    NoSvgError,
    NoTextError,
)
from .models import IMAGE_MODELS, ImageModel
from .providers import GeneratedImage

__all__ = [
    "IMAGE_MODELS",
    "ClientConfig",
    "ConfigurationError",
    "EmptyResponseError",
    "GeneratedImage",
    "GenerationClient",
    "HealthStatus",
    "ImageModel",
    "MissingProviderError",
    "NanoBananaError",
    "NoImageDataError",
    "NoSvgError",
    "NoTextError",
    "create_client",
]
