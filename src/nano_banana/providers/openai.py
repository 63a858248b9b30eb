"""OpenAI DALL-E 图片生成"""

import logging
from typing import Any

from openai import AsyncOpenAI

from ..errors import EmptyResponseError, NoImageDataError
from ..models import DEFAULT_OPENAI_IMAGE_MODEL, get_image_model
from .base import GeneratedImage, GenerationProvider, ImageParts

logger = logging.getLogger(__name__)


class OpenAIProvider(GenerationProvider):
    """OpenAI DALL-E，返回 b64_json"""

    def __init__(self, *, api_key: str | None = None, client: Any = None):
        self._client = client if client is not None else AsyncOpenAI(api_key=api_key)

    @property
    def name(self) -> str:
        return "openai"

    @property
    def sdk(self) -> Any:
        return self._client

    async def generate_images(
        self,
        prompt: str,
        *,
        model: str = DEFAULT_OPENAI_IMAGE_MODEL,
        size: str | None = "1024x1024",
        quality: str | None = "standard",
        **kwargs: Any,
    ) -> ImageParts:
        caps = get_image_model(model)
        params: dict[str, Any] = {
            "model": model,
            "prompt": prompt,
            "n": 1,
            "response_format": "b64_json",
        }
        if caps.size and size:
            params["size"] = size
        if caps.quality and quality:
            params["quality"] = quality

        logger.info("DALL-E 文生图: model=%s, size=%s", model, size)
        response = await self._client.images.generate(**params)

        if not response.data:
            raise EmptyResponseError("DALL-E 未返回响应")

        images = [
            GeneratedImage(
                data=item.b64_json,
                mime_type="image/png",
                text=getattr(item, "revised_prompt", None),
                provider=self.name,
                model=model,
            )
            for item in response.data
            if item.b64_json
        ]
        if not images:
            raise NoImageDataError("DALL-E 未返回图片数据")
        return ImageParts(images=images)

    async def ping(self) -> None:
        await self._client.models.list()

    async def close(self) -> None:
        await self._client.close()
