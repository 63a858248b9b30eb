"""Google Gemini 图片 / 文本生成"""

import base64
import logging
from typing import Any

from google import genai
from google.genai import types

from ..errors import EmptyResponseError, NoImageDataError, NoTextError
from ..models import DEFAULT_GEMINI_IMAGE_MODEL, DEFAULT_TEXT_MODEL, get_image_model
from .base import GeneratedImage, GenerationProvider, ImageParts

logger = logging.getLogger(__name__)


class GeminiProvider(GenerationProvider):
    """Google Gemini，支持文生图、文本生成和健康检查"""

    def __init__(
        self,
        *,
        api_key: str | None = None,
        text_model: str = DEFAULT_TEXT_MODEL,
        client: Any = None,
    ):
        self.text_model = text_model
        self._client = client if client is not None else genai.Client(api_key=api_key)

    @property
    def name(self) -> str:
        return "gemini"

    @property
    def sdk(self) -> Any:
        return self._client

    @staticmethod
    def _build_image_config(
        model: str,
        *,
        aspect_ratio: str | None,
        image_size: str | None,
    ) -> types.GenerateContentConfig:
        caps = get_image_model(model)
        image_kwargs: dict[str, Any] = {}
        if caps.aspect_ratio and aspect_ratio:
            image_kwargs["aspect_ratio"] = aspect_ratio
        if caps.image_size and image_size:
            image_kwargs["image_size"] = image_size
        return types.GenerateContentConfig(
            response_modalities=["TEXT", "IMAGE"],
            image_config=types.ImageConfig(**image_kwargs),
        )

    async def generate_images(
        self,
        prompt: str,
        *,
        model: str = DEFAULT_GEMINI_IMAGE_MODEL,
        aspect_ratio: str | None = "1:1",
        image_size: str | None = None,
        **kwargs: Any,
    ) -> ImageParts:
        config = self._build_image_config(
            model, aspect_ratio=aspect_ratio, image_size=image_size
        )
        logger.info("Gemini 文生图: model=%s, aspect_ratio=%s", model, aspect_ratio)
        logger.debug("Gemini generate_content 参数: config=%s, prompt=%s", config, prompt)

        response = await self._client.aio.models.generate_content(
            model=model,
            contents=prompt,
            config=config,
        )

        candidates = response.candidates or []
        content = candidates[0].content if candidates else None
        parts = (content.parts if content else None) or []
        if not parts:
            raise EmptyResponseError("Gemini 图片生成未返回响应")

        images: list[GeneratedImage] = []
        texts: list[str] = []
        for part in parts:
            if part.text:
                texts.append(part.text)
            inline = part.inline_data
            if not (inline and inline.data):
                continue
            mime_type = inline.mime_type or "image/png"
            # 只取图片，音频等其他 inline 数据忽略
            if not mime_type.startswith("image/"):
                continue
            raw = inline.data
            b64 = (
                base64.b64encode(raw).decode("utf-8")
                if isinstance(raw, bytes)
                else raw
            )
            images.append(
                GeneratedImage(
                    data=b64,
                    mime_type=mime_type,
                    provider=self.name,
                    model=model,
                )
            )

        if not images:
            raise NoImageDataError("Gemini 图片生成未返回图片数据")
        return ImageParts(images=images, text="".join(texts) or None)

    async def generate_text(self, prompt: str, *, model: str | None = None) -> str:
        use_model = model or self.text_model
        logger.info("Gemini 文本生成: model=%s", use_model)
        response = await self._client.aio.models.generate_content(
            model=use_model,
            contents=prompt,
        )
        if not response.text:
            raise NoTextError("Gemini 未返回文本")
        return response.text

    async def ping(self) -> None:
        await self._client.aio.models.generate_content(
            model=self.text_model,
            contents="OK",
        )
