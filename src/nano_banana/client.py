"""统一生成客户端

按模型能力表路由到 Gemini 或 DALL-E，结果可选保存到本地输出目录。
"""

import dataclasses
import logging
import re
import time
from pathlib import Path
from typing import Any, cast

import httpx

from .config import ClientConfig
from .errors import ConfigurationError, MissingProviderError, NoSvgError
from .models import (
    DEFAULT_GEMINI_IMAGE_MODEL,
    DEFAULT_OPENAI_IMAGE_MODEL,
    GEMINI,
    OPENAI,
    get_image_model,
)
from .providers.base import GeneratedImage, GenerationProvider
from .providers.gemini import GeminiProvider
from .providers.openai import OpenAIProvider
from .storage.base import StorageProvider, extension_for_mime
from .storage.local import LocalStorage

logger = logging.getLogger(__name__)

_SVG_PATTERN = re.compile(r"<svg[\s\S]*</svg>", re.IGNORECASE)

SVG_PROMPT = (
    "Create an SVG image of: {prompt}. "
    "Return ONLY the SVG code, no markdown or explanation."
)


def _timestamp() -> int:
    return int(time.time() * 1000)


@dataclasses.dataclass
class HealthStatus:
    """健康检查结果"""

    ok: bool = False
    google: bool = False
    openai: bool = False

    def as_dict(self) -> dict[str, bool]:
        return dataclasses.asdict(self)


class GenerationClient:
    """统一生成客户端

    用法:
        client = GenerationClient(output_dir="./temp")
        images = await client.generate_image("a cute banana with sunglasses")
        print(images[0].file_path)
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        *,
        api_key: str | None = None,
        openai_api_key: str | None = None,
        output_dir: str | Path | None = None,
        gemini: GeminiProvider | None = None,
        openai: OpenAIProvider | None = None,
        storage: StorageProvider | None = None,
        **config_kwargs: Any,
    ):
        if config is None:
            config = ClientConfig.load(
                api_key=api_key,
                openai_api_key=openai_api_key,
                output_dir=output_dir,
                **config_kwargs,
            )
        if not config.has_credentials:
            raise ConfigurationError(
                "需要 API key，请设置 NanoBanana_ApiKey 或 OPENAI_API_KEY"
            )
        self._config = config

        self._providers: dict[str, GenerationProvider] = {}
        if config.google_api_key:
            self._providers[GEMINI] = gemini or GeminiProvider(
                api_key=config.google_api_key
            )
        if config.openai_api_key:
            self._providers[OPENAI] = openai or OpenAIProvider(
                api_key=config.openai_api_key
            )

        self._storage = storage or LocalStorage(config.output_dir)

    @property
    def providers(self) -> list[str]:
        """已配置的 provider 名称"""
        return list(self._providers)

    def get_config(self) -> dict[str, str]:
        """当前配置（不含 API key）"""
        return {"output_dir": str(self._config.output_dir)}

    def sdk(self, provider: str) -> Any:
        """底层 SDK 客户端

        不属于稳定接口，仅在本客户端没有覆盖的场景下使用。
        """
        return self._require(provider, "直接访问 SDK").sdk

    def _require(self, provider: str, action: str) -> GenerationProvider:
        found = self._providers.get(provider)
        if not found:
            raise MissingProviderError(f"{action}需要 {provider} API key")
        return found

    def _gemini(self, action: str) -> GeminiProvider:
        return cast(GeminiProvider, self._require(GEMINI, action))

    # ── 生成 ──────────────────────────────────────────────

    async def generate_image(
        self,
        prompt: str,
        *,
        model: str | None = None,
        aspect_ratio: str = "1:1",
        image_size: str | None = None,
        size: str = "1024x1024",
        quality: str = "standard",
        save: bool = True,
        filename: str | None = None,
    ) -> list[GeneratedImage]:
        """文生图

        Args:
            model: 模型名，默认有 Google key 时用 Gemini，否则用 DALL-E
            aspect_ratio: Gemini 宽高比
            image_size: 1K/2K/4K，仅支持的模型会转发
            size / quality: DALL-E 参数
            filename: 不带扩展名的文件名，多张图时第 i 张追加 _i
        """
        if model is None:
            model = (
                DEFAULT_GEMINI_IMAGE_MODEL
                if GEMINI in self._providers
                else DEFAULT_OPENAI_IMAGE_MODEL
            )
        caps = get_image_model(model)
        provider = self._require(caps.provider, "图片生成")

        result = await provider.generate_images(
            prompt,
            model=model,
            aspect_ratio=aspect_ratio,
            image_size=image_size,
            size=size,
            quality=quality,
        )

        ts = _timestamp()
        images: list[GeneratedImage] = []
        for i, image in enumerate(result.images):
            updates: dict[str, Any] = {}
            if result.text and not image.text:
                updates["text"] = result.text
            if save:
                ext = extension_for_mime(image.mime_type)
                if filename:
                    name = f"{filename}{f'_{i}' if i > 0 else ''}.{ext}"
                else:
                    name = f"image_{ts}_{i}.{ext}"
                updates["file_path"] = self.save_image(image.data, name)
            images.append(dataclasses.replace(image, **updates))

        logger.info("生成图片 %d 张: model=%s", len(images), model)
        return images

    async def generate_text(self, prompt: str, *, model: str | None = None) -> str:
        return await self._gemini("文本生成").generate_text(prompt, model=model)

    async def generate_svg(
        self,
        prompt: str,
        *,
        model: str | None = None,
        save: bool = True,
        filename: str | None = None,
    ) -> GeneratedImage:
        """让 Gemini 输出 SVG 代码并抽取第一段 <svg>...</svg>"""
        gemini = self._gemini("SVG 生成")
        text = await gemini.generate_text(SVG_PROMPT.format(prompt=prompt), model=model)

        match = _SVG_PATTERN.search(text)
        if not match:
            logger.debug("SVG 抽取失败，响应: %s", text[:500])
            raise NoSvgError("生成结果中没有 SVG")

        svg = match.group(0)
        file_path = None
        if save:
            name = f"{filename}.svg" if filename else f"svg_{_timestamp()}.svg"
            file_path = self._storage.save_text(svg, name)

        return GeneratedImage(
            data=svg,
            mime_type="image/svg+xml",
            file_path=file_path,
            provider=gemini.name,
            model=model or gemini.text_model,
        )

    # ── 本地文件 ──────────────────────────────────────────────

    def save_image(self, base64_data: str, filename: str) -> str:
        """解码 base64 写入输出目录，返回绝对路径"""
        return self._storage.save_base64(base64_data, filename)

    async def download_image(
        self,
        url: str,
        filename: str,
        *,
        timeout: float = 30,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> str:
        """下载图片到输出目录，返回绝对路径"""
        async with httpx.AsyncClient(
            timeout=timeout, follow_redirects=True, transport=transport
        ) as http:
            resp = await http.get(url)
            resp.raise_for_status()
        logger.info("下载图片: %s", url)
        return self._storage.save_bytes(resp.content, filename)

    def list_saved_images(self) -> list[str]:
        return self._storage.list_images()

    def clear_saved_images(self) -> int:
        return self._storage.clear_images()

    # ── 健康检查 ──────────────────────────────────────────────

    async def health_check(self) -> HealthStatus:
        """逐个 provider 发最小请求，失败记为 False，不抛出"""
        status = HealthStatus()
        for name, provider in self._providers.items():
            try:
                await provider.ping()
            except Exception as e:
                logger.warning("%s 健康检查失败: %s", name, e)
                continue
            if name == GEMINI:
                status.google = True
            else:
                status.openai = True
        status.ok = status.google or status.openai
        return status

    async def close(self) -> None:
        for provider in self._providers.values():
            await provider.close()


def create_client(config: ClientConfig | None = None, **kwargs: Any) -> GenerationClient:
    """用默认配置创建客户端"""
    return GenerationClient(config, **kwargs)
