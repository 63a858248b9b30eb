"""生成 Provider 抽象接口"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class GeneratedImage:
    """图片生成结果，返回后不可变"""

    data: str  # base64，SVG 结果为原始 markup
    mime_type: str = "image/png"
    file_path: str | None = None
    text: str | None = None
    provider: str = ""
    model: str = ""


@dataclass
class ImageParts:
    """provider 解包后的图片及附带文本，顺序与响应一致"""

    images: list[GeneratedImage] = field(default_factory=list)
    text: str | None = None


class GenerationProvider(ABC):
    """生成 Provider 抽象基类，每个实例包一个 SDK handle"""

    @property
    @abstractmethod
    def name(self) -> str:
        """Provider 名称"""

    @property
    @abstractmethod
    def sdk(self) -> Any:
        """底层 SDK 客户端"""

    @abstractmethod
    async def generate_images(self, prompt: str, *, model: str, **kwargs: Any) -> ImageParts:
        """文生图"""

    @abstractmethod
    async def ping(self) -> None:
        """最小请求，失败时抛出 SDK 异常"""

    async def close(self) -> None:
        """释放资源"""
