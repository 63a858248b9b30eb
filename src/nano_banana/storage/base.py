"""存储抽象接口"""

import base64
from abc import ABC, abstractmethod

# 视为图片的扩展名
IMAGE_EXTENSIONS = frozenset({"png", "jpg", "jpeg", "gif", "webp", "svg"})

_MIME_EXTENSIONS = {
    "image/png": "png",
    "image/jpeg": "jpg",
    "image/jpg": "jpg",
    "image/gif": "gif",
    "image/webp": "webp",
    "image/svg+xml": "svg",
}


def extension_for_mime(mime_type: str) -> str:
    """按 MIME 类型取文件扩展名，未知类型取子类型，兜底 png"""
    mime_type = (mime_type or "").split(";")[0].strip().lower()
    if mime_type in _MIME_EXTENSIONS:
        return _MIME_EXTENSIONS[mime_type]
    _, _, subtype = mime_type.partition("/")
    return subtype.split("+")[0] or "png"


class StorageProvider(ABC):
    """存储 Provider 抽象基类"""

    @property
    @abstractmethod
    def name(self) -> str:
        """Provider 名称"""

    @abstractmethod
    def save_bytes(self, data: bytes, filename: str) -> str:
        """写入二进制数据，返回绝对路径"""

    @abstractmethod
    def list_images(self) -> list[str]:
        """列出已保存的图片"""

    def save_base64(self, b64_data: str, filename: str) -> str:
        """便捷方法：解码 base64 后写入"""
        return self.save_bytes(base64.b64decode(b64_data), filename)

    def save_text(self, content: str, filename: str) -> str:
        return self.save_bytes(content.encode("utf-8"), filename)

    @abstractmethod
    def clear_images(self) -> int:
        """删除所有已保存的图片，返回删除数量"""
