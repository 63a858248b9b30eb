"""本地目录存储"""

import logging
from pathlib import Path

from .base import IMAGE_EXTENSIONS, StorageProvider

logger = logging.getLogger(__name__)


class LocalStorage(StorageProvider):
    """单层扁平输出目录"""

    def __init__(self, output_dir: str | Path):
        self.output_dir = Path(output_dir).expanduser().resolve()
        self.output_dir.mkdir(parents=True, exist_ok=True)

    @property
    def name(self) -> str:
        return "local"

    def save_bytes(self, data: bytes, filename: str) -> str:
        # 不创建子目录，输出目录在构造时已保证存在
        path = self.output_dir / filename
        path.write_bytes(data)
        logger.info("已保存: %s (%d bytes)", path, len(data))
        return str(path)

    def list_images(self) -> list[str]:
        return [
            str(p)
            for p in sorted(self.output_dir.iterdir())
            if p.is_file() and p.suffix[1:].lower() in IMAGE_EXTENSIONS
        ]

    def clear_images(self) -> int:
        images = self.list_images()
        for img in images:
            Path(img).unlink()
        logger.info("已删除 %d 张图片: %s", len(images), self.output_dir)
        return len(images)
