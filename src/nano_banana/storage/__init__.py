"""统一存储入口"""

from .base import IMAGE_EXTENSIONS, StorageProvider, extension_for_mime
from .local import LocalStorage

__all__ = ["IMAGE_EXTENSIONS", "LocalStorage", "StorageProvider", "extension_for_mime"]
