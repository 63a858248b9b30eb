"""客户端配置

优先级: 显式参数 > 环境变量 > .env 文件 > 默认值

环境变量:
    NanoBanana_ApiKey / GEMINI_API_KEY / GOOGLE_API_KEY: Google API key
    OPENAI_API_KEY: OpenAI API key
    NANO_BANANA_OUTPUT_DIR: 输出目录（默认 ./temp）
"""

import logging
import os
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import dotenv_values

logger = logging.getLogger(__name__)

GOOGLE_KEY_VARS = ("NanoBanana_ApiKey", "GEMINI_API_KEY", "GOOGLE_API_KEY")
OPENAI_KEY_VARS = ("OPENAI_API_KEY",)
OUTPUT_DIR_VAR = "NANO_BANANA_OUTPUT_DIR"
DEFAULT_OUTPUT_DIR = "temp"


def default_env_files() -> list[Path]:
    """默认 .env 查找位置，按顺序取第一个存在的"""
    return [
        Path.cwd() / ".env",
        Path.home() / ".agentic-loop" / ".env",
    ]


def _read_env_file(env_files: Iterable[str | Path]) -> dict[str, str]:
    for path in env_files:
        path = Path(path)
        if path.is_file():
            logger.debug("读取配置文件: %s", path)
            values = dotenv_values(path)
            return {k: v for k, v in values.items() if v is not None}
    return {}


def _lookup(
    names: Iterable[str],
    environ: Mapping[str, str],
    file_values: Mapping[str, str],
) -> str | None:
    # 环境变量整体优先于文件
    for source in (environ, file_values):
        for name in names:
            value = source.get(name)
            if value:
                return value
    return None


@dataclass(frozen=True)
class ClientConfig:
    """GenerationClient 配置"""

    google_api_key: str | None = None
    openai_api_key: str | None = None
    output_dir: Path = field(default_factory=lambda: Path.cwd() / DEFAULT_OUTPUT_DIR)

    @property
    def has_credentials(self) -> bool:
        return bool(self.google_api_key or self.openai_api_key)

    @classmethod
    def load(
        cls,
        *,
        api_key: str | None = None,
        openai_api_key: str | None = None,
        output_dir: str | Path | None = None,
        environ: Mapping[str, str] | None = None,
        env_files: Iterable[str | Path] | None = None,
    ) -> "ClientConfig":
        """按优先级解析配置

        Args:
            environ: 环境变量来源，默认 os.environ
            env_files: .env 候选路径，传空序列则不读文件
        """
        if environ is None:
            environ = os.environ
        if env_files is None:
            env_files = default_env_files()
        file_values = _read_env_file(env_files)

        google_key = api_key or _lookup(GOOGLE_KEY_VARS, environ, file_values)
        openai_key = openai_api_key or _lookup(OPENAI_KEY_VARS, environ, file_values)
        out = (
            output_dir
            or _lookup((OUTPUT_DIR_VAR,), environ, file_values)
            or Path.cwd() / DEFAULT_OUTPUT_DIR
        )
        return cls(
            google_api_key=google_key,
            openai_api_key=openai_key,
            output_dir=Path(out).expanduser().resolve(),
        )

    def __repr__(self) -> str:
        return (
            f"ClientConfig(google_api_key={'***' if self.google_api_key else None}, "
            f"openai_api_key={'***' if self.openai_api_key else None}, "
            f"output_dir={str(self.output_dir)!r})"
        )
