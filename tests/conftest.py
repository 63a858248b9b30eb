from __future__ import annotations

import pytest

from nano_banana import GenerationClient
from nano_banana.providers import GeminiProvider, OpenAIProvider

from .dummies import DummyGenai, DummyOpenAI


@pytest.fixture
def output_dir(tmp_path):
    out = tmp_path / "out"
    out.mkdir()
    return out


@pytest.fixture
def make_client(output_dir):
    def _make(
        *,
        genai: DummyGenai | None = None,
        openai: DummyOpenAI | None = None,
    ) -> GenerationClient:
        return GenerationClient(
            api_key="test-google-key" if genai is not None else None,
            openai_api_key="test-openai-key" if openai is not None else None,
            output_dir=output_dir,
            environ={},
            env_files=(),
            gemini=GeminiProvider(client=genai) if genai is not None else None,
            openai=OpenAIProvider(client=openai) if openai is not None else None,
        )

    return _make
