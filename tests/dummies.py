from __future__ import annotations

import base64
from types import SimpleNamespace
from typing import Any

# 1x1 PNG
PNG_B64 = "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mP8z8BQDwAEhQGAhKmMIQAAAABJRU5ErkJggg=="
PNG_BYTES = base64.b64decode(PNG_B64)


class DummyCalls:
    """Pops one queued response per call; queued exceptions are raised."""

    def __init__(self, responses: list[Any]):
        self._responses = list(responses)
        self.calls: list[dict[str, Any]] = []

    async def __call__(self, **kwargs: Any) -> Any:
        self.calls.append(kwargs)
        resp = self._responses.pop(0)
        if isinstance(resp, Exception):
            raise resp
        return resp


class DummyGenai:
    def __init__(self, responses: list[Any]):
        self.generate_content = DummyCalls(responses)
        models = SimpleNamespace(generate_content=self.generate_content)
        self.aio = SimpleNamespace(models=models)


class DummyOpenAI:
    def __init__(self, responses: list[Any] = (), models: list[Any] = ()):
        self.generate = DummyCalls(list(responses))
        self.list_models = DummyCalls(list(models))
        self.images = SimpleNamespace(generate=self.generate)
        self.models = SimpleNamespace(list=self.list_models)
        self.closed = False

    async def close(self) -> None:
        self.closed = True


def part(*, text: str | None = None, data: Any = None, mime_type: str = "image/png") -> SimpleNamespace:
    inline = SimpleNamespace(data=data, mime_type=mime_type) if data is not None else None
    return SimpleNamespace(text=text, inline_data=inline)


def gemini_response(*parts: SimpleNamespace) -> SimpleNamespace:
    return SimpleNamespace(
        candidates=[SimpleNamespace(content=SimpleNamespace(parts=list(parts)))]
    )


def dalle_response(*b64_items: str | None, revised_prompt: str | None = None) -> SimpleNamespace:
    return SimpleNamespace(
        data=[SimpleNamespace(b64_json=b, revised_prompt=revised_prompt) for b in b64_items]
    )


def text_response(text: str | None) -> SimpleNamespace:
    return SimpleNamespace(text=text)
