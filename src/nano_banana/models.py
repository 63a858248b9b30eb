"""图片模型能力表

按模型名决定请求里带哪些字段，新增模型只需加一行。
"""

from dataclasses import dataclass

GEMINI = "gemini"
OPENAI = "openai"

DEFAULT_GEMINI_IMAGE_MODEL = "gemini-2.5-flash-image"
DEFAULT_OPENAI_IMAGE_MODEL = "dall-e-3"
DEFAULT_TEXT_MODEL = "gemini-2.5-flash"


@dataclass(frozen=True)
class ImageModel:
    """单个图片模型支持的请求字段"""

    name: str
    provider: str
    aspect_ratio: bool = False
    image_size: bool = False
    size: bool = False
    quality: bool = False


IMAGE_MODELS: dict[str, ImageModel] = {
    m.name: m
    for m in (
        ImageModel("gemini-2.5-flash-image", GEMINI, aspect_ratio=True),
        ImageModel(
            "gemini-3-pro-image-preview", GEMINI, aspect_ratio=True, image_size=True
        ),
        ImageModel("dall-e-3", OPENAI, size=True, quality=True),
        ImageModel("dall-e-2", OPENAI, size=True),
    )
}


def get_image_model(name: str) -> ImageModel:
    model = IMAGE_MODELS.get(name)
    if not model:
        raise ValueError(f"未知图片模型: {name}，可选: {list(IMAGE_MODELS.keys())}")
    return model
