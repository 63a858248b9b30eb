"""错误类型

所有错误直接抛给调用方，只有 health_check 会把 provider 异常折叠成 False。
"""


class NanoBananaError(Exception):
    """所有 nano_banana 错误的基类"""


class ConfigurationError(NanoBananaError):
    """没有任何可用的 API key"""


class MissingProviderError(NanoBananaError):
    """操作需要的 provider 未配置 key，在发出请求之前抛出"""


class EmptyResponseError(NanoBananaError):
    """provider 没有返回任何 candidate / part"""


class NoImageDataError(NanoBananaError):
    """响应有效但不含图片数据"""


class NoTextError(NanoBananaError):
    """文本生成返回空"""


class NoSvgError(NanoBananaError):
    """生成结果中找不到 <svg>...</svg>"""
