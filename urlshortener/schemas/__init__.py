# re-export common schemas for simpler imports
from .URLCreateRequest import URLCreateRequest
from .ShortenedURLResponse import ShortenedURLResponse
from .OriginalURLResponse import OriginalURLResponse

__all__ = [
    "URLCreateRequest",
    "ShortenedURLResponse",
    "OriginalURLResponse",
]
