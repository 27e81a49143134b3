import re
from urllib.parse import SplitResult, urlsplit

from pydantic import AnyUrl, TypeAdapter, ValidationError

_any_url = TypeAdapter(AnyUrl)
_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def parse_url(value: str) -> SplitResult:
    """Syntactic URL parse only: no scheme whitelist and no reachability check.

    The value must be an absolute URL pydantic's AnyUrl accepts, with no
    control characters and no malformed percent-escapes. The original text is
    split as given, not normalized.
    """
    if any(ord(ch) < 0x20 or ord(ch) == 0x7f for ch in value):
        raise ValueError("invalid control character in URL")
    if _BAD_ESCAPE.search(value):
        raise ValueError("invalid URL escape")
    try:
        _any_url.validate_python(value)
    except ValidationError as e:
        raise ValueError(f"invalid URL: {e.errors()[0]['msg']}") from None
    parts = urlsplit(value)
    # .port validates lazily
    parts.port
    return parts


def url_host(parts: SplitResult) -> str:
    """Network location without user info, port included."""
    return parts.netloc.rpartition("@")[2]
