from typing import Dict, Optional, Protocol
from urllib.parse import urlunsplit
import logging
import threading

from urlshortener.utils.encoding import (
    SHORT_CODE_LENGTH,
    ShortCodeGenerationError,
    generate_short_code,
)


logger = logging.getLogger(__name__)

MAX_CODE_ATTEMPTS = 5


class Shortener(Protocol):
    """Contract the request handlers depend on."""
    def get_shortened_url(self, original_url: str) -> Optional[str]: ...
    def get_original_url(self, shortened_url: str) -> Optional[str]: ...
    def create_shortened_url(self, original_url: str) -> str: ...
    def is_valid_hostname(self, host: str) -> bool: ...


class URLShortener:
    """In-memory bidirectional mapping between original and short URLs.

    Lookups are plain dict reads. Creation is serialized by a single writer
    lock, and within it the forward table is written before the reverse one.
    """

    def __init__(self, hostname: str, length: int = SHORT_CODE_LENGTH, scheme: str = "https"):
        if length < 1:
            raise ValueError("short code length must be positive")
        self.hostname = hostname
        self.length = length
        self.scheme = scheme
        self._url_map: Dict[str, str] = {}
        self._inverted_url_map: Dict[str, str] = {}
        self._write_lock = threading.Lock()

    def __len__(self) -> int:
        """Number of stored mappings."""
        return len(self._url_map)

    def get_shortened_url(self, original_url: str) -> Optional[str]:
        return self._url_map.get(original_url)

    def get_original_url(self, shortened_url: str) -> Optional[str]:
        return self._inverted_url_map.get(shortened_url)

    def is_valid_hostname(self, host: str) -> bool:
        return host == self.hostname

    def build_short_url(self, code: str) -> str:
        return urlunsplit((self.scheme, self.hostname, f"/{code}", "", ""))

    def create_shortened_url(self, original_url: str) -> str:
        with self._write_lock:
            # Another request may have created it since the caller's lookup
            existing = self._url_map.get(original_url)
            if existing is not None:
                logger.info("short URL already existed: %s for URL: %s", existing, original_url[:50])
                return existing

            for attempt in range(MAX_CODE_ATTEMPTS):
                short_url = self.build_short_url(generate_short_code(self.length))
                if short_url not in self._inverted_url_map:
                    self._url_map[original_url] = short_url
                    self._inverted_url_map[short_url] = original_url
                    return short_url
                logger.info(f"Short code collision on attempt {attempt + 1}/{MAX_CODE_ATTEMPTS}")

        raise ShortCodeGenerationError(
            f"Failed to generate unique short code after {MAX_CODE_ATTEMPTS} attempts"
        )
