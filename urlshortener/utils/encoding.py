import secrets
import string

# Base62 alphabet (case-sensitive)
ALPHABET = string.ascii_lowercase + string.ascii_uppercase + string.digits
SHORT_CODE_LENGTH = 5


class ShortCodeGenerationError(RuntimeError):
    """Raised when a short code cannot be produced."""


def generate_short_code(length: int = SHORT_CODE_LENGTH) -> str:
    """Generate a cryptographically secure random Base62 code of exactly `length` characters."""
    if length < 1:
        raise ValueError("short code length must be positive")
    try:
        return ''.join(secrets.choice(ALPHABET) for _ in range(length))
    except (OSError, NotImplementedError) as e:
        raise ShortCodeGenerationError(f"secure random source unavailable: {e}") from e
