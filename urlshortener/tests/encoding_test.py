import re
import string

import pytest

from urlshortener.utils.encoding import (
    ALPHABET,
    ShortCodeGenerationError,
    generate_short_code,
)


def test_alphabet_is_base62():
    assert len(ALPHABET) == 62
    assert set(ALPHABET) == set(string.ascii_letters + string.digits)


@pytest.mark.parametrize("length", [1, 5, 12])
def test_generate_short_code_length(length):
    for _ in range(50):
        code = generate_short_code(length)
        assert len(code) == length
        assert re.fullmatch(r"[a-zA-Z0-9]+", code)


def test_generate_short_code_default_length():
    assert len(generate_short_code()) == 5


def test_generate_short_code_rejects_non_positive_length():
    with pytest.raises(ValueError):
        generate_short_code(0)


def test_random_source_failure_is_not_masked(monkeypatch):
    def broken_choice(seq):
        raise OSError("no entropy")

    monkeypatch.setattr("urlshortener.utils.encoding.secrets.choice", broken_choice)
    with pytest.raises(ShortCodeGenerationError):
        generate_short_code(5)
