import pytest
from fastapi.testclient import TestClient

from urlshortener.main import create_app
from urlshortener.core.config import Settings
from urlshortener.api.shortener import get_shortener


class FakeShortener:
    """Canned answers for exercising handlers without the real store."""

    def __init__(self, original_url=None, shortened_url="https://urlshortener.com/aBcd1", valid_host=True):
        self.original_url = original_url
        self.shortened_url = shortened_url
        self.valid_host = valid_host
        self.created = []

    def get_shortened_url(self, original_url):
        return None

    def get_original_url(self, shortened_url):
        return self.original_url

    def create_shortened_url(self, original_url):
        self.created.append(original_url)
        return self.shortened_url

    def is_valid_hostname(self, host):
        return self.valid_host


@pytest.fixture
def app():
    """A fresh application, and so a fresh empty store, for each test."""
    return create_app(Settings())


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def store(app):
    return app.state.shortener


@pytest.fixture
def fake_shortener(app):
    """Installs a FakeShortener through the dependency override."""
    fake = FakeShortener()
    app.dependency_overrides[get_shortener] = lambda: fake
    yield fake
    app.dependency_overrides.clear()


@pytest.fixture
def sample_urls():
    """Provides sample URLs for testing."""
    return [
        "https://example.com/a",
        "https://google.com/search?q=test",
        "https://github.com/user/repo",
        "https://www.cs.cmu.edu/afs/cs.cmu.edu/project/phrensy/pub/papers/DilleyMPPSW02.pdf",
    ]
