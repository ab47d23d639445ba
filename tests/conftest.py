"""Pytest configuration and fixtures."""

from typing import Iterator

import pytest
from fastapi.testclient import TestClient

from shortie.core.setting import Settings
from shortie.main import create_app
from shortie.services.code_store import CodeStore
from shortie.services.url_service import URLShorteningService

BASE_URL = "http://sho.rt"


class AlwaysTakenStore(CodeStore):
    """Store that reports every candidate code as already taken."""

    def __init__(self):
        super().__init__()
        self.attempts = 0

    def insert_if_absent(self, code: str, target: str) -> bool:
        self.attempts += 1
        return False


@pytest.fixture
def app_settings() -> Settings:
    return Settings(_env_file=None, BASE_URL=BASE_URL, PORT=8080)


@pytest.fixture
def store() -> CodeStore:
    return CodeStore()


@pytest.fixture
def url_service(store) -> URLShorteningService:
    return URLShorteningService(store=store, base_url=BASE_URL)


@pytest.fixture
def client(app_settings, store) -> Iterator[TestClient]:
    app = create_app(app_settings=app_settings, store=store)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def sample_urls():
    """Sample URLs for testing."""
    return [
        "https://example.com/page",
        "http://example.com",
        "https://www.example.com/path/to/page?query=value#frag",
        "http://subdomain.example.com:8080/path",
    ]
