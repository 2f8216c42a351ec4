"""
Shared fixtures: isolated document directory, credentials file and clients.

Run:  pytest tests/ -v
"""

from __future__ import annotations

import base64
import json
import os

os.environ.setdefault("APP_ENV", "test")

import pytest
from fastapi.testclient import TestClient
from itsdangerous import TimestampSigner

from app.core.config import settings
from app.core.storage import get_document_repository, get_user_repository
from app.infrastructure.repositories.document_repository import FileDocumentRepository
from app.infrastructure.repositories.user_repository import YamlUserRepository
from app.main import app


SAMPLE_DOCUMENTS = {
    "about.md": b"# ruby is",
    "history.txt": (
        b"1993 - Yukihiro Matsumoto dreams up Ruby.\n"
        b" 1995 - Ruby 0.95 released.\n"
        b" 1996 - Ruby 1.0 released.\n "
    ),
    "changes.txt": (
        b"2020 - Ruby 3.0 released.\n"
        b" 2021 - Ruby 3.1 released.\n"
        b" 2022 - Ruby 3.2 released.\n "
    ),
    "xyz.xyz": b"aaaaa",
}


@pytest.fixture
def data_dir(tmp_path):
    path = tmp_path / "data"
    path.mkdir()
    return path


@pytest.fixture
def users_file(tmp_path):
    path = tmp_path / "users.yml"
    path.write_text("admin: secret\n", encoding="utf-8")
    return path


@pytest.fixture
def document_repository(data_dir):
    repository = FileDocumentRepository(data_dir)
    for name, content in SAMPLE_DOCUMENTS.items():
        repository.write(name, content)
    return repository


@pytest.fixture
def client(document_repository, users_file):
    app.dependency_overrides[get_document_repository] = lambda: document_repository
    app.dependency_overrides[get_user_repository] = lambda: YamlUserRepository(users_file)
    with TestClient(app, follow_redirects=False) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def admin_client(client):
    response = client.post("/users/login", data={"username": "admin", "password": "secret"})
    assert response.status_code == 302
    return client


def read_session(client: TestClient) -> dict:
    """Decode the signed session cookie the way SessionMiddleware writes it."""
    cookie = client.cookies.get("session")
    if not cookie:
        return {}
    payload = TimestampSigner(settings.session_secret).unsign(cookie)
    return json.loads(base64.b64decode(payload))
