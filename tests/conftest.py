# tests/conftest.py
import dataclasses
import os
import tempfile

# Keep the module-level default app from creating ./uploads in the repo
os.environ.setdefault("UPLOAD_DIR", tempfile.mkdtemp(prefix="jobstore_default_"))

import pytest
from fastapi.testclient import TestClient

from app.config import Config
from app.lib.store import JobFileStore
from app.main import create_app


def _config(root, **overrides) -> Config:
    base = Config(
        port=8080,
        upload_dir=root,
        max_file_size=10 * 1024 * 1024 * 1024,
        on_collision="overwrite",
        public_base_url="",
        allowed_origins=["*"],
        log_level="DEBUG",
        access_log=False,
    )
    return dataclasses.replace(base, **overrides)

# -------- Config / store --------
@pytest.fixture
def upload_root(tmp_path):
    root = tmp_path / "uploads"
    root.mkdir()
    return root

@pytest.fixture
def make_config(upload_root):
    def _make(**overrides) -> Config:
        return _config(upload_root, **overrides)
    return _make

@pytest.fixture
def store(make_config):
    return JobFileStore(make_config())

# -------- Test client --------
@pytest.fixture
def make_client(make_config):
    clients = []

    def _make(**overrides) -> TestClient:
        c = TestClient(create_app(make_config(**overrides)))
        c.__enter__()
        clients.append(c)
        return c

    yield _make
    for c in clients:
        c.__exit__(None, None, None)

@pytest.fixture
def client(make_client):
    return make_client()
