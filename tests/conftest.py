"""
Pytest fixtures.

테스트마다 tmp_path 아래에 SQLite 파일과 public 디렉토리를 따로 만들어
앱 인스턴스를 격리한다.
"""

from collections.abc import Generator
from pathlib import Path

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from gallery.application import create_app
from gallery.config import Settings
from gallery.database import create_db_engine
from gallery.services.photo_store import PhotoStore
from gallery.services.upload_service import UploadStorage

# 1x1 PNG
PNG_BYTES = (
    b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR\x00\x00\x00\x01\x00\x00\x00\x01"
    b"\x08\x06\x00\x00\x00\x1f\x15\xc4\x89\x00\x00\x00\rIDATx\x9cc\xf8\x0f"
    b"\x00\x00\x01\x01\x00\x05\x18\xd8N\x00\x00\x00\x00IEND\xaeB`\x82"
)

# =============================================================================
# Settings / Services
# =============================================================================


def make_settings(tmp_path: Path, **overrides) -> Settings:
    """tmp_path 기반 설정 (.env 무시)."""
    values = {
        "database_url": f"sqlite:///{tmp_path / 'test.sqlite'}",
        "public_dir": str(tmp_path / "public"),
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return make_settings(tmp_path)


@pytest.fixture
def store(tmp_path: Path) -> PhotoStore:
    """테이블이 준비된 사진 저장소."""
    photo_store = PhotoStore(create_db_engine(f"sqlite:///{tmp_path / 'store.sqlite'}"))
    photo_store.create_tables()
    return photo_store


@pytest.fixture
def storage(tmp_path: Path) -> UploadStorage:
    upload_storage = UploadStorage(tmp_path / "public")
    upload_storage.ensure_directory()
    return upload_storage


# =============================================================================
# App / Client
# =============================================================================


@pytest.fixture
def app(settings: Settings) -> FastAPI:
    return create_app(settings)


@pytest.fixture
def app_factory(tmp_path: Path):
    """설정을 바꿔 앱을 만드는 팩토리."""

    def _make(**overrides) -> FastAPI:
        return create_app(make_settings(tmp_path, **overrides))

    return _make


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    """FastAPI TestClient (500 응답을 예외 대신 그대로 받음)."""
    with TestClient(app, raise_server_exceptions=False) as client:
        yield client


@pytest.fixture
def upload(client: TestClient):
    """사진 업로드 헬퍼."""

    def _upload(
        title: str = "T",
        description: str = "D",
        category: str = "Faces",
        filename: str = "photo.png",
        content: bytes = PNG_BYTES,
        content_type: str = "image/png",
    ):
        return client.post(
            "/upload",
            data={"title": title, "description": description, "category": category},
            files={"image": (filename, content, content_type)},
            follow_redirects=False,
        )

    return _upload


@pytest.fixture
def png_bytes() -> bytes:
    return PNG_BYTES
