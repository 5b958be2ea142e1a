"""
에러 처리 테스트.

- 매칭되지 않는 경로 → 404 plain text
- 처리되지 않은 예외 → 500 plain text, 상세 노출 없음
- 레코드 생성 실패 시 저장한 파일 정리
"""

from fastapi.testclient import TestClient

from gallery.api.deps import get_photo_store
from gallery.application import FORM_OVERHEAD


class BrokenStore:
    """모든 호출이 실패하는 저장소."""

    def __getattr__(self, name):
        def _fail(*args, **kwargs):
            raise OSError("disk I/O error")

        return _fail


class TestNotFound:
    def test_unmatched_route(self, client):
        response = client.get("/no/such/page")

        assert response.status_code == 404
        assert response.headers["content-type"].startswith("text/plain")
        assert response.text == "404 - Not Found"

    def test_missing_static_file(self, client):
        response = client.get("/uploads/missing.png")

        assert response.status_code == 404
        assert response.text == "404 - Not Found"


class TestServerError:
    def test_storage_error_returns_500(self, client, app):
        app.dependency_overrides[get_photo_store] = lambda: BrokenStore()

        response = client.get("/admin")

        assert response.status_code == 500
        assert response.headers["content-type"].startswith("text/plain")
        assert response.text == "Server Error"
        assert "disk I/O error" not in response.text

    def test_failed_insert_removes_saved_file(self, client, app, upload):
        app.dependency_overrides[get_photo_store] = lambda: BrokenStore()

        response = upload()

        assert response.status_code == 500
        assert list(app.state.upload_storage.upload_dir.iterdir()) == []


class TestRequestSize:
    def test_oversized_upload_rejected(self, upload, app):
        app.state.upload_storage.max_bytes = 8

        response = upload(content=b"x" * 64)

        assert response.status_code == 413
        assert app.state.photo_store.list_all() == []
        assert list(app.state.upload_storage.upload_dir.iterdir()) == []

    def test_request_body_over_limit_rejected_before_parsing(self, app_factory):
        """Content-Length가 한도 + 폼 여유분을 넘으면 라우트 전에 413."""
        app = app_factory(max_upload_bytes=8)
        body = b"x" * (8 + FORM_OVERHEAD + 1)

        with TestClient(app, raise_server_exceptions=False) as client:
            response = client.post(
                "/upload",
                data={"title": "T", "description": "D", "category": "Faces"},
                files={"image": ("big.png", body, "image/png")},
                follow_redirects=False,
            )

        assert response.status_code == 413
        assert response.text == "Request too large"
        assert app.state.photo_store.list_all() == []
        assert list(app.state.upload_storage.upload_dir.iterdir()) == []


class TestPublicRoot:
    def test_file_in_public_root_is_served(self, client, app):
        (app.state.upload_storage.public_dir / "style.css").write_text("body { margin: 0; }")

        response = client.get("/style.css")

        assert response.status_code == 200
        assert response.text == "body { margin: 0; }"

    def test_non_get_to_unmatched_path_is_404(self, client):
        response = client.post("/no/such/page")

        assert response.status_code == 404
        assert response.text == "404 - Not Found"

    def test_routes_take_precedence_over_public_root(self, client, app):
        (app.state.upload_storage.public_dir / "admin").write_text("shadow")

        response = client.get("/admin")

        assert response.status_code == 200
        assert "shadow" not in response.text
