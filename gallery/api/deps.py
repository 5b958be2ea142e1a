# gallery/api/deps.py
from fastapi import Depends, HTTPException, Request, status
from fastapi.templating import Jinja2Templates
from pathlib import Path
import secrets

from gallery.config import Settings
from gallery.services.photo_store import PhotoStore
from gallery.services.upload_service import UploadStorage

# Jinja2 템플릿 (gallery/templates)
templates = Jinja2Templates(directory=Path(__file__).parent.parent / "templates")

def get_settings(request: Request) -> Settings:
    return request.app.state.settings

def get_photo_store(request: Request) -> PhotoStore:
    """앱 시작 시 만든 사진 저장소"""
    return request.app.state.photo_store

def get_upload_storage(request: Request) -> UploadStorage:
    """앱 시작 시 만든 업로드 저장소"""
    return request.app.state.upload_storage

def require_admin(request: Request, settings: Settings = Depends(get_settings)) -> str | None:
    """관리자 토큰 확인

    ADMIN_TOKEN이 없으면 모두 허용. 있으면 X-Admin-Token 헤더나
    token 쿼리 파라미터가 일치해야 한다. 반환값은 링크에 붙일 토큰.
    """
    if settings.admin_token is None:
        return None

    token = request.headers.get("x-admin-token") or request.query_params.get("token")
    if token is None or not secrets.compare_digest(token.encode(), settings.admin_token.encode()):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Forbidden"
        )

    return token
