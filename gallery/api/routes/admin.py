# gallery/api/routes/admin.py
from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import RedirectResponse
from urllib.parse import urlencode

from gallery.api.deps import get_photo_store, get_upload_storage, require_admin, templates
from gallery.core.logger import logger
from gallery.schemas.photo import PhotoResponse
from gallery.services.photo_store import PhotoStore
from gallery.services.upload_service import UploadStorage

router = APIRouter(tags=["관리"])

# SQLite INTEGER (64비트 부호 있는 정수)
SQLITE_INT_MIN = -2**63
SQLITE_INT_MAX = 2**63 - 1

def admin_url(token: str | None) -> str:
    if token is None:
        return "/admin"
    return f"/admin?{urlencode({'token': token})}"

@router.get("/admin")
def admin_list(
    request: Request,
    token: str | None = Depends(require_admin),
    store: PhotoStore = Depends(get_photo_store)
):
    """관리 화면 (전체 사진, 최신순)"""
    photos = [PhotoResponse.model_validate(photo) for photo in store.list_all()]

    return templates.TemplateResponse(
        request,
        "admin.html",
        {"photos": photos, "token": token}
    )

@router.get("/delete/{photo_id}")
def delete_photo(
    photo_id: str,
    token: str | None = Depends(require_admin),
    store: PhotoStore = Depends(get_photo_store),
    storage: UploadStorage = Depends(get_upload_storage)
):
    """사진 삭제 (파일 → 레코드 순서, 없으면 무시)"""
    redirect = RedirectResponse(url=admin_url(token), status_code=status.HTTP_302_FOUND)

    try:
        pk = int(photo_id)
    except ValueError:
        return redirect

    # SQLite INTEGER 범위 밖이면 존재할 수 없는 id
    if not SQLITE_INT_MIN <= pk <= SQLITE_INT_MAX:
        return redirect

    photo = store.find_by_id(pk)
    if photo is None:
        logger.debug(f"삭제 대상 없음: id={photo_id}")
        return redirect

    # 파일 먼저 삭제
    storage.remove(photo.url)

    # DB에서 삭제
    store.delete(pk)

    return redirect
