# gallery/api/routes/pages.py
from fastapi import APIRouter, Depends, File, Form, HTTPException, Request, UploadFile, status
from fastapi.responses import RedirectResponse
from pydantic import ValidationError

from gallery.api.deps import get_photo_store, get_upload_storage, templates
from gallery.core.logger import logger
from gallery.models.photo import Category
from gallery.schemas.photo import PhotoCreate, PhotoResponse
from gallery.services.photo_store import PhotoStore
from gallery.services.upload_service import UploadStorage

router = APIRouter(tags=["갤러리"])

# 홈 화면 카테고리별 최근 사진 수
RECENT_LIMIT = 3

def to_responses(photos) -> list[PhotoResponse]:
    return [PhotoResponse.model_validate(photo) for photo in photos]

@router.get("/")
def home(request: Request, store: PhotoStore = Depends(get_photo_store)):
    """홈 (카테고리별 최근 사진 3장)"""
    categories = [category.value for category in Category]
    recent_photos = {
        category: to_responses(store.list_by_category(category, limit=RECENT_LIMIT))
        for category in categories
    }

    return templates.TemplateResponse(
        request,
        "home.html",
        {"categories": categories, "recent_photos": recent_photos}
    )

@router.get("/category/{category}")
def category_view(category: str, request: Request, store: PhotoStore = Depends(get_photo_store)):
    """카테고리별 전체 사진 (최신순)"""
    photos = to_responses(store.list_by_category(category))

    return templates.TemplateResponse(
        request,
        "category.html",
        {"category": category, "photos": photos}
    )

@router.get("/upload")
def upload_form(request: Request):
    """업로드 폼"""
    categories = [category.value for category in Category]
    return templates.TemplateResponse(request, "upload.html", {"categories": categories})

@router.post("/upload")
def upload_photo(
    title: str = Form(""),
    description: str = Form(""),
    category: str = Form(""),
    image: UploadFile | None = File(None),
    store: PhotoStore = Depends(get_photo_store),
    storage: UploadStorage = Depends(get_upload_storage)
):
    """사진 업로드 (파일 저장 → 레코드 생성)"""

    # 파일 없으면 아무것도 만들지 않고 거부
    if image is None or not image.filename:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="No image uploaded"
        )

    try:
        data = PhotoCreate(title=title, description=description, category=category)
    except ValidationError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Unknown category: {category}"
        )

    url = storage.save(image)

    try:
        store.create(
            title=data.title,
            description=data.description,
            url=url,
            category=data.category.value
        )
    except Exception:
        # 레코드 생성 실패 시 저장한 파일 정리
        logger.error(f"레코드 생성 실패, 파일 제거: {url}")
        storage.remove(url)
        raise

    return RedirectResponse(url="/", status_code=status.HTTP_302_FOUND)
