# gallery/schemas/photo.py
from pydantic import BaseModel, field_validator
from datetime import datetime

from gallery.models.photo import Category

class PhotoCreate(BaseModel):
    """업로드 폼 입력"""
    title: str = ""
    description: str = ""
    category: Category

    @field_validator('category', mode='before')
    def normalize_category(cls, v):
        # 대소문자 무시하고 정식 표기로 변환
        if isinstance(v, str):
            for category in Category:
                if category.value.lower() == v.strip().lower():
                    return category
        return v

class PhotoResponse(BaseModel):
    """사진 응답"""
    id: int
    title: str | None
    description: str | None
    url: str
    category: str
    created_at: datetime

    class Config:
        from_attributes = True
