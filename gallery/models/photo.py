# gallery/models/photo.py
from sqlalchemy import Column, Integer, String, Text, DateTime
from datetime import datetime, timezone
from gallery.database import Base
import enum

def utcnow() -> datetime:
    return datetime.now(timezone.utc)

class Category(str, enum.Enum):
    """사진 카테고리 (화면에 노출되는 값)"""
    FACES = "Faces"
    PLACES = "Places"
    THINGS = "Things"

class Photo(Base):
    """사진 모델"""
    __tablename__ = "photos"
    # 삭제된 id 재사용 방지 (SQLite)
    __table_args__ = {"sqlite_autoincrement": True}

    # 기본 필드
    id = Column(Integer, primary_key=True, autoincrement=True)

    # 사용자 입력
    title = Column(String(255))
    description = Column(Text)

    # 저장된 이미지 URL (/uploads/...)
    url = Column(String, nullable=False)

    # 카테고리 (저장은 자유 문자열)
    category = Column(String(50), nullable=False)

    # 타임스탬프 (마이크로초 단위, 정렬 키)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)

    def __repr__(self):
        return f"<Photo {self.id} {self.category}>"
