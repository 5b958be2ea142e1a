# gallery/services/photo_store.py
from sqlalchemy.engine import Engine

from gallery.database import Base, create_session_factory
from gallery.models.photo import Photo
from gallery.core.logger import logger

class PhotoStore:
    """사진 레코드 저장소

    호출마다 세션을 새로 열고 닫는다 (행 하나 단위 작업, 여러 행 트랜잭션 없음).
    반환되는 Photo 객체는 세션에서 분리된 상태다.
    """

    def __init__(self, engine: Engine):
        self.engine = engine
        self.session_factory = create_session_factory(engine)

    def create_tables(self) -> None:
        """테이블 생성 (없을 때만)"""
        Base.metadata.create_all(bind=self.engine)

    def create(
        self,
        title: str | None,
        description: str | None,
        url: str,
        category: str
    ) -> Photo:
        """사진 레코드 생성"""
        with self.session_factory() as db:
            photo = Photo(
                title=title,
                description=description,
                url=url,
                category=category
            )
            db.add(photo)
            db.commit()
            db.refresh(photo)

        logger.info(f"사진 생성: id={photo.id} category={photo.category} url={photo.url}")
        return photo

    def list_by_category(self, category: str, limit: int | None = None) -> list[Photo]:
        """카테고리별 조회 (최신순)"""
        with self.session_factory() as db:
            query = db.query(Photo)\
                .filter(Photo.category == category)\
                .order_by(Photo.created_at.desc(), Photo.id.desc())

            if limit is not None:
                query = query.limit(limit)

            return query.all()

    def list_all(self) -> list[Photo]:
        """전체 조회 (최신순)"""
        with self.session_factory() as db:
            return db.query(Photo)\
                .order_by(Photo.created_at.desc(), Photo.id.desc())\
                .all()

    def find_by_id(self, photo_id: int) -> Photo | None:
        with self.session_factory() as db:
            return db.get(Photo, photo_id)

    def delete(self, photo_id: int) -> bool:
        """사진 레코드 삭제 (없으면 False)"""
        with self.session_factory() as db:
            photo = db.get(Photo, photo_id)
            if photo is None:
                return False

            db.delete(photo)
            db.commit()

        logger.info(f"사진 삭제: id={photo_id}")
        return True

    def count(self) -> int:
        with self.session_factory() as db:
            return db.query(Photo).count()
