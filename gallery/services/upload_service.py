# gallery/services/upload_service.py
from fastapi import UploadFile
from pathlib import Path
import random
import shutil
import time

from gallery.core.file_security import validate_uploaded_file, sanitize_filename
from gallery.core.logger import logger

# 업로드 설정
UPLOAD_FIELD = "image"  # 폼 필드 이름
UPLOAD_SUBDIR = "uploads"
URL_PREFIX = f"/{UPLOAD_SUBDIR}/"

class UploadStorage:
    """업로드 파일 디스크 저장소 (public/uploads)"""

    def __init__(self, public_dir: str | Path, max_bytes: int = 0, allowed_types: list[str] | None = None):
        self.public_dir = Path(public_dir)
        self.upload_dir = self.public_dir / UPLOAD_SUBDIR
        self.max_bytes = max_bytes
        self.allowed_types = allowed_types or []

    def ensure_directory(self) -> None:
        """업로드 디렉토리 생성 (시작 시 한 번)"""
        if not self.upload_dir.exists():
            self.upload_dir.mkdir(parents=True, exist_ok=True)
            logger.info(f"업로드 디렉토리 생성: {self.upload_dir}")

    def generate_filename(self, original: str | None) -> str:
        """필드명-타임스탬프(ms)-난수-원본파일명"""
        unique_suffix = f"{int(time.time() * 1000)}-{random.randint(0, 10**9)}"
        return f"{UPLOAD_FIELD}-{unique_suffix}-{sanitize_filename(original or '')}"

    def save(self, file: UploadFile) -> str:
        """파일 저장 후 웹 경로 반환"""
        validate_uploaded_file(file, self.max_bytes, self.allowed_types)

        filename = self.generate_filename(file.filename)
        file_path = self.upload_dir / filename

        with open(file_path, "wb") as buffer:
            shutil.copyfileobj(file.file, buffer)

        logger.debug(f"파일 저장: {file_path}")
        return f"{URL_PREFIX}{filename}"

    def path_for(self, url: str) -> Path | None:
        """저장된 URL → 디스크 경로 (업로드 디렉토리 밖이면 None)"""
        if not url or not url.startswith(URL_PREFIX):
            return None

        upload_root = self.upload_dir.resolve()
        file_path = (upload_root / url[len(URL_PREFIX):]).resolve()
        if file_path.parent != upload_root:
            return None
        return file_path

    def remove(self, url: str) -> bool:
        """파일 삭제 (없으면 False)"""
        file_path = self.path_for(url)
        if file_path is None or not file_path.exists():
            return False

        file_path.unlink()
        logger.debug(f"파일 삭제: {file_path}")
        return True
