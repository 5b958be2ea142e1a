# gallery/config.py
from pydantic_settings import BaseSettings
from pydantic import field_validator

DEFAULT_CONTENT_TYPES = [
    "image/jpeg",
    "image/png",
    "image/gif",
    "image/webp",
]

class Settings(BaseSettings):
    """환경변수 설정"""

    # 서버 기본 설정
    app_name: str = "Photo Gallery"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 3000

    # Database
    database_url: str = "sqlite:///./database.sqlite"
    auto_create_tables: bool = True  # 시작 시 테이블 생성

    # 정적 파일 / 업로드
    public_dir: str = "public"
    max_upload_bytes: int = 20 * 1024 * 1024  # 20MB, 0이면 제한 없음
    allowed_content_types: list[str] = DEFAULT_CONTENT_TYPES  # 비어있으면 제한 없음

    # 관리자 토큰 (없으면 누구나 관리 가능)
    admin_token: str | None = None

    # 로그
    log_dir: str = "logs"

    @field_validator('port')
    def validate_port(cls, v):
        if not 0 < v < 65536:
            raise ValueError('PORT는 1~65535 사이여야 합니다')
        return v

    @field_validator('admin_token')
    def validate_admin_token(cls, v):
        if v is not None and len(v) < 16:
            raise ValueError('ADMIN_TOKEN은 최소 16자 이상이어야 합니다')
        return v

    class Config:
        env_file = ".env"
        case_sensitive = False

# 싱글톤 인스턴스 (기본값)
settings = Settings()
