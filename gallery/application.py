# gallery/application.py
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from gallery.config import Settings, settings as default_settings
from gallery.api.routes import admin, pages
from gallery.core.logging_middleware import log_requests
from gallery.core.logger import logger
from gallery.database import create_db_engine
from gallery.services.photo_store import PhotoStore
from gallery.services.upload_service import UploadStorage

# 폼 필드 등 업로드 외 요청 본문 여유분
FORM_OVERHEAD = 1024 * 1024

def create_app(settings: Settings | None = None) -> FastAPI:
    """앱 생성 (저장소 객체를 만들어 app.state에 주입)"""
    settings = settings or default_settings

    app = FastAPI(
        title=settings.app_name,
        debug=settings.debug
    )

    # ===== 서비스 객체 =====
    engine = create_db_engine(settings.database_url, echo=settings.debug)
    photo_store = PhotoStore(engine)
    if settings.auto_create_tables:
        photo_store.create_tables()

    upload_storage = UploadStorage(
        settings.public_dir,
        max_bytes=settings.max_upload_bytes,
        allowed_types=settings.allowed_content_types
    )
    upload_storage.ensure_directory()

    app.state.settings = settings
    app.state.photo_store = photo_store
    app.state.upload_storage = upload_storage

    if settings.admin_token is None:
        logger.warning("ADMIN_TOKEN 미설정: /admin, /delete 가 인증 없이 열려 있음")

    # ===== 로깅 미들웨어 =====
    @app.middleware("http")
    async def logging_middleware(request: Request, call_next):
        return await log_requests(request, call_next)

    # 요청 크기 제한 미들웨어
    @app.middleware("http")
    async def limit_upload_size(request: Request, call_next):
        """요청 크기 제한"""
        max_size = settings.max_upload_bytes
        if max_size and request.method in ["POST", "PUT", "PATCH"]:
            content_length = request.headers.get("content-length")
            if content_length and content_length.isdigit() and int(content_length) > max_size + FORM_OVERHEAD:
                return PlainTextResponse("Request too large", status_code=413)
        return await call_next(request)

    # ===== 에러 핸들러 =====
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        # 정적 파일 마운트(/)는 GET 외 요청에 405를 냄 → 매칭 안 된 경로와 동일하게 404
        if exc.status_code in (404, 405):
            return PlainTextResponse("404 - Not Found", status_code=404)
        return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=exc.headers)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        logger.warning(f"잘못된 요청: {request.method} {request.url.path} - {exc.errors()}")
        return PlainTextResponse("Bad Request", status_code=400)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.opt(exception=exc).error(f"처리되지 않은 에러: {request.method} {request.url.path}")
        return PlainTextResponse("Server Error", status_code=500)

    # 라우터 등록
    app.include_router(pages.router)
    app.include_router(admin.router)

    # 정적 파일 서빙
    app.mount("/uploads", StaticFiles(directory=upload_storage.upload_dir), name="uploads")

    @app.on_event("startup")
    async def startup_event():
        logger.info(f"{settings.app_name} 서버 시작 (port {settings.port})")

    @app.on_event("shutdown")
    async def shutdown_event():
        engine.dispose()
        logger.info(f"{settings.app_name} 서버 종료")

    @app.get("/health")
    def health_check():
        """헬스체크"""
        return JSONResponse({
            "status": "healthy",
            "service": settings.app_name,
            "photos": photo_store.count()
        })

    # public 루트 (라우트 뒤에 마지막으로 등록)
    app.mount("/", StaticFiles(directory=upload_storage.public_dir), name="public")

    return app

