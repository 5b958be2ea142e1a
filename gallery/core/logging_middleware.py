# gallery/core/logging_middleware.py
from fastapi import Request
from gallery.core.logger import logger
import time

# 정적 파일 요청은 DEBUG로만 기록
QUIET_PREFIXES = ("/uploads/",)

def _describe(request: Request, response, elapsed_ms: float) -> str:
    line = f"{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.1f}ms)"
    location = response.headers.get("location")
    if location:
        line += f" => {location}"
    return line

async def log_requests(request: Request, call_next):
    """요청 결과를 상태 코드별 레벨로 기록

    - 5xx: ERROR (상세 traceback은 전역 에러 핸들러가 기록)
    - 4xx: WARNING (파일 누락, 권한 없음, 없는 경로)
    - 리다이렉트: 이동할 위치 포함
    """
    start_time = time.perf_counter()

    try:
        response = await call_next(request)
    except Exception as e:
        elapsed_ms = (time.perf_counter() - start_time) * 1000
        logger.error(f"{request.method} {request.url.path} 실패: {e!r} ({elapsed_ms:.1f}ms)")
        raise

    elapsed_ms = (time.perf_counter() - start_time) * 1000
    line = _describe(request, response, elapsed_ms)

    if response.status_code >= 500:
        logger.error(line)
    elif response.status_code >= 400:
        logger.warning(line)
    elif request.url.path.startswith(QUIET_PREFIXES):
        logger.debug(line)
    else:
        logger.info(line)

    return response
