# gallery/core/file_security.py
import os
from fastapi import UploadFile, HTTPException, status

MAX_NAME_LENGTH = 50

def validate_file_size(file: UploadFile, max_bytes: int) -> None:
    """파일 크기 검증 (0이면 제한 없음)"""
    if not max_bytes:
        return

    file.file.seek(0, 2)  # 파일 끝으로 이동
    size = file.file.tell()  # 현재 위치 = 파일 크기
    file.file.seek(0)  # 다시 처음으로

    if size > max_bytes:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"File too large. Max: {max_bytes // 1024 // 1024}MB"
        )

def validate_mime_type(file: UploadFile, allowed: list[str]) -> None:
    """MIME 타입 검증 (목록이 비어있으면 제한 없음)"""
    if not allowed:
        return

    if file.content_type not in allowed:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"File type not allowed: {file.content_type}"
        )

def sanitize_filename(filename: str) -> str:
    """파일명 안전하게 변환"""
    # 위험한 문자 제거
    filename = os.path.basename(filename.replace("\\", "/"))  # 경로 제거
    filename = filename.replace(" ", "_")  # 공백 → 언더스코어

    name, ext = os.path.splitext(filename)

    # 알파벳, 숫자, 언더스코어, 하이픈, 점만 허용
    safe_name = "".join(c for c in name if c.isascii() and (c.isalnum() or c in "_-."))
    safe_ext = "".join(c for c in ext if c.isascii() and (c.isalnum() or c == "."))

    if len(safe_name) > MAX_NAME_LENGTH:
        safe_name = safe_name[:MAX_NAME_LENGTH]

    if not safe_name:
        safe_name = "upload"

    return f"{safe_name}{safe_ext.lower()}"

def validate_uploaded_file(file: UploadFile, max_bytes: int, allowed: list[str]) -> None:
    """전체 파일 검증"""
    validate_file_size(file, max_bytes)
    validate_mime_type(file, allowed)
