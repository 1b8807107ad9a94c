"""
ID/파일명 정리: slug, 업로드 파일명

규칙:
- slug: [a-zA-Z0-9-] 외 문자 → "-", 소문자로 통일
- 업로드 파일명: basename 후 [a-zA-Z0-9._-] 외 문자 → "_"
- 두 함수 모두 멱등: 이미 정리된 값은 그대로
"""

import re

from src.domain.constants import (
    SLUG_FORBIDDEN_PATTERN,
    SLUG_REPLACEMENT,
    UPLOAD_DEFAULT_FILENAME,
    UPLOAD_FILENAME_FORBIDDEN_PATTERN,
    UPLOAD_FILENAME_REPLACEMENT,
)

_WORD_START = re.compile(r"\b\w")


def sanitize_slug(value: str | None) -> str:
    """
    사용자 입력을 slug로 정리.

    빈 문자열이 나올 수 있음 (호출자가 INVALID_INPUT 처리).

    Args:
        value: 원본 slug 입력 (None 허용)

    Returns:
        정리된 slug
    """
    if not value:
        return ""
    return SLUG_FORBIDDEN_PATTERN.sub(SLUG_REPLACEMENT, str(value)).lower()


def sanitize_upload_filename(filename: str | None) -> str:
    """
    업로드 파일명 정리.

    - 경로 구분자(/ 또는 \\) 앞부분 제거 (basename)
    - 허용 외 문자 → "_"
    - 비었거나 "." / ".."이면 기본 이름 "image"

    Args:
        filename: 클라이언트가 보낸 파일명

    Returns:
        public/images 아래에 그대로 쓸 수 있는 파일명
    """
    name = (filename or UPLOAD_DEFAULT_FILENAME).rstrip("/\\")
    name = re.split(r"[/\\]", name)[-1]

    safe = UPLOAD_FILENAME_FORBIDDEN_PATTERN.sub(UPLOAD_FILENAME_REPLACEMENT, name)
    if safe in ("", ".", ".."):
        return UPLOAD_DEFAULT_FILENAME
    return safe


def humanize_slug(slug: str) -> str:
    """
    slug → 사람이 읽을 제목.

    예: "my-cool-project" → "My Cool Project"
    """
    spaced = slug.replace("-", " ")
    return _WORD_START.sub(lambda m: m.group(0).upper(), spaced)
