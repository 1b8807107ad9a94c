"""
Core layer: 인덱스/파일 저장 핵심 모듈.

역할:
- SSOT (projects.json) 로드/원자적 쓰기
- 저장소 추상화 (파일시스템 / 메모리)
- slug, 업로드 파일명 정리
- HTML 메타데이터 추출
"""

from .html_meta import parse_meta_from_html
from .ids import humanize_slug, sanitize_slug, sanitize_upload_filename
from .logging import emit_warning, setup_logging
from .ssot_index import atomic_write_json, load_index, parse_index
from .storage import FileSystemStorage, InMemoryStorage, ProjectStorage

__all__ = [
    # ssot_index
    "atomic_write_json",
    "load_index",
    "parse_index",
    # storage
    "ProjectStorage",
    "FileSystemStorage",
    "InMemoryStorage",
    # ids
    "sanitize_slug",
    "sanitize_upload_filename",
    "humanize_slug",
    # html_meta
    "parse_meta_from_html",
    # logging
    "setup_logging",
    "emit_warning",
]
