"""
Application Services.

역할:
- projects: 프로젝트 HTML 저장 + projects.json upsert/동기화
- uploads: 에디터 이미지 업로드 저장
"""

from .projects import ProjectIndexService
from .uploads import ImageUploadService

__all__ = [
    "ProjectIndexService",
    "ImageUploadService",
]
