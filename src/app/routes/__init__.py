"""
FastAPI Routes.

API 라우트 (REST). 정적 파일/루트 리다이렉트는 main.py에서 등록.
"""

from . import editor

__all__ = ["editor"]
