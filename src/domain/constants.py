"""
Domain Constants: 에디터 서버 전역 상수.

파일명 정책, 경로 상수, 정규식 정책 등 시스템 전반에서 사용되는 값들.
"""

import re

# =============================================================================
# Project Directory Structure (프로젝트 디렉토리 구조)
# =============================================================================
# nested 레이아웃 (기본):
# <project_root>/
# ├── public/images/          # 업로드 이미지
# └── <editor_root>/
#     ├── template-editor.html
#     └── projects/
#         ├── projects.json   # 프로젝트 인덱스
#         └── <slug>.html
#
# sibling 레이아웃:
# <project_root>/
# ├── public/images/
# ├── projects/<slug>.html
# ├── projects.json
# └── <editor_root>/

PROJECTS_DIR_NAME = "projects"
PROJECTS_INDEX_FILENAME = "projects.json"
PROJECT_FILE_SUFFIX = ".html"
PUBLIC_IMAGES_DIR = "public/images"
IMAGES_URL_PREFIX = "public/images/"

LAYOUT_NESTED = "nested"
LAYOUT_SIBLING = "sibling"
LAYOUTS = (LAYOUT_NESTED, LAYOUT_SIBLING)

# =============================================================================
# Server Defaults
# =============================================================================

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 3333
DEFAULT_EDITOR_PAGE = "template-editor.html"

# =============================================================================
# Sanitization Policies (정규식 정책)
# =============================================================================
# slug: [a-zA-Z0-9-] 외 문자는 "-" 로 치환
# 업로드 파일명: [a-zA-Z0-9._-] 외 문자는 "_" 로 치환

SLUG_FORBIDDEN_PATTERN = re.compile(r"[^a-zA-Z0-9-]")
SLUG_REPLACEMENT = "-"

UPLOAD_FILENAME_FORBIDDEN_PATTERN = re.compile(r"[^a-zA-Z0-9._-]")
UPLOAD_FILENAME_REPLACEMENT = "_"
UPLOAD_DEFAULT_FILENAME = "image"

# =============================================================================
# HTML Metadata Scrape
# =============================================================================

# <title> 뒤에 붙는 " | <사이트 소유자>" 접미사
DEFAULT_SITE_OWNER = "Sharva Paralkar"
