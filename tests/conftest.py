"""
Pytest fixtures for the editor server tests.

테스트 구성:
- 에디터 폴더 구조는 tmp_path 아래에 매번 새로 생성
- nested 레이아웃이 기본, sibling은 필요한 테스트에서 직접 구성
"""

from pathlib import Path

import pytest

from src.app.config import resolve_editor_paths
from src.app.services.projects import ProjectIndexService
from src.core.storage import FileSystemStorage
from src.domain.schemas import EditorPaths

# =============================================================================
# Path Fixtures
# =============================================================================

@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """
    테스트용 공용 프로젝트 루트.

    포함:
    - TemplateEdit/template-editor.html (에디터 정적 파일)
    - TemplateEdit/css/editor.css
    """
    root = tmp_path / "portfolio"
    editor_root = root / "TemplateEdit"
    (editor_root / "css").mkdir(parents=True)
    (editor_root / "template-editor.html").write_text(
        "<!DOCTYPE html><title>Template Editor</title>", encoding="utf-8"
    )
    (editor_root / "css" / "editor.css").write_text("body { margin: 0; }", encoding="utf-8")
    return root


@pytest.fixture
def editor_root(project_root: Path) -> Path:
    """에디터 정적 파일 루트."""
    return project_root / "TemplateEdit"


# =============================================================================
# Config Fixtures
# =============================================================================

@pytest.fixture
def test_config(editor_root: Path) -> dict:
    """테스트용 설정 (nested 레이아웃)."""
    return {
        "server": {
            "editor_page": "template-editor.html",
        },
        "paths": {
            "layout": "nested",
            "editor_root": str(editor_root),
        },
        "scrape": {
            "site_owner": "Site Owner",
        },
        "logging": {
            "level": "DEBUG",
        },
    }


@pytest.fixture
def editor_paths(test_config: dict, project_root: Path) -> EditorPaths:
    """nested 레이아웃 경로 (폴더 생성 완료)."""
    paths = resolve_editor_paths(test_config, project_root)
    paths.ensure_dirs()
    return paths


# =============================================================================
# Service Fixtures
# =============================================================================

@pytest.fixture
def fs_storage(editor_paths: EditorPaths) -> FileSystemStorage:
    """디스크 저장소."""
    return FileSystemStorage(editor_paths)


@pytest.fixture
def project_service(fs_storage: FileSystemStorage, editor_paths: EditorPaths) -> ProjectIndexService:
    """디스크 기반 ProjectIndexService."""
    return ProjectIndexService(
        fs_storage,
        projects_path_prefix=editor_paths.projects_path_prefix,
        site_owner="Site Owner",
    )
