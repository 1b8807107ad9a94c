"""
설정 로드 + 배포 레이아웃별 경로 해석.

설정 파일: 프로젝트 루트 default.yaml (TEMPLATE_EDITOR_CONFIG로 변경 가능)
환경 변수 (.env 지원):
- TEMPLATE_EDITOR_CONFIG: 설정 파일 경로
- TEMPLATE_EDITOR_ROOT: 에디터 정적 파일 루트 (paths.editor_root 대신)
"""

import os
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from src.domain.constants import (
    LAYOUT_NESTED,
    LAYOUT_SIBLING,
    LAYOUTS,
    PROJECTS_DIR_NAME,
    PROJECTS_INDEX_FILENAME,
    PUBLIC_IMAGES_DIR,
)
from src.domain.schemas import EditorPaths

PROJECT_ROOT = Path(__file__).parent.parent.parent
DEFAULT_CONFIG_PATH = PROJECT_ROOT / "default.yaml"

# =============================================================================
# Configuration
# =============================================================================


def get_config_path() -> Path:
    """설정 파일 경로 (TEMPLATE_EDITOR_CONFIG 우선)."""
    load_dotenv()
    env_path = os.getenv("TEMPLATE_EDITOR_CONFIG")
    return Path(env_path) if env_path else DEFAULT_CONFIG_PATH


def load_config(config_path: Path | None = None) -> dict:
    """설정 파일 로드."""
    if config_path is None:
        config_path = get_config_path()

    if not config_path.exists():
        return {}

    with open(config_path, encoding="utf-8") as f:
        data: dict[Any, Any] = yaml.safe_load(f) or {}
        return data


def _resolve(base_dir: Path, value: str | None) -> Path | None:
    """설정값 경로 해석 (상대 경로는 base_dir 기준)."""
    if not value:
        return None
    path = Path(value).expanduser()
    if not path.is_absolute():
        path = base_dir / path
    return path.resolve()


def resolve_editor_paths(config: dict, base_dir: Path | None = None) -> EditorPaths:
    """
    배포 레이아웃에 따라 경로 해석.

    - nested: projects/, projects.json 모두 에디터 루트 아래
      (반환 경로: "<에디터 폴더명>/projects/<slug>.html")
    - sibling: projects/, projects.json 이 공용 프로젝트 루트 아래
      (반환 경로: "projects/<slug>.html")
    - 이미지: 항상 <project_root>/public/images

    Args:
        config: 설정 (paths.*)
        base_dir: 상대 경로 기준 (기본: 프로젝트 루트)

    Returns:
        EditorPaths

    Raises:
        ValueError: 알 수 없는 레이아웃
    """
    if base_dir is None:
        base_dir = PROJECT_ROOT
    paths_config = config.get("paths", {}) or {}

    layout = paths_config.get("layout", LAYOUT_NESTED)
    if layout not in LAYOUTS:
        raise ValueError(f"Unknown paths.layout: {layout!r} (expected one of {LAYOUTS})")

    editor_root = _resolve(
        base_dir, os.getenv("TEMPLATE_EDITOR_ROOT") or paths_config.get("editor_root")
    ) or base_dir.resolve()
    project_root = _resolve(base_dir, paths_config.get("project_root")) or editor_root.parent

    if layout == LAYOUT_SIBLING:
        projects_dir = project_root / PROJECTS_DIR_NAME
        projects_index = project_root / PROJECTS_INDEX_FILENAME
        prefix = f"{PROJECTS_DIR_NAME}/"
    else:
        projects_dir = editor_root / PROJECTS_DIR_NAME
        projects_index = projects_dir / PROJECTS_INDEX_FILENAME
        prefix = f"{editor_root.name}/{PROJECTS_DIR_NAME}/"

    projects_dir = _resolve(base_dir, paths_config.get("projects_dir")) or projects_dir
    projects_index = _resolve(base_dir, paths_config.get("projects_index")) or projects_index
    public_images_dir = (
        _resolve(base_dir, paths_config.get("public_images_dir"))
        or project_root / PUBLIC_IMAGES_DIR
    )

    return EditorPaths(
        editor_root=editor_root,
        public_images_dir=public_images_dir,
        projects_dir=projects_dir,
        projects_index=projects_index,
        projects_path_prefix=paths_config.get("projects_path_prefix") or prefix,
        layout=layout,
    )
