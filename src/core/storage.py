"""
Storage 추상 인터페이스.

- 서비스는 ProjectStorage만 알고, 실제 위치(파일시스템/메모리)는 모름
- FileSystemStorage: EditorPaths 기준 실제 디스크 I/O
- InMemoryStorage: 테스트/도구용 (디스크 접근 없음)

인덱스는 "원문 텍스트"가 아니라 파싱된 list로 주고받는다.
파싱 실패 복구 정책은 ssot_index.parse_index 한 곳에서만 처리.
"""

import json
import os
from abc import ABC, abstractmethod
from typing import Any

from src.core.ssot_index import atomic_write_json, load_index, parse_index
from src.domain.constants import PROJECT_FILE_SUFFIX
from src.domain.schemas import EditorPaths


class ProjectStorage(ABC):
    """프로젝트 인덱스 + HTML 파일 + 이미지 저장소."""

    # === Index ===

    @abstractmethod
    def read_index(self) -> list[dict[str, Any]]:
        """인덱스 로드 (없음/파싱 실패 → [])."""

    @abstractmethod
    def write_index(self, records: list[dict[str, Any]]) -> None:
        """인덱스 전체 덮어쓰기."""

    # === Project HTML ===

    @abstractmethod
    def write_project_html(self, slug: str, html: str) -> None:
        """<slug>.html 저장 (덮어쓰기)."""

    @abstractmethod
    def read_project_html(self, filename: str) -> str:
        """
        프로젝트 HTML 읽기.

        Raises:
            OSError: 읽기 실패 (호출자가 처리)
        """

    @abstractmethod
    def list_project_files(self) -> list[str]:
        """*.html 파일명 목록 (목록 순서 그대로, 정렬 보장 없음)."""

    # === Images ===

    @abstractmethod
    def write_image(self, filename: str, data: bytes) -> None:
        """이미지 저장 (같은 이름이면 덮어쓰기)."""


# =============================================================================
# File System
# =============================================================================

class FileSystemStorage(ProjectStorage):
    """
    디스크 기반 저장소.

    구조 (nested 레이아웃 예):
    <editor_root>/projects/
    ├── projects.json
    └── <slug>.html
    """

    def __init__(self, paths: EditorPaths):
        """
        Args:
            paths: 배포 레이아웃별로 해석된 경로
        """
        self.paths = paths

    def read_index(self) -> list[dict[str, Any]]:
        return load_index(self.paths.projects_index)

    def write_index(self, records: list[dict[str, Any]]) -> None:
        atomic_write_json(self.paths.projects_index, records)

    def write_project_html(self, slug: str, html: str) -> None:
        self.paths.projects_dir.mkdir(parents=True, exist_ok=True)
        target = self.paths.projects_dir / f"{slug}{PROJECT_FILE_SUFFIX}"
        target.write_text(html, encoding="utf-8")

    def read_project_html(self, filename: str) -> str:
        return (self.paths.projects_dir / filename).read_text(encoding="utf-8", errors="replace")

    def list_project_files(self) -> list[str]:
        if not self.paths.projects_dir.exists():
            return []
        # os.listdir: 디렉토리 읽기 순서 유지
        return [
            name
            for name in os.listdir(self.paths.projects_dir)
            if name.endswith(PROJECT_FILE_SUFFIX)
        ]

    def write_image(self, filename: str, data: bytes) -> None:
        self.paths.public_images_dir.mkdir(parents=True, exist_ok=True)
        (self.paths.public_images_dir / filename).write_bytes(data)


# =============================================================================
# In Memory
# =============================================================================

class InMemoryStorage(ProjectStorage):
    """
    메모리 저장소.

    index_text는 projects.json 원문에 해당 (손상된 JSON 시뮬레이션 가능).
    """

    def __init__(
        self,
        index_text: str | None = None,
        files: dict[str, str] | None = None,
    ):
        self.index_text = index_text
        self.files: dict[str, str] = dict(files or {})
        self.images: dict[str, bytes] = {}
        # 읽기 실패를 시뮬레이션할 파일명
        self.unreadable: set[str] = set()

    def read_index(self) -> list[dict[str, Any]]:
        if self.index_text is None:
            return []
        return parse_index(self.index_text, source="memory:projects.json")

    def write_index(self, records: list[dict[str, Any]]) -> None:
        self.index_text = json.dumps(records, indent=2, ensure_ascii=False)

    def write_project_html(self, slug: str, html: str) -> None:
        self.files[f"{slug}{PROJECT_FILE_SUFFIX}"] = html

    def read_project_html(self, filename: str) -> str:
        if filename in self.unreadable or filename not in self.files:
            raise OSError(f"Cannot read {filename}")
        return self.files[filename]

    def list_project_files(self) -> list[str]:
        return [name for name in self.files if name.endswith(PROJECT_FILE_SUFFIX)]

    def write_image(self, filename: str, data: bytes) -> None:
        self.images[filename] = data
