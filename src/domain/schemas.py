"""
Data schemas for the editor server.

규칙:
- 필드명 통일: projects.json 키와 동일하게 사용 (camelCase 유지)
- tags / dataCategory: scalar-or-list 입력 → 항상 list로 정규화
- slug 비교는 항상 대소문자 무시
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from src.domain.constants import IMAGES_URL_PREFIX, LAYOUT_NESTED

# =============================================================================
# Normalization Helpers
# =============================================================================


def normalize_list(value: Any) -> list[Any]:
    """
    scalar-or-list 입력을 list로 정규화.

    - 이미 list면 그대로 유지
    - truthy scalar면 단일 원소 list로 감쌈
    - 그 외 (None, "", 0 등) → 빈 list

    Args:
        value: meta에서 꺼낸 원본 값

    Returns:
        정규화된 list
    """
    if isinstance(value, list):
        return value
    if value:
        return [value]
    return []


def slug_key(value: Any) -> str:
    """인덱스 조회용 slug 키 (str 변환 + 소문자). None → ""."""
    if value is None:
        return ""
    return str(value).lower()


# =============================================================================
# Project Schemas
# =============================================================================

@dataclass
class ProjectRecord:
    """
    projects.json의 프로젝트 한 건.

    필드명은 에디터 프론트엔드가 읽는 키와 동일해야 함.
    """
    slug: str
    title: str
    category: str = ""
    data_category: list[Any] = field(default_factory=list)
    description: str = ""
    tags: list[Any] = field(default_factory=list)
    image: str = ""

    @classmethod
    def from_meta(cls, slug: str, meta: dict[str, Any] | None) -> "ProjectRecord":
        """
        저장 요청의 meta 객체에서 레코드 생성.

        title이 없으면 slug, 나머지 문자열은 빈 문자열이 기본값.
        """
        if not isinstance(meta, dict):
            meta = {}

        return cls(
            slug=slug,
            title=meta.get("title") or slug,
            category=meta.get("category") or "",
            data_category=normalize_list(meta.get("dataCategory")),
            description=meta.get("description") or "",
            tags=normalize_list(meta.get("tags")),
            image=meta.get("image") or "",
        )

    def to_dict(self) -> dict[str, Any]:
        """JSON 직렬화용 (projects.json 키 순서)."""
        return {
            "slug": self.slug,
            "title": self.title,
            "category": self.category,
            "dataCategory": self.data_category,
            "description": self.description,
            "tags": self.tags,
            "image": self.image,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ProjectRecord":
        return cls(
            slug=str(data.get("slug") or ""),
            title=data.get("title") or "",
            category=data.get("category") or "",
            data_category=normalize_list(data.get("dataCategory")),
            description=data.get("description") or "",
            tags=normalize_list(data.get("tags")),
            image=data.get("image") or "",
        )


@dataclass
class ScrapedMeta:
    """HTML에서 긁어낸 메타데이터 (없으면 빈 문자열)."""
    title: str = ""
    image: str = ""


@dataclass
class SyncResult:
    """
    인덱스 ↔ 파일시스템 동기화 결과.

    records는 저장된 인덱스 원본 (알 수 없는 키 포함) 그대로.
    """
    records: list[dict[str, Any]]
    added: list[str] = field(default_factory=list)
    removed_count: int = 0

    @property
    def message(self) -> str:
        return (
            f"Synced: {len(self.records)} project(s). "
            f"Added: {len(self.added)}; removed from list: {self.removed_count}."
        )

    def to_dict(self) -> dict[str, Any]:
        """API 응답용."""
        return {
            "projects": self.records,
            "added": self.added,
            "removed": self.removed_count,
            "message": self.message,
        }


# =============================================================================
# Path Schemas
# =============================================================================

@dataclass
class EditorPaths:
    """
    배포 레이아웃별로 해석된 경로.

    nested / sibling 레이아웃 차이는 여기서만 드러나고
    서비스 로직은 동일하게 동작.
    """
    editor_root: Path
    public_images_dir: Path
    projects_dir: Path
    projects_index: Path
    projects_path_prefix: str
    images_url_prefix: str = IMAGES_URL_PREFIX
    layout: str = LAYOUT_NESTED

    def ensure_dirs(self) -> None:
        """업로드/프로젝트 폴더 생성 (시작 시 1회)."""
        self.public_images_dir.mkdir(parents=True, exist_ok=True)
        self.projects_dir.mkdir(parents=True, exist_ok=True)
