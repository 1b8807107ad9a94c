"""
Project Index Service: 프로젝트 HTML + projects.json 동기화.

규칙:
- slug는 유일 키, 비교는 대소문자 무시
- upsert: 같은 slug가 있으면 제자리 교체, 없으면 뒤에 추가
- reconcile: 파일만 있는 프로젝트는 추가, 파일 없는 레코드는 제거
- 인덱스 로드 실패 → 빈 인덱스로 진행 (warning 로그는 ssot_index에서)
- 락 없음: 동시 요청은 마지막 쓰기가 이김
"""

import logging
from pathlib import PurePath
from typing import Any

from src.core.html_meta import parse_meta_from_html
from src.core.ids import humanize_slug, sanitize_slug
from src.core.logging import emit_warning
from src.core.storage import ProjectStorage
from src.domain.constants import DEFAULT_SITE_OWNER
from src.domain.errors import EditorError, ErrorCodes
from src.domain.schemas import ProjectRecord, SyncResult, slug_key

logger = logging.getLogger(__name__)


class ProjectIndexService:
    """
    프로젝트 인덱스 관리 서비스.

    저장 위치는 주입된 ProjectStorage가 결정하고,
    응답에 돌려줄 경로 문자열은 projects_path_prefix로 조립한다.
    """

    def __init__(
        self,
        storage: ProjectStorage,
        projects_path_prefix: str = "projects/",
        site_owner: str = DEFAULT_SITE_OWNER,
    ):
        """
        Args:
            storage: 인덱스/HTML 저장소
            projects_path_prefix: 반환 경로 접두사 (예: "TemplateEdit/projects/")
            site_owner: 제목 접미사 제거용 사이트 소유자 이름
        """
        self.storage = storage
        self.projects_path_prefix = projects_path_prefix
        self.site_owner = site_owner

    # =========================================================================
    # Upsert
    # =========================================================================

    def upsert_project(
        self,
        slug_raw: str | None,
        html: str | None,
        meta: dict[str, Any] | None,
    ) -> str:
        """
        프로젝트 HTML 저장 + 인덱스 upsert.

        Args:
            slug_raw: 사용자 입력 slug
            html: 페이지 HTML (None이면 빈 문자열)
            meta: 레코드 메타 (title, category, dataCategory, description, tags, image)

        Returns:
            저장된 HTML 경로 문자열

        Raises:
            EditorError: INVALID_INPUT (slug가 비어 있음)
        """
        slug = sanitize_slug(slug_raw)
        if not slug:
            raise EditorError(ErrorCodes.INVALID_INPUT, "Missing slug", slug_raw=slug_raw)

        self.storage.write_project_html(slug, html or "")

        projects = self.storage.read_index()
        entry = ProjectRecord.from_meta(slug, meta).to_dict()

        key = slug_key(slug)
        for idx, existing in enumerate(projects):
            if self._record_key(existing) == key:
                projects[idx] = entry
                break
        else:
            projects.append(entry)

        self.storage.write_index(projects)
        logger.info(f"Saved project '{slug}' ({len(projects)} in index)")

        return f"{self.projects_path_prefix}{slug}.html"

    # =========================================================================
    # Reconcile
    # =========================================================================

    def reconcile_index(self) -> SyncResult:
        """
        인덱스를 프로젝트 폴더의 *.html 파일과 맞춤.

        1. 파일은 있는데 레코드가 없으면: HTML에서 제목/이미지 추출 후 추가
        2. 레코드는 있는데 파일이 없으면: 제거
        3. 결과 저장 (upsert와 같은 형식)

        추가 순서는 디렉토리 목록 순서 (알파벳순 보장 없음).

        Returns:
            SyncResult (records, added, removed_count)
        """
        projects = self.storage.read_index()
        files = self.storage.list_project_files()

        slugs_from_files = {slug_key(PurePath(name).stem) for name in files}
        known = {self._record_key(p) for p in projects}

        added: list[str] = []
        for filename in files:
            slug = PurePath(filename).stem
            key = slug_key(slug)
            if key in known:
                continue

            entry = self._record_from_file(slug, filename)
            projects.append(entry)
            known.add(key)
            added.append(slug)

        before = len(projects)
        projects = [p for p in projects if self._record_key(p) in slugs_from_files]
        removed_count = before - len(projects)

        self.storage.write_index(projects)

        result = SyncResult(records=projects, added=added, removed_count=removed_count)
        logger.info(result.message)
        return result

    # =========================================================================
    # Read
    # =========================================================================

    def list_projects(self) -> list[dict[str, Any]]:
        """현재 인덱스 (관용 로드 정책 동일)."""
        return self.storage.read_index()

    # =========================================================================
    # Internal Helpers
    # =========================================================================

    @staticmethod
    def _record_key(record: Any) -> str:
        """인덱스 레코드의 slug 키 (dict가 아니거나 slug 없으면 "")."""
        if not isinstance(record, dict):
            return ""
        return slug_key(record.get("slug") or "")

    def _record_from_file(self, slug: str, filename: str) -> dict[str, Any]:
        """인덱스에 없는 HTML 파일에서 새 레코드 생성."""
        try:
            html = self.storage.read_project_html(filename)
        except OSError as e:
            emit_warning(
                logger,
                ErrorCodes.HTML_READ_FAILURE,
                "Could not read project file; using empty content",
                filename=filename,
                error=str(e),
            )
            html = ""

        parsed = parse_meta_from_html(html, site_owner=self.site_owner)
        record = ProjectRecord(
            slug=slug,
            title=parsed.title or humanize_slug(slug),
            image=parsed.image,
        )
        return record.to_dict()
