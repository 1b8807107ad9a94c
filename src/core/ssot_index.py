"""
SSOT (Single Source of Truth) 관리: projects.json

규칙:
- projects.json = 프로젝트 목록의 유일한 진실 원천 (JSON 배열)
- 원자적 쓰기: temp → rename + fsync
- 로드 실패는 빈 인덱스로 복구 (호환성 유지) + warning 이벤트
- 락 없음: 동시 쓰기는 마지막 쓰기가 이김 (로컬 단일 사용자 도구)

파일시스템 안정성 (best-effort):
- fsync로 가능한 환경에서 내구성 강화 (파일 + 디렉토리)
- fsync 실패 시 경고 남기고 계속 진행
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

from src.core.logging import emit_warning
from src.domain.errors import ErrorCodes

logger = logging.getLogger(__name__)

# =============================================================================
# Atomic Write
# =============================================================================


def _fsync_dir(dir_path: Path) -> None:
    """
    디렉토리 fsync (가능한 환경에서).

    rename 후 디렉토리 엔트리까지 내구성을 강화하려면 필요.
    Linux에서 주로 유효하며, 일부 OS/파일시스템에서는 지원되지 않을 수 있음.

    Args:
        dir_path: fsync할 디렉토리 경로
    """
    try:
        dir_fd = os.open(str(dir_path), os.O_RDONLY | os.O_DIRECTORY)
        try:
            os.fsync(dir_fd)
        finally:
            os.close(dir_fd)
    except (OSError, AttributeError) as e:
        # O_DIRECTORY 미지원 (Windows), 권한 문제 등
        logger.debug(f"Directory fsync skipped for {dir_path}: {e}")


def atomic_write_json(path: Path, data: list | dict) -> None:
    """
    원자적 JSON 쓰기.

    동작:
    - 중간 상태 없음: temp → rename
    - pretty print (indent=2), UTF-8, 비ASCII 그대로
    - 가능한 환경에서 내구성 강화: 파일 fsync + 디렉토리 fsync
    - 실패 시 cleanup: temp 파일 삭제, 기존 파일 보존

    Args:
        path: 저장할 파일 경로
        data: JSON 직렬화할 데이터 (인덱스는 list)
    """
    dir_path = path.parent
    dir_path.mkdir(parents=True, exist_ok=True)

    temp_path = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="w",
            dir=dir_path,
            suffix=".tmp",
            delete=False,
            encoding="utf-8",
        ) as f:
            temp_path = Path(f.name)
            json.dump(data, f, indent=2, ensure_ascii=False)
            f.flush()  # Python 버퍼 → OS 버퍼
            try:
                os.fsync(f.fileno())  # OS 버퍼 → 디스크
            except OSError as e:
                logger.warning(
                    f"File fsync failed for {path}: {e}. "
                    f"Data may not be durable on power loss."
                )

        os.replace(temp_path, path)  # 원자적 (Windows에서도 덮어쓰기)

        _fsync_dir(dir_path)

    except Exception:
        # 실패 시 temp 파일 정리
        if temp_path and temp_path.exists():
            try:
                temp_path.unlink()
            except OSError:
                pass
        raise


# =============================================================================
# Index Load
# =============================================================================


def parse_index(text: str, source: str = "<memory>") -> list[dict[str, Any]]:
    """
    projects.json 내용 파싱 (관용 정책).

    - JSON 파싱 실패 → [] + INDEX_PARSE_FAILURE 경고
    - 배열이 아님 → [] + INDEX_NOT_A_LIST 경고

    Args:
        text: 파일 내용
        source: 로그용 출처 (파일 경로 등)

    Returns:
        인덱스 레코드 목록 (dict 그대로)
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        emit_warning(
            logger,
            ErrorCodes.INDEX_PARSE_FAILURE,
            "Project index is not valid JSON; treating it as empty",
            path=source,
            error=str(e),
        )
        return []

    if not isinstance(data, list):
        emit_warning(
            logger,
            ErrorCodes.INDEX_NOT_A_LIST,
            "Project index is not a JSON array; treating it as empty",
            path=source,
            found_type=type(data).__name__,
        )
        return []

    return data


def load_index(index_path: Path) -> list[dict[str, Any]]:
    """
    projects.json 로드.

    파일이 없으면 조용히 [] (정상 초기 상태).

    Args:
        index_path: projects.json 경로

    Returns:
        인덱스 레코드 목록
    """
    if not index_path.exists():
        return []

    # 깨진 바이트는 U+FFFD로 치환: 레코드는 유지, JSON 문법 오류만 복구 대상
    text = index_path.read_text(encoding="utf-8", errors="replace")
    return parse_index(text, source=str(index_path))
