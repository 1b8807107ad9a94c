#!/usr/bin/env python3
"""
sync_projects.py - 서버 없이 projects.json ↔ projects/*.html 동기화

GET /api/sync-projects 와 같은 동작:
1. projects/에 있는데 인덱스에 없는 HTML → 제목/이미지 추출 후 추가
2. 인덱스에 있는데 파일이 없는 항목 → 제거

사용법:
    # 동기화 실행
    uv run python scripts/sync_projects.py

    # 현재 인덱스만 출력 (쓰기 없음)
    uv run python scripts/sync_projects.py --list

    # 다른 설정/레이아웃
    uv run python scripts/sync_projects.py --config other.yaml --layout sibling
"""

import argparse
import json
import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from src.app.config import get_config_path, load_config, resolve_editor_paths  # noqa: E402
from src.app.services.projects import ProjectIndexService  # noqa: E402
from src.core.logging import setup_logging  # noqa: E402
from src.core.storage import FileSystemStorage  # noqa: E402
from src.domain.constants import DEFAULT_SITE_OWNER  # noqa: E402
from src.domain.schemas import ProjectRecord  # noqa: E402

logger = logging.getLogger(__name__)


def build_service(config_path: Path, layout: str | None = None) -> ProjectIndexService:
    """설정 파일에서 ProjectIndexService 생성."""
    config = load_config(config_path)
    if layout:
        config["paths"] = {**(config.get("paths") or {}), "layout": layout}

    paths = resolve_editor_paths(config, config_path.parent)
    scrape_config = config.get("scrape", {}) or {}

    return ProjectIndexService(
        FileSystemStorage(paths),
        projects_path_prefix=paths.projects_path_prefix,
        site_owner=scrape_config.get("site_owner", DEFAULT_SITE_OWNER),
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="projects.json ↔ projects/*.html 동기화",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="설정 파일 경로 (기본: default.yaml 또는 TEMPLATE_EDITOR_CONFIG)",
    )
    parser.add_argument(
        "--layout",
        choices=["nested", "sibling"],
        help="paths.layout 덮어쓰기",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="현재 인덱스만 출력 (동기화 안 함)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="결과를 JSON으로 출력",
    )

    args = parser.parse_args(argv)

    config_path = Path(args.config) if args.config else get_config_path()
    setup_logging(load_config(config_path))
    service = build_service(config_path, args.layout)

    if args.list:
        records = service.list_projects()
        if args.json:
            print(json.dumps(records, indent=2, ensure_ascii=False))
        else:
            for raw in records:
                if not isinstance(raw, dict):
                    continue
                record = ProjectRecord.from_dict(raw)
                print(f"{record.slug}\t{record.title}")
        return 0

    result = service.reconcile_index()

    if args.json:
        print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
    else:
        for slug in result.added:
            logger.info(f"  추가됨: {slug}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
