"""
HTML 메타데이터 추출 (best-effort, 정규식 기반).

인덱스에 없는 프로젝트 HTML을 동기화할 때만 사용.
HTML 파서가 아니므로 깨진 마크업에서도 예외 없이 기본값을 돌려준다.
"""

import re

from src.domain.constants import DEFAULT_SITE_OWNER
from src.domain.schemas import ScrapedMeta

TITLE_PATTERN = re.compile(r"<title[^>]*>([^<]+)</title>", re.IGNORECASE)
H1_PATTERN = re.compile(r"<h1[^>]*>([^<]+)</h1>", re.IGNORECASE)
IMG_SRC_PATTERN = re.compile(r"""<img[^>]+src=["']([^"']+)["']""", re.IGNORECASE)


def _owner_suffix_pattern(site_owner: str) -> re.Pattern[str]:
    """제목 끝의 " | <사이트 소유자>" 접미사 패턴."""
    return re.compile(rf"\s*\|\s*{re.escape(site_owner)}\s*$", re.IGNORECASE)


def parse_meta_from_html(html: str, site_owner: str = DEFAULT_SITE_OWNER) -> ScrapedMeta:
    """
    HTML에서 제목/대표 이미지 추출.

    우선순위:
    - title: <title> (소유자 접미사 제거) → 첫 <h1>
    - image: 첫 <img>의 src (검증 없이 그대로)

    Args:
        html: 프로젝트 HTML 원문
        site_owner: 제목에서 제거할 사이트 소유자 이름

    Returns:
        ScrapedMeta (매칭 없으면 빈 문자열)
    """
    meta = ScrapedMeta()

    title_match = TITLE_PATTERN.search(html)
    if title_match:
        meta.title = _owner_suffix_pattern(site_owner).sub("", title_match.group(1)).strip()

    if not meta.title:
        h1_match = H1_PATTERN.search(html)
        if h1_match:
            meta.title = h1_match.group(1).strip()

    img_match = IMG_SRC_PATTERN.search(html)
    if img_match:
        meta.image = img_match.group(1).strip()

    return meta
