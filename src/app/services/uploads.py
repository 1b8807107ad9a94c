"""
Image Upload Service: 에디터 이미지 업로드 → public/images/

- 파일명은 sanitize_upload_filename으로 정리 후 그대로 사용
- 같은 이름이면 덮어쓰기 (마지막 업로드가 이김)
"""

import logging

from src.core.ids import sanitize_upload_filename
from src.core.storage import ProjectStorage
from src.domain.constants import IMAGES_URL_PREFIX
from src.domain.errors import EditorError, ErrorCodes

logger = logging.getLogger(__name__)


class ImageUploadService:
    """업로드 이미지 저장 서비스."""

    def __init__(self, storage: ProjectStorage, url_prefix: str = IMAGES_URL_PREFIX):
        """
        Args:
            storage: 이미지 저장소
            url_prefix: 반환 URL 접두사
        """
        self.storage = storage
        self.url_prefix = url_prefix

    def save_image(self, filename: str | None, data: bytes | None) -> str:
        """
        업로드 이미지 저장.

        Args:
            filename: 클라이언트 파일명
            data: 파일 내용 (None이면 파일 없음)

        Returns:
            상대 URL (예: "public/images/photo_1.png")

        Raises:
            EditorError: NO_IMAGE_FILE
        """
        if data is None or not filename:
            raise EditorError(ErrorCodes.NO_IMAGE_FILE, "No image file")

        safe_name = sanitize_upload_filename(filename)
        self.storage.write_image(safe_name, data)
        logger.info(f"Uploaded image {filename!r} → {safe_name} ({len(data)} bytes)")

        return f"{self.url_prefix}{safe_name}"
