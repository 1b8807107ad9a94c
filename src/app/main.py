"""
FastAPI 애플리케이션 진입점.

실행:
- 개발: uv run uvicorn src.app.main:app --reload --port 3333
- 직접: uv run python -m src.app.main
그 다음 http://localhost:3333/template-editor.html 열기

설정/환경 변수는 src/app/config.py 참조.
"""

import logging
import re
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse, RedirectResponse, Response
from fastapi.staticfiles import StaticFiles
from starlette.types import Scope

from src.app.config import get_config_path, load_config, resolve_editor_paths
from src.app.routes import editor
from src.app.services.projects import ProjectIndexService
from src.app.services.uploads import ImageUploadService
from src.core.logging import setup_logging
from src.core.storage import FileSystemStorage
from src.domain.constants import (
    DEFAULT_EDITOR_PAGE,
    DEFAULT_HOST,
    DEFAULT_PORT,
    DEFAULT_SITE_OWNER,
)
from src.domain.errors import EditorError
from src.domain.schemas import EditorPaths

logger = logging.getLogger(__name__)


# =============================================================================
# Static Files
# =============================================================================


class EditorStaticFiles(StaticFiles):
    """
    에디터 정적 파일.

    "."으로 시작하는 경로 조각 (.env, .git/ 등)은 404.
    """

    async def get_response(self, path: str, scope: Scope) -> Response:
        if any(part.startswith(".") and part != "." for part in re.split(r"[/\\]", path)):
            raise HTTPException(status_code=404)
        return await super().get_response(path, scope)


# =============================================================================
# Lifespan
# =============================================================================


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    애플리케이션 생명주기 관리.

    시작 시: 로깅 설정, 업로드/프로젝트 폴더 생성
    """
    setup_logging(app.state.config)

    paths: EditorPaths = app.state.paths
    paths.ensure_dirs()
    logger.info(f"Editor root: {paths.editor_root} (layout={paths.layout})")
    logger.info(f"Uploads → {paths.public_images_dir}   Save → {paths.projects_dir}")

    yield


# =============================================================================
# App Factory
# =============================================================================


def create_app(config: dict | None = None, base_dir: Path | None = None) -> FastAPI:
    """
    FastAPI 앱 생성.

    Args:
        config: 설정 (None이면 default.yaml 로드)
        base_dir: 설정 상대 경로 기준

    Returns:
        라우트/정적 파일이 등록된 앱
    """
    if config is None:
        config_path = get_config_path()
        config = load_config(config_path)
        base_dir = base_dir or config_path.parent

    paths = resolve_editor_paths(config, base_dir)
    server_config = config.get("server", {}) or {}
    scrape_config = config.get("scrape", {}) or {}
    editor_page = server_config.get("editor_page", DEFAULT_EDITOR_PAGE)

    app = FastAPI(
        title="Template Editor Server",
        description="로컬 템플릿 에디터: 이미지 업로드 + 프로젝트 페이지 저장",
        version="0.1.0",
        lifespan=lifespan,
    )

    storage = FileSystemStorage(paths)
    app.state.config = config
    app.state.paths = paths
    app.state.project_service = ProjectIndexService(
        storage,
        projects_path_prefix=paths.projects_path_prefix,
        site_owner=scrape_config.get("site_owner", DEFAULT_SITE_OWNER),
    )
    app.state.upload_service = ImageUploadService(storage, url_prefix=paths.images_url_prefix)

    @app.exception_handler(EditorError)
    async def editor_error_handler(request: Request, exc: EditorError) -> JSONResponse:
        """EditorError → {"error", "code"} JSON."""
        logger.info(f"Rejected {request.method} {request.url.path}: {exc}")
        return JSONResponse(
            status_code=exc.http_status,
            content={"error": exc.message, "code": exc.code},
        )

    # API 라우트
    app.include_router(editor.api_router, prefix="/api", tags=["Editor API"])

    @app.get("/")
    async def root() -> RedirectResponse:
        """에디터 페이지로 리다이렉트."""
        return RedirectResponse(url=f"/{editor_page}", status_code=302)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """헬스 체크."""
        return {"status": "ok"}

    # Static files (에디터 자체 파일, 디렉토리 목록/index.html 자동 제공 없음)
    # 마지막에 등록: "/" 마운트가 위 라우트를 가리지 않도록
    if paths.editor_root.is_dir():
        app.mount("/", EditorStaticFiles(directory=paths.editor_root, html=False), name="editor")
    else:
        logger.warning(f"Editor root not found, static files disabled: {paths.editor_root}")

    return app


# =============================================================================
# App Instance
# =============================================================================

app = create_app()


# =============================================================================
# CLI Entry Point
# =============================================================================

if __name__ == "__main__":
    import uvicorn

    server_config = app.state.config.get("server", {}) or {}
    host = server_config.get("host", DEFAULT_HOST)
    port = server_config.get("port", DEFAULT_PORT)
    page = server_config.get("editor_page", DEFAULT_EDITOR_PAGE)

    print(f"Template editor: http://localhost:{port}/{page}")
    uvicorn.run(app, host=host, port=port)
