"""
Editor Routes: 템플릿 에디터 API.

- POST /api/upload → 이미지 업로드 (multipart, 필드명 "image")
- POST /api/save → 프로젝트 HTML 저장 + projects.json upsert
- GET /api/sync-projects → projects.json ↔ projects/*.html 동기화
- GET /api/projects → 현재 인덱스

EditorError는 main.py의 exception handler가 {"error", "code"} JSON으로 변환.
"""

from typing import Any

from fastapi import APIRouter, Body, File, Request, UploadFile

from src.app.services.projects import ProjectIndexService
from src.app.services.uploads import ImageUploadService

# Routers
api_router = APIRouter()  # API endpoints


def get_project_service(request: Request) -> ProjectIndexService:
    """Request에서 ProjectIndexService 가져오기."""
    return request.app.state.project_service


def get_upload_service(request: Request) -> ImageUploadService:
    """Request에서 ImageUploadService 가져오기."""
    return request.app.state.upload_service


# =============================================================================
# API Routes
# =============================================================================

@api_router.post("/upload")
async def upload_image(
    request: Request,
    image: UploadFile | None = File(None),
) -> dict[str, str]:
    """
    이미지 업로드.

    파일명 정리 후 public/images/에 저장하고 상대 URL 반환.
    """
    service = get_upload_service(request)

    data = await image.read() if image is not None else None
    filename = image.filename if image is not None else None

    url = service.save_image(filename, data)
    return {"url": url}


@api_router.post("/save")
async def save_project(
    request: Request,
    payload: Any = Body(None),
) -> dict[str, str]:
    """
    프로젝트 저장.

    Body: {"slug": str, "html": str, "meta": {...}}
    객체가 아닌 body (배열, 문자열 등)는 빈 객체로 취급 → "Missing slug".
    """
    if not isinstance(payload, dict):
        payload = {}
    service = get_project_service(request)

    path = service.upsert_project(
        payload.get("slug"),
        payload.get("html"),
        payload.get("meta"),
    )
    return {"path": path}


@api_router.get("/sync-projects")
async def sync_projects(request: Request) -> dict[str, Any]:
    """
    projects.json을 projects/ 폴더와 동기화.

    누락 항목 추가, 파일 없는 항목 제거 후 요약 메시지 반환.
    """
    service = get_project_service(request)
    result = service.reconcile_index()
    return result.to_dict()


@api_router.get("/projects")
async def list_projects(request: Request) -> list[dict[str, Any]]:
    """현재 projects.json 내용."""
    service = get_project_service(request)
    return service.list_projects()
