"""
Asset Routes: 빌드된 클라이언트 번들 서빙.

- GET /<pkg_dir>/<file> → {site_root}/{pkg_dir}/<file>

prefix는 app 생성 시 RenderOptions.site_pkg_dir로 결정된다 (main.py).
"""

from pathlib import Path

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import FileResponse

from src.app.services.ssr import get_render_options
from src.domain.constants import get_mime_type
from src.domain.errors import ErrorCodes

router = APIRouter()


def get_pkg_root(request: Request) -> Path:
    """번들 디렉터리 경로."""
    options = get_render_options(request)
    return Path(options.site_root) / options.site_pkg_dir


@router.get("/{filename:path}")
async def serve_asset(request: Request, filename: str) -> FileResponse:
    """번들 파일 (.js, .wasm, .css)."""
    pkg_root = get_pkg_root(request)
    file_path = pkg_root / filename

    if not file_path.is_file():
        raise HTTPException(
            status_code=404,
            detail={"code": ErrorCodes.ASSET_NOT_FOUND, "message": f"Asset '{filename}' not found"},
        )

    # 경로 순회 방지: 실제 경로가 pkg_root 내부인지 확인
    try:
        resolved = file_path.resolve(strict=True)
        resolved.relative_to(pkg_root.resolve())
    except (ValueError, OSError):
        raise HTTPException(status_code=400, detail={"code": "INVALID_PATH", "message": "Invalid asset path"})

    # symlink 자체를 명시적으로 차단
    if file_path.is_symlink():
        raise HTTPException(status_code=400, detail={"code": "SYMLINK_NOT_ALLOWED", "message": "Symbolic links are not allowed"})

    return FileResponse(
        path=file_path,
        media_type=get_mime_type(filename),
    )
