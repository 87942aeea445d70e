# novadesk/routers/site.py
from pathlib import Path

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.types import Scope

from novadesk.config import Settings
from novadesk.deps import get_settings

INDEX_DOCUMENT = "index.html"

router = APIRouter(prefix="", tags=["site"])


class SiteFiles(StaticFiles):
    """StaticFiles that refuses dotfiles (.env, .git/...) anywhere in the path."""

    async def get_response(self, path: str, scope: Scope):
        parts = Path(path).parts
        if any(p.startswith(".") and p not in (".", "..") for p in parts):
            raise StarletteHTTPException(status_code=404)
        return await super().get_response(path, scope)


@router.get("/", include_in_schema=False)
def index(settings: Settings = Depends(get_settings)):
    path = Path(settings.STATIC_DIR) / INDEX_DOCUMENT
    if not path.is_file():
        raise HTTPException(status_code=404, detail="Not Found")
    return FileResponse(path)


def static_files(settings: Settings) -> SiteFiles:
    # html=True: /pricing/ serves pricing/index.html and /pricing redirects there
    return SiteFiles(directory=settings.STATIC_DIR, html=True)
