from fastapi import HTTPException, Request, status
from fastapi.templating import Jinja2Templates

from mongowiki.core.paths import parse_page_path
from mongowiki.page_store import PageStore


def get_store(request: Request) -> PageStore:
    return request.app.state.store


def get_templates(request: Request) -> Jinja2Templates:
    return request.app.state.templates


async def require_title(request: Request) -> str:
    parsed = parse_page_path(request.url.path)
    if parsed is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not Found")
    return parsed[1]


__all__ = ["get_store", "get_templates", "require_title"]
