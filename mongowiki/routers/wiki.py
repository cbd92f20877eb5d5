from typing import Annotated

from fastapi import APIRouter, Depends, Form, HTTPException, Request, status
from fastapi.responses import RedirectResponse, Response
from fastapi.templating import Jinja2Templates

from mongowiki.core.paths import LIST_PATH, page_path, parse_page_path
from mongowiki.core.services.pages_service import delete_page, edit_page, list_titles, save_page, view_page
from mongowiki.deps import get_store, get_templates, require_title
from mongowiki.page_store import PageStore
from mongowiki.rendering import render_list, render_page

router = APIRouter(tags=["wiki"])

Store = Annotated[PageStore, Depends(get_store)]
Templates = Annotated[Jinja2Templates, Depends(get_templates)]
Title = Annotated[str, Depends(require_title)]


def _found(url: str) -> RedirectResponse:
    return RedirectResponse(url, status_code=status.HTTP_302_FOUND)


@router.get("/", include_in_schema=False)
def index() -> Response:
    return _found(LIST_PATH)


@router.get("/view/{raw_title:path}")
def view(request: Request, title: Title, store: Store, templates: Templates) -> Response:
    page = view_page(store, title)
    if page is None:
        return _found(page_path("edit", title))
    return render_page(templates, request, "view", page)


@router.get("/edit/{raw_title:path}")
def edit(request: Request, title: Title, store: Store, templates: Templates) -> Response:
    return render_page(templates, request, "edit", edit_page(store, title))


@router.post("/save/{raw_title:path}")
def save(title: Title, store: Store, body: Annotated[str, Form()] = "") -> Response:
    save_page(store, title, body)
    return _found(page_path("view", title))


@router.api_route("/delete/{raw_title:path}", methods=["GET", "POST"])
def delete(title: Title, store: Store) -> Response:
    delete_page(store, title)
    return _found(LIST_PATH)


@router.get(LIST_PATH)
def list_pages(request: Request, store: Store, templates: Templates) -> Response:
    titles = list_titles(store)
    if titles is None:
        return _found(LIST_PATH)
    return render_list(templates, request, titles)


ALLOWED_METHODS = {"view": "GET", "edit": "GET", "save": "POST", "delete": "GET, POST"}


# Registered last: only reached when no page route accepts the method.
# The title check runs first, so a bad title is 404 whatever the method.
@router.api_route(
    "/{action}/{raw_title:path}",
    methods=["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
    include_in_schema=False,
)
def method_not_allowed(request: Request, title: Title) -> Response:
    action, _ = parse_page_path(request.url.path)
    raise HTTPException(
        status_code=status.HTTP_405_METHOD_NOT_ALLOWED,
        detail="Method Not Allowed",
        headers={"Allow": ALLOWED_METHODS[action]},
    )
