from __future__ import annotations

import logging
from typing import Any

from fastapi import Request, status
from fastapi.responses import PlainTextResponse, Response
from fastapi.templating import Jinja2Templates
from jinja2 import TemplateError

from .log_utils import LOGGER_NAME
from .models import Page

logger = logging.getLogger(LOGGER_NAME)

TEMPLATE_NAMES = ("view", "edit", "list")


def load_templates(directory: str) -> Jinja2Templates:
    templates = Jinja2Templates(directory=directory)
    # fail at startup, not on the first request, when a template is missing or broken
    for name in TEMPLATE_NAMES:
        templates.get_template(f"{name}.html")
    return templates


def render(templates: Jinja2Templates, request: Request, name: str, context: dict[str, Any]) -> Response:
    try:
        return templates.TemplateResponse(request, f"{name}.html", context)
    except TemplateError as e:
        logger.exception("rendering %s.html failed", name)
        return PlainTextResponse(str(e), status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


def render_page(templates: Jinja2Templates, request: Request, name: str, page: Page) -> Response:
    return render(templates, request, name, {"page": page, "title": page.title, "body": page.text})


def render_list(templates: Jinja2Templates, request: Request, titles: list[str]) -> Response:
    return render(templates, request, "list", {"titles": titles})
