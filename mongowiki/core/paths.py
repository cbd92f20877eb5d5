from __future__ import annotations

import re

ACTIONS = ("edit", "save", "view", "delete")

# Matched with fullmatch so a trailing newline never slips past "$".
TITLE_RE = re.compile(r"[a-zA-Z0-9]+")
VALID_PATH_RE = re.compile(r"/(edit|save|view|delete)/([a-zA-Z0-9]+)")
LIST_PATH = "/list"


def is_valid_title(title: str | None) -> bool:
    return bool(title) and TITLE_RE.fullmatch(title) is not None


def parse_page_path(path: str) -> tuple[str, str] | None:
    """Split ``/<action>/<title>`` into its parts, or None when the path is not a page route."""
    m = VALID_PATH_RE.fullmatch(path or "")
    if m is None:
        return None
    return m.group(1), m.group(2)


def page_path(action: str, title: str) -> str:
    if action not in ACTIONS:
        raise ValueError(f"unknown page action: {action}")
    if not is_valid_title(title):
        raise ValueError(f"invalid page title: {title!r}")
    return f"/{action}/{title}"
