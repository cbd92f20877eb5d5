from __future__ import annotations

import logging

from mongowiki.core.errors import PageNotFoundError, StorageError
from mongowiki.log_utils import LOGGER_NAME
from mongowiki.models import Page
from mongowiki.page_store import PageStore

logger = logging.getLogger(LOGGER_NAME)


def view_page(store: PageStore, title: str) -> Page | None:
    """Return the page, or None when it does not exist yet."""
    try:
        return store.load(title)
    except PageNotFoundError:
        return None


def edit_page(store: PageStore, title: str) -> Page:
    try:
        return store.load(title)
    except PageNotFoundError:
        # blank form for a new page
        return Page(title=title)


def save_page(store: PageStore, title: str, body: str) -> Page:
    page = store.save(Page(title=title, body=body.encode("utf-8")))
    logger.info("saved %s (%d bytes)", title, len(page.body))
    return page


def delete_page(store: PageStore, title: str) -> None:
    store.delete(title)
    logger.info("deleted %s", title)


def list_titles(store: PageStore) -> list[str] | None:
    """Return all titles, or None when the store could not be read."""
    try:
        return store.list_titles()
    except StorageError as e:
        logger.warning("list failed: %s", e.message)
        return None
