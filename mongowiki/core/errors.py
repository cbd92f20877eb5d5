from __future__ import annotations


class WikiError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class PageNotFoundError(WikiError):
    status_code = 404

    def __init__(self, title: str):
        super().__init__(f"Page not found: {title}")
        self.title = title


class StorageError(WikiError):
    status_code = 500
