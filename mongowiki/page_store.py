from __future__ import annotations

import logging
from typing import Any

from pymongo import ASCENDING, MongoClient
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from .config import Settings
from .core.errors import PageNotFoundError, StorageError
from .log_utils import LOGGER_NAME
from .models import Page

logger = logging.getLogger(LOGGER_NAME)


class PageStore:
    """One document per page, keyed by ``title``, in a single collection.

    The store holds the shared collection handle; pymongo pools connections
    internally so a single instance is safe to use from every request thread.
    """

    def __init__(self, collection: Collection):
        self.collection = collection

    @classmethod
    def connect(cls, settings: Settings) -> "PageStore":
        try:
            client: MongoClient = MongoClient(
                settings.mongodb_uri,
                serverSelectionTimeoutMS=settings.timeout_ms,
            )
            client.admin.command("ping")
        except PyMongoError as e:
            raise StorageError(f"cannot connect to MongoDB at {settings.mongodb_uri}: {e}") from e
        store = cls(client[settings.database][settings.collection])
        logger.info("connected to %s (db=%s, collection=%s)", settings.mongodb_uri, settings.database, settings.collection)
        return store

    def ping(self) -> None:
        try:
            self.collection.database.client.admin.command("ping")
        except PyMongoError as e:
            raise StorageError(f"ping failed: {e}") from e

    def close(self) -> None:
        self.collection.database.client.close()

    def ensure_indexes(self) -> None:
        try:
            self.collection.create_index([("title", ASCENDING)], unique=True)
        except PyMongoError as e:
            logger.exception("create_index on title failed")
            raise StorageError(f"create index failed: {e}") from e

    def save(self, page: Page) -> Page:
        # full replace, never a merge
        try:
            self.collection.replace_one({"title": page.title}, page.to_document(), upsert=True)
        except PyMongoError as e:
            logger.exception("save failed for %s", page.title)
            raise StorageError(str(e)) from e
        return page

    def delete(self, title: str) -> None:
        try:
            self.collection.delete_one({"title": title})
        except PyMongoError as e:
            logger.exception("delete failed for %s", title)
            raise StorageError(str(e)) from e

    def load(self, title: str) -> Page:
        try:
            doc: dict[str, Any] | None = self.collection.find_one({"title": title}, {"_id": 0})
        except PyMongoError as e:
            logger.exception("load failed for %s", title)
            raise StorageError(str(e)) from e
        if doc is None:
            raise PageNotFoundError(title)
        body = doc.get("body") or b""
        if isinstance(body, str):
            body = body.encode("utf-8")
        return Page(title=doc["title"], body=bytes(body))

    def list_titles(self) -> list[str]:
        try:
            return [doc["title"] for doc in self.collection.find({}, {"title": 1, "_id": 0})]
        except PyMongoError as e:
            logger.exception("list failed")
            raise StorageError(str(e)) from e
