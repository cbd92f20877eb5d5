from types import SimpleNamespace

import mongomock
import pytest
from pymongo.errors import PyMongoError, ServerSelectionTimeoutError

from mongowiki import page_store
from mongowiki.config import Settings
from mongowiki.core.errors import PageNotFoundError, StorageError
from mongowiki.models import Page
from mongowiki.page_store import PageStore


def _fail(*args, **kwargs):
    raise PyMongoError("connection refused")


class _BrokenCollection:
    replace_one = staticmethod(_fail)
    delete_one = staticmethod(_fail)
    find_one = staticmethod(_fail)
    find = staticmethod(_fail)
    create_index = staticmethod(_fail)
    database = SimpleNamespace(client=SimpleNamespace(admin=SimpleNamespace(command=_fail)))


@pytest.fixture
def store():
    return PageStore(mongomock.MongoClient().wiki.pages)


def test_save_then_load_round_trip(store):
    store.save(Page(title="Foo", body=b"hello"))
    page = store.load("Foo")
    assert page.title == "Foo"
    assert page.body == b"hello"
    assert page.text == "hello"


def test_save_replaces_whole_document(store):
    store.save(Page(title="Foo", body=b"first version, quite long"))
    store.collection.update_one({"title": "Foo"}, {"$set": {"extra": 1}})
    store.save(Page(title="Foo", body=b"second"))

    assert store.load("Foo").body == b"second"
    doc = store.collection.find_one({"title": "Foo"}, {"_id": 0})
    assert set(doc) == {"title", "body"}
    assert bytes(doc["body"]) == b"second"
    assert store.collection.count_documents({"title": "Foo"}) == 1


def test_delete_then_load_is_not_found(store):
    store.save(Page(title="Foo", body=b"hello"))
    store.delete("Foo")
    with pytest.raises(PageNotFoundError) as exc:
        store.load("Foo")
    assert exc.value.title == "Foo"


def test_delete_missing_title_is_not_an_error(store):
    store.delete("Nope")
    assert store.list_titles() == []


def test_list_titles(store):
    assert store.list_titles() == []
    store.save(Page(title="Alpha", body=b"a"))
    store.save(Page(title="Beta", body=b"b"))
    store.save(Page(title="Alpha", body=b"again"))
    assert sorted(store.list_titles()) == ["Alpha", "Beta"]


def test_ensure_indexes_makes_title_unique(store):
    store.ensure_indexes()
    info = store.collection.index_information()
    assert any(spec.get("unique") and spec["key"] == [("title", 1)] for spec in info.values())


def test_load_accepts_legacy_string_body(store):
    store.collection.insert_one({"title": "Old", "body": "plain text"})
    assert store.load("Old").body == b"plain text"


@pytest.mark.parametrize(
    "call",
    [
        lambda s: s.save(Page(title="Foo", body=b"x")),
        lambda s: s.delete("Foo"),
        lambda s: s.load("Foo"),
        lambda s: s.list_titles(),
        lambda s: s.ping(),
        lambda s: s.ensure_indexes(),
    ],
)
def test_storage_failures_raise_storage_error(call):
    broken = PageStore(_BrokenCollection())
    with pytest.raises(StorageError) as exc:
        call(broken)
    assert "connection refused" in exc.value.message


def test_connect_pings_and_binds_collection(monkeypatch):
    seen = {}

    class _FakeClient:
        def __init__(self, uri, **kwargs):
            seen["uri"] = uri
            seen["kwargs"] = kwargs
            self.admin = SimpleNamespace(command=lambda name: seen.setdefault("command", name))

        def __getitem__(self, db_name):
            seen["db"] = db_name
            return {"notes": SimpleNamespace(database=SimpleNamespace(client=self))}

    monkeypatch.setattr(page_store, "MongoClient", _FakeClient)

    store = PageStore.connect(
        Settings(mongodb_uri="mongodb://db.test:27017/", database="w", collection="notes", timeout_ms=250)
    )
    assert seen["uri"] == "mongodb://db.test:27017/"
    assert seen["kwargs"] == {"serverSelectionTimeoutMS": 250}
    assert seen["db"] == "w"
    assert seen["command"] == "ping"
    assert store.collection.database.client is not None


def test_connect_failure_raises_storage_error(monkeypatch):
    class _DownClient:
        def __init__(self, uri, **kwargs):
            self.admin = SimpleNamespace(command=self._down)

        def _down(self, name):
            raise ServerSelectionTimeoutError("no servers")

        def __getitem__(self, db_name):
            return {"pages": SimpleNamespace(database=SimpleNamespace(client=self))}

    monkeypatch.setattr(page_store, "MongoClient", _DownClient)

    with pytest.raises(StorageError) as exc:
        PageStore.connect(Settings(mongodb_uri="mongodb://down.test/"))
    assert "mongodb://down.test/" in exc.value.message
    assert "no servers" in exc.value.message
