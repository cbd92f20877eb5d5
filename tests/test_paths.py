import pytest

from mongowiki.core.paths import is_valid_title, page_path, parse_page_path


def test_parse_page_path_examples():
    assert parse_page_path("/view/Foo") == ("view", "Foo")
    assert parse_page_path("/edit/Page2") == ("edit", "Page2")
    assert parse_page_path("/save/abc123") == ("save", "abc123")
    assert parse_page_path("/delete/X") == ("delete", "X")


def test_parse_page_path_rejects_bad_titles():
    assert parse_page_path("/view/Foo Bar") is None
    assert parse_page_path("/view/Foo/Bar") is None
    assert parse_page_path("/view/") is None
    assert parse_page_path("/view/Foo-Bar") is None
    assert parse_page_path("/view/Foo\n") is None
    assert parse_page_path("/rename/Foo") is None
    assert parse_page_path("/list") is None
    assert parse_page_path("") is None


def test_is_valid_title():
    assert is_valid_title("FrontPage")
    assert not is_valid_title("")
    assert not is_valid_title(None)
    assert not is_valid_title("has space")
    assert not is_valid_title("Zürich")


def test_page_path_builds_and_validates():
    assert page_path("edit", "Foo") == "/edit/Foo"
    with pytest.raises(ValueError):
        page_path("rename", "Foo")
    with pytest.raises(ValueError):
        page_path("view", "a/b")
