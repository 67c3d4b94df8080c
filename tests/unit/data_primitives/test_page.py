from __future__ import annotations

from tagpages.data_primitives import Collection, Pagination, new_tag_page


def test_collection_behaves_like_list():
    collection = Collection([{"a": 1}], name="blog")
    collection.append({"b": 2})

    assert len(collection) == 2
    assert collection.tags == {}
    assert "blog" in repr(collection)


def test_new_tag_page_fields():
    pagination = Pagination(num=1, pages=2, tag="x", start=0, end=1, files=[{"id": 1}])

    page = new_tag_page("tag.html", pagination, {"title": "X"})

    assert page == {"template": "tag.html", "contents": "", "tag": "x", "pagination": pagination, "title": "X"}


def test_pagination_flags():
    first = Pagination(num=1, pages=2, tag="x", start=0, end=1)
    last = Pagination(num=2, pages=2, tag="x", start=1, end=2)

    assert first.is_first
    assert not last.is_first


def test_linked_pages_repr_does_not_recurse():
    a = new_tag_page("t", Pagination(num=1, pages=2, tag="x", start=0, end=1))
    b = new_tag_page("t", Pagination(num=2, pages=2, tag="x", start=1, end=2))
    a["pagination"].next, b["pagination"].prev = b, a

    assert "num=1" in repr(a["pagination"])
