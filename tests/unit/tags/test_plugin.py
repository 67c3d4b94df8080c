from __future__ import annotations

from types import SimpleNamespace

import pytest

from tagpages.config import CollectionTagSettings, ConfigValidationError
from tagpages.data_primitives import Collection, Pagination
from tagpages.exceptions import CollectionNotFoundError
from tagpages.tags.plugin import CollectionTags, collection_tags


def _run(plugin: CollectionTags, metadata: dict, files: dict | None = None):
    files = {} if files is None else files
    outcome: list = []
    plugin(files, SimpleNamespace(metadata=lambda: metadata), outcome.append)
    return files, outcome


def test_three_items_produce_three_tag_pages(items):
    metadata = {"collections": {"blog": items}}

    files, outcome = _run(collection_tags({"blog": {}}), metadata)

    assert outcome == [None]
    assert sorted(files) == [
        "blog/tags/tag-one/index.html",
        "blog/tags/tag-three/index.html",
        "blog/tags/tag-two/index.html",
    ]
    page = files["blog/tags/tag-two/index.html"]
    assert page["pagination"].files == [items[0], items[1]]
    assert page["tag"] == "tag two"
    assert page["template"] == "partials/tag.html"
    assert page["contents"] == ""


def test_tags_are_split_on_items(items):
    _run(collection_tags({"blog": {"handle": "tags"}}), {"collections": {"blog": items}})
    assert items[0]["tags"] == ["tag one", "tag two"]


def test_global_index_published(items):
    metadata = {"collections": {"blog": items}}

    _run(collection_tags({"blog": {}}), metadata)

    assert sorted(metadata["tags"]) == ["tag one", "tag three", "tag two"]
    assert metadata["tags"]["tag two"] == [items[0], items[1]]


def test_collection_promoted_and_carries_tags(items):
    metadata = {"collections": {"blog": items}}

    _run(collection_tags({"blog": {}}), metadata)

    collection = metadata["collections"]["blog"]
    assert isinstance(collection, Collection)
    assert collection.name == "blog"
    assert list(collection) == items
    assert collection.tags["tag one"] == [items[0]]


def test_existing_collection_object_is_reused(items):
    collection = Collection(items, name="blog")
    metadata = {"collections": {"blog": collection}}

    _run(collection_tags({"blog": {}}), metadata)

    assert metadata["collections"]["blog"] is collection
    assert set(collection.tags) == {"tag one", "tag two", "tag three"}


def test_skip_metadata_keeps_collection_out_of_global_index(items):
    metadata = {"collections": {"blog": items}}

    _run(collection_tags({"blog": {"skipMetadata": True}}), metadata)

    assert metadata["tags"] == {}
    assert "tag one" in metadata["collections"]["blog"].tags


def test_multiple_collections_concatenate_in_processing_order():
    blog = [{"id": "b1", "tags": "x"}, {"id": "b2", "tags": "x, y"}]
    pages = [{"id": "p1", "tags": "x"}]
    metadata = {"collections": {"blog": blog, "pages": pages}}

    files, _ = _run(collection_tags({"blog": {}, "pages": {}}), metadata)

    assert [item["id"] for item in metadata["tags"]["x"]] == ["b1", "b2", "p1"]
    assert [item["id"] for item in metadata["collections"]["pages"].tags["x"]] == ["p1"]
    assert "blog/tags/x/index.html" in files
    assert "pages/tags/x/index.html" in files


def test_mixed_skip_only_excludes_skipped_collection():
    blog = [{"id": "b1", "tags": "x"}]
    drafts = [{"id": "d1", "tags": "x, secret"}]
    metadata = {"collections": {"blog": blog, "drafts": drafts}}

    _run(collection_tags({"blog": {}, "drafts": {"skip_metadata": True}}), metadata)

    assert [item["id"] for item in metadata["tags"]["x"]] == ["b1"]
    assert "secret" not in metadata["tags"]


def test_paginated_paths_and_links(items):
    options = {
        "blog": {
            "path": "blog/tags/:tag/index.html",
            "pathPage": "blog/tags/:tag/:num/index.html",
            "perPage": 1,
        }
    }

    files, _ = _run(collection_tags(options), {"collections": {"blog": items}})

    first = files["blog/tags/tag-two/index.html"]
    second = files["blog/tags/tag-two/2/index.html"]
    assert "blog/tags/tag-two/1/index.html" not in files
    assert first["pagination"].num == 1
    assert first["pagination"].pages == 2
    assert first["pagination"].prev is None
    assert first["pagination"].next is second
    assert second["pagination"].prev is first
    assert second["pagination"].next is None
    assert second["pagination"].files == [items[1]]

    single = files["blog/tags/tag-three/index.html"]
    assert single["pagination"].prev is None
    assert single["pagination"].next is None


def test_default_paths_use_collection_name():
    items = [{"tags": "Tag One"}, {"tags": "Tag One"}]

    files, _ = _run(collection_tags({"My Blog": {"perPage": 1}}), {"collections": {"My Blog": items}})

    assert sorted(files) == ["my-blog/tags/tag-one/2/index.html", "my-blog/tags/tag-one/index.html"]


def test_metadata_rendered_per_page(items):
    options = {
        "blog": {
            "perPage": 1,
            "metadata": {"title": ":tag - :num", "description": "this is the :num page for :tag", "layout": 3},
        }
    }

    files, _ = _run(collection_tags(options), {"collections": {"blog": items}})

    assert files["blog/tags/tag-one/index.html"]["title"] == "tag one - 1"
    assert files["blog/tags/tag-two/2/index.html"]["description"] == "this is the 2 page for tag two"
    assert files["blog/tags/tag-two/2/index.html"]["layout"] == 3


def test_metadata_can_override_base_fields(items):
    files, _ = _run(
        collection_tags({"blog": {"metadata": {"template": "custom.html"}}}),
        {"collections": {"blog": items}},
    )
    assert files["blog/tags/tag-one/index.html"]["template"] == "custom.html"


def test_strict_slugs_option():
    items = [{"tags": "Café Society"}]
    files, _ = _run(collection_tags({"blog": {"slugify": True}}), {"collections": {"blog": items}})
    assert list(files) == ["blog/tags/cafe-society/index.html"]


def test_colliding_paths_later_tag_wins():
    items = [{"id": 1, "tags": "Tag One"}, {"id": 2, "tags": "tag-one"}]

    files, _ = _run(collection_tags({"blog": {}}), {"collections": {"blog": items}})

    assert list(files) == ["blog/tags/tag-one/index.html"]
    assert files["blog/tags/tag-one/index.html"]["tag"] == "tag-one"


def test_existing_files_kept(items):
    existing = {"blog/one.html": {"contents": "x"}}
    files, _ = _run(collection_tags({"blog": {}}), {"collections": {"blog": items}}, existing)
    assert files["blog/one.html"] == {"contents": "x"}


def test_missing_collection_reported_through_done(items):
    metadata = {"collections": {"blog": items}}

    files, outcome = _run(collection_tags({"news": {}}), metadata)

    assert len(outcome) == 1
    assert isinstance(outcome[0], CollectionNotFoundError)
    assert outcome[0].name == "news"
    assert outcome[0].available == ["blog"]
    assert files == {}


def test_missing_collections_mapping_raises_from_run():
    with pytest.raises(CollectionNotFoundError):
        CollectionTags({"blog": {}}).run({}, {})


def test_global_index_reset_each_run(items):
    metadata = {"collections": {"blog": items}, "tags": {"stale": []}}
    plugin = collection_tags({"blog": {}})

    plugin.run({}, metadata)
    first = {tag: len(members) for tag, members in metadata["tags"].items()}
    plugin.run({}, metadata)

    assert "stale" not in metadata["tags"]
    assert {tag: len(members) for tag, members in metadata["tags"].items()} == first


def test_run_returns_index(items):
    index = CollectionTags({"blog": {}}).run({}, {"collections": {"blog": items}})
    assert list(index) == ["tag one", "tag two", "tag three"]


def test_settings_instances_and_none_accepted(items):
    plugin = collection_tags({"blog": CollectionTagSettings(per_page=2), "pages": None})
    assert plugin.options["blog"].per_page == 2
    assert plugin.options["pages"] == CollectionTagSettings()


def test_invalid_options_raise_validation_error():
    with pytest.raises(ConfigValidationError) as excinfo:
        collection_tags({"blog": {"perPage": "many"}})
    assert excinfo.value.errors[0]["loc"][0] == "blog"


def test_pagination_descriptor_type(items):
    files, _ = _run(collection_tags({"blog": {}}), {"collections": {"blog": items}})
    assert all(isinstance(page["pagination"], Pagination) for page in files.values())
