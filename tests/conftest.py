from __future__ import annotations

from pathlib import Path
from textwrap import dedent

import pytest

TAG_TEMPLATE = dedent(
    """\
    <h1>{{ title or tag }}</h1>
    <ul>
    {%- for post in pagination.files %}
    <li>{{ post.title }}</li>
    {%- endfor %}
    </ul>
    <p>page {{ pagination.num }} of {{ pagination.pages }}</p>
    {%- if pagination.prev %}
    <a rel="prev">{{ pagination.prev.pagination.num }}</a>
    {%- endif %}
    {%- if pagination.next %}
    <a rel="next">{{ pagination.next.pagination.num }}</a>
    {%- endif %}
    """
)


def _post(title: str, date: str, tags: str | None) -> str:
    lines = ["---", f"title: {title}", f"date: {date}"]
    if tags is not None:
        lines.append(f"tags: {tags}")
    lines += ["---", f"<p>{title} body</p>", ""]
    return "\n".join(lines)


def write_tree(root: Path, files: dict[str, str]) -> Path:
    for relative, content in files.items():
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    return root


@pytest.fixture
def basic_site(tmp_path: Path) -> Path:
    """Three blog posts tagged like the classic fixture, plus a tag template."""
    return write_tree(
        tmp_path / "site",
        {
            "src/blog/one.html": _post("One", "2024-01-01", "tag one, tag two"),
            "src/blog/two.html": _post("Two", "2024-01-02", "tag one, tag two"),
            "src/blog/three.html": _post("Three", "2024-01-03", "tag three"),
            "src/index.html": "<p>home</p>\n",
            "templates/tag.html": TAG_TEMPLATE,
            "templates/partials/tag.html": TAG_TEMPLATE,
        },
    )


@pytest.fixture
def complex_site(tmp_path: Path) -> Path:
    """Two collections sharing tags."""
    return write_tree(
        tmp_path / "site",
        {
            "src/blog/a.html": _post("Blog A", "2024-01-01", "tag one, tag five"),
            "src/blog/b.html": _post("Blog B", "2024-01-02", "tag two, tag five"),
            "src/blog/c.html": _post("Blog C", "2024-01-03", "tag one"),
            "src/pages/x.html": _post("Page X", "2024-02-01", "tag five, tag three"),
            "src/pages/y.html": _post("Page Y", "2024-02-02", "tag one, tag five"),
            "src/pages/z.html": _post("Page Z", "2024-02-03", None),
            "templates/tag.html": TAG_TEMPLATE,
            "templates/partials/tag.html": TAG_TEMPLATE,
        },
    )


@pytest.fixture
def items() -> list[dict]:
    return [
        {"title": "one", "tags": "tag one, tag two"},
        {"title": "two", "tags": "tag two"},
        {"title": "three", "tags": "tag three"},
    ]
