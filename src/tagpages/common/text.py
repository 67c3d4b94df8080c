"""Text-related utilities: path-safe tags and slugification."""

from __future__ import annotations

from unicodedata import normalize

from pymdownx.slugs import slugify as _md_slugify

# Pre-configured slugifiers, reused across calls.
slugify_lower = _md_slugify(case="lower")
slugify_case = _md_slugify()


def safe_tag(tag: str | None, *, lowercase: bool = True) -> str:
    """Turn a tag into a path segment.

    Surrounding whitespace is trimmed, the tag is lowercased and every space
    becomes a hyphen. Other characters are kept as-is, so ``"C++ tips"``
    becomes ``"c++-tips"``.
    """
    if not tag:
        return ""
    text = tag.strip()
    if lowercase:
        text = text.lower()
    return text.replace(" ", "-")


def slugify(text: str, max_len: int = 60, *, lowercase: bool = True) -> str:
    """Convert text to a strict URL-friendly slug using Python Markdown semantics.

    Produces ASCII-only slugs with Unicode transliteration, so punctuation is
    dropped rather than carried into the path.

    Args:
        text: Input text to slugify
        max_len: Maximum length of output slug (default 60)
        lowercase: Whether to lowercase the slug (default True)

    Returns:
        Safe slug string, ``"tag"`` when nothing usable remains

    """
    if not text:
        return ""

    normalized = normalize("NFKD", text).encode("ascii", "ignore").decode("ascii")

    slugifier = slugify_lower if lowercase else slugify_case
    slug = slugifier(normalized, sep="-")

    slug = slug or "tag"
    if len(slug) > max_len:
        slug = slug[:max_len].rstrip("-")

    return slug
