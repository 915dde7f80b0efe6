"""Slug derivation — turns a human title into a URL-safe identifier."""

import re

_INELIGIBLE = re.compile(r"[^a-z0-9 -]")
_WHITESPACE = re.compile(r"\s+")
_HYPHENS = re.compile(r"-+")


def derive_slug(title: str) -> str:
    """Derive a slug from a title.

    Lower-cases the title, drops everything except ``a-z``, ``0-9``, spaces
    and hyphens, turns whitespace runs into a single hyphen, collapses
    repeated hyphens and trims hyphens from both ends.

    Never fails; returns an empty string when the title has no eligible
    characters (e.g. ``"!!!"`` or ``"日本語"``).

    >>> derive_slug("Getting Started with React")
    'getting-started-with-react'
    >>> derive_slug("  C++ -- the  Basics ")
    'c-the-basics'
    """
    slug = _INELIGIBLE.sub("", title.lower())
    slug = _WHITESPACE.sub("-", slug)
    slug = _HYPHENS.sub("-", slug)
    return slug.strip("-")


def is_valid_slug(slug: str) -> bool:
    """A slug is valid when it is non-empty and ``derive_slug`` leaves it unchanged."""
    return bool(slug) and derive_slug(slug) == slug
