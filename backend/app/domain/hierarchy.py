"""Hierarchy builder — flat parent-pointer records to an ordered forest.

Articles are stored flat (``id`` + ``parent_id``). The tree is rebuilt on
every read from a freshly fetched collection instead of keeping live
back-references between entities.

Dangling parents: a record whose ``parent_id`` points at an id that is not in
the collection becomes an *orphan root* and is listed among the roots at its
input position. The builder never raises.

Cycles: records that only reach each other through a parent cycle are never
attached to a root, so they are absent from the forest. Callers can detect
this by comparing ``count_nodes(forest)`` with the number of records.
"""

from collections.abc import Iterable, Iterator

from app.domain.entities import Article, ArticleNode


def build_forest(records: Iterable[Article]) -> list[ArticleNode]:
    """Build the forest of root nodes from a flat, ordered collection.

    Roots and every child list keep the input order. O(n) time and space.
    """
    articles = list(records)
    nodes: dict[str, ArticleNode] = {a.id: ArticleNode(article=a) for a in articles}

    roots: list[ArticleNode] = []
    for article in articles:
        node = nodes[article.id]
        parent = nodes.get(article.parent_id) if article.parent_id is not None else None
        if parent is None:
            roots.append(node)
        else:
            parent.children.append(node)
    return roots


def walk(forest: Iterable[ArticleNode], depth: int = 0) -> Iterator[tuple[ArticleNode, int]]:
    """Pre-order depth-first traversal yielding ``(node, depth)``."""
    for node in forest:
        yield node, depth
        yield from walk(node.children, depth + 1)


def count_nodes(forest: Iterable[ArticleNode]) -> int:
    return sum(1 for _ in walk(forest))


def _children_index(records: Iterable[Article]) -> dict[str | None, list[str]]:
    index: dict[str | None, list[str]] = {}
    for article in records:
        index.setdefault(article.parent_id, []).append(article.id)
    return index


def descendant_ids(records: Iterable[Article], article_id: str) -> set[str]:
    """Ids of every article below ``article_id`` (the article itself excluded)."""
    index = _children_index(records)
    found: set[str] = set()
    stack = list(index.get(article_id, []))
    while stack:
        current = stack.pop()
        if current in found or current == article_id:
            continue
        found.add(current)
        stack.extend(index.get(current, []))
    return found


def ancestors(records: Iterable[Article], article_id: str) -> list[Article]:
    """Ancestor chain of ``article_id``, root first.

    Stops at a missing parent or at the first repeated id, so corrupt data
    containing a cycle still terminates.
    """
    by_id = {a.id: a for a in records}
    chain: list[Article] = []
    seen = {article_id}
    current = by_id.get(article_id)
    while current is not None and current.parent_id is not None:
        if current.parent_id in seen:
            break
        parent = by_id.get(current.parent_id)
        if parent is None:
            break
        chain.append(parent)
        seen.add(parent.id)
        current = parent
    chain.reverse()
    return chain


def would_create_cycle(records: Iterable[Article], article_id: str, new_parent_id: str | None) -> bool:
    """True when moving ``article_id`` under ``new_parent_id`` makes it its own ancestor."""
    if new_parent_id is None:
        return False
    if new_parent_id == article_id:
        return True
    return new_parent_id in descendant_ids(records, article_id)
