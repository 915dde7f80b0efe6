"""Unit tests for the forest builder and traversal helpers."""

from itertools import permutations

from app.domain.entities import Article, ArticleNode
from app.domain.hierarchy import (
    ancestors,
    build_forest,
    count_nodes,
    descendant_ids,
    walk,
    would_create_cycle,
)


def _article(article_id: str, parent_id: str | None = None, title: str | None = None) -> Article:
    title = title or f"Article {article_id}"
    return Article(id=article_id, title=title, slug=f"article-{article_id}", content="...", parent_id=parent_id)


def _shape(forest: list[ArticleNode]) -> list:
    """(id, [children...]) tuples, for comparing whole forests."""
    return [(node.id, _shape(node.children)) for node in forest]


def test_empty_input_gives_empty_forest():
    assert build_forest([]) == []


def test_one_root_one_child():
    root = _article("r")
    child = _article("c", parent_id="r")

    forest = build_forest([root, child])

    assert len(forest) == 1
    assert forest[0].id == "r"
    assert len(forest[0].children) == 1
    assert forest[0].children[0].id == "c"
    assert forest[0].children[0].parent_id == forest[0].id


def test_tech_programming_web_dev_chain():
    records = [
        _article("1", None, "Tech"),
        _article("2", "1", "Programming"),
        _article("3", "2", "Web Dev"),
    ]

    forest = build_forest(records)

    assert _shape(forest) == [("1", [("2", [("3", [])])])]


def test_children_follow_input_order():
    records = [_article("p"), _article("b", "p"), _article("a", "p"), _article("c", "p")]

    forest = build_forest(records)

    assert [child.id for child in forest[0].children] == ["b", "a", "c"]


def test_child_listed_before_parent_is_still_attached():
    records = [_article("c", "p"), _article("p")]

    forest = build_forest(records)

    assert _shape(forest) == [("p", [("c", [])])]


def test_permutations_only_change_sibling_order():
    records = [_article("root"), _article("x", "root"), _article("y", "root"), _article("z", "x")]

    for ordering in permutations(records):
        forest = build_forest(ordering)
        assert len(forest) == 1
        root = forest[0]
        assert root.id == "root"
        expected_order = [a.id for a in ordering if a.parent_id == "root"]
        assert [c.id for c in root.children] == expected_order
        x = next(c for c in root.children if c.id == "x")
        assert [c.id for c in x.children] == ["z"]


def test_same_input_gives_identical_forest():
    records = [_article("1"), _article("2", "1"), _article("3"), _article("4", "3"), _article("5", "1")]
    assert _shape(build_forest(records)) == _shape(build_forest(list(records)))


def test_dangling_parent_becomes_orphan_root_at_input_position():
    records = [_article("a"), _article("orphan", "missing"), _article("b")]

    forest = build_forest(records)

    assert [node.id for node in forest] == ["a", "orphan", "b"]
    assert forest[1].parent_id == "missing"


def test_cycle_is_left_out_without_failing():
    records = [_article("root"), _article("a", "b"), _article("b", "a"), _article("self", "self")]

    forest = build_forest(records)

    assert _shape(forest) == [("root", [])]
    assert count_nodes(forest) == 1


def test_walk_is_preorder_with_depth():
    records = [_article("1"), _article("2", "1"), _article("3", "2"), _article("4", "1"), _article("5")]

    visited = [(node.id, depth) for node, depth in walk(build_forest(records))]

    assert visited == [("1", 0), ("2", 1), ("3", 2), ("4", 1), ("5", 0)]


def test_descendant_ids():
    records = [_article("1"), _article("2", "1"), _article("3", "2"), _article("4", "1"), _article("5")]

    assert descendant_ids(records, "1") == {"2", "3", "4"}
    assert descendant_ids(records, "2") == {"3"}
    assert descendant_ids(records, "5") == set()


def test_descendant_ids_terminates_on_cycle():
    records = [_article("a", "b"), _article("b", "a")]
    assert descendant_ids(records, "a") == {"b"}


def test_ancestors_root_first():
    records = [_article("1"), _article("2", "1"), _article("3", "2")]

    assert [a.id for a in ancestors(records, "3")] == ["1", "2"]
    assert ancestors(records, "1") == []
    assert ancestors(records, "unknown") == []


def test_ancestors_stop_at_missing_parent_and_cycles():
    assert [a.id for a in ancestors([_article("x", "gone"), _article("y", "x")], "y")] == ["x"]
    assert [a.id for a in ancestors([_article("a", "b"), _article("b", "a")], "a")] == ["b"]


def test_would_create_cycle():
    records = [_article("1"), _article("2", "1"), _article("3", "2"), _article("4")]

    assert would_create_cycle(records, "1", "1")
    assert would_create_cycle(records, "1", "3")
    assert would_create_cycle(records, "2", "3")
    assert not would_create_cycle(records, "3", "1")
    assert not would_create_cycle(records, "1", "4")
    assert not would_create_cycle(records, "1", None)
