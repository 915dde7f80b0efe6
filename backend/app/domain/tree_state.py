"""Presentation state for the article tree — expand/collapse and selection.

Pure UI state: nothing here is persisted. Every node starts Expanded; the
state only records which nodes have been collapsed, so toggling one node
never touches its siblings or descendants.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field

from app.domain.entities import ArticleNode


@dataclass
class TreeRow:
    """One visible line of a rendered tree traversal."""

    node: ArticleNode
    depth: int
    expanded: bool
    selected: bool


@dataclass
class TreeViewState:
    """Per-node Collapsed/Expanded flags plus an at-most-one selection."""

    collapsed: set[str] = field(default_factory=set)
    selected_id: str | None = None

    def is_expanded(self, node_id: str) -> bool:
        return node_id not in self.collapsed

    def expand(self, node_id: str) -> None:
        self.collapsed.discard(node_id)

    def collapse(self, node_id: str) -> None:
        self.collapsed.add(node_id)

    def toggle(self, node_id: str) -> bool:
        """Flip one node's state and return True if it is now expanded."""
        if node_id in self.collapsed:
            self.collapsed.discard(node_id)
            return True
        self.collapsed.add(node_id)
        return False

    def select(self, node_id: str) -> None:
        """Select a node; any previous selection is cleared."""
        self.selected_id = node_id

    def clear_selection(self) -> None:
        self.selected_id = None

    def is_selected(self, node_id: str) -> bool:
        return self.selected_id == node_id

    def visible_rows(self, forest: Iterable[ArticleNode]) -> list[TreeRow]:
        """Pre-order traversal that hides the descendants of collapsed nodes.

        The forest itself is not modified; collapsed subtrees are simply not
        visited.
        """
        rows: list[TreeRow] = []
        self._collect(forest, 0, rows)
        return rows

    def _collect(self, nodes: Iterable[ArticleNode], depth: int, rows: list[TreeRow]) -> None:
        for node in nodes:
            expanded = self.is_expanded(node.id)
            rows.append(
                TreeRow(
                    node=node,
                    depth=depth,
                    expanded=expanded,
                    selected=self.is_selected(node.id),
                )
            )
            if expanded:
                self._collect(node.children, depth + 1, rows)
