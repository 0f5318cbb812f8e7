"""Navigation stack for drilling through the menu tree."""
from __future__ import annotations

from dataclasses import dataclass

from .catalog import ROOT_TITLE, MenuNode


@dataclass(frozen=True)
class NavigationFrame:
    """A displayed menu level and its title."""

    nodes: tuple[MenuNode, ...]
    title: str
    selected_index: int = 0


class NavigationStack:
    """Stack-based navigation with breadcrumbs.

    - Descend on a group: the current frame is pushed, the group's
      children become current
    - Ascend: the previous frame comes back exactly as it was
    - Ascend at the root: returns False, which the shell treats as exit
    """

    def __init__(self, root_nodes: tuple[MenuNode, ...], root_title: str = ROOT_TITLE):
        """Initialize with the root level as the current frame.

        Args:
            root_nodes: Top-level catalog nodes
            root_title: Title shown for the root level
        """
        self.current = NavigationFrame(nodes=tuple(root_nodes), title=root_title)
        self.stack: list[NavigationFrame] = []

    @property
    def nodes(self) -> tuple[MenuNode, ...]:
        return self.current.nodes

    @property
    def title(self) -> str:
        return self.current.title

    @property
    def selected_index(self) -> int:
        return self.current.selected_index

    def descend(self, node: MenuNode) -> None:
        """Open a group node.

        Args:
            node: Group to open; must have children

        Raises:
            ValueError: If ``node`` is a leaf
        """
        if not node.is_group:
            raise ValueError(f"Cannot descend into leaf node {node.name!r}")
        self.stack.append(self.current)
        self.current = NavigationFrame(nodes=node.children, title=node.name)

    def ascend(self) -> bool:
        """Go back to the previous level.

        Returns:
            True if a level was restored, False at the root
        """
        if not self.stack:
            return False
        self.current = self.stack.pop()
        return True

    def select(self, index: int) -> None:
        """Remember the highlighted row; out-of-range indexes are ignored."""
        if 0 <= index < len(self.current.nodes):
            self.current = NavigationFrame(
                nodes=self.current.nodes,
                title=self.current.title,
                selected_index=index,
            )

    def node_at(self, index: int) -> MenuNode | None:
        if 0 <= index < len(self.current.nodes):
            return self.current.nodes[index]
        return None

    def depth(self) -> int:
        """Number of drill-downs since the root."""
        return len(self.stack)

    def breadcrumbs(self) -> str:
        """Breadcrumb path like "Navigation > Workloads"."""
        titles = [frame.title for frame in self.stack] + [self.current.title]
        return " > ".join(titles)
