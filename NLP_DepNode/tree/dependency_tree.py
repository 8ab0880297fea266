# NLP_DepNode/tree/dependency_tree.py
from typing import Dict, Iterable, Iterator, List, Optional, Tuple
from omegaconf import DictConfig

from .node import Node, ROOT_IDX
from .semantic_graph import SemanticGraph
from ..utils.logging_config import get_logger

class DependencyTree:
    """
    Arena owning every node of one sentence, keyed by node id.

    Heads are stored on each node as an id and dependents as a sorted
    registry of ids. set_head(), add_dependent() and clear_dependencies()
    are the only operations that change those links; they keep every
    registry sorted and every sibling_index in step with it.

    Acyclicity of the head relation is the caller's responsibility.
    Ancestor walks do not guard against cycles; verify_structure() is the
    explicit check.
    """

    def __init__(self, text: str = "", root: Optional[Node] = None,
                 config: Optional[DictConfig] = None, logger=None):
        self.text = text
        self.config = config or {}
        self.logger = logger or get_logger(self.__class__.__name__, self.config)

        self.nodes: Dict[int, Node] = {}
        self.semantic_heads = SemanticGraph(self.nodes)
        self.secondary_heads = SemanticGraph(self.nodes)
        self._navigator = None

        self.root = self.add_node(root or Node())

    @classmethod
    def from_nodes(cls, nodes: Iterable[Node], heads: Dict[int, Tuple[int, Optional[str]]],
                   text: str = "", config: Optional[DictConfig] = None, logger=None) -> 'DependencyTree':
        """
        Build a tree from detached nodes and a map of node id -> (head id, label).

        Nodes missing from `heads` stay headless. A node with id 0 in `nodes`
        replaces the default root sentinel.
        """
        nodes = list(nodes)
        root = next((n for n in nodes if n.idx == ROOT_IDX), None)
        tree = cls(text, root, config, logger)

        for node in nodes:
            if node is not root:
                tree.add_node(node)

        for idx, (head_idx, label) in heads.items():
            tree.set_head(tree.get_node(idx), tree.get_node(head_idx), label)

        if not tree.verify_structure():
            raise ValueError("Invalid tree structure detected")
        return tree

    def add_node(self, node: Node) -> Node:
        if node.idx in self.nodes:
            raise ValueError(f"Duplicate node id {node.idx}")
        if node.parent_idx is not None or len(node.children):
            raise ValueError(f"Node {node.idx} is already linked into another tree")
        self.nodes[node.idx] = node
        return node

    def get_node(self, idx: int) -> Node:
        try:
            return self.nodes[idx]
        except KeyError:
            raise ValueError(f"No node with id {idx} in tree") from None

    def get(self, idx: Optional[int]) -> Optional[Node]:
        return self.nodes.get(idx) if idx is not None else None

    def __getitem__(self, idx: int) -> Node:
        return self.get_node(idx)

    def __contains__(self, node: Node) -> bool:
        return self.nodes.get(node.idx) is node

    def __len__(self) -> int:
        return len(self.nodes)

    def __iter__(self) -> Iterator[Node]:
        """Nodes in id order, root sentinel first."""
        return iter(sorted(self.nodes.values()))

    def tokens(self) -> List[Node]:
        """All nodes except the root sentinel, in id order."""
        return [node for node in self if node is not self.root]

    @property
    def navigator(self):
        if self._navigator is None:
            from .navigator import TreeNavigator
            self._navigator = TreeNavigator(self)
        return self._navigator

    def _check_member(self, node: Node):
        if node not in self:
            raise ValueError(f"{node!r} does not belong to this tree")

    def get_head(self, node: Node) -> Optional[Node]:
        return self.get(node.parent_idx)

    def set_head(self, node: Node, head: Optional[Node], label: Optional[str] = None):
        """
        Attach `node` to `head` with `label`, detaching it from its old head.

        Passing head=None makes the node headless. Only the old and the new
        head's dependent orderings are touched.
        """
        self._check_member(node)
        if head is not None:
            self._check_member(head)

        old_head = self.get_head(node)
        if old_head is not None:
            old_head.children.remove(node.idx)
            old_head.children.reindex(self.nodes)

        if head is not None:
            head.children.insert(node.idx)
            head.children.reindex(self.nodes)
        else:
            node.sibling_index = -1

        node.parent_idx = head.idx if head is not None else None
        node.dependency_to_parent = label
        self.logger.debug(f"Set head of {node.idx} to "
                          f"{head.idx if head is not None else None} ({label})")

    def add_dependent(self, head: Node, node: Node, label: Optional[str] = None):
        self.set_head(node, head, label)

    def clear_dependencies(self, node: Node) -> Tuple[Optional[Node], Optional[str]]:
        """
        Remove the head, label and dependents of `node`.

        Returns the previous (head, label). The removed dependents become
        headless but keep their own subtrees and labels.
        """
        self._check_member(node)
        previous = (self.get_head(node), node.dependency_to_parent)

        old_head = previous[0]
        if old_head is not None:
            old_head.children.remove(node.idx)
            old_head.children.reindex(self.nodes)

        for idx in node.children.clear():
            dep = self.nodes[idx]
            dep.parent_idx = None
            dep.sibling_index = -1

        node.parent_idx = None
        node.dependency_to_parent = None
        node.sibling_index = -1
        return previous

    def verify_structure(self) -> bool:
        """
        Check the link invariants over the whole tree: heads and dependent
        registries agree, registries are sorted, sibling indexes match,
        the root has no head and no head chain loops.
        """
        if self.root.has_head():
            self.logger.warning("Root sentinel has a head")
            return False

        for node in self.nodes.values():
            ids = node.children.ids()
            if ids != sorted(ids):
                self.logger.warning(f"Dependents of {node.idx} are not sorted: {ids}")
                return False

            for i, idx in enumerate(ids):
                dep = self.nodes.get(idx)
                if dep is None or dep.parent_idx != node.idx or dep.sibling_index != i:
                    self.logger.warning(f"Broken link between {node.idx} and dependent {idx}")
                    return False

            if node.parent_idx is not None:
                head = self.nodes.get(node.parent_idx)
                if head is None or node.idx not in head.children:
                    self.logger.warning(f"Node {node.idx} is missing from its head's dependents")
                    return False

        for node in self.nodes.values():
            seen = {node.idx}
            current = self.get_head(node)
            while current is not None:
                if current.idx in seen:
                    self.logger.warning(f"Head cycle through node {node.idx}")
                    return False
                seen.add(current.idx)
                current = self.get_head(current)

        return True

    def __str__(self) -> str:
        from ..utils.tsv_io import TSVWriter
        return TSVWriter(self.config, self.logger).format_tree(self)
