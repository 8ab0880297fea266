# NLP_DepNode/tree/navigator.py
from re import Pattern
from typing import Callable, Iterator, List, Optional, Set, Tuple, Union
import numpy as np

from .node import Node
from .fields import Field, Direction

LabelQuery = Union[str, Pattern, Set[str], frozenset]

LEFT_DELIM = "<"
RIGHT_DELIM = ">"
UP_DELIM = "^"
DOWN_DELIM = "|"

class TreeNavigator:
    """
    Read-only queries over the primary tree of a DependencyTree.

    Every query resolves ids through the tree it was built for and returns
    None (or an empty collection) when the requested neighbor does not
    exist. Indexed access with get_dependent() is the one exception and
    raises IndexError.
    """

    def __init__(self, tree):
        self.tree = tree

    def _dependents(self, node: Node) -> List[Node]:
        nodes = self.tree.nodes
        return [nodes[idx] for idx in node.children]

    def get_head(self, node: Node) -> Optional[Node]:
        return self.tree.get(node.parent_idx)

    def get_grand_head(self, node: Node) -> Optional[Node]:
        head = self.get_head(node)
        return self.get_head(head) if head is not None else None

    def get_dependent(self, node: Node, index: int) -> Node:
        """Dependent at `index` in id order. Raises IndexError when out of range."""
        return self.tree.nodes[node.children.get(index)]

    def get_dependent_index(self, node: Node, dependent: Node) -> int:
        """Position of `dependent` among the node's dependents, -1 if it is not one."""
        return node.children.index_of(dependent.idx)

    def get_dependent_size(self, node: Node) -> int:
        return len(node.children)

    def get_dependent_list(self, node: Node) -> List[Node]:
        return self._dependents(node)

    def get_left_nearest_dependent(self, node: Node, order: int = 0) -> Optional[Node]:
        """
        Dependent left of `node` at displacement `order`
        (0 - left-nearest, 1 - second left-nearest, etc.).
        """
        index = node.children.insert_index(node.idx) - order - 1
        if 0 <= index < len(node.children):
            return self.get_dependent(node, index)
        return None

    def get_right_nearest_dependent(self, node: Node, order: int = 0) -> Optional[Node]:
        """
        Dependent right of `node` at displacement `order`
        (0 - right-nearest, 1 - second right-nearest, etc.).
        """
        index = node.children.insert_index(node.idx) + order
        if 0 <= index < len(node.children):
            return self.get_dependent(node, index)
        return None

    def get_left_most_dependent(self, node: Node, order: int = 0) -> Optional[Node]:
        """
        Dependent at `order` counted from the leftmost (0 - leftmost,
        1 - second leftmost, etc.); it must lie left of `node`.
        """
        if 0 <= order < len(node.children):
            dep = self.get_dependent(node, order)
            if dep.idx < node.idx:
                return dep
        return None

    def get_right_most_dependent(self, node: Node, order: int = 0) -> Optional[Node]:
        """
        Dependent at `order` counted from the rightmost; it must lie right
        of `node`.
        """
        order = len(node.children) - 1 - order
        if 0 <= order < len(node.children):
            dep = self.get_dependent(node, order)
            if dep.idx > node.idx:
                return dep
        return None

    def get_left_nearest_sibling(self, node: Node, order: int = 0) -> Optional[Node]:
        head = self.get_head(node)
        if head is not None:
            index = node.sibling_index - order - 1
            if 0 <= index < len(head.children):
                return self.get_dependent(head, index)
        return None

    def get_right_nearest_sibling(self, node: Node, order: int = 0) -> Optional[Node]:
        head = self.get_head(node)
        if head is not None:
            index = node.sibling_index + order + 1
            if 0 <= index < len(head.children):
                return self.get_dependent(head, index)
        return None

    def get_left_nearest_sibling_by_label(self, node: Node, label: Union[str, Pattern]) -> Optional[Node]:
        head = self.get_head(node)
        if head is not None:
            for i in range(node.sibling_index - 1, -1, -1):
                sibling = self.get_dependent(head, i)
                if sibling.is_dependency_label(label):
                    return sibling
        return None

    def get_right_nearest_sibling_by_label(self, node: Node, label: Union[str, Pattern]) -> Optional[Node]:
        head = self.get_head(node)
        if head is not None:
            for i in range(node.sibling_index + 1, len(head.children)):
                sibling = self.get_dependent(head, i)
                if sibling.is_dependency_label(label):
                    return sibling
        return None

    def get_first_dependent(self, node: Node, label: str,
                            predicate: Callable[[Node, str], bool]) -> Optional[Node]:
        """First dependent for which predicate(dependent, label) holds."""
        for dep in self._dependents(node):
            if predicate(dep, label):
                return dep
        return None

    def get_first_dependent_by_label(self, node: Node, label: Union[str, Pattern]) -> Optional[Node]:
        for dep in self._dependents(node):
            if dep.is_dependency_label(label):
                return dep
        return None

    def get_dependent_list_by_label(self, node: Node, label: LabelQuery) -> List[Node]:
        """Dependents whose label equals a string, is in a set, or matches a pattern."""
        if isinstance(label, (set, frozenset)):
            return [dep for dep in self._dependents(node) if dep.dependency_to_parent in label]
        return [dep for dep in self._dependents(node) if dep.is_dependency_label(label)]

    def get_left_dependent_list(self, node: Node, label: Optional[Pattern] = None) -> List[Node]:
        deps = []
        for dep in self._dependents(node):
            if dep.idx > node.idx:
                break
            if label is None or dep.is_dependency_label(label):
                deps.append(dep)
        return deps

    def get_right_dependent_list(self, node: Node, label: Optional[Pattern] = None) -> List[Node]:
        return [dep for dep in self._dependents(node)
                if dep.idx > node.idx and (label is None or dep.is_dependency_label(label))]

    def get_grand_dependent_list(self, node: Node) -> List[Node]:
        deps = []
        for dep in self._dependents(node):
            deps.extend(self._dependents(dep))
        return deps

    def get_descendant_list(self, node: Node, height: int) -> List[Node]:
        """
        Descendants within `height` levels: 1 gives the dependents, 2 adds
        the grand-dependents and so on; below 1 the list is empty.
        The list is not sorted.
        """
        descendants = []
        if height < 1:
            return descendants

        # each entry is a node and how many more levels to descend below it
        stack = [(node, height - 1)]
        while stack:
            current, remaining = stack.pop()
            deps = self._dependents(current)
            descendants.extend(deps)
            if remaining > 0:
                stack.extend((dep, remaining - 1) for dep in reversed(deps))
        return descendants

    def get_any_descendant_by_pos_tag(self, node: Node, tag: str) -> Optional[Node]:
        """First descendant in pre-order with the part-of-speech tag."""
        for current in self.traverse_preorder(node):
            if current is not node and current.is_pos_tag(tag):
                return current
        return None

    def traverse_preorder(self, node: Node) -> Iterator[Node]:
        """Depth-first pre-order traversal"""
        stack = [node]
        while stack:
            current = stack.pop()
            yield current
            stack.extend(reversed(self._dependents(current)))

    def traverse_postorder(self, node: Node) -> Iterator[Node]:
        """Depth-first post-order traversal"""
        stack = [(node, False)]
        while stack:
            current, expanded = stack.pop()
            if expanded:
                yield current
            else:
                stack.append((current, True))
                stack.extend((dep, False) for dep in reversed(self._dependents(current)))

    def traverse_levelorder(self, node: Node) -> Iterator[Node]:
        """Breadth-first traversal"""
        queue = [node]
        while queue:
            current = queue.pop(0)
            yield current
            queue.extend(self._dependents(current))

    def get_sub_node_list(self, node: Node) -> List[Node]:
        """Nodes of the subtree rooted at `node` (inclusive), sorted by id."""
        return sorted(self.traverse_preorder(node))

    def get_sub_node_set(self, node: Node) -> Set[Node]:
        return set(self.traverse_preorder(node))

    def get_sub_node_id_set(self, node: Node) -> Set[int]:
        return {n.idx for n in self.traverse_preorder(node)}

    def get_sub_node_id_sorted_array(self, node: Node) -> np.ndarray:
        return np.array(sorted(self.get_sub_node_id_set(node)), dtype=np.int64)

    def get_ancestor_set(self, node: Node) -> Set[Node]:
        """Head, grand-head and so on up to the root (exclusive of `node`)."""
        ancestors = set()
        head = self.get_head(node)
        while head is not None:
            ancestors.add(head)
            head = self.get_head(head)
        return ancestors

    def get_lowest_common_ancestor(self, node: Node, other: Node) -> Optional[Node]:
        """
        Lowest node that has both `node` and `other` in its subtree.

        Only the ancestors of `node` are collected; `other`'s chain is walked
        until it meets them. Returns None for nodes in disconnected trees.
        """
        ancestors = self.get_ancestor_set(node)
        ancestors.add(node)

        current = other
        while current is not None:
            if current in ancestors:
                return current
            current = self.get_head(current)
        return None

    def get_path(self, node: Node, other: Node, field: Field,
                 lca: Optional[Node] = None) -> Optional[str]:
        """
        Encode the path from `node` up to the lowest common ancestor and down
        to `other`. Steps from `node` are prefixed with '^', steps from
        `other` with '|'. For Field.DISTANCE each half ends with its hop
        count instead of values.

        When `node` is the ancestor only the '|' half from `other` is
        emitted; when `other` is, only the '^' half from `node`. A node
        paired with itself counts as the first case and yields its own
        value (or '|0' for distance).
        """
        if lca is None:
            lca = self.get_lowest_common_ancestor(node, other)
            if lca is None:
                return None

        if node is lca:
            return self._path_half(lca, other, field, DOWN_DELIM, True)

        if other is lca:
            return self._path_half(lca, node, field, UP_DELIM, True)

        up = self._path_half(lca, node, field, UP_DELIM, True)
        down = self._path_half(lca, other, field, DOWN_DELIM, False)
        path = (up or "") + (down or "")
        return path or None

    def _path_half(self, top: Node, bottom: Node, field: Field,
                   delim: str, include_top: bool) -> Optional[str]:
        parts = []
        dist = 0

        # identical endpoints: nothing lies between bottom and top
        current = bottom if bottom is not top else None
        while current is not None:
            value = current.get_value(field)
            if value is not None:
                parts.append(delim + value)
            else:
                dist += 1

            current = self.get_head(current)
            if current is top:
                break

        if field is Field.DISTANCE:
            parts.append(delim + str(dist))
        elif field is not Field.DEPENDENCY_LABEL and include_top:
            value = top.get_value(field)
            if value is not None:
                parts.append(delim + value)

        return "".join(parts) or None

    def get_valency(self, node: Node, direction: Direction) -> Optional[str]:
        """
        '' - no dependents on that side, '<' / '>' - one, '<<' / '>>' - two or more.
        Direction.ALL joins both sides with '-'.
        """
        if direction is Direction.LEFT:
            return self.get_left_valency(node)
        if direction is Direction.RIGHT:
            return self.get_right_valency(node)
        if direction is Direction.ALL:
            return self.get_left_valency(node) + "-" + self.get_right_valency(node)
        return None

    def get_left_valency(self, node: Node) -> str:
        valency = ""
        if self.get_left_most_dependent(node) is not None:
            valency += LEFT_DELIM
            if self.get_left_most_dependent(node, 1) is not None:
                valency += LEFT_DELIM
        return valency

    def get_right_valency(self, node: Node) -> str:
        valency = ""
        if self.get_right_most_dependent(node) is not None:
            valency += RIGHT_DELIM
            if self.get_right_most_dependent(node, 1) is not None:
                valency += RIGHT_DELIM
        return valency

    def get_dependent_value_set(self, node: Node, field: Field) -> Set[Optional[str]]:
        return {dep.get_value(field) for dep in self._dependents(node)}

    def get_subcategorization(self, node: Node, direction: Direction, field: Field) -> Optional[str]:
        if direction is Direction.LEFT:
            return self.get_left_subcategorization(node, field)
        if direction is Direction.RIGHT:
            return self.get_right_subcategorization(node, field)
        if direction is Direction.ALL:
            left = self.get_left_subcategorization(node, field)
            if left is None:
                return self.get_right_subcategorization(node, field)
            right = self.get_right_subcategorization(node, field)
            return left if right is None else left + right
        return None

    def get_left_subcategorization(self, node: Node, field: Field) -> Optional[str]:
        """'<' + value for every left dependent, leftmost first; None if none."""
        parts = []
        for dep in self._dependents(node):
            if dep.idx > node.idx:
                break
            parts.append(LEFT_DELIM + (dep.get_value(field) or ""))
        return "".join(parts) or None

    def get_right_subcategorization(self, node: Node, field: Field) -> Optional[str]:
        """'>' + value for every right dependent, rightmost first; None if none."""
        parts = []
        for dep in reversed(self._dependents(node)):
            if dep.idx < node.idx:
                break
            parts.append(RIGHT_DELIM + (dep.get_value(field) or ""))
        return "".join(parts) or None

    def get_argument_candidate_list(self, node: Node, max_depth: int,
                                    max_height: int) -> List[Tuple[Node, Node]]:
        """
        Treat `node` as a predicate and list (argument, lowest common ancestor)
        candidates: descendants level by level up to `max_depth` (paired with
        `node`), then for up to `max_height` ancestors the ancestor itself and
        its other dependents (paired with that ancestor). The climb stops at
        the first ancestor without a head of its own.
        """
        candidates = []
        lca = node

        for dep in self._dependents(lca):
            candidates.append((dep, lca))

        end = 0
        for _ in range(1, max_depth):
            if end == len(candidates):
                break
            begin, end = end, len(candidates)
            for j in range(begin, end):
                for dep in self._dependents(candidates[j][0]):
                    candidates.append((dep, lca))

        for _ in range(max_height):
            prev = lca
            lca = self.get_head(lca)
            if lca is None or not lca.has_head():
                break
            candidates.append((lca, lca))
            for dep in self._dependents(lca):
                if dep is not prev:
                    candidates.append((dep, lca))

        return candidates

    def has_head(self, node: Node) -> bool:
        return node.has_head()

    def is_dependent_of(self, node: Node, head: Node, label: Optional[str] = None) -> bool:
        if node.parent_idx != head.idx or self.tree.get(node.parent_idx) is not head:
            return False
        return label is None or node.is_dependency_label(label)

    def contains_dependent(self, node: Node, dependent: Node) -> bool:
        return dependent.idx in node.children and self.tree.get(dependent.idx) is dependent

    def contains_dependent_by_label(self, node: Node, label: Union[str, Pattern]) -> bool:
        return self.get_first_dependent_by_label(node, label) is not None

    def is_descendant_of(self, node: Node, ancestor: Node) -> bool:
        head = self.get_head(node)
        while head is not None:
            if head is ancestor:
                return True
            head = self.get_head(head)
        return False

    def is_sibling_of(self, node: Node, other: Node) -> bool:
        return node.has_head() and other is not node and self.is_dependent_of(other, self.get_head(node))
