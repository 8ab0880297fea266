# NLP_DepNode/tree/semantic_graph.py
import re
from re import Pattern
from typing import Dict, Iterable, List, Mapping, Optional, Union

from .node import Node

ARC_DELIM = ";"
LABEL_DELIM = ":"

class Arc:
    """
    A labeled edge pointing at another node of the same tree.

    Arcs are compared by (target id, label) for sorting only; equality is
    identity, so two arcs with the same target and label stay distinct.
    """
    __slots__ = ('node_idx', 'label')

    def __init__(self, node_idx: int, label: Optional[str]):
        self.node_idx = node_idx
        self.label = label

    def is_node(self, node: Union[Node, int]) -> bool:
        return self.node_idx == _idx(node)

    def is_label(self, label: Union[str, Pattern]) -> bool:
        if self.label is None:
            return False
        if isinstance(label, re.Pattern):
            return label.search(self.label) is not None
        return label == self.label

    def matches(self, node: Union[Node, int], label: Union[str, Pattern]) -> bool:
        return self.is_node(node) and self.is_label(label)

    def __lt__(self, other: 'Arc') -> bool:
        return (self.node_idx, self.label or "") < (other.node_idx, other.label or "")

    def __str__(self) -> str:
        return f"{self.node_idx}{LABEL_DELIM}{self.label}"

    def __repr__(self) -> str:
        return f"Arc({self.node_idx}, {self.label!r})"

class SemanticGraph:
    """
    Labeled multi-edge adjacency lists keyed by owner id.

    Independent of the primary tree: arcs may form cycles, repeat, or join
    nodes that have no head relation. Arcs keep insertion order. Owners
    without a list (never added to or set) report None from get().
    """

    def __init__(self, nodes: Mapping[int, Node]):
        self._nodes = nodes
        self._arcs: Dict[int, List[Arc]] = {}

    def _list(self, owner: Union[Node, int]) -> List[Arc]:
        return self._arcs.setdefault(_idx(owner), [])

    def _resolve(self, arc: Optional[Arc]) -> Optional[Node]:
        return self._nodes.get(arc.node_idx) if arc is not None else None

    def add_arc(self, owner: Union[Node, int], arc: Arc) -> Arc:
        self._list(owner).append(arc)
        return arc

    def add_head(self, owner: Union[Node, int], head: Union[Node, int], label: Optional[str]) -> Arc:
        return self.add_arc(owner, Arc(_idx(head), label))

    def add_arcs(self, owner: Union[Node, int], arcs: Iterable[Arc]):
        self._list(owner).extend(arcs)

    def set_arcs(self, owner: Union[Node, int], arcs: Optional[List[Arc]]):
        if arcs is None:
            self._arcs.pop(_idx(owner), None)
        else:
            self._arcs[_idx(owner)] = arcs

    def get(self, owner: Union[Node, int]) -> Optional[List[Arc]]:
        return self._arcs.get(_idx(owner))

    def get_arcs(self, owner: Union[Node, int], label: Optional[str] = None) -> List[Arc]:
        """All arcs of the owner, or the ones with exactly `label`."""
        arcs = self._arcs.get(_idx(owner), [])
        if label is None:
            return arcs
        return [arc for arc in arcs if arc.is_label(label)]

    def get_arc(self, owner: Union[Node, int], node: Union[Node, int],
                label: Optional[Union[str, Pattern]] = None) -> Optional[Arc]:
        """First arc to `node`, optionally also matching a label or pattern."""
        for arc in self._arcs.get(_idx(owner), []):
            if arc.is_node(node) and (label is None or arc.is_label(label)):
                return arc
        return None

    def get_label(self, owner: Union[Node, int], node: Union[Node, int]) -> Optional[str]:
        arc = self.get_arc(owner, node)
        return arc.label if arc is not None else None

    def get_first_head(self, owner: Union[Node, int], label: Union[str, Pattern]) -> Optional[Node]:
        for arc in self._arcs.get(_idx(owner), []):
            if arc.is_label(label):
                return self._resolve(arc)
        return None

    def get_heads(self, owner: Union[Node, int]) -> List[Node]:
        return [self._nodes[arc.node_idx] for arc in self._arcs.get(_idx(owner), [])
                if arc.node_idx in self._nodes]

    def is_argument_of(self, owner: Union[Node, int],
                       node: Optional[Union[Node, int]] = None,
                       label: Optional[Union[str, Pattern]] = None) -> bool:
        """True if the owner has an arc to `node` and/or with `label`."""
        if node is not None:
            return self.get_arc(owner, node, label) is not None
        if label is not None:
            return self.get_first_head(owner, label) is not None
        return bool(self._arcs.get(_idx(owner)))

    def remove_head(self, owner: Union[Node, int], node: Union[Node, int]) -> bool:
        """Remove the first arc to `node`; False if there was none."""
        arcs = self._arcs.get(_idx(owner), [])
        for i, arc in enumerate(arcs):
            if arc.is_node(node):
                del arcs[i]
                return True
        return False

    def remove_arc(self, owner: Union[Node, int], arc: Arc) -> bool:
        arcs = self._arcs.get(_idx(owner), [])
        for i, a in enumerate(arcs):
            if a is arc:
                del arcs[i]
                return True
        return False

    def remove_arcs(self, owner: Union[Node, int], arcs: Iterable[Arc]):
        removed = {id(arc) for arc in arcs}
        current = self._arcs.get(_idx(owner))
        if current:
            current[:] = [arc for arc in current if id(arc) not in removed]

    def remove_arcs_by_label(self, owner: Union[Node, int], label: str):
        current = self._arcs.get(_idx(owner))
        if current:
            current[:] = [arc for arc in current if not arc.is_label(label)]

    def clear(self, owner: Union[Node, int]) -> List[Arc]:
        """Empty the owner's arcs and return them for restoring later."""
        current = self._arcs.get(_idx(owner))
        if not current:
            return []
        backup = list(current)
        current.clear()
        return backup

def _idx(node: Union[Node, int]) -> int:
    return node if isinstance(node, int) else node.idx
