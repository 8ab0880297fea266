# tests/test_semantic_graph.py
import re
import pytest
from NLP_DepNode.tree import Node, DependencyTree, Arc

@pytest.fixture
def srl_tree(default_config):
    """Z(3) has semantic heads X(1)/ARG0 and Y(2)/ARG1"""
    tree = DependencyTree(config=default_config)
    x = tree.add_node(Node("X", "x", "VERB", 1))
    y = tree.add_node(Node("Y", "y", "VERB", 2))
    z = tree.add_node(Node("Z", "z", "NOUN", 3))
    tree.semantic_heads.add_head(z, x, "ARG0")
    tree.semantic_heads.add_head(z, y, "ARG1")
    return tree

def test_first_semantic_head(srl_tree):
    graph = srl_tree.semantic_heads
    z = srl_tree[3]
    assert graph.get_first_head(z, "ARG1") is srl_tree[2]
    assert graph.get_first_head(z, re.compile(r"ARG\d")) is srl_tree[1]
    assert graph.get_first_head(z, "ARGM-TMP") is None

def test_remove_by_node(srl_tree):
    graph = srl_tree.semantic_heads
    z = srl_tree[3]
    assert graph.remove_head(z, srl_tree[1])
    arcs = graph.get_arcs(z)
    assert len(arcs) == 1
    assert arcs[0].node_idx == 2 and arcs[0].label == "ARG1"
    assert not graph.remove_head(z, srl_tree[1])

def test_clear_returns_backup(srl_tree):
    graph = srl_tree.semantic_heads
    z = srl_tree[3]
    original = list(graph.get_arcs(z))
    backup = graph.clear(z)
    assert graph.get_arcs(z) == []
    assert len(backup) == 2
    assert all(a is b for a, b in zip(backup, original))

    graph.add_arcs(z, backup)
    assert graph.get_first_head(z, "ARG0") is srl_tree[1]

def test_arc_lookups(srl_tree):
    graph = srl_tree.semantic_heads
    x, y, z = srl_tree[1], srl_tree[2], srl_tree[3]
    assert graph.get_arc(z, x).label == "ARG0"
    assert graph.get_arc(z, y, "ARG1").node_idx == 2
    assert graph.get_arc(z, y, "ARG0") is None
    assert graph.get_arc(z, y, re.compile("1$")) is not None
    assert graph.get_label(z, y) == "ARG1"
    assert graph.get_label(z, z) is None
    assert [a.label for a in graph.get_arcs(z, "ARG0")] == ["ARG0"]
    assert graph.get_heads(z) == [x, y]

def test_is_argument_of(srl_tree):
    graph = srl_tree.semantic_heads
    x, z = srl_tree[1], srl_tree[3]
    assert graph.is_argument_of(z, x)
    assert graph.is_argument_of(z, x, "ARG0")
    assert not graph.is_argument_of(z, x, "ARG1")
    assert graph.is_argument_of(z, label=re.compile("^ARG"))
    assert not graph.is_argument_of(x)

def test_duplicates_and_removals(srl_tree):
    graph = srl_tree.semantic_heads
    x, z = srl_tree[1], srl_tree[3]
    dup = graph.add_head(z, x, "ARG0")
    assert len(graph.get_arcs(z, "ARG0")) == 2

    # identity removal takes the later copy, not the first equal one
    assert graph.remove_arc(z, dup)
    assert not graph.remove_arc(z, dup)
    assert len(graph.get_arcs(z)) == 2

    graph.add_head(z, x, "ARG0")
    graph.remove_arcs_by_label(z, "ARG0")
    assert [a.label for a in graph.get_arcs(z)] == ["ARG1"]

    graph.remove_arcs(z, graph.get_arcs(z))
    assert graph.get_arcs(z) == []

def test_cycles_and_tree_independence(srl_tree):
    """Semantic arcs may loop and never touch the primary tree"""
    graph = srl_tree.semantic_heads
    x, z = srl_tree[1], srl_tree[3]
    graph.add_head(x, z, "ARG1")
    graph.add_head(x, x, "R-ARG0")
    assert graph.get_first_head(x, "R-ARG0") is x
    assert not x.has_head() and len(x.children) == 0
    assert srl_tree.verify_structure()

def test_secondary_heads_are_separate(srl_tree):
    z = srl_tree[3]
    assert srl_tree.secondary_heads.get(z) is None
    srl_tree.secondary_heads.add_head(z, srl_tree[2], "xcomp")
    assert [a.label for a in srl_tree.secondary_heads.get(z)] == ["xcomp"]
    assert len(srl_tree.semantic_heads.get_arcs(z)) == 2

    srl_tree.secondary_heads.set_arcs(z, None)
    assert srl_tree.secondary_heads.get(z) is None

def test_arc_ordering():
    arcs = [Arc(5, "ARG1"), Arc(2, "ARG2"), Arc(2, "ARG0")]
    assert [str(a) for a in sorted(arcs)] == ["2:ARG0", "2:ARG2", "5:ARG1"]

def test_reading_arcs_leaves_owner_unset(srl_tree):
    graph = srl_tree.secondary_heads
    x = srl_tree[1]
    assert graph.get(x) is None
    assert graph.get_arcs(x) == []
    assert graph.get_arcs(x, "ARG0") == []
    assert graph.get(x) is None

    graph.add_head(x, srl_tree[2], "ref")
    assert [str(a) for a in graph.get(x)] == ["2:ref"]
