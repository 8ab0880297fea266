# tests/conftest.py
import pytest
import yaml
from pathlib import Path
from omegaconf import OmegaConf

from NLP_DepNode.tree import Node, DependencyTree

@pytest.fixture
def default_config():
    """Load the packaged default config for testing"""
    config_dir = Path(__file__).parent.parent / 'NLP_DepNode' / 'configs'

    with open(config_dir / 'default_node_config.yaml') as f:
        config = yaml.safe_load(f)

    config['verbose'] = 'quiet'
    return OmegaConf.create(config)

@pytest.fixture
def small_tree(default_config):
    """root(0) -> A(1) -> B(2), C(3)"""
    tree = DependencyTree("A B C", config=default_config)
    a = tree.add_node(Node("A", "a", "NN", 1))
    b = tree.add_node(Node("B", "b", "NN", 2))
    c = tree.add_node(Node("C", "c", "NN", 3))
    tree.set_head(a, tree.root, "root")
    tree.set_head(b, a, "dep")
    tree.set_head(c, a, "dep")
    return tree

@pytest.fixture
def sample_tree(default_config):
    """'The cat chases the mouse' with chases as the root token"""
    words = [("The", "the", "DET"), ("cat", "cat", "NOUN"), ("chases", "chase", "VERB"),
             ("the", "the", "DET"), ("mouse", "mouse", "NOUN")]
    nodes = [Node(w, l, p, i) for i, (w, l, p) in enumerate(words, start=1)]
    heads = {1: (2, "det"), 2: (3, "nsubj"), 3: (0, "root"), 4: (5, "det"), 5: (3, "obj")}
    return DependencyTree.from_nodes(nodes, heads, "The cat chases the mouse", default_config)

@pytest.fixture
def clause_tree(default_config):
    """'John said Mary bought a car quickly' with bought as a ccomp of said"""
    words = [("John", "john", "PROPN"), ("said", "say", "VERB"), ("Mary", "mary", "PROPN"),
             ("bought", "buy", "VERB"), ("a", "a", "DET"), ("car", "car", "NOUN"),
             ("quickly", "quickly", "ADV")]
    nodes = [Node(w, l, p, i) for i, (w, l, p) in enumerate(words, start=1)]
    heads = {1: (2, "nsubj"), 2: (0, "root"), 3: (4, "nsubj"), 4: (2, "ccomp"),
             5: (6, "det"), 6: (4, "obj"), 7: (4, "advmod")}
    return DependencyTree.from_nodes(nodes, heads, "John said Mary bought a car quickly", default_config)
