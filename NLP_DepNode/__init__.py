# NLP_DepNode/__init__.py
from .tree.node import Node, ROOT_TAG
from .tree.fields import Field, Direction
from .tree.dependents import DependentRegistry
from .tree.dependency_tree import DependencyTree
from .tree.navigator import TreeNavigator
from .tree.semantic_graph import Arc, SemanticGraph
from .utils import FeatMap, load_config, setup_logger, get_logger
from .utils.tsv_io import TSVReader, TSVWriter
from .utils.viz_utils import print_tree_text, visualize_tree_graphviz

__all__ = [
    'Node', 'ROOT_TAG', 'Field', 'Direction',
    'DependentRegistry', 'DependencyTree', 'TreeNavigator',
    'Arc', 'SemanticGraph',
    'FeatMap', 'load_config', 'setup_logger', 'get_logger', 'TSVReader', 'TSVWriter',
    'print_tree_text', 'visualize_tree_graphviz'
]
