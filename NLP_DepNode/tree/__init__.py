# NLP_DepNode/tree/__init__.py
from .node import Node
from .fields import Field, Direction
from .dependency_tree import DependencyTree
from .navigator import TreeNavigator
from .semantic_graph import Arc, SemanticGraph

__all__ = ['Node', 'Field', 'Direction', 'DependencyTree', 'TreeNavigator', 'Arc', 'SemanticGraph']
