# NLP_DepNode/utils/viz_utils.py

from typing import Optional
from ..tree.node import Node
from ..tree.dependency_tree import DependencyTree
from omegaconf import DictConfig
import graphviz

def _show_features(config: Optional[DictConfig]) -> bool:
    return config.get('visualization', {}).get('show_features', False) if config else False

def print_tree_text(tree: DependencyTree, config: Optional[DictConfig] = None) -> str:
    """
    Create a text visualization of a dependency tree.

    Args:
        tree: DependencyTree to visualize
        config: Configuration dict, used for visualization settings

    Returns:
        String representation of the tree, rooted at the sentinel. Headless
        tokens are listed after it as separate fragments.

    Example:
        >>> print(print_tree_text(tree))
        └── @#r$% (@#r$%)
            └── chases (VERB) --root-->
                ├── cat (NOUN) --nsubj-->
                └── mouse (NOUN) --obj-->
    """
    show_features = _show_features(config)
    nav = tree.navigator

    def _build_lines(node: Node, prefix: str = "", is_last: bool = True) -> list[str]:
        lines = []

        node_text = f"{node.word} ({node.pos_tag})"
        if node.has_head() and node.dependency_to_parent:
            node_text = f"{node_text} --{node.dependency_to_parent}-->"

        if show_features and node.features:
            feat_str = ", ".join(f"{k}: {v}" for k, v in node.features.items())
            node_text = f"{node_text} [{feat_str}]"

        conn = "└── " if is_last else "├── "
        lines.append(prefix + conn + node_text)

        child_prefix = prefix + ("    " if is_last else "│   ")
        children = nav.get_dependent_list(node)
        for i, child in enumerate(children):
            lines.extend(_build_lines(
                child,
                prefix=child_prefix,
                is_last=(i == len(children) - 1)
            ))

        return lines

    if not tree or not len(tree):
        return "<empty tree>"

    lines = _build_lines(tree.root)
    for node in tree.tokens():
        if not node.has_head():
            lines.extend(_build_lines(node))
    return "\n".join(lines)

def visualize_tree_graphviz(
    tree: DependencyTree,
    config: Optional[DictConfig] = None,
    filename: Optional[str] = None,
    show_semantic_heads: bool = False
) -> graphviz.Digraph:
    """
    Create a graphical visualization of a dependency tree using graphviz.

    Args:
        tree: DependencyTree to visualize
        config: Configuration dict, used for visualization settings
        filename: If provided, save the visualization to this file
        show_semantic_heads: Also draw semantic arcs as dashed edges

    Returns:
        Graphviz digraph object
    """
    show_features = _show_features(config)

    dot = graphviz.Digraph(comment='Dependency Tree')
    dot.attr(rankdir='TB')

    for node in tree:
        node_label = f"{node.word}\n{node.pos_tag}"
        if show_features and node.features:
            feat_str = "\n".join(f"{k}: {v}" for k, v in node.features.items())
            node_label = f"{node_label}\n{feat_str}"
        dot.node(str(node.idx), node_label)

    for node in tree:
        for child in tree.navigator.get_dependent_list(node):
            dot.edge(str(node.idx), str(child.idx), label=child.dependency_to_parent or "")

        if show_semantic_heads:
            for arc in tree.semantic_heads.get(node) or []:
                dot.edge(str(arc.node_idx), str(node.idx), label=arc.label or "", style='dashed')

    if filename:
        dot.render(filename, view=False)

    return dot
