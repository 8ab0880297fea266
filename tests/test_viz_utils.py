# tests/test_viz_utils.py

import logging
import graphviz
from NLP_DepNode.utils.viz_utils import print_tree_text, visualize_tree_graphviz
from NLP_DepNode.utils.config import load_config
from NLP_DepNode.utils.logging_config import logger, get_logger

class TestVizUtils:

    def test_print_tree_text(self, sample_tree):
        text = print_tree_text(sample_tree)
        logger.info(text)
        assert "chases" in text
        assert "cat" in text
        assert "mouse" in text
        assert "--nsubj--" in text
        assert "--obj--" in text

    def test_print_tree_text_with_features(self, sample_tree):
        sample_tree[3].put_feat("Tense", "Pres")
        config = load_config({'visualization': {'show_features': True}}, verbosity='quiet')
        text = print_tree_text(sample_tree, config)
        assert "Tense: Pres" in text

    def test_print_headless_fragment(self, sample_tree):
        sample_tree.set_head(sample_tree[5], None)
        lines = print_tree_text(sample_tree).split("\n")
        assert lines[-2].endswith("mouse (NOUN)")

    def test_visualize_tree_graphviz(self, sample_tree):
        sample_tree.semantic_heads.add_head(sample_tree[2], sample_tree[3], "ARG0")
        dot = visualize_tree_graphviz(sample_tree, show_semantic_heads=True)
        assert isinstance(dot, graphviz.Digraph)
        assert "chases" in dot.source
        assert "nsubj" in dot.source
        assert "ARG0" in dot.source
        assert "dashed" in dot.source

def test_load_config_overrides(tmp_path):
    config = load_config()
    assert config.tsv.blank == "_"
    assert config.verbose == "normal"

    override = tmp_path / "override.yaml"
    override.write_text("tsv:\n  arc_delim: ','\nverbose: debug\n")
    config = load_config(str(override))
    assert config.tsv.arc_delim == ","
    assert config.tsv.blank == "_"
    assert config.verbose == "debug"

def test_logger_follows_config_verbosity():
    quiet = get_logger('VerbosityCheck', load_config(verbosity='quiet'))
    assert quiet.level == logging.WARNING
    assert all(h.level == logging.WARNING for h in quiet.handlers)

    debug = get_logger('VerbosityCheck', load_config(verbosity='debug'))
    assert debug is quiet
    assert debug.level == logging.DEBUG
    assert len(debug.handlers) == 1

    assert get_logger('VerbosityCheck', {}).level == logging.INFO
