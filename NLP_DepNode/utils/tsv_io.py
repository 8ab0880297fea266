# NLP_DepNode/utils/tsv_io.py
from typing import Iterable, Iterator, List, Optional, Tuple, Union
from pathlib import Path
from omegaconf import DictConfig
from tqdm import tqdm

from ..tree.node import Node, ROOT_IDX
from ..tree.dependency_tree import DependencyTree
from ..tree.semantic_graph import Arc
from .feat_map import FeatMap
from .logging_config import get_logger

# column order of one node line
ID, FORM, LEMMA, POS, FEATS, HEAD, DEPREL, SHEADS, NAMENT = range(9)

DEFAULT_TSV = {
    'blank': '_',
    'arc_delim': ';',
    'arc_label_delim': ':',
    'feat_delim': '|',
    'feat_key_value_delim': '=',
    'column_count': 9,
}

def _tsv_settings(config) -> dict:
    settings = dict(DEFAULT_TSV)
    if config:
        settings.update(config.get('tsv', {}) or {})
    return settings

class TSVWriter:
    """Encodes nodes as single tab-separated lines, one sentence per block."""

    def __init__(self, config: Optional[DictConfig] = None, logger=None):
        self.config = config or {}
        self.settings = _tsv_settings(self.config)
        self.blank = self.settings['blank']
        self.logger = logger or get_logger(self.__class__.__name__, self.config)

    def _field(self, value: Optional[str]) -> str:
        return self.blank if value is None else value

    def format_arcs(self, arcs: Optional[List[Arc]]) -> str:
        """Arcs sorted by (target id, label) as 'id:label;id:label'."""
        if not arcs:
            return self.blank
        label_delim = self.settings['arc_label_delim']
        return self.settings['arc_delim'].join(
            f"{arc.node_idx}{label_delim}{self._field(arc.label)}" for arc in sorted(arcs)
        )

    def format_feats(self, feats: FeatMap) -> str:
        if not feats:
            return self.blank
        kv = self.settings['feat_key_value_delim']
        return self.settings['feat_delim'].join(f"{k}{kv}{v}" for k, v in feats.items())

    def format_node(self, tree: DependencyTree, node: Node) -> str:
        head = tree.get_head(node)
        columns = [
            str(node.idx),
            self._field(node.word),
            self._field(node.lemma),
            self._field(node.pos_tag),
            self.format_feats(node.features),
            str(head.idx) if head is not None else self.blank,
            self._field(node.dependency_to_parent) if head is not None else self.blank,
            self.format_arcs(tree.semantic_heads.get(node)),
            self._field(node.nament_tag),
        ]
        return "\t".join(columns)

    def format_tree(self, tree: DependencyTree) -> str:
        return "\n".join(self.format_node(tree, node) for node in tree.tokens())

    def write_file(self, trees: Iterable[DependencyTree], path: Union[str, Path]) -> int:
        """Write trees separated by blank lines; returns the number written."""
        count = 0
        with open(path, 'w', encoding='utf-8') as f:
            for tree in trees:
                f.write(self.format_tree(tree))
                f.write("\n\n")
                count += 1
        self.logger.info(f"Wrote {count} trees to {path}")
        return count

class TSVReader:
    """
    Builds DependencyTrees from tab-separated node lines.

    Blank lines separate sentences. Head ids and semantic-arc targets must
    refer to nodes of the same sentence; id 0 is the root sentinel.
    """

    def __init__(self, config: Optional[DictConfig] = None, logger=None):
        self.config = config or {}
        self.settings = _tsv_settings(self.config)
        self.blank = self.settings['blank']
        self.logger = logger or get_logger(self.__class__.__name__, self.config)

    def _value(self, text: str) -> Optional[str]:
        return None if text == self.blank else text

    def _int(self, text: str, what: str, line_no: int) -> int:
        try:
            return int(text)
        except ValueError:
            raise ValueError(f"Line {line_no}: {what} '{text}' is not an integer") from None

    def parse_arcs(self, text: str, line_no: int = 0) -> List[Tuple[int, Optional[str]]]:
        if text == self.blank or not text:
            return []
        arcs = []
        for item in text.split(self.settings['arc_delim']):
            idx, sep, label = item.partition(self.settings['arc_label_delim'])
            if not sep:
                raise ValueError(f"Line {line_no}: malformed semantic arc '{item}'")
            arcs.append((self._int(idx, "arc head id", line_no), self._value(label)))
        return arcs

    def parse_line(self, line: str, line_no: int = 0) -> Tuple[Node, Optional[int], Optional[str], List[Tuple[int, Optional[str]]]]:
        """Return the node plus its unresolved head id, label and semantic arcs."""
        columns = line.rstrip("\r\n").split("\t")
        if len(columns) != self.settings['column_count']:
            raise ValueError(f"Line {line_no}: expected {self.settings['column_count']} "
                             f"columns, found {len(columns)}")

        idx = self._int(columns[ID], "node id", line_no)
        if idx <= ROOT_IDX:
            raise ValueError(f"Line {line_no}: node id must be positive, got {idx}")

        try:
            feats = FeatMap.from_string(columns[FEATS],
                                        self.settings['feat_delim'],
                                        self.settings['feat_key_value_delim'],
                                        self.blank)
        except ValueError as e:
            raise ValueError(f"Line {line_no}: {e}") from e

        node = Node(word=self._value(columns[FORM]),
                    lemma=self._value(columns[LEMMA]),
                    pos_tag=self._value(columns[POS]),
                    idx=idx,
                    features=feats,
                    nament_tag=self._value(columns[NAMENT]))

        head = self._value(columns[HEAD])
        head_idx = self._int(head, "head id", line_no) if head is not None else None
        label = self._value(columns[DEPREL])
        arcs = self.parse_arcs(columns[SHEADS], line_no)
        return node, head_idx, label, arcs

    def read_tree(self, lines: Iterable[str], first_line_no: int = 1) -> DependencyTree:
        parsed = []
        for offset, line in enumerate(lines):
            parsed.append((first_line_no + offset,) + self.parse_line(line, first_line_no + offset))

        tree = DependencyTree(" ".join(p[1].word or "" for p in parsed), config=self.config, logger=self.logger)
        for line_no, node, _, _, _ in parsed:
            try:
                tree.add_node(node)
            except ValueError as e:
                raise ValueError(f"Line {line_no}: {e}") from e

        for line_no, node, head_idx, label, arcs in parsed:
            if head_idx is not None:
                if head_idx not in tree.nodes:
                    raise ValueError(f"Line {line_no}: head id {head_idx} not in sentence")
                tree.set_head(node, tree.nodes[head_idx], label)
            for arc_head, arc_label in arcs:
                if arc_head not in tree.nodes:
                    raise ValueError(f"Line {line_no}: semantic head id {arc_head} not in sentence")
                tree.semantic_heads.add_head(node, arc_head, arc_label)

        return tree

    def read_lines(self, lines: Iterable[str], show_progress: bool = False) -> Iterator[DependencyTree]:
        block: List[str] = []
        start = 1
        for line_no, line in enumerate(tqdm(lines, disable=not show_progress, desc="Reading"), start=1):
            if line.strip():
                if not block:
                    start = line_no
                block.append(line)
            elif block:
                yield self.read_tree(block, start)
                block = []
        if block:
            yield self.read_tree(block, start)

    def read_file(self, path: Union[str, Path], show_progress: bool = False) -> List[DependencyTree]:
        with open(path, encoding='utf-8') as f:
            trees = list(self.read_lines(f, show_progress))
        self.logger.info(f"Read {len(trees)} trees from {path}")
        return trees
