# NLP_DepNode/tree/node.py
import re
from typing import List, Optional, Dict, Set, Union
from re import Pattern
import numpy as np

from .dependents import DependentRegistry
from .fields import Field
from ..utils.feat_map import FeatMap
from ..utils.text_normalization import (
    to_lowercase, to_simplified_form, to_undigitized_form, get_shape
)

ROOT_TAG = "@#r$%"
ROOT_IDX = 0
SHAPE_MAX_REPETITIONS = 2
COLLECTION_DELIM = "_"

class Node:
    """
    One token of a dependency tree.

    The node keeps its own lexical fields and the ids of its links; the
    owning DependencyTree resolves those ids and is the only place that
    changes parent_idx, dependency_to_parent, children and sibling_index.
    A node created without a word at index 0 is the root sentinel.
    """

    def __init__(self,
                 word: Optional[str] = None,
                 lemma: Optional[str] = None,
                 pos_tag: Optional[str] = None,
                 idx: int = ROOT_IDX,
                 features: Optional[Union[FeatMap, Dict[str, str]]] = None,
                 nament_tag: Optional[str] = None):
        if idx < 0:
            raise ValueError(f"Node index must be non-negative, got {idx}")

        self.idx = idx
        self.word = word
        self.lemma = lemma
        self.pos_tag = pos_tag
        self.nament_tag = nament_tag
        self.features = features if isinstance(features, FeatMap) else FeatMap(features)

        # offsets into the source text
        self.start_offset = 0
        self.end_offset = 0

        # Tree structure, maintained by DependencyTree
        self.parent_idx: Optional[int] = None
        self.dependency_to_parent: Optional[str] = None
        self.children = DependentRegistry()
        self.sibling_index = -1

        # lexica, filled by external resources
        self.named_entity_gazetteers: Optional[Set[str]] = None
        self.ambiguity_classes: Optional[List[str]] = None
        self.word_clusters: Optional[Set[str]] = None
        self.word_embedding: Optional[np.ndarray] = None
        self.stop_word = False

        if word is None and idx == ROOT_IDX:
            self.to_root()

    def to_root(self) -> 'Node':
        """Reset this node to the root sentinel state."""
        self.idx = ROOT_IDX
        self.word = ROOT_TAG
        self.lemma = ROOT_TAG
        self.pos_tag = ROOT_TAG
        self.nament_tag = ROOT_TAG
        self.features = FeatMap()
        self.parent_idx = None
        self.dependency_to_parent = None
        self.children = DependentRegistry()
        self.sibling_index = -1
        return self

    @property
    def is_root(self) -> bool:
        return self.idx == ROOT_IDX and self.pos_tag == ROOT_TAG

    @property
    def word(self) -> Optional[str]:
        return self._word

    @word.setter
    def word(self, form: Optional[str]):
        self._word = form
        self.word_lowercase = to_lowercase(form)
        self.word_simplified = to_simplified_form(form)
        self.word_undigitized = to_undigitized_form(form)
        self.word_simplified_lowercase = to_lowercase(self.word_simplified)

    @property
    def word_shape(self) -> Optional[str]:
        return get_shape(self.word_simplified, SHAPE_MAX_REPETITIONS)

    @property
    def word_shape_lowercase(self) -> Optional[str]:
        return get_shape(self.word_simplified_lowercase, SHAPE_MAX_REPETITIONS)

    def get_ambiguity_class(self, index: int) -> Optional[str]:
        if self.ambiguity_classes is not None and 0 <= index < len(self.ambiguity_classes):
            return self.ambiguity_classes[index]
        return None

    def get_ambiguity_classes(self) -> Optional[str]:
        return self._join_collection(self.ambiguity_classes)

    def get_named_entity_gazetteers(self) -> Optional[str]:
        return self._join_collection(self.named_entity_gazetteers)

    def add_named_entity_gazetteer(self, gazetteer: str):
        if self.named_entity_gazetteers is None:
            self.named_entity_gazetteers = set()
        self.named_entity_gazetteers.add(gazetteer)

    def has_word_clusters(self) -> bool:
        return self.word_clusters is not None

    def has_word_embedding(self) -> bool:
        return self.word_embedding is not None

    @staticmethod
    def _join_collection(values) -> Optional[str]:
        if not values:
            return None
        # sets have no stable order, sequences keep theirs
        items = sorted(values) if isinstance(values, (set, frozenset)) else values
        return COLLECTION_DELIM.join(items)

    def get_feat(self, key: str) -> Optional[str]:
        return self.features.get(key)

    def put_feat(self, key: str, value: str) -> Optional[str]:
        previous = self.features.get(key)
        self.features[key] = value
        return previous

    def remove_feat(self, key: str) -> Optional[str]:
        return self.features.pop(key, None)

    def get_value(self, field: Field) -> Optional[str]:
        """Value of the given attribute, or None if the node has none."""
        getters = {
            Field.WORD_FORM: lambda: self.word,
            Field.WORD_FORM_LOWERCASE: lambda: self.word_lowercase,
            Field.WORD_FORM_SIMPLIFIED: lambda: self.word_simplified,
            Field.WORD_FORM_UNDIGITALIZED: lambda: self.word_undigitized,
            Field.WORD_FORM_SIMPLIFIED_LOWERCASE: lambda: self.word_simplified_lowercase,
            Field.WORD_SHAPE: lambda: self.word_shape,
            Field.WORD_SHAPE_LOWERCASE: lambda: self.word_shape_lowercase,
            Field.LEMMA: lambda: self.lemma,
            Field.PART_OF_SPEECH_TAG: lambda: self.pos_tag,
            Field.NAMED_ENTITY_TAG: lambda: self.nament_tag,
            Field.DEPENDENCY_LABEL: lambda: self.dependency_to_parent,
            Field.AMBIGUITY_CLASSES: self.get_ambiguity_classes,
            Field.NAMED_ENTITY_GAZETTEERS: self.get_named_entity_gazetteers,
        }
        getter = getters.get(field)
        return getter() if getter else None

    def is_word_form(self, form: str) -> bool:
        return form == self.word

    def is_simplified_word_form(self, form: str) -> bool:
        return form == self.word_simplified

    def is_lemma(self, lemma: str) -> bool:
        return lemma == self.lemma

    def is_pos_tag(self, tag: Union[str, Pattern]) -> bool:
        return _matches(tag, self.pos_tag)

    def is_named_entity_tag(self, tag: str) -> bool:
        return tag == self.nament_tag

    def is_dependency_label(self, label: Union[str, Pattern]) -> bool:
        """Exact match for a string, search for a compiled pattern."""
        return _matches(label, self.dependency_to_parent)

    def is_dependency_label_any(self, *labels: str) -> bool:
        return any(self.is_dependency_label(label) for label in labels)

    def has_head(self) -> bool:
        return self.parent_idx is not None

    def sort_key(self) -> int:
        return self.idx

    def __lt__(self, other: 'Node') -> bool:
        return self.idx < other.idx

    def __repr__(self) -> str:
        return f"Node({self.idx}, {self.word!r}, {self.pos_tag!r})"

def _matches(expected: Union[str, Pattern], value: Optional[str]) -> bool:
    if value is None:
        return False
    if isinstance(expected, re.Pattern):
        return expected.search(value) is not None
    return expected == value
