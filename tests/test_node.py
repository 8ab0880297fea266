# tests/test_node.py
import re
import numpy as np
import pytest
from NLP_DepNode.tree import Node, Field
from NLP_DepNode.tree.node import ROOT_TAG
from NLP_DepNode.utils import FeatMap, get_shape, to_simplified_form, to_undigitized_form

def test_derived_word_forms():
    node = Node("McDonald's", "mcdonald", "PROPN", 1)
    assert node.word_lowercase == "mcdonald's"
    assert node.word_simplified == "McDonald's"
    assert node.word_simplified_lowercase == "mcdonald's"
    assert node.word_shape == "AaAaa'a"
    assert node.word_shape_lowercase == "aa'a"

def test_word_form_setter_refreshes_forms():
    node = Node("Hello", "hello", "INTJ", 1)
    node.word = "Year2024"
    assert node.word_lowercase == "year2024"
    assert node.word_undigitized == "Year0"
    assert node.word_simplified == "Year0"

def test_normalization_helpers():
    assert to_simplified_form("-LRB-") == "("
    assert to_simplified_form("https://example.com/a") == "#url#"
    assert to_simplified_form("3.14") == "0"
    assert to_simplified_form("1,000,000") == "0"
    assert to_simplified_form("wow!!!!") == "wow!!"
    assert to_undigitized_form("3.14") == "0.0"
    assert to_undigitized_form(None) is None
    assert get_shape("ABCdef123") == "AAaa11"
    assert get_shape("a-b", max_repetitions=1) == "a-a"

def test_get_value():
    node = Node("Cats", "cat", "NNS", 2, {"Number": "Plur"}, nament_tag="O")
    assert node.get_value(Field.WORD_FORM) == "Cats"
    assert node.get_value(Field.WORD_FORM_LOWERCASE) == "cats"
    assert node.get_value(Field.LEMMA) == "cat"
    assert node.get_value(Field.PART_OF_SPEECH_TAG) == "NNS"
    assert node.get_value(Field.NAMED_ENTITY_TAG) == "O"
    assert node.get_value(Field.WORD_SHAPE) == "Aaa"
    assert node.get_value(Field.DEPENDENCY_LABEL) is None
    assert node.get_value(Field.DISTANCE) is None
    assert node.get_value(Field.AMBIGUITY_CLASSES) is None

def test_lexical_resources():
    node = Node("Paris", "paris", "PROPN", 1)
    node.ambiguity_classes = ["NNP", "NN"]
    node.add_named_entity_gazetteer("LOC")
    node.add_named_entity_gazetteer("CITY")
    node.word_embedding = np.zeros(4, dtype=np.float32)

    assert node.get_ambiguity_class(1) == "NN"
    assert node.get_ambiguity_class(2) is None
    assert node.get_value(Field.AMBIGUITY_CLASSES) == "NNP_NN"
    assert node.get_value(Field.NAMED_ENTITY_GAZETTEERS) == "CITY_LOC"
    assert node.has_word_embedding()
    assert not node.has_word_clusters()
    assert not node.stop_word

def test_features():
    node = Node("ran", "run", "VERB", 3, {"Tense": "Past"})
    assert isinstance(node.features, FeatMap)
    assert node.get_feat("Tense") == "Past"
    assert node.put_feat("Tense", "Pres") == "Past"
    assert node.remove_feat("Tense") == "Pres"
    assert node.remove_feat("Tense") is None

def test_feat_map_encoding():
    feats = FeatMap.from_string("Number=Sing|Person=3")
    assert list(feats.items()) == [("Number", "Sing"), ("Person", "3")]
    assert str(feats) == "Number=Sing|Person=3"
    assert str(FeatMap()) == "_"
    assert FeatMap.from_string("_") == {}
    with pytest.raises(ValueError):
        FeatMap.from_string("Number")

def test_predicates():
    node = Node("dogs", "dog", "NNS", 4)
    node.dependency_to_parent = "nsubj:pass"
    assert node.is_word_form("dogs")
    assert node.is_lemma("dog")
    assert node.is_pos_tag("NNS")
    assert node.is_pos_tag(re.compile("^NN"))
    assert node.is_dependency_label("nsubj:pass")
    assert node.is_dependency_label(re.compile("subj"))
    assert node.is_dependency_label_any("obj", "nsubj:pass")
    assert not node.is_dependency_label_any("obj", "iobj")

def test_root_and_ordering():
    root = Node()
    assert root.word == ROOT_TAG and root.is_root
    nodes = [Node("c", "c", "X", 3), Node("a", "a", "X", 1), Node("b", "b", "X", 2)]
    assert [n.idx for n in sorted(nodes)] == [1, 2, 3]

    node = Node("x", "x", "X", 5)
    node.to_root()
    assert node.idx == 0 and node.pos_tag == ROOT_TAG

def test_negative_id_rejected():
    with pytest.raises(ValueError):
        Node("x", "x", "X", -1)
