# NLP_DepNode/tree/fields.py
from enum import Enum

class Field(Enum):
    """Node attributes selectable by path, valency and sub-categorization queries."""
    WORD_FORM = "word_form"
    WORD_FORM_LOWERCASE = "word_form_lowercase"
    WORD_FORM_SIMPLIFIED = "word_form_simplified"
    WORD_FORM_UNDIGITALIZED = "word_form_undigitalized"
    WORD_FORM_SIMPLIFIED_LOWERCASE = "word_form_simplified_lowercase"
    WORD_SHAPE = "word_shape"
    WORD_SHAPE_LOWERCASE = "word_shape_lowercase"
    LEMMA = "lemma"
    PART_OF_SPEECH_TAG = "part_of_speech_tag"
    NAMED_ENTITY_TAG = "named_entity_tag"
    DEPENDENCY_LABEL = "dependency_label"
    AMBIGUITY_CLASSES = "ambiguity_classes"
    NAMED_ENTITY_GAZETTEERS = "named_entity_gazetteers"
    # hop count pseudo-attribute, only meaningful for path encoding
    DISTANCE = "distance"

class Direction(Enum):
    LEFT = "left"
    RIGHT = "right"
    ALL = "all"
