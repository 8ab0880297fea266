# NLP_DepNode/utils/__init__.py
# tsv_io and viz_utils depend on the tree package and are imported from their modules
from .logging_config import setup_logger, get_logger
from .config import load_config
from .feat_map import FeatMap
from .text_normalization import to_simplified_form, to_undigitized_form, get_shape

__all__ = [
    'setup_logger',
    'get_logger',
    'load_config',
    'FeatMap',
    'to_simplified_form',
    'to_undigitized_form',
    'get_shape'
]
