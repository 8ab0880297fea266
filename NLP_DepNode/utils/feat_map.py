# NLP_DepNode/utils/feat_map.py
from typing import Dict, Optional

FEAT_DELIM = '|'
KEY_VALUE_DELIM = '='
BLANK = '_'

class FeatMap(dict):
    """
    Ordered key -> value map of string features (e.g. morphology).

    Encodes as 'key=value|key=value' in insertion order; an empty map
    encodes as the blank token.
    """

    def __init__(self, features: Optional[Dict[str, str]] = None,
                 feat_delim: str = FEAT_DELIM,
                 key_value_delim: str = KEY_VALUE_DELIM,
                 blank: str = BLANK):
        super().__init__(features or {})
        self.feat_delim = feat_delim
        self.key_value_delim = key_value_delim
        self.blank = blank

    @classmethod
    def from_string(cls, text: Optional[str],
                    feat_delim: str = FEAT_DELIM,
                    key_value_delim: str = KEY_VALUE_DELIM,
                    blank: str = BLANK) -> 'FeatMap':
        feats = cls(feat_delim=feat_delim, key_value_delim=key_value_delim, blank=blank)
        if text is None or text == blank or not text:
            return feats

        for item in text.split(feat_delim):
            key, sep, value = item.partition(key_value_delim)
            if not sep:
                raise ValueError(f"Malformed feature '{item}' in '{text}'")
            feats[key] = value
        return feats

    def __str__(self) -> str:
        if not self:
            return self.blank
        return self.feat_delim.join(f"{k}{self.key_value_delim}{v}" for k, v in self.items())
