# NLP_DepNode/utils/text_normalization.py
import re
from typing import Optional

URL_TOKEN = "#url#"

# PTB-style escaped brackets
BRACKETS = {
    "-LRB-": "(", "-RRB-": ")",
    "-LSB-": "[", "-RSB-": "]",
    "-LCB-": "{", "-RCB-": "}",
}

URL_PATTERN = re.compile(r'^(?:(?:https?|ftp)://|www\.)\S+$', flags=re.IGNORECASE)
NUMBER_PATTERN = re.compile(r'\d+(?:[.,:/-]\d+)*')
DIGITS_PATTERN = re.compile(r'\d+')
PUNCT_RUN_PATTERN = re.compile(r'([^\w\s])\1{2,}')

def to_lowercase(text: Optional[str]) -> Optional[str]:
    return text.lower() if text is not None else None

def to_simplified_form(text: Optional[str]) -> Optional[str]:
    """
    Simplified word form used for sparse lexical features.

    Brackets escaped by the treebank are reverted, URLs become '#url#',
    numbers (including separators such as 1,000 or 3.14) collapse to '0'
    and runs of a repeated punctuation character are cut to two.
    """
    if text is None:
        return None

    if text in BRACKETS:
        return BRACKETS[text]

    if URL_PATTERN.match(text):
        return URL_TOKEN

    text = NUMBER_PATTERN.sub('0', text)
    text = PUNCT_RUN_PATTERN.sub(r'\1\1', text)
    return text

def to_undigitized_form(text: Optional[str]) -> Optional[str]:
    """Replace every run of digits with a single '0'."""
    if text is None:
        return None
    return DIGITS_PATTERN.sub('0', text)

def get_shape(text: Optional[str], max_repetitions: int = 2) -> Optional[str]:
    """
    Character-class rendering of a word: upper case -> 'A', lower case -> 'a',
    digit -> '1', anything else kept as is. A class repeated consecutively is
    written at most `max_repetitions` times ("McDonald's" -> "AaAaa'a").
    """
    if text is None:
        return None

    shape = []
    prev = None
    count = 0

    for c in text:
        if c.isupper():
            t = 'A'
        elif c.islower():
            t = 'a'
        elif c.isdigit():
            t = '1'
        else:
            t = c

        if t == prev:
            count += 1
        else:
            prev = t
            count = 1

        if count <= max_repetitions:
            shape.append(t)

    return ''.join(shape)
