"""
diacritics.py - accent folding for Latin, Greek and Cyrillic text

Letters from other scripts (CJK, kana, Hangul, Arabic, ...) are returned
untouched, including their own combining marks.
"""

import unicodedata
from functools import lru_cache

_FOLDABLE_SCRIPTS = ("LATIN", "GREEK", "CYRILLIC")

# Letters whose accent is part of the glyph and do not decompose under NFD
_STROKE_LETTERS = {
    "ø": "o", "Ø": "O",
    "ł": "l", "Ł": "L",
    "đ": "d", "Đ": "D",
    "ħ": "h", "Ħ": "H",
    "ŧ": "t", "Ŧ": "T",
    "ŀ": "l", "Ŀ": "L",
    "ı": "i",
    "ð": "d", "Ð": "D",
    "ƀ": "b", "ƶ": "z", "Ƶ": "Z",
}


@lru_cache(maxsize=8192)
def _is_foldable_base(ch: str) -> bool:
    return unicodedata.name(ch, "").startswith(_FOLDABLE_SCRIPTS)


@lru_cache(maxsize=8192)
def _fold_char(ch: str) -> str:
    if ch < "\u0080":
        return ch
    if ch in _STROKE_LETTERS:
        return _STROKE_LETTERS[ch]
    decomposed = unicodedata.normalize("NFD", ch)
    if not _is_foldable_base(decomposed[0]):
        return ch
    return "".join(c for c in decomposed if not unicodedata.combining(c))


def diacritics(text: str) -> str:
    """Strip accents from Latin, Greek and Cyrillic letters.

    Precomposed letters are decomposed one at a time; free-standing
    combining marks are dropped only when they follow a foldable base
    letter, so a decomposed ``e\\u0301`` folds the same way as ``é``.
    """
    out = []
    fold_marks = False
    for ch in text:
        if unicodedata.combining(ch):
            if not fold_marks:
                out.append(ch)
            continue
        folded = _fold_char(ch)
        out.append(folded)
        fold_marks = folded != ch or _is_foldable_base(ch)
    return "".join(out)
