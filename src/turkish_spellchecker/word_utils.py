"""Surface-level helpers applied to words before they reach the backend."""

from __future__ import annotations

import re
import string

_TRAILING_PUNCTUATION = re.compile(f"[{re.escape(string.punctuation)}]+$")


def remove_trailing_punctuation(word: str) -> str:
    return _TRAILING_PUNCTUATION.sub("", word)


def get_apostrophe(word: str) -> str | None:
    """Apostrophe style used inside ``word``; a leading apostrophe does not count."""
    if word.find("’") > 0:
        return "’"
    if word.find("'") > 0:
        return "'"
    return None
