"""Value types exchanged between the spell checker and its NLP backend."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class CaseType(str, Enum):
    """Casing pattern of a word, as guessed by the surface formatter."""

    DEFAULT_CASE = "DEFAULT_CASE"
    LOWER_CASE = "LOWER_CASE"
    UPPER_CASE = "UPPER_CASE"
    TITLE_CASE = "TITLE_CASE"
    UPPER_CASE_ROOT_LOWER_CASE_ENDING = "UPPER_CASE_ROOT_LOWER_CASE_ENDING"
    MIXED_CASE = "MIXED_CASE"


@dataclass(frozen=True)
class GeneratedWord:
    """Formal word produced from an informal analysis.

    ``analysis`` is the backend's analysis object for the generated word and
    is only ever handed back to the same backend.
    """

    surface: str
    analysis: Any


@dataclass(frozen=True)
class ScoredItem:
    item: str
    score: float
