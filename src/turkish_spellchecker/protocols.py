"""
Protocol definitions for the spell checker and the NLP capabilities it uses.

The spell checker never talks to the morphology library directly; it is
handed a SpellCheckerBackend whose members satisfy these protocols. Analysis
and token objects are opaque here and only passed back to the backend that
produced them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol

from turkish_spellchecker.models import CaseType, GeneratedWord


class MorphologyProtocol(Protocol):
    """Morphological analyzer built with informal analysis enabled."""

    def analyze(self, word: str) -> list[Any]:
        """Return every analysis of ``word``; empty when the word is unknown."""
        ...

    def analyze_unidentified(self, token: Any) -> list[Any]:
        """Analyze a token the lexicon does not know (numbers, abbreviations, proper nouns...)."""
        ...

    def contains_informal_morpheme(self, analysis: Any) -> bool:
        ...


class SpellEngineProtocol(Protocol):
    """Dictionary spell checker restricted to formal analyses."""

    def check(self, word: str) -> bool:
        """Return True when ``word`` is a correctly written formal Turkish word."""
        ...

    def suggest_for_word(self, word: str) -> list[str]:
        """Return spelling suggestions, best first."""
        ...


class TokenizerProtocol(Protocol):
    def tokenize(self, text: str) -> list[Any]:
        ...


class UnigramLanguageModelProtocol(Protocol):
    """Unigram language model with its vocabulary."""

    def index_of(self, word: str) -> int:
        """Vocabulary index of ``word``; unknown words map to the unknown-word index."""
        ...

    def get_probability(self, index: int) -> float:
        """Log probability of the vocabulary entry at ``index``."""
        ...


class InformalConverterProtocol(Protocol):
    def convert(self, word: str, analysis: Any) -> GeneratedWord | None:
        """Convert an informal analysis of ``word`` to its formal form, None if impossible."""
        ...


class SurfaceFormatterProtocol(Protocol):
    """Guesses and reapplies casing and apostrophe style."""

    def guess_case(self, word: str) -> CaseType:
        ...

    def can_be_formatted(self, analysis: Any, case_type: CaseType) -> bool:
        ...

    def format_to_case(self, analysis: Any, case_type: CaseType, apostrophe: str | None) -> str:
        ...


@dataclass(frozen=True)
class SpellCheckerBackend:
    """The NLP capabilities a spell checker is built from."""

    morphology: MorphologyProtocol
    spell_engine: SpellEngineProtocol
    tokenizer: TokenizerProtocol
    language_model: UnigramLanguageModelProtocol
    informal_converter: InformalConverterProtocol
    formatter: SurfaceFormatterProtocol


class SpellCheckerProtocol(Protocol):
    """Word-level spell checking as consumed by editors and the HTTP API."""

    def is_correct(self, word: str | None) -> bool:
        """
        Check whether a single word is spelled correctly.

        Args:
            word: Word to check, possibly with trailing punctuation

        Returns:
            True if the word is accepted, False otherwise
        """
        ...

    def get_suggestions(self, word: str | None) -> list[str]:
        """
        Suggest replacements for a word.

        Args:
            word: Word to find suggestions for

        Returns:
            Unique suggestions in discovery order, at most MAX_SUGGESTIONS long
        """
        ...
