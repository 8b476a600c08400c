"""
Turkish spell checking built on zemberek-python.

The spell checker accepts formal Turkish words only, converts informally
written words to their formal spelling and proposes two-word splits for
run-together words.
"""

from .config import Settings
from .implementations.spell_checker_impl import DefaultSpellChecker
from .protocols import SpellCheckerBackend, SpellCheckerProtocol
from .result import Result
from .spell_checker_factory import create_spell_checker

__all__ = [
    "DefaultSpellChecker",
    "Result",
    "Settings",
    "SpellCheckerBackend",
    "SpellCheckerProtocol",
    "create_spell_checker",
]
