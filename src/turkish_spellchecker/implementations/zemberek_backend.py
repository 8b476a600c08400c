"""
zemberek-python implementation of the spell checker backend.

Each adapter wraps one zemberek object and satisfies the matching protocol,
so the spell checker itself never imports zemberek.
"""

from __future__ import annotations

import re
import time
from collections.abc import Iterator
from operator import itemgetter
from typing import Any

from zemberek.core.turkish import RootAttribute, SecondaryPos, TurkishAlphabet
from zemberek.morphology import TurkishMorphology
from zemberek.morphology.analysis.informal_analysis_converter import InformalAnalysisConverter
from zemberek.morphology.analysis.word_analysis_surface_formatter import (
    WordAnalysisSurfaceFormatter,
)
from zemberek.morphology.lexicon import RootLexicon
from zemberek.normalization import TurkishSpellChecker
from zemberek.tokenization import TurkishTokenizer

from turkish_spellchecker.config import Settings
from turkish_spellchecker.logging_utils import create_service_logger
from turkish_spellchecker.models import CaseType, GeneratedWord
from turkish_spellchecker.protocols import (
    InformalConverterProtocol,
    MorphologyProtocol,
    SpellCheckerBackend,
    SpellEngineProtocol,
    SurfaceFormatterProtocol,
    TokenizerProtocol,
    UnigramLanguageModelProtocol,
)
from turkish_spellchecker.word_utils import get_apostrophe

logger = create_service_logger("turkish_spellchecker.zemberek_backend")

_NON_FORMAL_ROOT_ATTRIBUTES = (RootAttribute.Ext, RootAttribute.Informal)
_APOSTROPHES = re.compile("['’]")


def is_formal_analysis(analysis: Any) -> bool:
    """Reject informal or extended dictionary roots and informal suffixes."""
    attributes = analysis.item.attributes
    if any(attribute in attributes for attribute in _NON_FORMAL_ROOT_ATTRIBUTES):
        return False
    return not analysis.contains_informal_morpheme()


class ZemberekMorphology(MorphologyProtocol):
    def __init__(self, morphology: TurkishMorphology) -> None:
        self.morphology = morphology

    def analyze(self, word: str) -> list[Any]:
        return list(self.morphology.analyze(word))

    def analyze_unidentified(self, token: Any) -> list[Any]:
        return list(self.morphology.unidentified_token_analyzer.analyze(token))

    def contains_informal_morpheme(self, analysis: Any) -> bool:
        return bool(analysis.contains_informal_morpheme())


class ZemberekSurfaceFormatter(SurfaceFormatterProtocol):
    """Maps CaseType to and from the zemberek formatter's own case enum by name."""

    def __init__(self, formatter: WordAnalysisSurfaceFormatter | None = None) -> None:
        self.formatter = formatter or WordAnalysisSurfaceFormatter()

    @staticmethod
    def _to_library_case(case_type: CaseType) -> Any:
        return WordAnalysisSurfaceFormatter.CaseType[case_type.value]

    def guess_case(self, word: str) -> CaseType:
        return CaseType(self.formatter.guess_case(word).name)

    def can_be_formatted(self, analysis: Any, case_type: CaseType) -> bool:
        """Whether ``analysis`` may be written in ``case_type``.

        Proper nouns and abbreviations are never lower case, abbreviations are
        never title case, and nothing is rendered in mixed case.
        """
        secondary_pos = analysis.item.secondary_pos
        if case_type == CaseType.LOWER_CASE:
            return secondary_pos not in (SecondaryPos.ProperNoun, SecondaryPos.Abbreviation)
        if case_type == CaseType.TITLE_CASE:
            return secondary_pos != SecondaryPos.Abbreviation
        return case_type != CaseType.MIXED_CASE

    def format_to_case(self, analysis: Any, case_type: CaseType, apostrophe: str | None) -> str:
        return self.formatter.format_to_case(
            analysis, self._to_library_case(case_type), apostrophe
        )


class ZemberekSpellEngine(SpellEngineProtocol):
    """TurkishSpellChecker restricted to analyses accepted by ``is_formal_analysis``.

    A word is correct when one of its formal analyses renders back to exactly
    the input in the input's casing and apostrophe style. Suggestions are
    rendered the same way, so "Kitab" yields "Kitap" rather than "kitap".
    """

    def __init__(
        self,
        spell_checker: TurkishSpellChecker,
        morphology: TurkishMorphology,
        formatter: ZemberekSurfaceFormatter,
    ) -> None:
        self.spell_checker = spell_checker
        self.morphology = morphology
        self.formatter = formatter

    def _formal_analyses(self, word: str) -> Iterator[Any]:
        for analysis in self.morphology.analyze(word):
            if not analysis.is_unknown() and is_formal_analysis(analysis):
                yield analysis

    def check(self, word: str) -> bool:
        if not word:
            return False

        case_type = self.formatter.guess_case(word)
        apostrophe = get_apostrophe(word)
        for analysis in self._formal_analyses(word):
            if not self.formatter.can_be_formatted(analysis, case_type):
                continue
            if self.formatter.format_to_case(analysis, case_type, apostrophe) == word:
                return True
        return False

    def unranked_suggestions(self, word: str) -> list[str]:
        """Decoder candidates for ``word`` as formal words in the input's casing."""
        normalized = TurkishAlphabet.INSTANCE.normalize(_APOSTROPHES.sub("", word))
        candidates = self.spell_checker.decoder.get_suggestions(
            normalized, self.spell_checker.char_matcher
        )

        case_type = self.formatter.guess_case(word)
        if case_type in (CaseType.MIXED_CASE, CaseType.LOWER_CASE):
            case_type = CaseType.DEFAULT_CASE
        apostrophe = get_apostrophe(word)

        suggestions: dict[str, None] = {}
        for candidate in candidates:
            for analysis in self._formal_analyses(candidate):
                formatted = self.formatter.format_to_case(analysis, case_type, apostrophe)
                suggestions.setdefault(formatted)
        return list(suggestions)

    def rank_by_unigram_probability(self, suggestions: list[str]) -> list[str]:
        """Sort by language model probability, best first, keeping ties in order."""
        lm = self.spell_checker.unigram_model
        scored = [
            (
                suggestion,
                lm.get_unigram_probability(
                    lm.vocabulary.index_of(TurkishSpellChecker.normalize_for_lm(suggestion))
                ),
            )
            for suggestion in suggestions
        ]
        scored.sort(key=itemgetter(1), reverse=True)
        return [suggestion for suggestion, _ in scored]

    def suggest_for_word(self, word: str) -> list[str]:
        return self.rank_by_unigram_probability(self.unranked_suggestions(word))


class ZemberekTokenizer(TokenizerProtocol):
    def __init__(self, tokenizer: TurkishTokenizer | None = None) -> None:
        self.tokenizer = tokenizer or TurkishTokenizer.DEFAULT

    def tokenize(self, text: str) -> list[Any]:
        return list(self.tokenizer.tokenize(text))


class ZemberekUnigramModel(UnigramLanguageModelProtocol):
    def __init__(self, language_model: Any) -> None:
        self.language_model = language_model

    def index_of(self, word: str) -> int:
        return self.language_model.vocabulary.index_of(word)

    def get_probability(self, index: int) -> float:
        return float(self.language_model.get_unigram_probability(index))


class ZemberekInformalConverter(InformalConverterProtocol):
    def __init__(self, morphology: TurkishMorphology) -> None:
        self.converter = InformalAnalysisConverter(morphology.word_generator)

    def convert(self, word: str, analysis: Any) -> GeneratedWord | None:
        result = self.converter.convert(word, analysis)
        if result is None:
            return None
        return GeneratedWord(surface=result.surface, analysis=result.analysis)


def build_morphology(settings: Settings, lexicon: RootLexicon | None = None) -> TurkishMorphology:
    """Build the morphology over ``lexicon``, the bundled default lexicon when None."""
    builder = TurkishMorphology.builder(lexicon or RootLexicon.get_default())
    if settings.INFORMAL_ANALYSIS_ENABLED:
        builder = builder.use_informal_analysis()
    return builder.build()


def build_zemberek_backend(
    settings: Settings, lexicon: RootLexicon | None = None
) -> SpellCheckerBackend:
    """
    Build every backend capability from a single zemberek morphology.

    Args:
        settings: Service settings
        lexicon: Optional custom root lexicon, mainly for tests and debugging

    Returns:
        SpellCheckerBackend backed by zemberek-python

    Raises:
        Whatever zemberek raises while loading its lexicon and model resources
    """
    start = time.perf_counter()
    morphology = build_morphology(settings, lexicon)
    spell_checker = TurkishSpellChecker(morphology)
    formatter = ZemberekSurfaceFormatter()

    backend = SpellCheckerBackend(
        morphology=ZemberekMorphology(morphology),
        spell_engine=ZemberekSpellEngine(spell_checker, morphology, formatter),
        tokenizer=ZemberekTokenizer(),
        language_model=ZemberekUnigramModel(spell_checker.unigram_model),
        informal_converter=ZemberekInformalConverter(morphology),
        formatter=formatter,
    )
    logger.info(
        "zemberek backend initialized",
        informal_analysis=settings.INFORMAL_ANALYSIS_ENABLED,
        custom_lexicon=lexicon is not None,
        duration_seconds=round(time.perf_counter() - start, 2),
    )
    return backend
