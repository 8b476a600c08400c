"""Default implementation of SpellCheckerProtocol."""

from __future__ import annotations

from turkish_spellchecker.config import Settings
from turkish_spellchecker.logging_utils import create_service_logger
from turkish_spellchecker.models import ScoredItem
from turkish_spellchecker.protocols import SpellCheckerBackend, SpellCheckerProtocol
from turkish_spellchecker.word_utils import get_apostrophe, remove_trailing_punctuation

logger = create_service_logger("turkish_spellchecker.spell_checker_impl")


class DefaultSpellChecker(SpellCheckerProtocol):
    """Spell checker composing morphology, dictionary checks and a unigram model.

    Suggestions are merged from three sources, in this order:
    - formal forms of informally written words
    - dictionary spelling suggestions
    - two-word splits ranked by unigram probability
    """

    def __init__(self, backend: SpellCheckerBackend, settings: Settings) -> None:
        self.backend = backend
        self.settings = settings

    def is_correct(self, word: str | None) -> bool:
        if not word or len(word) == 1:
            return True

        stripped = remove_trailing_punctuation(word)
        spell_engine = self.backend.spell_engine

        if "-" in stripped:
            left, right = stripped.split("-", 1)
            if spell_engine.check(left) and spell_engine.check(right):
                return True

        if spell_engine.check(stripped):
            return True

        tokens = self.backend.tokenizer.tokenize(word)
        if len(tokens) != 1:
            return False

        analyses = self.backend.morphology.analyze_unidentified(tokens[0])
        return len(analyses) > 0

    def get_suggestions(self, word: str | None) -> list[str]:
        if not word:
            return []

        stripped = remove_trailing_punctuation(word)

        # dict keeps first-seen order, giving an ordered set
        suggestions: dict[str, None] = {}
        for source in (
            self.informal_word_suggestions(stripped),
            self.backend.spell_engine.suggest_for_word(stripped),
            self.split_word_suggestions(word),
        ):
            suggestions.update(dict.fromkeys(source))

        result = list(suggestions)[: self.settings.MAX_SUGGESTIONS]
        logger.debug("Suggestions generated", word=word, suggestion_count=len(result))
        return result

    def informal_word_suggestions(self, word: str) -> list[str]:
        """Formal spellings for informal analyses of ``word``, in the input's casing."""
        morphology = self.backend.morphology
        formatter = self.backend.formatter

        analyses = morphology.analyze(word)
        if not analyses:
            return []

        case_type = formatter.guess_case(word)
        apostrophe = get_apostrophe(word)

        result: list[str] = []
        for analysis in analyses:
            if not morphology.contains_informal_morpheme(analysis):
                continue
            generated = self.backend.informal_converter.convert(word, analysis)
            if generated is None:
                logger.debug("Informal analysis could not be converted", word=word)
                continue
            if formatter.can_be_formatted(analysis, case_type):
                result.append(formatter.format_to_case(generated.analysis, case_type, apostrophe))
            else:
                result.append(generated.surface)
        return result

    def split_word_suggestions(self, word: str) -> list[str]:
        """Split ``word`` into two correct words, best unigram score first."""
        if len(word) < self.settings.SPLIT_MIN_LENGTH or len(word) > self.settings.SPLIT_MAX_LENGTH:
            return []

        # Brute force over split points; ranking uses unigram probabilities only
        language_model = self.backend.language_model
        candidates: list[ScoredItem] = []
        for i in range(1, len(word) - 1):
            left, right = word[:i], word[i:]
            if self.is_correct(left) and self.is_correct(right):
                score = language_model.get_probability(
                    language_model.index_of(left)
                ) + language_model.get_probability(language_model.index_of(right))
                candidates.append(ScoredItem(f"{left} {right}", score))

        candidates.sort(key=lambda candidate: candidate.score, reverse=True)
        return [candidate.item for candidate in candidates[: self.settings.MAX_SPLIT_SUGGESTIONS]]
