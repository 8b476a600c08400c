"""Unit tests for DefaultSpellChecker.get_suggestions and informal word conversion."""

from __future__ import annotations

import pytest

from turkish_spellchecker.implementations.spell_checker_impl import DefaultSpellChecker

from .mocks import FakeAnalysis, FakeBackendSpec, create_spell_checker_for_tests


class TestSuggestionComposition:
    @pytest.mark.parametrize("word", [None, ""])
    def test_empty_input_has_no_suggestions(
        self, spell_checker: DefaultSpellChecker, word: str | None
    ) -> None:
        assert spell_checker.get_suggestions(word) == []

    def test_correct_word_still_gets_split_suggestions(
        self, spell_checker: DefaultSpellChecker
    ) -> None:
        # every split of "okulda" has an incorrect half except "okul da"
        assert spell_checker.get_suggestions("okulda") == ["okul da"]

    def test_engine_suggestions_use_stripped_word(self, spell_checker: DefaultSpellChecker) -> None:
        assert spell_checker.get_suggestions("kitab,")[:2] == ["kitap", "kitabı"]

    def test_sources_are_merged_in_discovery_order(self, backend_spec: FakeBackendSpec) -> None:
        backend_spec.analyses["evdeokul"] = [FakeAnalysis("evdeokul", informal=True)]
        backend_spec.conversions["evdeokul"] = "evde okul"
        backend_spec.engine_suggestions["evdeokul"] = ["evdekul"]
        checker = create_spell_checker_for_tests(backend_spec)

        assert checker.get_suggestions("evdeokul") == ["evde okul", "evdekul"]

    def test_duplicates_across_sources_are_removed(self, backend_spec: FakeBackendSpec) -> None:
        backend_spec.engine_suggestions["evokul"] = ["ev okul", "evokulu"]
        checker = create_spell_checker_for_tests(backend_spec)

        suggestions = checker.get_suggestions("evokul")

        assert suggestions == ["ev okul", "evokulu"]
        assert len(suggestions) == len(set(suggestions))

    def test_deduplication_is_case_sensitive(self, backend_spec: FakeBackendSpec) -> None:
        backend_spec.engine_suggestions["okl"] = ["okul", "Okul", "okul"]
        checker = create_spell_checker_for_tests(backend_spec)

        assert checker.get_suggestions("okl") == ["okul", "Okul"]

    def test_result_is_capped_at_nine(self, backend_spec: FakeBackendSpec) -> None:
        backend_spec.engine_suggestions["abc"] = [f"aday{i}" for i in range(12)]
        checker = create_spell_checker_for_tests(backend_spec)

        suggestions = checker.get_suggestions("abc")

        assert len(suggestions) == 9
        assert suggestions == [f"aday{i}" for i in range(9)]

    def test_cap_follows_settings(self, backend_spec: FakeBackendSpec) -> None:
        backend_spec.engine_suggestions["abc"] = ["a1", "a2", "a3"]
        checker = create_spell_checker_for_tests(backend_spec, MAX_SUGGESTIONS=2)

        assert checker.get_suggestions("abc") == ["a1", "a2"]


class TestInformalWordSuggestions:
    def test_informal_word_is_converted_in_lower_case(
        self, spell_checker: DefaultSpellChecker
    ) -> None:
        assert spell_checker.get_suggestions("geliyom") == ["geliyorum"]

    def test_title_case_is_reproduced(self, spell_checker: DefaultSpellChecker) -> None:
        assert spell_checker.informal_word_suggestions("Geliyom") == ["Geliyorum"]

    def test_unformattable_case_falls_back_to_surface(
        self, spell_checker: DefaultSpellChecker
    ) -> None:
        assert spell_checker.informal_word_suggestions("GeLiYoM") == ["geliyorum"]

    def test_informal_suggestions_use_stripped_word(
        self, spell_checker: DefaultSpellChecker
    ) -> None:
        assert spell_checker.get_suggestions("geliyom!") == ["geliyorum"]

    @pytest.mark.parametrize("apostrophe", ["’", "'"])
    def test_apostrophe_style_is_preserved(
        self, backend_spec: FakeBackendSpec, apostrophe: str
    ) -> None:
        word = f"ankara{apostrophe}dayım"
        backend_spec.analyses[word] = [FakeAnalysis("ankara'dayım", informal=True)]
        backend_spec.conversions["ankara'dayım"] = "ankara'dayım"
        checker = create_spell_checker_for_tests(backend_spec)

        assert checker.informal_word_suggestions(word) == [f"ankara{apostrophe}dayım"]

    def test_leading_apostrophe_is_not_an_apostrophe_style(
        self, backend_spec: FakeBackendSpec
    ) -> None:
        backend_spec.analyses["’okul'da"] = [FakeAnalysis("okul'da", informal=True)]
        backend_spec.conversions["okul'da"] = "okul'da"
        checker = create_spell_checker_for_tests(backend_spec)

        # the curly apostrophe sits at index 0, so the straight one is used
        assert checker.informal_word_suggestions("’okul'da") == ["okul'da"]

    def test_formal_analyses_are_ignored(self, spell_checker: DefaultSpellChecker) -> None:
        assert spell_checker.informal_word_suggestions("okulda") == []

    def test_unknown_word_has_no_informal_suggestions(
        self, spell_checker: DefaultSpellChecker
    ) -> None:
        assert spell_checker.informal_word_suggestions("qwzx") == []

    def test_unconvertible_analysis_is_skipped(self, backend_spec: FakeBackendSpec) -> None:
        backend_spec.analyses["napcan"] = [
            FakeAnalysis("napcan", informal=True),
            FakeAnalysis("napcan-alt", informal=True),
        ]
        backend_spec.conversions["napcan-alt"] = "ne yapacaksın"
        checker = create_spell_checker_for_tests(backend_spec)

        assert checker.informal_word_suggestions("napcan") == ["ne yapacaksın"]

    def test_every_informal_analysis_contributes(self, backend_spec: FakeBackendSpec) -> None:
        backend_spec.analyses["gelcem"] = [
            FakeAnalysis("gelcem", informal=True),
            FakeAnalysis("gelcem2", informal=True),
        ]
        backend_spec.conversions.update({"gelcem": "geleceğim", "gelcem2": "gelceğim"})
        checker = create_spell_checker_for_tests(backend_spec)

        assert checker.informal_word_suggestions("gelcem") == ["geleceğim", "gelceğim"]
