from __future__ import annotations

import pytest

from turkish_spellchecker.implementations.spell_checker_impl import DefaultSpellChecker

from .mocks import FakeAnalysis, FakeBackendSpec, create_spell_checker_for_tests


@pytest.fixture
def backend_spec() -> FakeBackendSpec:
    """Small Turkish vocabulary shared by the spell checker tests."""
    return FakeBackendSpec(
        known_words={
            "okul",
            "okulda",
            "da",
            "ev",
            "evde",
            "kitap",
            "geliyorum",
        },
        engine_suggestions={
            "okulde": ["okulda", "okulu"],
            "kitab": ["kitap", "kitabı"],
        },
        analyses={
            "geliyom": [FakeAnalysis("geliyom", informal=True)],
            "Geliyom": [FakeAnalysis("geliyom", informal=True)],
            "GeLiYoM": [FakeAnalysis("geliyom", informal=True)],
            "okulda": [FakeAnalysis("okulda")],
        },
        unidentified={"1984'te": [FakeAnalysis("1984'te")]},
        conversions={"geliyom": "geliyorum"},
        log_probabilities={"okul": -3.0, "da": -2.0, "ev": -3.5, "evde": -4.0, "kitap": -5.0},
    )


@pytest.fixture
def spell_checker(backend_spec: FakeBackendSpec) -> DefaultSpellChecker:
    return create_spell_checker_for_tests(backend_spec)
