"""Unit tests for clause detection."""

import pytest

from config.analysis_rules import ClauseCategory
from utils.exceptions import InvalidInputError
from services.data_models import ClauseMatch
from services.clause_extractor import ClauseDetector


@pytest.fixture
def detector() -> ClauseDetector:
    return ClauseDetector()


class TestClauseDetection:
    """Tests for category matching."""

    def test_nda_scenario(self, detector, nda_text):
        """Confidentiality, liability and termination clauses are found in the NDA text."""
        clauses = detector.detect(nda_text)

        confidentiality = clauses[ClauseCategory.CONFIDENTIALITY]
        termination     = clauses[ClauseCategory.TERMINATION]
        liability       = clauses[ClauseCategory.LIABILITY]

        assert len(confidentiality) == 1
        assert confidentiality[0].position == 1
        assert confidentiality[0].keywords == ["confidential"]

        assert len(termination) == 1
        assert "terminated" in termination[0].content
        assert termination[0].position == 3

        assert len(liability) == 1
        assert liability[0].content == "The Receiving Party shall be liable for any breach."
        assert liability[0].keywords == ["liable"]

    def test_every_category_is_present(self, detector, nda_text):
        """Categories without matches map to an empty list."""
        clauses = detector.detect(nda_text)

        assert set(clauses) == set(ClauseCategory)
        assert clauses[ClauseCategory.DATA_PROCESSING] == []
        assert clauses[ClauseCategory.GOVERNING_LAW] == []

    def test_sentence_can_match_several_categories(self, detector):
        """One sentence yields at most one match per category but may appear in several."""
        clauses = detector.detect("The supplier is liable for any fee that remains unpaid.")

        assert len(clauses[ClauseCategory.LIABILITY]) == 1
        assert len(clauses[ClauseCategory.PAYMENT]) == 1
        assert clauses[ClauseCategory.LIABILITY][0].position == clauses[ClauseCategory.PAYMENT][0].position == 1

    def test_keywords_come_from_the_first_matching_pattern(self, detector):
        """'payment' is absent, so the 'fee' pattern wins and every occurrence is captured."""
        clauses = detector.detect("The fee and the late fee are due monthly.")

        assert clauses[ClauseCategory.PAYMENT][0].keywords == ["fee", "fee"]

    def test_content_keeps_original_case(self, detector):
        clauses = detector.detect("All Trade Secrets remain CONFIDENTIAL at all times.")

        assert clauses[ClauseCategory.CONFIDENTIALITY][0].content == "All Trade Secrets remain CONFIDENTIAL at all times."

    @pytest.mark.parametrize(
        "sentence",
        [
            "The supplier follows the standard operating procedure at all times.",
            "Attendance at the weekly agenda review is mandatory.",
        ],
    )
    def test_nda_pattern_matches_inside_words(self, detector, sentence):
        """The clause table matches 'nda' anywhere, unlike the anchored classifier pattern."""
        matches = detector.detect(sentence)[ClauseCategory.CONFIDENTIALITY]

        assert len(matches) == 1
        assert "nda" in matches[0].keywords

    def test_governing_law(self, detector):
        clauses = detector.detect("This Agreement is governed by English law.")

        assert clauses[ClauseCategory.GOVERNING_LAW][0].keywords == ["governed by"]


class TestFilteringAndDeduplication:
    """Tests for the sentence filter and duplicate removal."""

    def test_duplicate_sentences_are_reported_once(self, detector):
        sentence = "The supplier shall keep all information confidential."
        clauses  = detector.detect(f"{sentence} {sentence}")

        matches = clauses[ClauseCategory.CONFIDENTIALITY]

        assert len(matches) == 1
        assert matches[0].position == 1

    def test_case_variants_are_distinct_matches(self, detector):
        """Deduplication compares the original-case content, so case variants are both kept."""
        text    = "The Supplier Shall Keep Everything Confidential forever. the supplier shall keep everything confidential forever."
        matches = detector.detect(text)[ClauseCategory.CONFIDENTIALITY]

        assert [match.content for match in matches] == [
            "The Supplier Shall Keep Everything Confidential forever.",
            "the supplier shall keep everything confidential forever.",
        ]
        assert [match.position for match in matches] == [1, 2]

    def test_short_sentences_are_ignored(self, detector):
        clauses = detector.detect("Fee paid. Liable.")

        assert all(matches == [] for matches in clauses.values())

    def test_positions_refer_to_filtered_sentences(self, detector):
        clauses = detector.detect("Short one. The Company shall keep all records confidential.")

        assert clauses[ClauseCategory.CONFIDENTIALITY][0].position == 1

    def test_custom_length_threshold(self):
        detector = ClauseDetector(min_sentence_length=0)

        clauses = detector.detect("Fee paid.")

        assert clauses[ClauseCategory.PAYMENT][0].content == "Fee paid."


class TestEdgeCases:
    """Tests for empty and invalid input."""

    def test_empty_text(self, detector):
        clauses = detector.detect("")

        assert len(clauses) == 8
        assert all(matches == [] for matches in clauses.values())

    def test_non_string_input_is_rejected(self, detector):
        with pytest.raises(InvalidInputError):
            detector.detect(None)

    def test_clause_match_to_dict(self):
        match = ClauseMatch(category=ClauseCategory.INTELLECTUAL_PROPERTY, content="Copyright stays with us.", position=2, keywords=["copyright"])

        assert match.to_dict() == {
            "type": "Intellectual Property",
            "category": "intellectual_property",
            "content": "Copyright stays with us.",
            "position": 2,
            "keywords": ["copyright"],
        }
