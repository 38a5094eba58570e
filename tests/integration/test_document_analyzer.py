"""Integration tests for the end-to-end document analysis pipeline."""

import json

import pytest

from config.analysis_rules import RiskLevel
from config.analysis_rules import DocumentType
from config.analysis_rules import ClauseCategory
from utils.result_cache import ResultCache
from utils.exceptions import InvalidInputError
from utils.exceptions import ConfigurationError
from utils.exceptions import DocumentNotFoundError
from utils.exceptions import UnsupportedFormatError
from services.document_analyzer import DocumentAnalyzer


@pytest.fixture
def analyzer() -> DocumentAnalyzer:
    return DocumentAnalyzer(parallel=False)


class TestAnalyze:
    """Tests for single-document analysis."""

    def test_nda_document(self, analyzer, nda_text):
        result = analyzer.analyze(nda_text)

        assert result.document_type is DocumentType.NDA
        assert result.metadata["document_type"] == "nda"
        assert result.clauses[ClauseCategory.CONFIDENTIALITY]
        assert "terminated" in result.clauses[ClauseCategory.TERMINATION][0].content
        assert result.plain_text.startswith("This Non-Disclosure Agreement")
        assert len(result.key_points) <= 5

    def test_empty_document(self, analyzer):
        result = analyzer.analyze("")

        assert result.key_points == []
        assert result.plain_text == ""
        assert result.risks.risk_score.score == 0
        assert result.risks.risk_score.level == "low"
        assert result.metadata["document_type"] == "general_contract"
        assert result.metadata["word_count"] == 0
        assert result.metadata["sentence_count"] == 0
        assert all(matches == [] for matches in result.clauses.values())

    def test_metadata(self, analyzer, nda_text):
        result = analyzer.analyze(nda_text, metadata={"source": "upload", "document_type": "ignored"})

        assert result.metadata == {
            "source": "upload",
            "document_type": "nda",
            "word_count": len(nda_text.split()),
            "character_count": len(nda_text),
            "sentence_count": 3,
            "summary_ratio": 100.0,
            "language": "en",
        }

    def test_risk_score_formula_holds(self, analyzer, high_risk_text):
        risks = analyzer.analyze(high_risk_text).risks

        assert risks.risk_score.score == (
            10 * len(risks.high_risks) + 5 * len(risks.medium_risks) + 7 * len(risks.compliance_gaps) + 6 * len(risks.unfair_terms)
        )
        assert risks.risk_score.level is RiskLevel.CRITICAL

    def test_per_call_options(self, analyzer, nda_text):
        result = analyzer.analyze(nda_text, {"max_sentences": 1, "language": "de"})

        assert result.metadata["language"] == "de"
        assert result.metadata["summary_ratio"] < 100.0

    def test_invalid_text(self, analyzer):
        with pytest.raises(InvalidInputError):
            analyzer.analyze(None)

    def test_invalid_options(self, analyzer, nda_text):
        with pytest.raises(ConfigurationError):
            analyzer.analyze(nda_text, {"language": "klingon"})

    def test_invalid_default_options(self):
        with pytest.raises(ConfigurationError):
            DocumentAnalyzer(options={"max_sentences": -1})


class TestDeterminism:
    """Tests for idempotence and stage independence."""

    def test_repeated_analysis_is_identical(self, analyzer, high_risk_text):
        assert analyzer.analyze(high_risk_text).to_dict() == analyzer.analyze(high_risk_text).to_dict()

    def test_parallel_matches_sequential(self, nda_text, high_risk_text):
        sequential = DocumentAnalyzer(parallel=False)
        parallel   = DocumentAnalyzer(parallel=True, max_workers=4)

        for text in (nda_text, high_risk_text, ""):
            assert parallel.analyze(text).to_dict() == sequential.analyze(text).to_dict()


class TestSerialisation:
    """Tests for dict and JSON rendering."""

    def test_to_json(self, analyzer, nda_text):
        data = json.loads(analyzer.analyze(nda_text).to_json())

        assert data["metadata"]["document_type"] == "nda"
        assert set(data["clauses"]) == {category.value for category in ClauseCategory}
        assert data["clauses"]["confidentiality"][0]["type"] == "Confidentiality"
        assert data["risks"]["risk_score"]["level"] in {"low", "medium", "high", "critical"}


class TestAnalyzeFile:
    """Tests for the plain-text file entry point."""

    def test_text_file(self, analyzer, tmp_path, nda_text):
        path = tmp_path / "nda.txt"
        path.write_text(nda_text, encoding="utf-8")

        result = analyzer.analyze_file(path)

        assert result.document_type is DocumentType.NDA
        assert result.metadata["file_name"] == "nda.txt"
        assert result.metadata["file_size_bytes"] == path.stat().st_size
        assert "modified_at" in result.metadata
        assert "processed_at" in result.metadata

    def test_missing_file(self, analyzer, tmp_path):
        with pytest.raises(DocumentNotFoundError):
            analyzer.analyze_file(tmp_path / "missing.txt")

    def test_binary_format_is_rejected(self, analyzer, tmp_path):
        path = tmp_path / "contract.docx"
        path.write_bytes(b"PK\x03\x04")

        with pytest.raises(UnsupportedFormatError):
            analyzer.analyze_file(path)

    def test_invalid_utf8_is_rejected(self, analyzer, tmp_path):
        path = tmp_path / "contract.txt"
        path.write_bytes(b"\xff\xfe\xfa broken")

        with pytest.raises(UnsupportedFormatError):
            analyzer.analyze_file(path)

    def test_results_are_cached(self, tmp_path, nda_text):
        cache    = ResultCache(cache_dir=tmp_path / "cache", ttl_seconds=60)
        analyzer = DocumentAnalyzer(parallel=False, cache=cache)

        path = tmp_path / "nda.txt"
        path.write_text(nda_text, encoding="utf-8")

        first  = analyzer.analyze_file(path)
        second = analyzer.analyze_file(path)

        assert cache.get_stats()["total_files"] == 1
        assert second.metadata["processed_at"] == first.metadata["processed_at"]
        assert second.to_dict() == first.to_dict()

    def test_options_change_the_cache_key(self, tmp_path, nda_text):
        cache    = ResultCache(cache_dir=tmp_path / "cache", ttl_seconds=60)
        analyzer = DocumentAnalyzer(parallel=False, cache=cache)

        path = tmp_path / "nda.txt"
        path.write_text(nda_text, encoding="utf-8")

        analyzer.analyze_file(path)
        analyzer.analyze_file(path, {"max_sentences": 1})

        assert cache.get_stats()["total_files"] == 2


class TestAnalyzeBatch:
    """Tests for concurrent batch analysis."""

    def test_order_is_preserved(self, analyzer, nda_text, high_risk_text):
        results = analyzer.analyze_batch([nda_text, high_risk_text, ""])

        assert [item.index for item in results] == [0, 1, 2]
        assert all(item.success for item in results)
        assert results[0].result.document_type is DocumentType.NDA
        assert results[1].result.risks.risk_score.level is RiskLevel.CRITICAL
        assert results[2].result.document_type is DocumentType.GENERAL_CONTRACT

    def test_failures_are_isolated(self, analyzer, nda_text):
        results = analyzer.analyze_batch([nda_text, None, 42, nda_text])

        assert [item.success for item in results] == [True, False, False, True]
        assert results[1].result is None
        assert results[1].error["error_type"] == "InvalidInputError"
        assert results[3].result.to_dict()["clauses"] == results[0].result.to_dict()["clauses"]

    def test_batch_matches_single_analysis(self, analyzer, high_risk_text):
        single = analyzer.analyze(high_risk_text)
        batch  = analyzer.analyze_batch([high_risk_text])[0].result

        assert batch.risks == single.risks
        assert batch.plain_text == single.plain_text

    def test_invalid_batch_options(self, analyzer, nda_text):
        with pytest.raises(ConfigurationError):
            analyzer.analyze_batch([nda_text], {"max_sentences": 0})

    def test_empty_batch(self, analyzer):
        assert analyzer.analyze_batch([]) == []

    def test_item_to_dict(self, analyzer):
        item = analyzer.analyze_batch([None])[0]

        assert item.to_dict()["success"] is False
        assert item.to_dict()["result"] is None
